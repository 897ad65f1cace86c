"""Product Schemas — listing rows and the create confirmation."""

from pydantic import BaseModel, ConfigDict


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    suggested_price: float


class NewProductOut(BaseModel):
    """Echo of the created product; the create response carries no id."""
    model_config = ConfigDict(from_attributes=True)

    name: str
    suggested_price: float
