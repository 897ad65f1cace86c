"""Address Schemas — address listing with its city and state nested."""

from pydantic import BaseModel, ConfigDict


class StateOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    initials: str


class CityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    state: StateOut


class AddressOut(BaseModel):
    """Address as returned by GET /addresses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    street: str
    number: int
    complement: str
    cep: str
    city: CityOut
