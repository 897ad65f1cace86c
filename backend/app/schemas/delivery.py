"""Delivery Schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class DeliveryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    address_id: int
    sale_id: int
    delivery_forecast: datetime | None = None
