"""
schemas.py — Form Payload Validation
-------------------------------------

Pydantic models for the values submitted by the dashboard forms. Each view
builds one of these from its widgets before anything touches the database, so
a bad submission fails with a `ValidationError` and no row is written.

Dependencies:
- pydantic v2

"""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

StorageStatus = Literal["active", "inactive", "maintenance"]
ProduceType = Literal["vegetables", "fruits", "grains", "dairy", "other"]


class _Form(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class NewStorageUnit(_Form):
    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    capacity_kg: float = Field(..., gt=0)
    status: StorageStatus = "active"


class NewSensorReading(_Form):
    storage_unit_id: str = Field(..., min_length=1)
    temperature_celsius: float
    humidity_percent: float = Field(..., ge=0, le=100)
    weight_kg: Optional[float] = Field(None, ge=0)


class NewProduceBatch(_Form):
    storage_unit_id: str = Field(..., min_length=1)
    produce_name: str = Field(..., min_length=1)
    produce_type: ProduceType = "vegetables"
    quantity_kg: float = Field(..., gt=0)
    harvest_date: date
    expected_shelf_life_days: int = Field(..., gt=0)
    farmer_name: str = Field(..., min_length=1)
    farmer_contact: str = Field(..., min_length=1)


class NewMarketPrice(_Form):
    produce_name: str = Field(..., min_length=1)
    price_per_kg: float = Field(..., gt=0)
    market_name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)


class NewTransportRequest(_Form):
    batch_id: str = Field(..., min_length=1)
    from_location: str = Field(..., min_length=1)
    to_location: str = Field(..., min_length=1)
    transport_date: date
    vehicle_type: Optional[str] = None
    driver_name: Optional[str] = None
    driver_contact: Optional[str] = None

    @field_validator("vehicle_type", "driver_name", "driver_contact", mode="before")
    @classmethod
    def blank_optional_text(cls, value):
        return _blank_to_none(value)
