"""Data models for raw PNR records"""
from typing import List, Union
from pydantic import BaseModel, ConfigDict, Field


class Train(BaseModel):
    """Train the booking is made on"""
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)

    number: str = Field(..., description="Train number, e.g. 12301")
    name: str = Field(..., description="Train name")
    from_station: str = Field(..., alias="from", description="Boarding station code")
    to_station: str = Field(..., alias="to", description="Destination station code")


class Passenger(BaseModel):
    """Passenger entry of a PNR"""
    name: str
    age: Union[int, float] = Field(..., description="Passenger age")
    gender: str
    booking: str = Field(..., description="Status code at booking time (B1, WL5, RAC3...)")
    current: str = Field(..., description="Current status code (B1, S4, WL8, RAC2, CAN...)")


class PnrRecord(BaseModel):
    """Complete PNR record as received from upstream"""
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)

    pnr: str
    train: Train
    class_booked: str = Field(..., alias="classBooked", description="Travel class, e.g. 3A")
    passengers: List[Passenger]
