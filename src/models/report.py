"""Report output models"""
from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


class PassengerStatus(str, Enum):
    """Display status derived from a passenger's current status code"""
    CONFIRMED = "CONFIRMED"
    WAITING = "WAITING"
    CANCELLED = "CANCELLED"
    RAC = "RAC"


class PassengerDisplay(BaseModel):
    """Display-ready passenger line"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    formatted_name: str = Field(..., alias="formattedName")
    booking_status: str = Field(..., alias="bookingStatus")
    current_status: str = Field(..., alias="currentStatus")
    status_label: PassengerStatus = Field(..., alias="statusLabel")
    is_confirmed: bool = Field(..., alias="isConfirmed")


class PnrSummary(BaseModel):
    """Aggregate passenger counts for a PNR"""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalPassengers": 3,
                "confirmed": 2,
                "waiting": 1,
                "cancelled": 0,
                "rac": 0,
                "allConfirmed": False,
                "anyWaiting": True
            }
        }
    )

    total_passengers: int = Field(..., alias="totalPassengers")
    confirmed: int
    waiting: int
    cancelled: int
    rac: int
    all_confirmed: bool = Field(..., alias="allConfirmed")
    any_waiting: bool = Field(..., alias="anyWaiting")


class PnrReport(BaseModel):
    """Formatted PNR status report"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pnr_formatted: str = Field(..., alias="pnrFormatted", description="PNR in DDD-DDD-DDDD form")
    train_info: str = Field(..., alias="trainInfo")
    passengers: Tuple[PassengerDisplay, ...]
    summary: PnrSummary
    chart_prepared: bool = Field(..., alias="chartPrepared")
