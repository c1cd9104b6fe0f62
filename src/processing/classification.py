"""Per-passenger status classification"""
import logging
from typing import List, Sequence, Union

from src.models.pnr import Passenger
from src.models.report import PassengerDisplay, PassengerStatus

logger = logging.getLogger(__name__)

NAME_WIDTH = 20


def classify_status(current: str) -> PassengerStatus:
    """
    Map a current status code to its display status.

    Rules are applied in order, first match wins:
    - exactly "CAN" -> CANCELLED
    - starts with "WL" -> WAITING
    - starts with "RAC" -> RAC
    - anything else -> CONFIRMED (berth/seat codes such as B1 or S4, and
      any code not recognised above)

    Args:
        current: Current status code of the passenger

    Returns:
        Derived passenger status
    """
    if current == 'CAN':
        return PassengerStatus.CANCELLED
    if current.startswith('WL'):
        return PassengerStatus.WAITING
    if current.startswith('RAC'):
        return PassengerStatus.RAC
    return PassengerStatus.CONFIRMED


def _format_age(age: Union[int, float]) -> str:
    # 28.0 renders as "28"
    if isinstance(age, float) and age.is_integer():
        return str(int(age))
    return str(age)


def format_passenger_name(name: str, age: Union[int, float], gender: str) -> str:
    """Pad name to NAME_WIDTH characters and append "(age/gender)" """
    return f"{name.ljust(NAME_WIDTH)}({_format_age(age)}/{gender})"


def classify_passenger(passenger: Passenger) -> PassengerDisplay:
    """Build the display record for a single passenger"""
    status = classify_status(passenger.current)
    return PassengerDisplay(
        formatted_name=format_passenger_name(passenger.name, passenger.age, passenger.gender),
        booking_status=passenger.booking,
        current_status=passenger.current,
        status_label=status,
        is_confirmed=status == PassengerStatus.CONFIRMED
    )


def classify_passengers(passengers: Sequence[Passenger]) -> List[PassengerDisplay]:
    """
    Classify every passenger of a PNR.

    Args:
        passengers: Passengers in booking order

    Returns:
        One display record per passenger, in the same order
    """
    displays = [classify_passenger(passenger) for passenger in passengers]
    logger.debug(f"Classified {len(displays)} passengers")
    return displays
