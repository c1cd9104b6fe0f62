"""Aggregation of classified passengers into PNR-level summary fields"""
import logging
from collections import Counter
from typing import Sequence

from src.models.report import PassengerDisplay, PassengerStatus, PnrSummary

logger = logging.getLogger(__name__)


def summarize_passengers(passengers: Sequence[PassengerDisplay]) -> PnrSummary:
    """
    Count passengers per status.

    Every passenger has exactly one status, so the four counts always add
    up to the total.

    Args:
        passengers: Classified passengers

    Returns:
        Summary with per-status counts and the all-confirmed / any-waiting flags
    """
    counts = Counter(passenger.status_label for passenger in passengers)

    summary = PnrSummary(
        total_passengers=len(passengers),
        confirmed=counts[PassengerStatus.CONFIRMED],
        waiting=counts[PassengerStatus.WAITING],
        cancelled=counts[PassengerStatus.CANCELLED],
        rac=counts[PassengerStatus.RAC],
        all_confirmed=all(passenger.is_confirmed for passenger in passengers),
        any_waiting=any(passenger.status_label == PassengerStatus.WAITING for passenger in passengers)
    )

    logger.debug(
        f"Summary: {summary.confirmed} confirmed, {summary.waiting} waiting, "
        f"{summary.rac} RAC, {summary.cancelled} cancelled"
    )
    return summary


def is_chart_prepared(passengers: Sequence[PassengerDisplay]) -> bool:
    """
    Check whether the reservation chart can be considered prepared.

    Cancelled passengers are ignored; every other passenger must be confirmed.
    """
    return all(
        passenger.is_confirmed
        for passenger in passengers
        if passenger.status_label != PassengerStatus.CANCELLED
    )
