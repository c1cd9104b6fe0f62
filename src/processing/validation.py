"""Validation of raw PNR input before any processing"""
import logging
import re
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

PNR_LENGTH = 10
PNR_PATTERN = re.compile(r'[0-9]{10}')


def validate_pnr_data(data: Any) -> bool:
    """
    Check that raw PNR data has the structure required for a report.

    Checks run in order and stop at the first failure. Only the outer
    structure is checked: the contents of ``train`` and of individual
    passengers are left to the model parsing step.

    Args:
        data: Raw PNR data, usually a decoded JSON object

    Returns:
        True if the data can be processed, False otherwise
    """
    if data is None or not isinstance(data, Mapping):
        logger.debug("Rejected PNR data: not a mapping")
        return False

    pnr = data.get('pnr')
    if not isinstance(pnr, str):
        logger.debug("Rejected PNR data: pnr is not a string")
        return False

    if len(pnr) != PNR_LENGTH:
        logger.debug(f"Rejected PNR data: pnr has {len(pnr)} characters, expected {PNR_LENGTH}")
        return False

    if not PNR_PATTERN.fullmatch(pnr):
        logger.debug("Rejected PNR data: pnr is not all digits")
        return False

    if not isinstance(data.get('train'), Mapping):
        logger.debug("Rejected PNR data: train is missing or not a mapping")
        return False

    passengers = data.get('passengers')
    if not isinstance(passengers, (list, tuple)) or len(passengers) == 0:
        logger.debug("Rejected PNR data: passengers is not a non-empty list")
        return False

    return True
