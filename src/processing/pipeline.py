"""Main processing pipeline for PNR status reports"""
from typing import Any, Optional

from src.models.pnr import PnrRecord
from src.models.report import PnrReport
from src.processing.validation import validate_pnr_data
from src.processing.classification import classify_passengers
from src.processing.aggregation import summarize_passengers, is_chart_prepared
from src.processing.formatting import format_pnr, format_train_info

import logging

logger = logging.getLogger(__name__)


def process_railway_pnr(pnr_data: Any) -> Optional[PnrReport]:
    """
    Turn a raw PNR record into a display-ready status report.

    Steps:
    1. Validate the outer structure of the record
    2. Parse it into typed models
    3. Classify every passenger by current status
    4. Aggregate the passenger summary and chart status
    5. Format the PNR and train line

    Args:
        pnr_data: Raw PNR data (mapping with pnr, train, classBooked, passengers)

    Returns:
        PnrReport, or None if the data fails validation

    Raises:
        pydantic.ValidationError: if the structure is valid but a train or
            passenger field has the wrong type
    """
    if not validate_pnr_data(pnr_data):
        return None

    record = PnrRecord.model_validate(pnr_data)

    passengers = classify_passengers(record.passengers)
    summary = summarize_passengers(passengers)

    report = PnrReport(
        pnr_formatted=format_pnr(record.pnr),
        train_info=format_train_info(record.train, record.class_booked),
        passengers=passengers,
        summary=summary,
        chart_prepared=is_chart_prepared(passengers)
    )

    logger.debug(f"Built report for PNR {report.pnr_formatted} with {summary.total_passengers} passengers")
    return report
