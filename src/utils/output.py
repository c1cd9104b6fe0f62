"""Output utilities for rendering reports"""
import json
from typing import Any, Dict, List

from src.models.report import PnrReport

import logging

logger = logging.getLogger(__name__)


def report_to_dict(report: PnrReport) -> Dict[str, Any]:
    """Convert a report to plain data using the camelCase field names"""
    return report.model_dump(mode='json', by_alias=True)


def report_to_json(report: PnrReport, indent: int = 2) -> str:
    """
    Serialize a report to JSON.

    Args:
        report: Report to serialize
        indent: JSON indentation

    Returns:
        JSON document with camelCase keys; non-ASCII text (such as the
        arrow in the train line) is kept as is
    """
    return json.dumps(report_to_dict(report), indent=indent, ensure_ascii=False)


def render_report_text(report: PnrReport) -> str:
    """
    Render a report as a console table.

    Args:
        report: Report to render

    Returns:
        Multi-line text with header, one line per passenger and a summary line
    """
    summary = report.summary
    chart = "Prepared" if report.chart_prepared else "Not prepared"

    lines: List[str] = [
        '=' * 60,
        f"PNR: {report.pnr_formatted}",
        report.train_info,
        f"Chart: {chart}",
        '=' * 60,
    ]
    for i, passenger in enumerate(report.passengers, 1):
        lines.append(
            f"{i:2d}. {passenger.formatted_name}  |  "
            f"{passenger.booking_status:6s} -> {passenger.current_status:6s}  |  "
            f"{passenger.status_label.value}"
        )
    lines.append('-' * 60)
    lines.append(
        f"Total: {summary.total_passengers}  |  Confirmed: {summary.confirmed}  |  "
        f"Waiting: {summary.waiting}  |  RAC: {summary.rac}  |  Cancelled: {summary.cancelled}"
    )

    logger.debug(f"Rendered report for PNR {report.pnr_formatted}")
    return '\n'.join(lines)
