"""Formatting of PNR-level display fields"""
from src.models.pnr import Train


def format_pnr(pnr: str) -> str:
    """Split a 10-digit PNR into DDD-DDD-DDDD groups"""
    return '-'.join([pnr[0:3], pnr[3:6], pnr[6:10]])


def format_train_info(train: Train, class_booked: str) -> str:
    """
    Build the one-line train description shown above the passenger list.

    Fields are substituted verbatim.

    Args:
        train: Train the PNR is booked on
        class_booked: Travel class code

    Returns:
        e.g. "Train: 12301 - Rajdhani Express | NDLS → HWH | Class: 3A"
    """
    return (
        f"Train: {train.number} - {train.name} | "
        f"{train.from_station} → {train.to_station} | "
        f"Class: {class_booked}"
    )
