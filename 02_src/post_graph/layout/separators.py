"""Year and month boundary markers between adjacent records."""

import logging
from typing import List, Sequence

from ..config import LayoutConfig
from ..graph_model import SeparatorNode
from ..graph_orchestrator import month_separator_id, year_separator_id
from ..records import PostRecord

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def month_label(year: int, month: int) -> str:
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


def build_separators(records: Sequence[PostRecord], config: LayoutConfig) -> List[SeparatorNode]:
    """Insert at most one separator between each pair of adjacent records.

    A year change wins over a month change for the same pair. Separators sit
    half a row above the record that opens the new period.
    """
    separators: List[SeparatorNode] = []
    last_year: int | None = None
    last_month: int | None = None

    for index, record in enumerate(records):
        year = record.day.year
        month = record.day.month

        if index > 0:
            y = config.row_y(index) - config.row_height / 2
            if last_year is not None and year != last_year:
                separators.append(
                    SeparatorNode(id=year_separator_id(year), label=str(year), kind="year", y=y)
                )
            elif last_month is not None and month != last_month:
                separators.append(
                    SeparatorNode(
                        id=month_separator_id(year, month),
                        label=month_label(year, month),
                        kind="month",
                        y=y,
                    )
                )

        last_year = year
        last_month = month

    logger.debug("Inserted %d separators", len(separators))
    return separators
