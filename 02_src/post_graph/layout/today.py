"""Marker for the current date on the record timeline."""

import logging
from datetime import date
from typing import Sequence

from ..config import LayoutConfig
from ..graph_model import TodayNode
from ..graph_orchestrator import TODAY_NODE_ID
from ..records import PostRecord

logger = logging.getLogger(__name__)


def today_position(records: Sequence[PostRecord], today: date, config: LayoutConfig) -> float | None:
    if not records:
        return config.padding_top

    newest = records[0].day
    if today > newest:
        for index, record in enumerate(records):
            if record.day <= today:
                return config.row_y(index)
        return None

    return config.padding_top


def build_today_marker(
    records: Sequence[PostRecord],
    today: date,
    config: LayoutConfig,
) -> TodayNode | None:
    """Place the today marker, or return None when it has no usable position.

    The position must be strictly positive; a marker computed at y <= 0 is
    dropped, which also hides a legitimate top-row marker when padding_top
    is 0.
    """
    y = today_position(records, today, config)
    if y is None or y <= 0:
        logger.debug("Today marker suppressed (position=%s)", y)
        return None
    return TodayNode(id=TODAY_NODE_ID, date=today.isoformat(), y=y)
