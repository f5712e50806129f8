# catalog_hierarchy/services/active_filter.py
import logging
from datetime import datetime
from typing import Optional, Union
from ..models.base import ArchivableModel
from ..models.category import CategoryNode
from ..utils.dates import format_datetime, is_within_window

logger = logging.getLogger(__name__)


def _describe(record: ArchivableModel) -> str:
    if isinstance(record, CategoryNode):
        return f"category, {record.category_id},"
    return f"product, {getattr(record, 'product_id', None)},"


def _bound(value: Optional[datetime]) -> str:
    return format_datetime(value) if value is not None else "open"


def is_active(record: Union[CategoryNode, ArchivableModel],
              now: Optional[datetime] = None) -> bool:
    """Visible iff inside the activity window and not archived"""
    in_window = is_within_window(record.active_start_date, record.active_end_date, now)
    if logger.isEnabledFor(logging.DEBUG):
        if not in_window:
            logger.debug(
                f"{_describe(record)} inactive due to date "
                f"(window {_bound(record.active_start_date)} .. {_bound(record.active_end_date)})"
            )
        if record.is_archived:
            logger.debug(f"{_describe(record)} inactive due to archived status")
    return in_window and not record.is_archived
