# catalog_hierarchy/models/base.py
from datetime import datetime
from decimal import Decimal
from typing import Optional, List, Any
from pydantic import BaseModel, ConfigDict

ARCHIVED = 'Y'


class CatalogModel(BaseModel):
    """Base model for records supplied by the persistence layer"""
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)


class ArchivableModel(CatalogModel):
    """Record with an activity window and a soft-delete flag"""
    active_start_date: Optional[datetime] = None
    active_end_date: Optional[datetime] = None
    archived: Optional[str] = None

    @property
    def is_archived(self) -> bool:
        return self.archived == ARCHIVED


def order_by_display_order(items: List[Any]) -> List[Any]:
    """Stable sort on display_order; records without one go last"""
    def sort_key(item):
        order: Optional[Decimal] = item.display_order
        return (order is None, order if order is not None else Decimal(0))

    return sorted(items, key=sort_key)
