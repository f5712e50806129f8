# catalog_hierarchy/models/search_facet.py
from typing import Optional
from .base import CatalogModel


class SearchFacet(CatalogModel):
    """Search facet definition shared between categories"""
    search_facet_id: int
    name: str
    label: Optional[str] = None
    field_name: Optional[str] = None


class CategorySearchFacet(CatalogModel):
    """Placement of a search facet on one category"""
    id: int
    category_id: int
    search_facet: SearchFacet
    sequence: Optional[int] = None


class CategoryAttribute(CatalogModel):
    """Free-form name/value pair attached to a category"""
    id: int
    category_id: int
    name: str
    value: Optional[str] = None
    searchable: bool = False
