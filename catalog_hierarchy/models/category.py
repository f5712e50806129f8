# catalog_hierarchy/models/category.py
from decimal import Decimal
from enum import Enum
from typing import Optional, List
from pydantic import field_validator
from .base import CatalogModel, ArchivableModel, order_by_display_order
from .product import CategoryProductXref, FeaturedProduct, RelatedProduct
from .search_facet import CategorySearchFacet, SearchFacet, CategoryAttribute


class InventoryType(str, Enum):
    ALWAYS_AVAILABLE = "ALWAYS_AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"
    CHECK_QUANTITY = "CHECK_QUANTITY"


class FulfillmentType(str, Enum):
    DIGITAL = "DIGITAL"
    PHYSICAL_SHIP = "PHYSICAL_SHIP"
    PHYSICAL_PICKUP = "PHYSICAL_PICKUP"
    PHYSICAL_PICKUP_OR_SHIP = "PHYSICAL_PICKUP_OR_SHIP"
    GIFT_CARD = "GIFT_CARD"


class CategoryXref(CatalogModel):
    """Ordered parent/child edge between two categories"""
    category_id: int  # parent side
    sub_category_id: int  # child side
    display_order: Optional[Decimal] = None


class CategoryNode(ArchivableModel):
    """Category record as supplied by the persistence layer.

    Relations to other categories are stored by id only; the graph that
    owns the node resolves them.
    """
    category_id: Optional[int] = None  # unset until persisted
    name: Optional[str] = None
    description: Optional[str] = None
    long_description: Optional[str] = None
    display_template: Optional[str] = None
    url: Optional[str] = None
    url_key: Optional[str] = None
    default_parent_category_id: Optional[int] = None
    inventory_type: Optional[InventoryType] = None
    fulfillment_type: Optional[FulfillmentType] = None

    all_child_category_xrefs: List[CategoryXref] = []
    all_parent_category_xrefs: List[CategoryXref] = []
    all_product_xrefs: List[CategoryProductXref] = []

    featured_products: List[FeaturedProduct] = []
    cross_sale_products: List[RelatedProduct] = []
    up_sale_products: List[RelatedProduct] = []
    search_facets: List[CategorySearchFacet] = []
    excluded_search_facets: List[SearchFacet] = []
    category_attributes: List[CategoryAttribute] = []

    @field_validator(
        "all_child_category_xrefs",
        "all_parent_category_xrefs",
        "all_product_xrefs",
    )
    @classmethod
    def keep_display_order(cls, v):
        return order_by_display_order(v)

    @property
    def is_root(self) -> bool:
        return self.default_parent_category_id is None

    def same_category(self, other: "CategoryNode") -> bool:
        """Identity check: ids when both are set, otherwise name and url"""
        if other is None:
            return False
        if self is other:
            return True
        if self.category_id is not None and other.category_id is not None:
            return self.category_id == other.category_id
        return self.name == other.name and self.url == other.url
