# catalog_hierarchy/services/category_view.py
from datetime import datetime
from typing import TYPE_CHECKING, Dict, List, Optional
from ..models.category import CategoryNode, CategoryXref
from ..models.product import CategoryProductXref, FeaturedProduct, Product, RelatedProduct
from ..models.search_facet import CategoryAttribute, CategorySearchFacet
from ..utils.lazy import LazySlot
from .active_filter import is_active
from .aggregation_service import (
    unarchived_cross_sale_products,
    unarchived_featured_products,
    unarchived_up_sale_products,
)

if TYPE_CHECKING:
    from .catalog_service import CatalogService


class CategoryView:
    """Runtime wrapper around one category.

    Filtered lists are computed on first use and kept for the life of the
    view. They are not refreshed when the graph changes afterwards; build
    a new view to see the change.
    """

    def __init__(self, category: CategoryNode, catalog: "CatalogService"):
        self.category = category
        self.catalog = catalog
        self._active_child_xrefs: LazySlot[List[CategoryXref]] = LazySlot()
        self._featured_products: LazySlot[List[FeaturedProduct]] = LazySlot()
        self._cross_sale_products: LazySlot[List[RelatedProduct]] = LazySlot()
        self._up_sale_products: LazySlot[List[RelatedProduct]] = LazySlot()
        self._child_category_url_map: LazySlot[Dict[str, List[int]]] = LazySlot()

    def __repr__(self) -> str:
        return f"CategoryView(category_id={self.category.category_id}, name={self.category.name!r})"

    @property
    def category_id(self) -> Optional[int]:
        return self.category.category_id

    # Activity and urls

    def is_active(self, now: Optional[datetime] = None) -> bool:
        return is_active(self.category, now)

    @property
    def url(self) -> Optional[str]:
        return self.catalog.url_composer.url(self.category)

    @property
    def url_key(self) -> Optional[str]:
        return self.catalog.url_composer.resolve_url_key(self.category)

    @property
    def generated_url(self) -> str:
        return self.catalog.url_composer.generated_url(self.category)

    def canonical_link(self, ignore_top_level_segment: bool = False) -> str:
        return self.catalog.url_composer.canonical_link(self.category, ignore_top_level_segment)

    # Children

    def active_child_category_xrefs(self) -> List[CategoryXref]:
        """Child edges whose target category is active"""
        return self._active_child_xrefs.get_or_compute(self._compute_active_child_xrefs)

    def _compute_active_child_xrefs(self) -> List[CategoryXref]:
        graph = self.catalog.graph
        active = []
        for xref in self.category.all_child_category_xrefs:
            child = graph.get_category(xref.sub_category_id)
            if child is not None and is_active(child):
                active.append(xref)
        return active

    def child_categories(self) -> List[CategoryNode]:
        graph = self.catalog.graph
        return [graph.get_category(x.sub_category_id) for x in self.active_child_category_xrefs()]

    def has_child_categories(self) -> bool:
        return bool(self.active_child_category_xrefs())

    def has_all_child_categories(self) -> bool:
        return bool(self.category.all_child_category_xrefs)

    def child_category_url_map(self) -> Dict[str, List[int]]:
        return self._child_category_url_map.get_or_compute(
            lambda: self.catalog.url_map_builder.child_category_url_map(self.category)
        )

    def set_child_category_url_map(self, url_map: Dict[str, List[int]]):
        self._child_category_url_map.set(url_map)

    # Hierarchy

    def category_hierarchy(self) -> List[CategoryNode]:
        return self.catalog.walker.default_chain(self.category)

    def full_category_hierarchy(self) -> List[CategoryNode]:
        return self.catalog.walker.full_chain(self.category)

    # Products

    def active_product_xrefs(self, now: Optional[datetime] = None) -> List[CategoryProductXref]:
        return [x for x in self.category.all_product_xrefs if is_active(x.product, now)]

    def active_products(self, now: Optional[datetime] = None) -> List[Product]:
        return [x.product for x in self.active_product_xrefs(now)]

    def all_products(self) -> List[Product]:
        return [x.product for x in self.category.all_product_xrefs]

    def featured_products(self) -> List[FeaturedProduct]:
        return self._featured_products.get_or_compute(
            lambda: unarchived_featured_products(self.category)
        )

    def cross_sale_products(self) -> List[RelatedProduct]:
        return self._cross_sale_products.get_or_compute(
            lambda: unarchived_cross_sale_products(self.category)
        )

    def up_sale_products(self) -> List[RelatedProduct]:
        return self._up_sale_products.get_or_compute(
            lambda: unarchived_up_sale_products(self.category)
        )

    def cumulative_featured_products(self) -> List[FeaturedProduct]:
        return self.catalog.aggregation.cumulative_featured_products(self.category)

    def cumulative_cross_sale_products(self) -> List[RelatedProduct]:
        return self.catalog.aggregation.cumulative_cross_sale_products(self.category)

    def cumulative_up_sale_products(self) -> List[RelatedProduct]:
        return self.catalog.aggregation.cumulative_up_sale_products(self.category)

    # Search and attributes

    def cumulative_search_facets(self) -> List[CategorySearchFacet]:
        return self.catalog.aggregation.cumulative_search_facets(self.category)

    def category_attribute_by_name(self, name: str) -> Optional[CategoryAttribute]:
        for attribute in self.category.category_attributes:
            if attribute.name == name:
                return attribute
        return None

    def mapped_category_attributes(self) -> Dict[str, CategoryAttribute]:
        return {a.name: a for a in self.category.category_attributes}
