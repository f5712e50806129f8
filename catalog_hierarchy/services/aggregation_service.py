# catalog_hierarchy/services/aggregation_service.py
from functools import cmp_to_key
from typing import Any, Callable, FrozenSet, Hashable, List, Optional
from ..models.category import CategoryNode
from ..models.product import FeaturedProduct, RelatedProduct
from ..models.search_facet import CategorySearchFacet
from .hierarchy_service import HierarchyWalker


def compare_facet_position(first: CategorySearchFacet, second: CategorySearchFacet) -> int:
    """Order facets by sequence; facets without one sort after the rest"""
    if first.sequence == second.sequence:
        return 0
    if first.sequence is None:
        return 1
    if second.sequence is None:
        return -1
    return -1 if first.sequence < second.sequence else 1


def record_id(item: Any) -> Hashable:
    return item.id


def unarchived_featured_products(category: CategoryNode) -> List[FeaturedProduct]:
    return [f for f in category.featured_products if not f.product.is_archived]


def unarchived_cross_sale_products(category: CategoryNode) -> List[RelatedProduct]:
    return [r for r in category.cross_sale_products if not r.related_product.is_archived]


def unarchived_up_sale_products(category: CategoryNode) -> List[RelatedProduct]:
    return [r for r in category.up_sale_products if not r.related_product.is_archived]


class AggregationEngine:
    """Merges per-category collections along the default parent chain"""

    def __init__(self, walker: HierarchyWalker):
        self.walker = walker

    def cumulative(self, origin: CategoryNode,
                   selector: Callable[[CategoryNode], List[Any]],
                   key: Callable[[Any], Hashable] = record_id) -> List[Any]:
        """Union of selector(node) over the default chain, first seen wins.

        key gives the identity used for de-duplication; promotion records
        are compared by their own id.
        """
        result = []
        seen = set()
        for category in self.walker.default_chain(origin):
            for item in selector(category):
                identity = key(item)
                if identity in seen:
                    continue
                seen.add(identity)
                result.append(item)
        return result

    def cumulative_featured_products(self, origin: CategoryNode) -> List[FeaturedProduct]:
        return self.cumulative(origin, unarchived_featured_products)

    def cumulative_cross_sale_products(self, origin: CategoryNode) -> List[RelatedProduct]:
        return self.cumulative(origin, unarchived_cross_sale_products)

    def cumulative_up_sale_products(self, origin: CategoryNode) -> List[RelatedProduct]:
        return self.cumulative(origin, unarchived_up_sale_products)

    def cumulative_search_facets(self, origin: CategoryNode,
                                 _visited: Optional[FrozenSet[int]] = None) -> List[CategorySearchFacet]:
        """Own facets in sequence order, then the inherited ones.

        Inherited facets are dropped when origin excludes them or when
        their search facet is already in the result.
        """
        visited = (_visited or frozenset()) | {origin.category_id}
        facets = sorted(origin.search_facets, key=cmp_to_key(compare_facet_position))

        parent = self.walker.graph.get_default_parent(origin)
        if parent is None or parent.category_id in visited:
            return facets

        excluded = {f.search_facet_id for f in origin.excluded_search_facets}
        present = {f.search_facet.search_facet_id for f in facets}
        for facet in self.cumulative_search_facets(parent, visited):
            facet_id = facet.search_facet.search_facet_id
            if facet_id in excluded or facet_id in present:
                continue
            present.add(facet_id)
            facets.append(facet)
        return facets
