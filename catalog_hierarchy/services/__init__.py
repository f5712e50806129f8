"""Hierarchy services"""
from .active_filter import is_active
from .aggregation_service import AggregationEngine, compare_facet_position
from .cache_service import HydrationCache
from .catalog_service import CatalogService
from .category_graph import CategoryGraph
from .category_view import CategoryView
from .hierarchy_service import HierarchyWalker
from .url_map_service import URLMapBuilder
from .url_service import URLComposer

__all__ = [
    'is_active',
    'AggregationEngine',
    'compare_facet_position',
    'HydrationCache',
    'CatalogService',
    'CategoryGraph',
    'CategoryView',
    'HierarchyWalker',
    'URLMapBuilder',
    'URLComposer',
]
