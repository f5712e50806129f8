# catalog_hierarchy/services/catalog_service.py
import logging
from typing import Optional
from .aggregation_service import AggregationEngine
from .cache_service import HydrationCache
from .category_graph import CategoryGraph
from .category_view import CategoryView
from .hierarchy_service import HierarchyWalker
from .url_map_service import URLMapBuilder
from .url_service import URLComposer


class CatalogService:
    """Entry point wiring the hierarchy services around one graph"""

    def __init__(self, graph: CategoryGraph, cache: Optional[HydrationCache] = None):
        self.graph = graph
        self.cache = cache if cache is not None else HydrationCache()
        self.walker = HierarchyWalker(graph)
        self.url_composer = URLComposer(self.walker)
        self.url_map_builder = URLMapBuilder(graph, self.url_composer, self.cache)
        self.aggregation = AggregationEngine(self.walker)
        self.logger = logging.getLogger(__name__)

    def view(self, category_id: int) -> CategoryView:
        """Fresh runtime view; unknown ids raise CategoryNotFoundError"""
        return CategoryView(self.graph.require_category(category_id), self)

    def refresh_url_map(self, category_id: int) -> bool:
        """Drop the cached child category URL map of one category"""
        category = self.graph.require_category(category_id)
        refreshed = self.url_map_builder.refresh(category)
        if refreshed:
            self.logger.info(f"Child category URL map for category {category_id} dropped")
        return refreshed
