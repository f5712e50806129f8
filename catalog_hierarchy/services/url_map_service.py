# catalog_hierarchy/services/url_map_service.py
import logging
from typing import Dict, List, Optional
from ..config import Config
from ..exceptions import URLMapBuildError
from ..models.category import CategoryNode
from ..utils.url_utils import ROOT_URL_KEY
from .cache_service import HydrationCache
from .category_graph import CategoryGraph
from .url_service import URLComposer

CHILD_CATEGORY_URL_MAP = "child_category_url_map"


class URLMapBuilder:
    """Maps every composed path under a category to its id lineage"""

    def __init__(self, graph: CategoryGraph, url_composer: URLComposer,
                 cache: Optional[HydrationCache] = None):
        self.graph = graph
        self.url_composer = url_composer
        self.cache = cache
        self.logger = logging.getLogger(__name__)

    def build_subtree_url_map(self, origin: CategoryNode) -> Dict[str, List[int]]:
        """Build {path: [root id, ..., node id]} for the sub-tree under origin.

        Children are followed through every child edge, archived or not.
        A node without a url key aborts the whole build.
        """
        url_map: Dict[str, List[int]] = {}
        try:
            self._fill_in(url_map, origin, "", [])
        except URLMapBuildError as e:
            self.logger.error(f"URL map for category {origin.category_id} failed: {e}")
            raise
        return url_map

    def _fill_in(self, url_map: Dict[str, List[int]], category: CategoryNode,
                 starting_path: str, starting_ids: List[int]):
        url_key = self.url_composer.resolve_url_key(category)
        if url_key is None:
            raise URLMapBuildError(category.category_id)

        current_path = ""
        if url_key != ROOT_URL_KEY:
            current_path = f"{starting_path}/{url_key}"

        lineage = starting_ids + [category.category_id]
        url_map[current_path] = lineage

        for xref in category.all_child_category_xrefs:
            if xref.sub_category_id in lineage:
                self.logger.warning(
                    f"Skipping child {xref.sub_category_id} of category {category.category_id}: "
                    f"already on the path {lineage}"
                )
                continue
            child = self.graph.get_category(xref.sub_category_id)
            if child is None:
                self.logger.warning(
                    f"Category {category.category_id} has an edge to missing child {xref.sub_category_id}"
                )
                continue
            self._fill_in(url_map, child, current_path, lineage)

    def child_category_url_map(self, origin: CategoryNode) -> Dict[str, List[int]]:
        """The sub-tree map, through the hydration cache when one is configured"""
        if self.cache is None or not Config.URL_MAP_CACHE_ENABLED:
            return self.build_subtree_url_map(origin)
        return self.cache.get_or_create(
            (CHILD_CATEGORY_URL_MAP, origin.category_id),
            lambda: self.build_subtree_url_map(origin)
        )

    def refresh(self, origin: CategoryNode) -> bool:
        """Forget the cached map for origin"""
        if self.cache is None:
            return False
        return self.cache.invalidate((CHILD_CATEGORY_URL_MAP, origin.category_id))
