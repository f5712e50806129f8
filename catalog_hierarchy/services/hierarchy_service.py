# catalog_hierarchy/services/hierarchy_service.py
import logging
from typing import List
from ..models.category import CategoryNode
from .category_graph import CategoryGraph


class HierarchyWalker:
    """Builds ancestor chains over a graph that may contain cycles"""

    def __init__(self, graph: CategoryGraph):
        self.graph = graph
        self.logger = logging.getLogger(__name__)

    def default_chain(self, origin: CategoryNode) -> List[CategoryNode]:
        """Origin followed by its default parents, stopping at a root or a repeat"""
        chain = [origin]
        seen = {origin.category_id}
        current = self.graph.get_default_parent(origin)
        while current is not None:
            if current.category_id in seen:
                self.logger.debug(
                    f"Default parent cycle reached category {current.category_id} "
                    f"from category {origin.category_id}"
                )
                break
            chain.append(current)
            seen.add(current.category_id)
            current = self.graph.get_default_parent(current)
        return chain

    def full_chain(self, origin: CategoryNode) -> List[CategoryNode]:
        """Every ancestor reachable by default parent or parent edge, depth first.

        At each node the default parent is expanded before the edge
        parents, which keep their edge order.
        """
        chain = []
        seen = set()
        stack = [origin]
        while stack:
            current = stack.pop()
            if current.category_id in seen:
                continue
            seen.add(current.category_id)
            chain.append(current)
            # pushed in reverse so the default parent is popped first
            stack.extend(reversed(self._parents_of(current)))
        return chain

    def _parents_of(self, category: CategoryNode) -> List[CategoryNode]:
        parents = []
        default_parent = self.graph.get_default_parent(category)
        if default_parent is not None:
            parents.append(default_parent)
        for xref in category.all_parent_category_xrefs:
            parent = self.graph.get_category(xref.category_id)
            if parent is None:
                self.logger.warning(
                    f"Category {category.category_id} has an edge to missing parent {xref.category_id}"
                )
                continue
            parents.append(parent)
        return parents
