# catalog_hierarchy/services/category_graph.py
import logging
import threading
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from ..exceptions import CategoryNotFoundError
from ..models.base import ARCHIVED
from ..models.category import CategoryNode, CategoryXref


class CategoryGraph:
    """In-memory category arena keyed by category id.

    Stands in for the persistence layer: it owns the nodes, keeps both
    sides of every parent/child edge in step, and archives instead of
    deleting.
    """

    def __init__(self, categories: Optional[Iterable[CategoryNode]] = None):
        self._categories: Dict[int, CategoryNode] = {}
        self._lock = threading.RLock()
        self.logger = logging.getLogger(__name__)
        for category in categories or ():
            self.add_category(category)

    def __contains__(self, category_id: int) -> bool:
        return category_id in self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def add_category(self, category: CategoryNode) -> int:
        """Register a category record"""
        if category.category_id is None:
            raise ValueError("Category must have an id before it joins the graph")
        with self._lock:
            if category.category_id in self._categories:
                raise ValueError(f"Category {category.category_id} already exists")
            self._categories[category.category_id] = category
        return category.category_id

    def get_category(self, category_id: Optional[int]) -> Optional[CategoryNode]:
        """Category by id, or None"""
        if category_id is None:
            return None
        return self._categories.get(category_id)

    def require_category(self, category_id: int) -> CategoryNode:
        category = self.get_category(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    def get_all_categories(self) -> List[CategoryNode]:
        return list(self._categories.values())

    def get_root_categories(self) -> List[CategoryNode]:
        """Categories without a default parent"""
        return [c for c in self._categories.values() if c.is_root]

    def get_default_parent(self, category: CategoryNode) -> Optional[CategoryNode]:
        parent_id = category.default_parent_category_id
        if parent_id is None:
            return None
        parent = self.get_category(parent_id)
        if parent is None:
            self.logger.warning(
                f"Category {category.category_id} points to missing default parent {parent_id}"
            )
        return parent

    def get_subcategories(self, category_id: int) -> List[CategoryNode]:
        """Children reached through child edges, in edge order"""
        category = self.require_category(category_id)
        children = []
        for xref in category.all_child_category_xrefs:
            child = self.get_category(xref.sub_category_id)
            if child is None:
                self.logger.warning(
                    f"Category {category_id} has an edge to missing child {xref.sub_category_id}"
                )
                continue
            children.append(child)
        return children

    def link_categories(self, parent_id: int, child_id: int,
                        display_order: Optional[Decimal] = None) -> CategoryXref:
        """Add a parent/child edge to both categories"""
        if parent_id == child_id:
            raise ValueError(f"Category {parent_id} cannot be linked to itself")
        with self._lock:
            parent = self.require_category(parent_id)
            child = self.require_category(child_id)
            xref = CategoryXref(
                category_id=parent_id,
                sub_category_id=child_id,
                display_order=display_order
            )
            # reassignment re-runs the display order validator
            parent.all_child_category_xrefs = parent.all_child_category_xrefs + [xref]
            child.all_parent_category_xrefs = child.all_parent_category_xrefs + [xref]
        return xref

    def set_default_parent(self, category_id: int, parent_id: Optional[int]):
        """Change the primary ancestor of a category"""
        with self._lock:
            category = self.require_category(category_id)
            if parent_id is not None:
                self.require_category(parent_id)
                if self.check_circular_dependency(category_id, parent_id):
                    self.logger.warning(
                        f"Default parent {parent_id} closes a cycle through category {category_id}"
                    )
            category.default_parent_category_id = parent_id

    def archive_category(self, category_id: int) -> bool:
        """Soft delete: the category stays in every edge list"""
        with self._lock:
            category = self.require_category(category_id)
            if category.is_archived:
                return False
            category.archived = ARCHIVED
        self.logger.info(f"Category {category_id} archived")
        return True

    def check_circular_dependency(self, category_id: int, new_parent_id: int) -> bool:
        """True if new_parent_id already descends from category_id by default parents"""
        visited = set()
        current_id = new_parent_id
        while current_id is not None and current_id not in visited:
            if current_id == category_id:
                return True
            visited.add(current_id)
            current = self.get_category(current_id)
            current_id = current.default_parent_category_id if current else None
        return False
