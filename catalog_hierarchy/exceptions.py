# catalog_hierarchy/exceptions.py
from typing import Optional


class CatalogError(Exception):
    """Base class for category hierarchy errors"""


class CategoryNotFoundError(CatalogError, LookupError):
    """Raised when a category id is not present in the graph"""

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category {category_id} not found")


class URLMapBuildError(CatalogError):
    """Raised when a child category URL map cannot be built.

    The whole build is abandoned; no partial map is returned or cached.
    """

    def __init__(self, category_id: Optional[int], message: Optional[str] = None):
        self.category_id = category_id
        super().__init__(
            message
            or f"Cannot create child category URL map - the url key for category ({category_id}) was empty"
        )
