"""Category hierarchy: traversal, url composition and aggregation"""
from .exceptions import CatalogError, CategoryNotFoundError, URLMapBuildError
from .models.category import CategoryNode, CategoryXref
from .services import CatalogService, CategoryGraph, CategoryView, HydrationCache

__all__ = [
    'CatalogError',
    'CategoryNotFoundError',
    'URLMapBuildError',
    'CategoryNode',
    'CategoryXref',
    'CatalogService',
    'CategoryGraph',
    'CategoryView',
    'HydrationCache',
]
