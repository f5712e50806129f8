# catalog_hierarchy/models/product.py
from decimal import Decimal
from typing import Optional
from .base import CatalogModel, ArchivableModel


class Product(ArchivableModel):
    """Product referenced from category edges and promotion lists"""
    product_id: int
    name: str
    url: Optional[str] = None


class CategoryProductXref(CatalogModel):
    """Ordered edge from a category to one of its products"""
    category_id: int
    product: Product
    display_order: Optional[Decimal] = None


class FeaturedProduct(CatalogModel):
    """Product promoted on a category page"""
    id: int
    category_id: int
    product: Product
    sequence: Optional[Decimal] = None
    promotion_message: Optional[str] = None


class RelatedProduct(CatalogModel):
    """Cross-sale or up-sale entry attached to a category"""
    id: int
    category_id: int
    related_product: Product
    sequence: Optional[Decimal] = None
    promotion_message: Optional[str] = None
