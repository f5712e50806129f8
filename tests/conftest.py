"""Shared fixtures: a small catalog graph.

    1 root ("/")
    ├── 2 shoes
    │   ├── 4 running (no url key, name "Running Shoes")
    │   └── 5 sandals (archived)
    └── 3 bags
"""

import pytest

from catalog_hierarchy.models.category import CategoryNode
from catalog_hierarchy.models.product import Product, RelatedProduct, FeaturedProduct
from catalog_hierarchy.models.search_facet import SearchFacet, CategorySearchFacet
from catalog_hierarchy.services.cache_service import HydrationCache
from catalog_hierarchy.services.catalog_service import CatalogService
from catalog_hierarchy.services.category_graph import CategoryGraph


def make_category(category_id, name=None, url_key=None, parent_id=None, **fields):
    return CategoryNode(
        category_id=category_id,
        name=name if name is not None else f"Category {category_id}",
        url_key=url_key,
        default_parent_category_id=parent_id,
        **fields,
    )


def make_product(product_id, **fields):
    return Product(product_id=product_id, name=f"Product {product_id}", **fields)


def make_related(related_id, category_id, product):
    return RelatedProduct(id=related_id, category_id=category_id, related_product=product)


def make_featured(featured_id, category_id, product):
    return FeaturedProduct(id=featured_id, category_id=category_id, product=product)


def make_facet(facet_id, name=None):
    return SearchFacet(search_facet_id=facet_id, name=name or f"facet-{facet_id}")


def place_facet(placement_id, category_id, facet, sequence=None):
    return CategorySearchFacet(
        id=placement_id, category_id=category_id, search_facet=facet, sequence=sequence
    )


@pytest.fixture
def graph():
    g = CategoryGraph([
        make_category(1, name="Root", url_key="/"),
        make_category(2, name="Shoes", url_key="shoes", parent_id=1),
        make_category(3, name="Bags", url_key="bags", parent_id=1),
        make_category(4, name="Running Shoes", parent_id=2),
        make_category(5, name="Sandals", url_key="sandals", parent_id=2, archived="Y"),
    ])
    g.link_categories(1, 2, display_order=1)
    g.link_categories(1, 3, display_order=2)
    g.link_categories(2, 4, display_order=1)
    g.link_categories(2, 5, display_order=2)
    return g


@pytest.fixture
def cache():
    return HydrationCache()


@pytest.fixture
def catalog(graph, cache):
    return CatalogService(graph, cache)
