"""Tests for url keys, url normalization and canonical links."""

import pytest

from catalog_hierarchy.services.category_graph import CategoryGraph
from catalog_hierarchy.services.hierarchy_service import HierarchyWalker
from catalog_hierarchy.services.url_service import URLComposer
from catalog_hierarchy.utils.url_utils import slugify

from conftest import make_category


@pytest.fixture
def composer(graph):
    return URLComposer(HierarchyWalker(graph))


class TestSlugify:
    def test_spaces(self):
        assert slugify("Running Shoes") == "running-shoes"

    def test_punctuation_collapses(self):
        assert slugify("  Men's  T-Shirts & Tops! ") == "men-s-t-shirts-tops"

    def test_empty(self):
        assert slugify("") == ""


class TestResolveUrlKey:
    def test_explicit_key_wins(self):
        category = make_category(1, name="Running Shoes", url_key="shoes")
        assert URLComposer.resolve_url_key(category) == "shoes"

    def test_derived_from_name(self):
        category = make_category(1, name="Running Shoes")
        assert URLComposer.resolve_url_key(category) == slugify("Running Shoes")

    def test_blank_key_is_derived(self):
        category = make_category(1, name="Running Shoes", url_key="   ")
        assert URLComposer.resolve_url_key(category) == "running-shoes"

    def test_follows_name_changes(self):
        category = make_category(1, name="Boots")
        assert URLComposer.resolve_url_key(category) == "boots"
        category.name = "Winter Boots"
        assert URLComposer.resolve_url_key(category) == "winter-boots"

    def test_no_key_no_name(self):
        category = make_category(1)
        category.name = None
        assert URLComposer.resolve_url_key(category) is None


class TestNormalizeUrl:
    @pytest.mark.parametrize("raw, expected", [
        ("products", "/products"),
        ("/products", "/products"),
        ("http://ex.com/p", "http://ex.com/p"),
        ("https://ex.com/p?q=1", "https://ex.com/p?q=1"),
        ("mailto:sales@ex.com", "mailto:sales@ex.com"),
        ("search?q=a:b", "/search?q=a:b"),
        ("search?q=1", "/search?q=1"),
        ("", ""),
        (None, None),
    ])
    def test_rules(self, raw, expected):
        assert URLComposer.normalize_url(raw) == expected

    def test_url_accessor_normalizes(self, composer):
        assert composer.url(make_category(1, url="sale")) == "/sale"


class TestCanonicalLink:
    def test_root_marker_adds_no_segment(self, composer, graph):
        assert composer.canonical_link(graph.get_category(2)) == "shoes"

    def test_derived_key_in_leaf(self, composer, graph):
        assert composer.canonical_link(graph.get_category(4)) == "shoes/running-shoes"

    def test_named_top_level(self):
        g = CategoryGraph([
            make_category(1, url_key="catalog"),
            make_category(2, url_key="shoes", parent_id=1),
            make_category(3, url_key="boots", parent_id=2),
        ])
        composer = URLComposer(HierarchyWalker(g))
        assert composer.canonical_link(g.get_category(3)) == "catalog/shoes/boots"
        assert composer.canonical_link(g.get_category(3), True) == "shoes/boots"
        assert composer.generated_url(g.get_category(3)) == "catalog/shoes/boots"

    def test_ignore_top_level_on_root(self, composer, graph):
        assert composer.canonical_link(graph.get_category(1), True) == ""

    def test_keyless_leaf_keeps_own_link(self, composer, graph):
        graph.add_category(make_category(6, name="!!!", parent_id=2))
        leaf_link = composer.canonical_link(graph.get_category(6))
        assert leaf_link == "shoes/"
        assert leaf_link != composer.canonical_link(graph.get_category(2))

    def test_cycle_terminates(self):
        g = CategoryGraph([
            make_category(1, url_key="a", parent_id=2),
            make_category(2, url_key="b", parent_id=1),
        ])
        composer = URLComposer(HierarchyWalker(g))
        assert composer.canonical_link(g.get_category(1)) == "b/a"
        # no node in a cycle is a top level category
        assert composer.canonical_link(g.get_category(1), True) == "b/a"
