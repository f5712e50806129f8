"""Tests for category and product records."""

from decimal import Decimal

from catalog_hierarchy.models.category import CategoryNode, CategoryXref, FulfillmentType, InventoryType

from conftest import make_category


class TestCategoryNode:
    def test_defaults(self):
        category = CategoryNode(category_id=1)
        assert category.is_root
        assert not category.is_archived
        assert category.all_child_category_xrefs == []
        assert category.search_facets == []

    def test_collections_not_shared(self):
        first, second = CategoryNode(category_id=1), CategoryNode(category_id=2)
        first.featured_products.append("x")
        assert second.featured_products == []

    def test_xrefs_sorted_on_build(self):
        category = CategoryNode(
            category_id=1,
            all_child_category_xrefs=[
                CategoryXref(category_id=1, sub_category_id=3),
                CategoryXref(category_id=1, sub_category_id=2, display_order=Decimal("2")),
                CategoryXref(category_id=1, sub_category_id=4, display_order=Decimal("1")),
            ],
        )
        assert [x.sub_category_id for x in category.all_child_category_xrefs] == [4, 2, 3]

    def test_equal_display_order_keeps_given_order(self):
        category = CategoryNode(
            category_id=1,
            all_child_category_xrefs=[
                CategoryXref(category_id=1, sub_category_id=5, display_order=1),
                CategoryXref(category_id=1, sub_category_id=2, display_order=1),
            ],
        )
        assert [x.sub_category_id for x in category.all_child_category_xrefs] == [5, 2]

    def test_enums(self):
        category = CategoryNode(category_id=1, inventory_type="CHECK_QUANTITY", fulfillment_type="DIGITAL")
        assert category.inventory_type is InventoryType.CHECK_QUANTITY
        assert category.fulfillment_type is FulfillmentType.DIGITAL

    def test_from_attributes(self):
        class Row:
            category_id = 7
            name = "Hats"
            url_key = "hats"

        category = CategoryNode.model_validate(Row())
        assert category.category_id == 7
        assert category.url_key == "hats"


class TestSameCategory:
    def test_by_id(self):
        assert make_category(1, name="A").same_category(make_category(1, name="B"))
        assert not make_category(1).same_category(make_category(2))

    def test_by_name_and_url_without_ids(self):
        first = CategoryNode(name="Hats", url="/hats")
        assert first.same_category(CategoryNode(name="Hats", url="/hats"))
        assert not first.same_category(CategoryNode(name="Hats", url="/caps"))
        assert not first.same_category(None)
