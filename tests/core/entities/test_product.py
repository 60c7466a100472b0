"""Unit tests for product entities and filters."""

from decimal import Decimal

from stockroom.core.entities import Category, Product, ProductFilter


def _product(name="Laptop", category="Electronics", price="1200.00", qty=5) -> Product:
    return Product(
        id="p1",
        name=name,
        category=Category(name=category),
        unit_price=Decimal(price),
        stock_quantity=qty,
    )


class TestProduct:
    def test_defaults(self):
        product = Product(name="Pen", category=Category(name="Office"), unit_price=Decimal("1"))
        assert product.id is None
        assert product.stock_quantity == 0
        assert product.expiration_date is None
        assert product.created_at.tzinfo is not None

    def test_category_name(self):
        assert _product().category_name == "Electronics"

    def test_in_stock(self):
        assert _product(qty=1).in_stock is True
        assert _product(qty=0).in_stock is False

    def test_stock_value_is_exact_decimal(self):
        assert _product(price="0.10", qty=3).stock_value == Decimal("0.30")


class TestProductFilter:
    def test_empty_filter(self):
        assert ProductFilter().is_empty is True
        assert ProductFilter(name="   ", category_names=[]).is_empty is True

    def test_non_empty_filter(self):
        assert ProductFilter(in_stock=False).is_empty is False
        assert ProductFilter(name="lap").is_empty is False
        assert ProductFilter(category_names=["Food"]).is_empty is False

    def test_name_is_case_insensitive_substring(self):
        assert ProductFilter(name="APTO").matches(_product()) is True
        assert ProductFilter(name="phone").matches(_product()) is False

    def test_category_membership(self):
        assert ProductFilter(category_names=["Food", "Electronics"]).matches(_product()) is True
        assert ProductFilter(category_names=["Food"]).matches(_product()) is False

    def test_in_stock_criteria(self):
        assert ProductFilter(in_stock=True).matches(_product(qty=1)) is True
        assert ProductFilter(in_stock=True).matches(_product(qty=0)) is False
        assert ProductFilter(in_stock=False).matches(_product(qty=0)) is True

    def test_criteria_combine_with_and(self):
        criteria = ProductFilter(name="lap", category_names=["Electronics"], in_stock=False)
        assert criteria.matches(_product(qty=5)) is False
        assert criteria.matches(_product(qty=0)) is True
