"""Tests for the built-in order validators."""

from decimal import Decimal

import pytest

from myecom.catalogue.product.product import Product
from myecom.exceptions import BusinessError
from myecom.ordering.validation.empty_cart import EmptyCartValidator
from myecom.ordering.validation.price_limit import PriceLimitValidator
from myecom.ordering.validation.stock import StockValidator
from myecom.ordering.validation.validator import CartLine
from myecom.settings import configure


def _line(price="10.00", quantity=1, stock=200, active=True, name="Prodotto"):
    product = Product.create(name=name, price=price, stock=stock, category_id="cat-1", active=active)
    return CartLine(product=product, quantity=quantity)


class TestValidatorMetadata:
    def test_default_positions(self):
        assert EmptyCartValidator().order == 1
        assert PriceLimitValidator().order == 10
        assert StockValidator().order == 20

    def test_enabled_by_default(self):
        assert EmptyCartValidator().enabled is True

    def test_overrides(self):
        validator = StockValidator(order=5, enabled=False, name="custom-stock")
        assert (validator.name, validator.order, validator.enabled) == ("custom-stock", 5, False)


class TestEmptyCartValidator:
    def test_empty_cart_is_refused(self):
        with pytest.raises(BusinessError) as exc:
            EmptyCartValidator().validate("user-1", [])
        assert "vuoto" in exc.value.message

    def test_cart_with_lines_passes(self):
        EmptyCartValidator().validate("user-1", [_line()])


class TestPriceLimitValidator:
    def test_total_equal_to_limit_passes(self):
        PriceLimitValidator().validate("user-1", [_line(price="2500.00", quantity=2)])

    def test_one_cent_over_limit_is_refused(self):
        with pytest.raises(BusinessError) as exc:
            PriceLimitValidator().validate("user-1", [_line(price="5000.01")])
        assert "grande (€5000.01)" in exc.value.message
        assert "€5000.00" in exc.value.message

    def test_total_sums_every_line(self):
        lines = [_line(price="3000.00"), _line(price="2000.00"), _line(price="0.01")]
        with pytest.raises(BusinessError):
            PriceLimitValidator().validate("user-1", lines)

    def test_limit_follows_settings(self):
        configure(order_max_amount=Decimal("100.00"))
        with pytest.raises(BusinessError) as exc:
            PriceLimitValidator().validate("user-1", [_line(price="100.50")])
        assert "€100.00" in exc.value.message

    def test_explicit_limit_wins(self):
        PriceLimitValidator(max_amount=Decimal("10000")).validate("user-1", [_line(price="6000.00")])


class TestStockValidator:
    def test_quantity_equal_to_stock_passes(self):
        StockValidator().validate("user-1", [_line(quantity=5, stock=5)])

    def test_quantity_over_stock_is_refused(self):
        with pytest.raises(BusinessError) as exc:
            StockValidator().validate("user-1", [_line(quantity=6, stock=5, name="C")])
        assert "richiesti 6 pezzi ma disponibili solo 5" in exc.value.message

    def test_inactive_product_is_refused_regardless_of_stock(self):
        with pytest.raises(BusinessError) as exc:
            StockValidator().validate("user-1", [_line(stock=1000, active=False, name="D")])
        assert "'D' non è più disponibile" in exc.value.message

    def test_ninety_nine_pieces_pass(self):
        StockValidator().validate("user-1", [_line(quantity=99)])

    def test_hundred_pieces_are_refused(self):
        with pytest.raises(BusinessError) as exc:
            StockValidator().validate("user-1", [_line(quantity=100)])
        assert "Massimo 99 pezzi per prodotto" in exc.value.message
