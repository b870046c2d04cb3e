"""Unit tests for domain value objects."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from optimus.domain.exceptions import (
    CurrencyMismatchError,
    DomainValidationError,
    InvalidPriceError,
    InvalidProductNameError,
    InvalidQuantityError,
)
from optimus.domain.model.value_objects import Money, ProductName, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money.create(1050)
        assert m.cents == 1050
        assert m.currency == "EUR"
        assert m.amount == Decimal("10.50")

    def test_currency_is_uppercased(self):
        assert Money.create(100, "usd").currency == "USD"

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidPriceError, match="Invalid price"):
            Money.create(-1, "EUR")

    def test_fractional_cents_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.create(10.5)

    def test_bool_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.create(True)

    def test_direct_construction_is_validated(self):
        with pytest.raises(InvalidPriceError):
            Money(-5)

    def test_invalid_currency_rejected(self):
        with pytest.raises(DomainValidationError, match="ISO 4217"):
            Money.create(100, "EURO")

    def test_non_ascii_currency_rejected(self):
        with pytest.raises(DomainValidationError, match="ISO 4217"):
            Money.create(100, "ÉUR")

    def test_is_immutable(self):
        m = Money.create(100)
        with pytest.raises(FrozenInstanceError):
            m.amount_in_cents = 200

    @pytest.mark.parametrize("cents", [0, 1, 99, 1599, 123456789])
    def test_to_float_round_trips_to_cents(self, cents):
        assert round(Money.create(cents, "EUR").to_float() * 100) == cents

    def test_from_float(self):
        assert Money.from_float(15.99).cents == 1599

    def test_from_float_rounds_half_up(self):
        assert Money.from_float("1.005").cents == 101
        assert Money.from_float(0.125).cents == 13

    def test_from_float_accepts_decimal_and_int(self):
        assert Money.from_float(Decimal("2.50")).cents == 250
        assert Money.from_float(3).cents == 300

    def test_from_float_garbage_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.from_float("twelve")

    def test_from_float_negative_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.from_float(-0.01)

    def test_addition(self):
        assert Money.create(1000).add(Money.create(550)) == Money.create(1550)
        assert Money.create(1000) + Money.create(1) == Money.create(1001)

    def test_subtraction(self):
        assert Money.create(1000).subtract(Money.create(300)) == Money.create(700)

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.create(500).subtract(Money.create(1000))

    def test_add_then_subtract_is_identity(self):
        a, b = Money.create(1234, "EUR"), Money.create(987, "EUR")
        assert a.add(b).subtract(b).equals(a)

    def test_currency_mismatch_rejected(self):
        with pytest.raises(CurrencyMismatchError, match="EUR and USD"):
            Money.create(1000, "EUR").add(Money.create(500, "USD"))

    def test_multiply_by_int(self):
        assert Money.create(750).multiply(3) == Money.create(2250)
        assert Money.create(750) * 2 == Money.create(1500)

    def test_multiply_rounds_half_up(self):
        assert Money.create(999).multiply(1.5).cents == 1499

    def test_multiply_by_negative_rejected(self):
        with pytest.raises(InvalidPriceError):
            Money.create(100).multiply(-1)

    def test_multiply_by_non_number_rejected(self):
        with pytest.raises(TypeError):
            Money.create(100).multiply("2")

    def test_equality_needs_same_currency(self):
        assert not Money.create(100, "EUR").equals(Money.create(100, "USD"))
        assert Money.create(100, "eur").equals(Money.create(100, "EUR"))

    def test_comparison_operators(self):
        assert Money.create(500) < Money.create(1000)
        assert Money.create(1000) > Money.create(500)
        assert Money.create(1000) >= Money.create(1000)
        assert Money.create(1000) <= Money.create(1000)

    def test_comparison_across_currencies_rejected(self):
        with pytest.raises(CurrencyMismatchError):
            Money.create(100, "EUR") < Money.create(100, "USD")

    def test_str_is_locale_independent(self):
        assert str(Money.create(1599)) == "15.99 EUR"

    def test_format_french(self):
        formatted = Money.create(1599, "EUR").format()
        assert formatted.startswith("15,99")
        assert formatted.endswith("€")

    def test_format_accepts_posix_and_bcp47_tags(self):
        assert Money.create(1599, "USD").format("en-US") == "$15.99"
        assert Money.create(1599, "USD").format("en_US") == "$15.99"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity.create(5).value == 5

    def test_zero_allowed(self):
        assert Quantity.create(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="Invalid quantity"):
            Quantity.create(-3)

    def test_fractional_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Quantity.create(2.5)

    def test_add(self):
        assert Quantity.create(5).add(Quantity.create(3)) == Quantity.create(8)
        assert Quantity.create(5) + Quantity.create(1) == Quantity.create(6)

    def test_subtract(self):
        assert Quantity.create(10).subtract(Quantity.create(4)) == Quantity.create(6)

    def test_subtract_going_negative_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Quantity.create(5).subtract(Quantity.create(10))

    def test_is_sufficient_for(self):
        assert Quantity.create(10).is_sufficient_for(Quantity.create(10))
        assert not Quantity.create(9).is_sufficient_for(Quantity.create(10))

    def test_is_low_stock_default_threshold(self):
        assert Quantity.create(9).is_low_stock()
        assert not Quantity.create(10).is_low_stock()

    def test_is_low_stock_custom_threshold(self):
        assert Quantity.create(4).is_low_stock(threshold=5)
        assert not Quantity.create(5).is_low_stock(threshold=5)

    def test_str(self):
        assert str(Quantity.create(7)) == "7"


# ── ProductName ──────────────────────────────────────────────────────────────


class TestProductName:

    def test_is_trimmed(self):
        assert ProductName.create("  Riz Basmati ").value == "Riz Basmati"

    def test_blank_rejected(self):
        with pytest.raises(InvalidProductNameError):
            ProductName.create("   ")

    def test_empty_rejected(self):
        with pytest.raises(InvalidProductNameError):
            ProductName.create("")

    def test_too_long_rejected(self):
        with pytest.raises(InvalidProductNameError):
            ProductName.create("x" * 201)

    def test_max_length_accepted_after_trim(self):
        assert len(ProductName.create(" " + "x" * 200 + " ").value) == 200

    def test_non_string_rejected(self):
        with pytest.raises(InvalidProductNameError):
            ProductName.create(None)

    def test_equality_is_case_insensitive(self):
        assert ProductName.create("Tomate").equals(ProductName.create("TOMATE"))
        assert ProductName.create("Tomate") == ProductName.create(" tomate ")
        assert hash(ProductName.create("Tomate")) == hash(ProductName.create("TOMATE"))

    def test_different_names_not_equal(self):
        assert ProductName.create("Tomate") != ProductName.create("Tomates")

    def test_str(self):
        assert str(ProductName.create("Beurre Doux")) == "Beurre Doux"
