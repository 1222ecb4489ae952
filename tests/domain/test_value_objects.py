"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_digits(self):
        assert Money.of(19.99).amount == Decimal("19.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    def test_addition_keeps_full_precision(self):
        result = Money.of("10.005") + Money.of("0.001")
        assert result.amount == Decimal("10.006")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_decimal_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * Decimal("1.5")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero


class TestApplyRate:

    def test_rounds_half_up_to_cents(self):
        # 49.99 * 0.12 = 5.9988
        assert Money.of("49.99").apply_rate(Decimal("0.12")).amount == Decimal("6.00")

    def test_exact_half_cent_rounds_up(self):
        # 0.125 * 1 = 0.125
        assert Money.of("0.125").apply_rate(Decimal("1")).amount == Decimal("0.13")

    def test_result_has_two_fraction_digits(self):
        assert str(Money.of("10").apply_rate(Decimal("0.12")).amount) == "1.20"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)
