"""Tests for amount normalization and menu choice validation."""

import pytest
from decimal import Decimal

from accounting.models.transaction import MenuOption
from accounting.validation import (
    INVALID_AMOUNT_MESSAGE,
    INVALID_CHOICE_MESSAGE,
    InvalidAmountError,
    normalize_amount,
    parse_amount,
    round_to_two_decimals,
    validate_menu_choice,
)


class TestNormalizeAmount:
    """Tests for normalize_amount."""

    @pytest.mark.parametrize("raw, expected", [
        (500, Decimal("500.00")),
        (0, Decimal("0.00")),
        (123.45, Decimal("123.45")),
        ("234.56", Decimal("234.56")),
        ("  42  ", Decimal("42.00")),
        ("1e3", Decimal("1000.00")),
        (".5", Decimal("0.50")),
        (Decimal("19.999"), Decimal("20.00")),
        (999999.99, Decimal("999999.99")),
    ])
    def test_accepts_numbers_and_numeric_text(self, raw, expected):
        """Test numeric values and numeric-looking text normalize to cents."""
        assert normalize_amount(raw) == expected

    def test_result_has_two_decimal_places(self):
        """Test the normalized Decimal always carries exactly two places."""
        assert normalize_amount(7).as_tuple().exponent == -2
        assert str(normalize_amount("7")) == "7.00"

    def test_rounds_half_away_from_zero(self):
        """Test exact halves round away from zero."""
        assert normalize_amount(0.125) == Decimal("0.13")
        assert normalize_amount(-0.125) == Decimal("-0.13")

    def test_binary_float_boundary(self):
        """Test x.xx5 values follow their binary float representation."""
        # 1.005 is stored as 1.00499999..., so it rounds down
        assert normalize_amount(1.005) == Decimal("1.00")
        assert normalize_amount("1.005") == Decimal("1.00")

    def test_negative_values_pass_normalization(self):
        """Test negatives are numerically valid here."""
        assert normalize_amount(-100) == Decimal("-100.00")
        assert normalize_amount("-12.346") == Decimal("-12.35")

    def test_tiny_negative_rounds_to_plain_zero(self):
        """Test a value rounding to zero from below is not negative."""
        result = normalize_amount("-0.001")
        assert result == Decimal("0.00")
        assert not result < 0
        assert not result.is_signed()

    @pytest.mark.parametrize("raw", [
        None,
        True,
        False,
        "not a number",
        "",
        "   ",
        "12abc",
        "1_000",
        "-ABC",
        float("nan"),
        float("inf"),
        float("-inf"),
        "Infinity",
        "NaN",
        Decimal("NaN"),
        Decimal("sNaN"),
        [5],
        {"amount": 5},
    ])
    def test_rejects_non_numbers(self, raw):
        """Test anything that is not a finite number is rejected."""
        with pytest.raises(InvalidAmountError, match="Invalid amount: must be a number"):
            normalize_amount(raw)

    def test_invalid_amount_error_is_value_error(self):
        """Test InvalidAmountError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_amount("ABC")
        assert str(InvalidAmountError()) == INVALID_AMOUNT_MESSAGE

    def test_overflowing_text_is_rejected(self):
        """Test text that overflows a float is not a finite number."""
        with pytest.raises(InvalidAmountError):
            normalize_amount("1e400")


class TestRoundToTwoDecimals:
    """Tests for round_to_two_decimals."""

    @pytest.mark.parametrize("value", [
        Decimal("0"),
        Decimal("1000.15"),
        Decimal("2.675"),
        Decimal("-2.675"),
        Decimal("123456789.999"),
    ])
    def test_idempotent(self, value):
        """Test round2(round2(x)) == round2(x)."""
        once = round_to_two_decimals(value)
        assert round_to_two_decimals(once) == once

    def test_half_away_from_zero(self):
        """Test Decimal halves round away from zero."""
        assert round_to_two_decimals(Decimal("2.675")) == Decimal("2.68")
        assert round_to_two_decimals(Decimal("-2.675")) == Decimal("-2.68")


class TestValidateMenuChoice:
    """Tests for validate_menu_choice."""

    @pytest.mark.parametrize("raw, expected", [
        (1, MenuOption.VIEW_BALANCE),
        (2, MenuOption.CREDIT),
        (3, MenuOption.DEBIT),
        (4, MenuOption.EXIT),
        ("3", MenuOption.DEBIT),
        (" 2 ", MenuOption.CREDIT),
        ("+2", MenuOption.CREDIT),
        ("2abc", MenuOption.CREDIT),
        ("1.5", MenuOption.VIEW_BALANCE),
        (1.5, MenuOption.VIEW_BALANCE),
        (4.99, MenuOption.EXIT),
        (Decimal("2.9"), MenuOption.CREDIT),
    ])
    def test_valid_choices(self, raw, expected):
        """Test inputs that truncate to 1-4 are valid."""
        result = validate_menu_choice(raw)
        assert result.is_valid is True
        assert result.choice == expected
        assert result.error is None

    @pytest.mark.parametrize("raw", [
        -1, 0, 5, 9, "ABC", "", "  ", "-0", "0.9", -0.5, None, True,
        float("nan"), float("inf"), Decimal("NaN"), [1], "x1",
    ])
    def test_invalid_choices(self, raw):
        """Test everything else is invalid with the standard message."""
        result = validate_menu_choice(raw)
        assert result.is_valid is False
        assert result.choice is None
        assert result.error == INVALID_CHOICE_MESSAGE
