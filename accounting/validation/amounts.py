"""
Amount Normalization

Every amount that reaches the ledger passes through normalize_amount():

STEP 1 - PARSE:
- int, float and Decimal values are accepted as they are
- text is accepted only when it looks like a number ("12", " 3.50 ", "1e3")
- None, booleans, NaN and infinities are rejected

STEP 2 - ROUND:
- the parsed value is scaled by 100 as a binary float
- rounded half away from zero to a whole number of cents
- descaled into an exact two-place Decimal

Rounding on the float scale keeps the documented x.xx5 boundary behaviour
(1.005 is stored as 1.00499... and rounds to 1.00), while everything after
normalization is exact Decimal arithmetic, so repeated small operations never
drift.

IMPORTANT: Normalization does NOT reject negative amounts.
Refusing them is the caller's decision (credit/debit report it separately).
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Union

AmountInput = Union[int, float, Decimal, str]

CENT = Decimal("0.01")

INVALID_AMOUNT_MESSAGE = "Invalid amount: must be a number"

_NUMERIC_TEXT = re.compile(
    r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$"
)


class InvalidAmountError(ValueError):
    """Amount could not be parsed as a finite number."""

    def __init__(self, message: str = INVALID_AMOUNT_MESSAGE):
        super().__init__(message)


def parse_amount(value: Any) -> float:
    """
    Parse a raw amount into a finite float.

    Raises InvalidAmountError for anything that is not a finite number.
    """
    # bool is an int subclass; True is not an amount
    if value is None or isinstance(value, bool):
        raise InvalidAmountError()

    if isinstance(value, str):
        if not _NUMERIC_TEXT.match(value):
            raise InvalidAmountError()
        parsed = float(value)
    elif isinstance(value, (int, float, Decimal)):
        try:
            parsed = float(value)
        except (ValueError, OverflowError):
            # signalling NaN, or an int too large for a float
            raise InvalidAmountError()
    else:
        raise InvalidAmountError()

    if not math.isfinite(parsed):
        raise InvalidAmountError()

    return parsed


def to_cents(value: float) -> int:
    """Scale by 100 and round half away from zero."""
    scaled = value * 100
    if not math.isfinite(scaled):
        raise InvalidAmountError()
    cents = math.floor(abs(scaled) + 0.5)
    return -cents if scaled < 0 else cents


def normalize_amount(value: Any) -> Decimal:
    """
    Parse and round a raw amount to a two-place Decimal.

    Examples:
        normalize_amount(500)       -> Decimal("500.00")
        normalize_amount("123.456") -> Decimal("123.46")
        normalize_amount(-100)      -> Decimal("-100.00")
        normalize_amount("-0.001")  -> Decimal("0.00")
    """
    cents = to_cents(parse_amount(value))
    try:
        return Decimal(cents).scaleb(-2).quantize(CENT)
    except InvalidOperation:
        # more integer digits than the decimal context can hold
        raise InvalidAmountError()


def round_to_two_decimals(value: Decimal) -> Decimal:
    """
    Quantize an exact Decimal to cents, half away from zero.

    Idempotent: rounding an already rounded value returns it unchanged.
    """
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidAmountError()
