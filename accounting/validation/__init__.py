"""Input validation package."""

from accounting.validation.amounts import (
    CENT,
    INVALID_AMOUNT_MESSAGE,
    AmountInput,
    InvalidAmountError,
    normalize_amount,
    parse_amount,
    round_to_two_decimals,
)
from accounting.validation.menu import (
    INVALID_CHOICE_MESSAGE,
    parse_menu_choice,
    validate_menu_choice,
)

__all__ = [
    "CENT",
    "INVALID_AMOUNT_MESSAGE",
    "INVALID_CHOICE_MESSAGE",
    "AmountInput",
    "InvalidAmountError",
    "normalize_amount",
    "parse_amount",
    "parse_menu_choice",
    "round_to_two_decimals",
    "validate_menu_choice",
]
