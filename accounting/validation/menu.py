"""
Menu Choice Validation

Front ends read raw menu input and must dispatch only on a valid choice.
The input is parsed as an integer the forgiving way a console user expects:
"2", " 2 " and "2abc" all mean 2, and 1.5 means 1.
"""

import math
import re
from decimal import Decimal
from typing import Any, Optional

from accounting.models.transaction import MenuChoiceResult, MenuOption

INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")

VALID_CHOICES = frozenset(option.value for option in MenuOption)


def parse_menu_choice(choice: Any) -> Optional[int]:
    """Parse raw input into an integer, truncating fractions. None if impossible."""
    if choice is None or isinstance(choice, bool):
        return None

    if isinstance(choice, int):
        return choice

    if isinstance(choice, (float, Decimal)):
        if isinstance(choice, Decimal) and not choice.is_finite():
            return None
        if isinstance(choice, float) and not math.isfinite(choice):
            return None
        return int(choice)  # truncates toward zero

    if isinstance(choice, str):
        match = _LEADING_INTEGER.match(choice)
        if match:
            return int(match.group(1))

    return None


def validate_menu_choice(choice: Any) -> MenuChoiceResult:
    """
    Validate raw menu input.

    Returns a valid result carrying the MenuOption, or an invalid result
    carrying the error message. Never raises.
    """
    number = parse_menu_choice(choice)

    if number is None or number not in VALID_CHOICES:
        return MenuChoiceResult(
            is_valid=False,
            error=INVALID_CHOICE_MESSAGE,
        )

    return MenuChoiceResult(
        is_valid=True,
        choice=MenuOption(number),
    )
