"""
Input validation for catalog operations.

Every helper either returns the normalized value or raises
:class:`InvalidInputError`. Re-prompting on failure is left to the caller.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from ..core.exceptions import InvalidInputError

CENT = Decimal("0.01")


def parse_price(value: Any) -> Decimal:
    """
    Parse a price into a non-negative two-place Decimal.

    Accepts ``Decimal``, ``int``, ``float`` and numeric strings (surrounding
    whitespace is ignored). Amounts are rounded half-up to the cent.

    Raises:
        InvalidInputError: If the value is not numeric, not finite or negative
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"Price must be a number, got {value!r}", value)

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidInputError("Price must not be empty", value)
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise InvalidInputError(
                f"Invalid price {value!r}: please enter a numeric price", value)
    else:
        raise InvalidInputError(f"Price must be a number, got {value!r}", value)

    if not amount.is_finite():
        raise InvalidInputError(f"Price must be a finite number, got {value!r}", value)
    if amount < 0:
        raise InvalidInputError(f"Price must not be negative, got {value!r}", value)

    try:
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidInputError(f"Price is too large, got {value!r}", value)
    # "-0" passes the sign check above
    return amount.copy_abs()


def parse_name(value: Any) -> str:
    """Return the stripped name, rejecting non-strings and blank names."""
    if not isinstance(value, str):
        raise InvalidInputError(f"Name must be text, got {value!r}", value)
    name = value.strip()
    if not name:
        raise InvalidInputError("Name must not be empty", value)
    return name


def parse_item_id(value: Any) -> int:
    """Parse an item id given as an int or a string of digits."""
    if isinstance(value, bool):
        raise InvalidInputError(f"Item id must be an integer, got {value!r}", value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidInputError(
                f"Invalid item id {value!r}: please enter a number", value)
    raise InvalidInputError(f"Item id must be an integer, got {value!r}", value)


def parse_count(value: Any) -> int:
    """Parse a non-negative count such as the number of items to add."""
    try:
        count = parse_item_id(value)
    except InvalidInputError:
        raise InvalidInputError(
            f"Invalid count {value!r}: please enter a non-negative number", value)
    if count < 0:
        raise InvalidInputError(
            f"Invalid count {value!r}: please enter a non-negative number", value)
    return count
