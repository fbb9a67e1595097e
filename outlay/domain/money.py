"""Money helpers.

All amounts inside outlay are integer minor units (see ``Money``). Conversion from
user-entered major units happens once at the input edge and conversion back to a
display string happens only in the presentation layer.
"""

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from outlay.domain.models import Money
from outlay.errors import ValidationError

MINOR_UNITS_PER_MAJOR = 100
MINOR_UNIT_DIGITS = 2

# Largest single expense in minor units. Period sums must fit a 64-bit SQLite INTEGER.
MAX_AMOUNT = 10**12

_GROUPED_RE = re.compile(r"^\d{1,3}(,\d{3})+(\.\d+)?$")


def parse_amount(text: str) -> Money:
    """Convert a major-unit amount string into minor units.

    Args:
        text: Amount as typed by the user (e.g. "250", "12.50").

    Returns:
        Amount in minor units.

    Raises:
        ValidationError: If the amount is not a finite positive number, exceeds
            ``MAX_AMOUNT``, has badly placed thousands separators, or has more
            precision than the currency's minor unit.
    """
    if not isinstance(text, str):
        raise ValidationError("amount", f"'{text}' is not a number")

    cleaned = text.strip()
    if "," in cleaned:
        if not _GROUPED_RE.match(cleaned):
            raise ValidationError("amount", f"'{text}' is not a number (use '.' for decimals)")
        cleaned = cleaned.replace(",", "")

    try:
        value = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValidationError("amount", f"'{text}' is not a number") from e

    if not value.is_finite():
        raise ValidationError("amount", f"'{text}' is not a number")
    if value <= 0:
        raise ValidationError("amount", "Amount must be a positive number")

    if value > Decimal(MAX_AMOUNT) / MINOR_UNITS_PER_MAJOR:
        raise ValidationError("amount", f"Amount cannot exceed {MAX_AMOUNT // MINOR_UNITS_PER_MAJOR:,}")

    minor = value * MINOR_UNITS_PER_MAJOR
    if minor != minor.to_integral_value():
        raise ValidationError("amount", f"Amount cannot have more than {MINOR_UNIT_DIGITS} decimal places")

    return Money(int(minor))


def total(amounts: Iterable[Money]) -> Money:
    """Exact sum of minor-unit amounts (0 for an empty iterable)."""
    return Money(sum(amounts, 0))


def format_money(amount: Money, symbol: str = "") -> str:
    """Format minor units for display, e.g. ``KES 1,234.50``.

    Args:
        amount: Amount in minor units.
        symbol: Currency symbol or code prefix.

    Returns:
        Display string with thousands separators and two decimals.
    """
    sign = "-" if amount < 0 else ""
    major, minor = divmod(abs(amount), MINOR_UNITS_PER_MAJOR)
    body = f"{sign}{major:,}.{minor:0{MINOR_UNIT_DIGITS}d}"
    return f"{symbol} {body}" if symbol else body
