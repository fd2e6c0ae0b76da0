"""NSS check-digit arithmetic.

The IMSS check digit is a Luhn-style weighted sum over the first ten digits:
weights alternate 1, 2, 1, 2, ... from the left, a two-digit product is
reduced to the sum of its digits, and the check digit is what rounds the
total up to the next multiple of ten.

All functions here are total. Input is normalized first, so stray spaces,
dashes or letters never raise.
"""

from __future__ import annotations

import re
from typing import Any

from mximss.core.types import CheckDigit, NSSDigits, Weight

NSS_LENGTH = 11
BODY_LENGTH = 10

_NON_DIGIT = re.compile(r"[^0-9]")


def normalize(text: Any) -> NSSDigits:
    """Drop every character that is not an ASCII digit."""
    if text is None:
        return ""
    return _NON_DIGIT.sub("", str(text))


def weigh_digit(digit: str, weight: Weight) -> int:
    """Multiply a digit by its weight, folding 10..18 back to one digit."""
    value = int(digit) * weight
    if value >= 10:
        # weight is 1 or 2, so value <= 18 and one fold is enough
        value = value % 10 + 1
    return value


def compute_checksum_digit(digits: str) -> CheckDigit:
    """Check digit for the first ten digits of ``digits`` (fewer if shorter)."""
    body = normalize(digits)[:BODY_LENGTH]
    total = sum(weigh_digit(char, i % 2 + 1) for i, char in enumerate(body))
    return (10 - total % 10) % 10


def verify_last_digit(digits: str) -> bool:
    """Compare the last digit against the check digit of the first ten.

    Length is not checked. An input shorter than ten digits is summed whole,
    last digit included: ``"5"`` checks against a sum over itself and passes.
    Use ``NSS.is_valid`` when the length matters.
    """
    digits = normalize(digits)
    return str(compute_checksum_digit(digits)) == digits[-1:]
