"""NSS value object."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, field_validator

from mximss.core.exceptions import InvalidNSSError
from mximss.core.types import CheckDigit, NSSDigits
from mximss.nss import checksum

logger = logging.getLogger(__name__)


class NSS(BaseModel):
    """Mexican Social Security Number (Número de Seguridad Social).

    Input is normalized on construction and never rejected: ``digits`` holds
    whatever ASCII digits the raw text contained, in order. Validity is a
    separate query (``is_valid``) so that partial or mistyped numbers can still
    be carried around and displayed.
    """

    digits: NSSDigits = ""

    model_config = {"frozen": True}

    @field_validator("digits", mode="before")
    @classmethod
    def normalize_digits(cls, value: Any) -> str:
        return checksum.normalize(value)

    @classmethod
    def from_text(cls, text: Any) -> NSS:
        return cls(digits=text)

    @staticmethod
    def validate(text: Any) -> bool:  # type: ignore[override]
        """Normalize ``text`` and apply the length and check-digit rule."""
        return NSS.from_text(text).is_valid()

    @staticmethod
    def verify_last_digit(text: Any) -> bool:
        """Normalize ``text`` and check its last digit, whatever its length."""
        return checksum.verify_last_digit(checksum.normalize(text))

    @property
    def check_digit(self) -> CheckDigit:
        """Check digit expected for the first ten digits."""
        return checksum.compute_checksum_digit(self.digits)

    def is_valid(self) -> bool:
        if len(self.digits) != checksum.NSS_LENGTH:
            logger.debug("NSS rejected: %d digits", len(self.digits))
            return False
        if not checksum.verify_last_digit(self.digits):
            logger.debug("NSS rejected: check digit mismatch")
            return False
        return True

    def ensure_valid(self) -> NSS:
        """Return ``self`` if valid, else raise ``InvalidNSSError``."""
        if len(self.digits) != checksum.NSS_LENGTH:
            raise InvalidNSSError(len(self.digits), "length")
        if not checksum.verify_last_digit(self.digits):
            raise InvalidNSSError(len(self.digits), "checksum")
        return self

    def formatted(self) -> str:
        """Render as ``AA-AA-AA-AAAA-A``.

        No validity check: short values produce empty groups
        (``"123"`` becomes ``"12-3---"``).
        """
        d = self.digits
        return "-".join((d[0:2], d[2:4], d[4:6], d[6:10], d[10:11]))

    def to_text(self) -> str:
        return self.digits

    def __str__(self) -> str:
        return self.digits
