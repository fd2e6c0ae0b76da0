"""mximss exception hierarchy."""

from __future__ import annotations

from typing import Literal


class MxImssError(Exception):
    """Base exception for all mximss errors."""


class InvalidNSSError(MxImssError, ValueError):
    """An NSS failed the length or check-digit rule.

    Only the length and the failing rule are reported; the digits are personal
    data and stay out of the message.
    """

    def __init__(self, length: int, reason: Literal["length", "checksum"]) -> None:
        self.length = length
        self.reason = reason
        if reason == "length":
            message = f"NSS must have 11 digits, got {length}"
        else:
            message = "NSS check digit does not match the first 10 digits"
        super().__init__(message)
