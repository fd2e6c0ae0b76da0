"""Mexican Social Security Number (NSS) normalization, checksum and formatting."""

from __future__ import annotations

from mximss.core.exceptions import InvalidNSSError, MxImssError
from mximss.nss import NSS, compute_checksum_digit, normalize, verify_last_digit, weigh_digit

__all__ = [
    "NSS",
    "InvalidNSSError",
    "MxImssError",
    "compute_checksum_digit",
    "normalize",
    "verify_last_digit",
    "weigh_digit",
]
