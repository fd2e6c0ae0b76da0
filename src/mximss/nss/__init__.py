"""NSS value object and check-digit helpers."""

from __future__ import annotations

from mximss.nss.checksum import compute_checksum_digit, normalize, verify_last_digit, weigh_digit
from mximss.nss.value import NSS

__all__ = ["NSS", "compute_checksum_digit", "normalize", "verify_last_digit", "weigh_digit"]
