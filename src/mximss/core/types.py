"""Type aliases used across mximss."""

from __future__ import annotations

NSSText = str  # raw, unnormalized input
NSSDigits = str  # digits-only, any length
Weight = int  # 1 or 2
CheckDigit = int  # 0..9
