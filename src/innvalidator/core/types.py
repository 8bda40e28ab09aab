"""Type aliases used across innvalidator."""

from __future__ import annotations

from collections.abc import Sequence

Inn = str
Digit = int
Coefficients = tuple[int, ...]
ControlDigits = tuple[Digit, ...]
DigitSeq = Sequence[Digit]
