"""INN check result models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class TaxpayerCategory(str, Enum):
    """Taxpayer category, decided by INN length."""

    ORGANIZATION = "organization"  # 10 digits
    INDIVIDUAL = "individual"  # 12 digits, individuals and sole proprietors


class RejectReason(str, Enum):
    WRONG_LENGTH = "wrong_length"
    NOT_DIGITS = "not_digits"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class InnCheckResult(BaseModel):
    """Outcome of a single INN check.

    ``expected`` and ``actual`` hold control digits in INN order: one entry for
    organizations, two (n2, n1) for individuals. Both are empty when the input
    was rejected before the checksum was computed.
    """

    inn: str
    category: Optional[TaxpayerCategory] = None
    expected: tuple[int, ...] = ()
    actual: tuple[int, ...] = ()
    reason: Optional[RejectReason] = None

    model_config = {"frozen": True}

    @property
    def valid(self) -> bool:
        return self.reason is None
