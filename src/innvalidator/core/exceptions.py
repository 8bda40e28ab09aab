"""innvalidator exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from innvalidator.models.inn import InnCheckResult, RejectReason


class InnValidatorError(Exception):
    """Base exception for all innvalidator errors."""


class InnFormatError(InnValidatorError):
    """INN contains characters other than ASCII decimal digits."""


class InvalidInnError(InnValidatorError):
    """INN failed validation."""

    def __init__(self, result: InnCheckResult) -> None:
        self.result = result
        category = result.category.value if result.category else "unknown"
        reason = result.reason.value if result.reason else "ok"
        super().__init__(f"Invalid INN ({category}): {reason}")

    @property
    def reason(self) -> RejectReason | None:
        return self.result.reason
