"""Russian taxpayer identification number (INN) checksum validation."""

from __future__ import annotations

import logging

from innvalidator.core.exceptions import InnFormatError, InnValidatorError, InvalidInnError
from innvalidator.models.inn import InnCheckResult, RejectReason, TaxpayerCategory
from innvalidator.validator.inn_validator import (
    calc_check_digit,
    classify,
    ensure_valid,
    inspect,
    validate,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InnCheckResult",
    "InnFormatError",
    "InnValidatorError",
    "InvalidInnError",
    "RejectReason",
    "TaxpayerCategory",
    "calc_check_digit",
    "classify",
    "ensure_valid",
    "inspect",
    "validate",
]
