"""INN checksum validation for organizations (10 digits) and individuals (12 digits).

Each control digit is the weighted sum of the digits preceding it, taken
modulo 11; a remainder of 10 maps to control digit 0. Organizations carry one
control digit (n1). Individuals carry two: n2 at index 10, then n1 at index 11,
which is computed over the first 11 digits including n2.
"""

from __future__ import annotations

import logging

from innvalidator.core.exceptions import InnFormatError, InvalidInnError
from innvalidator.core.types import Coefficients, ControlDigits, DigitSeq, Inn
from innvalidator.models.inn import InnCheckResult, RejectReason, TaxpayerCategory

logger = logging.getLogger(__name__)

ORGANIZATION_COEFFICIENTS: Coefficients = (2, 4, 10, 3, 5, 9, 4, 6, 8, 0)
INDIVIDUAL_N2_COEFFICIENTS: Coefficients = (7, 2, 4, 10, 3, 5, 9, 4, 6, 8, 0)
# 12 weights for an 11-digit prefix; the trailing 0 is never read.
INDIVIDUAL_N1_COEFFICIENTS: Coefficients = (3, 7, 2, 4, 10, 3, 5, 9, 4, 6, 8, 0)

ORGANIZATION_LENGTH = 10
INDIVIDUAL_LENGTH = 12

# Control digit positions, counted from the end of the INN.
N1_INDEX = -1
N2_INDEX = -2

CHECK_MODULUS = 11

_ASCII_DIGITS = frozenset("0123456789")

_CATEGORY_BY_LENGTH = {
    ORGANIZATION_LENGTH: TaxpayerCategory.ORGANIZATION,
    INDIVIDUAL_LENGTH: TaxpayerCategory.INDIVIDUAL,
}


def classify(inn: Inn) -> TaxpayerCategory | None:
    """Return the taxpayer category implied by the trimmed length, or None."""
    return _CATEGORY_BY_LENGTH.get(len(inn.strip()))


def calc_check_digit(digits: DigitSeq, coefficients: Coefficients) -> int:
    """Weight ``digits`` by the leading ``coefficients`` and reduce to a control digit."""
    if len(digits) > len(coefficients):
        raise ValueError(
            f"{len(digits)} digits but only {len(coefficients)} coefficients"
        )
    checksum = sum(digit * coef for digit, coef in zip(digits, coefficients))
    control = checksum % CHECK_MODULUS
    return 0 if control > 9 else control


def _parse_digits(inn: Inn) -> list[int]:
    if not set(inn) <= _ASCII_DIGITS:
        raise InnFormatError("INN must contain only ASCII digits 0-9")
    return [int(ch) for ch in inn]


def _expected_control_digits(digits: list[int], category: TaxpayerCategory) -> ControlDigits:
    if category is TaxpayerCategory.ORGANIZATION:
        return (calc_check_digit(digits[:N1_INDEX], ORGANIZATION_COEFFICIENTS),)

    n2 = calc_check_digit(digits[:N2_INDEX], INDIVIDUAL_N2_COEFFICIENTS)
    n1 = calc_check_digit(digits[:N1_INDEX], INDIVIDUAL_N1_COEFFICIENTS)
    return (n2, n1)


def _reject(inn: Inn, reason: RejectReason, **fields) -> InnCheckResult:
    result = InnCheckResult(inn=inn, reason=reason, **fields)
    category = result.category.value if result.category else "unknown"
    logger.debug("INN rejected: category=%s reason=%s", category, reason.value)
    return result


def inspect(inn: Inn) -> InnCheckResult:
    """Check an INN and report category, control digits and reject reason.

    Never raises: malformed input (wrong length, non-digit characters, or a
    non-string argument) is reported through ``InnCheckResult.reason``.
    """
    if not isinstance(inn, str):
        return _reject("", RejectReason.WRONG_LENGTH)

    inn = inn.strip()
    category = classify(inn)
    if category is None:
        return _reject(inn, RejectReason.WRONG_LENGTH)

    try:
        digits = _parse_digits(inn)
    except InnFormatError:
        return _reject(inn, RejectReason.NOT_DIGITS, category=category)

    expected = _expected_control_digits(digits, category)
    actual = tuple(digits[-len(expected):])
    if expected != actual:
        return _reject(
            inn, RejectReason.CHECKSUM_MISMATCH,
            category=category, expected=expected, actual=actual,
        )

    return InnCheckResult(inn=inn, category=category, expected=expected, actual=actual)


def validate(inn: Inn) -> bool:
    """Return True if ``inn`` is a well-formed INN with matching control digits.

    Surrounding whitespace is ignored. Any other deviation, including
    non-ASCII-digit characters, yields False rather than an exception.
    """
    return inspect(inn).valid


def ensure_valid(inn: Inn) -> str:
    """Return the trimmed INN, or raise InvalidInnError if it does not validate."""
    result = inspect(inn)
    if not result.valid:
        raise InvalidInnError(result)
    return result.inn
