"""Structural validators for raw identifier and format strings.

Pure functions: they never raise on malformed input, they answer False.
Request-level validators call them before anything reaches the domain.
"""

from __future__ import annotations

import re

NATIONAL_ID_LENGTH = 11
MAX_EMAIL_LENGTH = 254

_NON_DIGITS = re.compile(r"[^0-9]")
_EMAIL_PATTERN = re.compile(r"[\w.-]+@[\w.-]+\.\w+")


def _check_digit(digits: list[int], weight: int) -> int:
    total = sum(d * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def national_id_check_digits(base: str) -> str:
    """Return the two check digits for nine base digits.

    Raises ValueError if *base* is not exactly nine digits.
    """
    if len(base) != NATIONAL_ID_LENGTH - 2 or not base.isdecimal():
        raise ValueError(f"Expected nine digits, got {base!r}")
    digits = [int(ch) for ch in base]
    first = _check_digit(digits, 10)
    second = _check_digit(digits + [first], 11)
    return f"{first}{second}"


def is_national_id_valid(value: str | None) -> bool:
    """Check a national ID (CPF) against its two trailing check digits.

    Punctuation is ignored, so ``529.982.247-25`` and ``52998224725`` are
    equivalent.  Eleven repetitions of one digit pass the arithmetic but
    are rejected.
    """
    if not value or not value.strip():
        return False

    digits = _NON_DIGITS.sub("", value)
    if len(digits) != NATIONAL_ID_LENGTH:
        return False
    if len(set(digits)) == 1:
        return False

    return digits[9:] == national_id_check_digits(digits[:9])


def is_email_valid(value: str | None) -> bool:
    # re has no match timeout; overlong input fails closed instead.
    if not value or not value.strip():
        return False
    if len(value) > MAX_EMAIL_LENGTH:
        return False
    return _EMAIL_PATTERN.fullmatch(value) is not None
