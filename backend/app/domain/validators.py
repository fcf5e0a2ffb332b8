"""Field validators for client records.

Every validator has the shape ``(value, snapshot) -> ValidationError | None`` where
``snapshot`` is the whole record being validated. ``None`` means the value is
valid. Validators are pure: they never raise and never log, so any number of
them can be composed on the same field.

Apart from ``required`` and ``boolean``, validators treat an empty value as valid.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from email_validator import EmailNotValidError, validate_email

IDENTITY_NUMBER_LENGTH = 11
POSTAL_CODE_LENGTH = 8

@dataclass(frozen=True)
class ValidationError:
    """A failed validation rule."""

    code: str
    message: str


FieldValidator = Callable[[Any, Mapping[str, Any]], ValidationError | None]


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def required(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
    if _is_empty(value) or (isinstance(value, str) and not value.strip()):
        return ValidationError("required", "This field is required")
    return None


def min_length(length: int) -> FieldValidator:
    def validator(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
        if _is_empty(value) or not isinstance(value, str):
            return None
        if len(value) < length:
            return ValidationError("min_length", f"Must have at least {length} characters")
        return None

    return validator


def max_length(length: int) -> FieldValidator:
    def validator(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
        if _is_empty(value) or not isinstance(value, str):
            return None
        if len(value) > length:
            return ValidationError("max_length", f"Must have at most {length} characters")
        return None

    return validator


def digits(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
    if _is_empty(value):
        return None
    if not isinstance(value, str) or not value.isdigit():
        return ValidationError("digits", "Only digits are allowed")
    return None


def email(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
    if _is_empty(value):
        return None
    if not isinstance(value, str):
        return ValidationError("email", "Invalid email address")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return ValidationError("email", "Invalid email address")
    return None


def iso_date(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
    """Accept a date or a YYYY-MM-DD string."""
    if _is_empty(value) or isinstance(value, date):
        return None
    if not isinstance(value, str):
        return ValidationError("date", "Invalid date, expected YYYY-MM-DD")
    try:
        date.fromisoformat(value)
    except ValueError:
        return ValidationError("date", "Invalid date, expected YYYY-MM-DD")
    return None


def boolean(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
    if not isinstance(value, bool):
        return ValidationError("boolean", "Must be true or false")
    return None


def _verifier_digit(numbers: list[int]) -> int:
    """Weighted sum modulo 11, weights counting down to 2."""
    weight = len(numbers) + 1
    total = sum(n * (weight - i) for i, n in enumerate(numbers))
    result = 11 - (total % 11)
    return 0 if result >= 10 else result


def is_valid_identity_number(value: str) -> bool:
    """Check an 11-digit identity number against its two verifier digits.

    Non-digit characters are ignored. Sequences of a single repeated digit
    pass the checksum arithmetic but are known to be invalid and rejected.
    """
    numbers = [int(c) for c in value if c.isdigit()]
    if len(numbers) != IDENTITY_NUMBER_LENGTH:
        return False
    if len(set(numbers)) == 1:
        return False

    first = _verifier_digit(numbers[:9])
    second = _verifier_digit(numbers[:9] + [first])
    return numbers[9] == first and numbers[10] == second


def identity_number_checksum(value: Any, snapshot: Mapping[str, Any]) -> ValidationError | None:
    if _is_empty(value):
        return None
    if not isinstance(value, str) or not is_valid_identity_number(value):
        return ValidationError("identity_number", "Invalid identity number")
    return None
