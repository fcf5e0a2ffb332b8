"""Unit tests for the client field validators."""

import random
from datetime import date

import pytest

from app.domain.validators import (
    ValidationError,
    boolean,
    digits,
    email,
    identity_number_checksum,
    is_valid_identity_number,
    iso_date,
    max_length,
    min_length,
    required,
)


# ── Helpers ──


def _reference_verifier(numbers: list[int]) -> int:
    """Independent weighted-sum computation used to cross-check the validator."""
    total = 0
    weight = len(numbers) + 1
    for n in numbers:
        total += n * weight
        weight -= 1
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _with_verifiers(base: str) -> str:
    numbers = [int(c) for c in base]
    first = _reference_verifier(numbers)
    second = _reference_verifier(numbers + [first])
    return f"{base}{first}{second}"


# ── Identity number ──


@pytest.mark.parametrize("value", ["52998224725", "11144477735", "529.982.247-25"])
def test_identity_number_valid(value: str):
    assert is_valid_identity_number(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "52998224724",  # second verifier wrong
        "52998224715",  # first verifier wrong
        "5299822472",   # too short
        "",
        "abcdefghijk",
    ],
)
def test_identity_number_invalid(value: str):
    assert is_valid_identity_number(value) is False


@pytest.mark.parametrize("digit", "0123456789")
def test_identity_number_rejects_repeated_digits(digit: str):
    assert is_valid_identity_number(digit * 11) is False


def test_identity_number_accepts_iff_both_verifiers_match():
    """Random 11-digit strings are accepted exactly when both verifiers agree."""
    rng = random.Random(20261019)
    for _ in range(2000):
        value = "".join(rng.choice("0123456789") for _ in range(11))
        numbers = [int(c) for c in value]
        expected = (
            len(set(numbers)) > 1
            and numbers[9] == _reference_verifier(numbers[:9])
            and numbers[10] == _reference_verifier(numbers[:10])
        )
        assert is_valid_identity_number(value) is expected, value


def test_identity_number_generated_values_are_valid():
    rng = random.Random(7)
    for _ in range(500):
        base = "".join(rng.choice("0123456789") for _ in range(9))
        value = _with_verifiers(base)
        if len(set(value)) == 1:
            continue
        assert is_valid_identity_number(value), value


def test_identity_number_checksum_outcomes():
    assert identity_number_checksum("52998224725", {}) is None
    assert identity_number_checksum("00000000000", {}) == ValidationError(
        "identity_number", "Invalid identity number"
    )
    # Emptiness belongs to `required`.
    assert identity_number_checksum(None, {}) is None
    assert identity_number_checksum("", {}) is None


# ── Generic field validators ──


def test_required():
    assert required(None, {}).code == "required"
    assert required("", {}).code == "required"
    assert required("   ", {}).code == "required"
    assert required("Ana", {}) is None


def test_length_validators_skip_empty_values():
    assert min_length(8)("", {}) is None
    assert max_length(8)(None, {}) is None


def test_length_validators():
    assert min_length(8)("1234567", {}).code == "min_length"
    assert min_length(8)("12345678", {}) is None
    assert max_length(8)("123456789", {}).code == "max_length"
    assert max_length(8)("12345678", {}) is None


def test_digits():
    assert digits("01001000", {}) is None
    assert digits("01001-00", {}).code == "digits"
    assert digits("", {}) is None


@pytest.mark.parametrize("value", ["", "ana@example.com", "ana.silva+crm@mail.example.com.br"])
def test_email_valid(value: str):
    assert email(value, {}) is None


@pytest.mark.parametrize(
    "value",
    ["ana", "ana@", "@example.com", "ana @example.com", "ana@-x.com", "ana@example", "ana@localhost", 42],
)
def test_email_invalid(value: str):
    assert email(value, {}).code == "email"


def test_iso_date():
    assert iso_date("1990-05-17", {}) is None
    assert iso_date(date(1990, 5, 17), {}) is None
    assert iso_date(None, {}) is None
    assert iso_date("17/05/1990", {}).code == "date"
    assert iso_date(19900517, {}).code == "date"


def test_boolean():
    assert boolean(True, {}) is None
    assert boolean(False, {}) is None
    assert boolean(None, {}).code == "boolean"
    assert boolean("true", {}).code == "boolean"
