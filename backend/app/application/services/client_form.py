"""Editable client form state with a declarative validator table."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from app.domain.entities import ClientRecord
from app.domain.validators import (
    IDENTITY_NUMBER_LENGTH,
    POSTAL_CODE_LENGTH,
    FieldValidator,
    ValidationError,
    boolean,
    digits,
    email,
    identity_number_checksum,
    iso_date,
    max_length,
    min_length,
    required,
)


@dataclass(frozen=True)
class FormField:
    initial: Any = None
    validators: tuple[FieldValidator, ...] = field(default_factory=tuple)


CLIENT_FORM_FIELDS: dict[str, FormField] = {
    "id": FormField(None),
    "name": FormField(None, (required,)),
    "identity_number": FormField(
        None,
        (
            required,
            min_length(IDENTITY_NUMBER_LENGTH),
            max_length(IDENTITY_NUMBER_LENGTH),
            identity_number_checksum,
        ),
    ),
    "status": FormField(True, (boolean,)),
    "email": FormField("", (email,)),
    "cellphone": FormField(""),
    "postal_code": FormField(
        "",
        (min_length(POSTAL_CODE_LENGTH), max_length(POSTAL_CODE_LENGTH), digits),
    ),
    "state": FormField(""),
    "city": FormField(""),
    "district": FormField(""),
    "street": FormField(""),
    "number": FormField(None),
    "birth_date": FormField(None, (iso_date,)),
}


class ClientForm:
    """Current values of the client being edited.

    Values are kept loosely typed, the way an operator types them; the
    validator table decides whether they can become a ClientRecord.
    """

    def __init__(self, fields: Mapping[str, FormField] = CLIENT_FORM_FIELDS):
        self._fields = dict(fields)
        self._values: dict[str, Any] = {name: f.initial for name, f in self._fields.items()}

    @property
    def value(self) -> dict[str, Any]:
        return dict(self._values)

    def get(self, name: str) -> Any:
        return self._values[name]

    def set_value(self, name: str, value: Any) -> None:
        if name not in self._fields:
            raise KeyError(f"Unknown form field '{name}'")
        self._values[name] = value

    def patch(self, values: Mapping[str, Any]) -> None:
        """Copy the matching keys of ``values`` into the form; others are ignored."""
        for name, value in values.items():
            if name in self._fields:
                self._values[name] = value

    @property
    def errors(self) -> dict[str, list[ValidationError]]:
        snapshot = self.value
        result: dict[str, list[ValidationError]] = {}
        for name, form_field in self._fields.items():
            failures = []
            for validator in form_field.validators:
                outcome = validator(snapshot[name], snapshot)
                if outcome is not None:
                    failures.append(outcome)
            if failures:
                result[name] = failures
        return result

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_record(self) -> ClientRecord:
        values = self.value
        birth_date = values["birth_date"]
        if isinstance(birth_date, str):
            birth_date = date.fromisoformat(birth_date) if birth_date else None
        number = values["number"]
        return ClientRecord(
            id=values["id"] or None,
            name=values["name"],
            identity_number=values["identity_number"],
            status=values["status"],
            email=values["email"] or "",
            cellphone=values["cellphone"] or "",
            postal_code=values["postal_code"] or "",
            state=values["state"] or "",
            city=values["city"] or "",
            district=values["district"] or "",
            street=values["street"] or "",
            number=str(number) if number not in (None, "") else None,
            birth_date=birth_date,
        )
