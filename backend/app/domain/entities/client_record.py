"""Domain entity — a client record and the address block resolved from its postal code."""

from dataclasses import dataclass, fields
from datetime import date
from typing import Any

ADDRESS_FIELDS = ("postal_code", "state", "city", "district", "street")


@dataclass(frozen=True)
class Address:
    """Value object produced by a postal-code lookup."""

    postal_code: str
    state: str
    city: str
    district: str
    street: str

    def as_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in ADDRESS_FIELDS}


@dataclass
class ClientRecord:
    """Core domain entity for a client.

    A record without ``id`` has never been persisted; the repository assigns
    one on save. ``status`` is ``True`` for active clients.
    """

    name: str
    identity_number: str
    id: int | None = None
    status: bool = True
    email: str = ""
    cellphone: str = ""
    postal_code: str = ""
    state: str = ""
    city: str = ""
    district: str = ""
    street: str = ""
    number: str | None = None
    birth_date: date | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
