"""Pydantic DTOs (Data Transfer Objects) for the client feature."""

from datetime import date

from pydantic import BaseModel, Field


class ClientFormPayload(BaseModel):
    """Raw form values as typed by the operator.

    Deliberately loose: the client form validators decide what is valid and
    report every failure per field.
    """

    id: int | None = Field(None, ge=1)
    name: str | None = Field(None, examples=["Ana"])
    identity_number: str | None = Field(None, examples=["52998224725"])
    status: bool = True
    email: str = ""
    cellphone: str = ""
    postal_code: str = Field("", examples=["01001000"])
    state: str = ""
    city: str = ""
    district: str = ""
    street: str = ""
    number: str | None = None
    birth_date: date | None = None


class ClientRecordResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    identity_number: str
    status: bool
    email: str
    cellphone: str
    postal_code: str
    state: str
    city: str
    district: str
    street: str
    number: str | None
    birth_date: date | None

    model_config = {"from_attributes": True}


class ClientStatusResponse(BaseModel):
    """Outcome of an activate/deactivate request."""

    id: int
    status: bool
    changed: bool


class FieldErrorSchema(BaseModel):
    code: str
    message: str


class AddressResponse(BaseModel):
    postal_code: str
    state: str
    city: str
    district: str
    street: str

    model_config = {"from_attributes": True}
