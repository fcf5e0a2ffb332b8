from .client_record import (
    AddressResponse,
    ClientFormPayload,
    ClientRecordResponse,
    ClientStatusResponse,
    FieldErrorSchema,
)

__all__ = [
    "AddressResponse",
    "ClientFormPayload",
    "ClientRecordResponse",
    "ClientStatusResponse",
    "FieldErrorSchema",
]
