from .client_record import ADDRESS_FIELDS, Address, ClientRecord
from .document import Placement

__all__ = [
    "ADDRESS_FIELDS",
    "Address",
    "ClientRecord",
    "Placement",
]
