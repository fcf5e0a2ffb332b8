from .client_record_repository import ClientRecordRepository
from .address_lookup_gateway import AddressLookupGateway
from .user_feedback import ConfirmationPrompt, Notifier
from .document_renderer import DocumentRenderer

__all__ = [
    "ClientRecordRepository",
    "AddressLookupGateway",
    "ConfirmationPrompt",
    "Notifier",
    "DocumentRenderer",
]
