from .client_form import ClientForm
from .client_form_controller import ClientFormController, PostalCodeWatch
from .client_document_service import ClientDocumentService

__all__ = [
    "ClientForm",
    "ClientFormController",
    "PostalCodeWatch",
    "ClientDocumentService",
]
