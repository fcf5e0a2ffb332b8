"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.interfaces import ConfirmationPrompt
from app.application.services import ClientDocumentService, ClientFormController
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import SQLAlchemyClientRecordRepository
from app.infrastructure.feedback import PresetConfirmation, QueuedNotifier
from app.infrastructure.pdf import PyMuPdfDocumentRenderer
from app.infrastructure.viacep import ViaCepAddressGateway


def get_address_gateway() -> ViaCepAddressGateway:
    """Provides the ViaCEP gateway configured from settings."""
    settings = get_settings()
    return ViaCepAddressGateway(
        base_url=settings.viacep_base_url,
        response_format=settings.viacep_format,
    )


async def get_client_record_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SQLAlchemyClientRecordRepository, None]:
    """Provides the client record repository bound to the request session."""
    yield SQLAlchemyClientRecordRepository(session)


def _build_form_controller(
    session: AsyncSession,
    address_gateway: ViaCepAddressGateway,
    confirmation: ConfirmationPrompt,
) -> ClientFormController:
    settings = get_settings()
    return ClientFormController(
        repository=SQLAlchemyClientRecordRepository(session),
        address_gateway=address_gateway,
        confirmation=confirmation,
        notifier=QueuedNotifier(),
        dismiss_label=settings.notification_dismiss_label,
        notification_duration_ms=settings.notification_duration_ms,
    )


async def get_client_form_controller(
    session: AsyncSession = Depends(get_db_session),
    address_gateway: ViaCepAddressGateway = Depends(get_address_gateway),
) -> AsyncGenerator[ClientFormController, None]:
    """Provides a form controller for one request. Status changes are never confirmed."""
    yield _build_form_controller(session, address_gateway, PresetConfirmation(None))


async def get_status_form_controller(
    confirm: bool = Query(False, description="Operator's answer to the confirmation prompt"),
    session: AsyncSession = Depends(get_db_session),
    address_gateway: ViaCepAddressGateway = Depends(get_address_gateway),
) -> AsyncGenerator[ClientFormController, None]:
    """Provides a form controller whose confirmation prompt answers with ``confirm``."""
    yield _build_form_controller(session, address_gateway, PresetConfirmation(confirm))


def _build_renderer() -> PyMuPdfDocumentRenderer:
    settings = get_settings()
    return PyMuPdfDocumentRenderer(
        title_font_size=settings.document_title_font_size,
        text_font_size=settings.document_text_font_size,
        line_width=settings.document_line_width,
    )


async def get_client_document_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientDocumentService, None]:
    """Provides a ClientDocumentService with its repository and PDF renderer wired up."""
    repository = SQLAlchemyClientRecordRepository(session)
    yield ClientDocumentService(repository, renderer_factory=_build_renderer)
