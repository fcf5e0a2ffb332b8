"""Client endpoints — load, save, activate/deactivate and print a client."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.application.schemas.client_record import (
    ClientFormPayload,
    ClientRecordResponse,
    ClientStatusResponse,
    FieldErrorSchema,
)
from app.application.services import ClientDocumentService, ClientFormController
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import (
    get_client_document_service,
    get_client_form_controller,
    get_status_form_controller,
)

router = APIRouter(prefix="/clients", tags=["Clients"])


def _failure_detail(controller: ClientFormController, default: str) -> str:
    return getattr(controller.notifier, "last_message", None) or default


async def _load_or_404(controller: ClientFormController, client_id: int) -> None:
    record = await controller.initialize(str(client_id))
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=_failure_detail(controller, "Client not found"),
        )


@router.get("/{client_id}", response_model=ClientRecordResponse)
async def get_client(
    client_id: int,
    controller: ClientFormController = Depends(get_client_form_controller),
) -> ClientRecordResponse:
    """Retrieve a single client by ID."""
    await _load_or_404(controller, client_id)
    return ClientRecordResponse.model_validate(controller.form.to_record(), from_attributes=True)


@router.post("", response_model=ClientRecordResponse, status_code=status.HTTP_201_CREATED)
async def save_client(
    data: ClientFormPayload,
    resolve_address: bool = Query(
        False, description="Fill the address fields from the postal code before saving"
    ),
    controller: ClientFormController = Depends(get_client_form_controller),
) -> ClientRecordResponse:
    """Create a client, or overwrite the stored client when an ID is given."""
    values = data.model_dump()
    if resolve_address:
        postal_code = values.pop("postal_code")
        controller.form.patch(values)
        await controller.edit("postal_code", postal_code)
    else:
        controller.form.patch(values)

    if not controller.form.valid:
        errors = {
            field: [FieldErrorSchema(code=e.code, message=e.message).model_dump() for e in failures]
            for field, failures in controller.form.errors.items()
        }
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=errors)

    record = await controller.submit()
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_failure_detail(controller, "Could not save the client."),
        )
    return ClientRecordResponse.model_validate(record, from_attributes=True)


@router.post("/{client_id}/activate", response_model=ClientStatusResponse)
async def activate_client(
    client_id: int,
    controller: ClientFormController = Depends(get_status_form_controller),
) -> ClientStatusResponse:
    """Mark a client as active. Nothing changes unless ``confirm=true``."""
    return await _change_status(controller, client_id, activate=True)


@router.post("/{client_id}/deactivate", response_model=ClientStatusResponse)
async def deactivate_client(
    client_id: int,
    controller: ClientFormController = Depends(get_status_form_controller),
) -> ClientStatusResponse:
    """Mark a client as inactive. Nothing changes unless ``confirm=true``."""
    return await _change_status(controller, client_id, activate=False)


async def _change_status(
    controller: ClientFormController, client_id: int, *, activate: bool
) -> ClientStatusResponse:
    await _load_or_404(controller, client_id)
    if activate:
        changed = await controller.activate()
    else:
        changed = await controller.deactivate()

    # Loading notifies only on failure, so any queued message is the status failure.
    failure = getattr(controller.notifier, "last_message", None)
    if not changed and failure:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure)
    return ClientStatusResponse(id=client_id, status=controller.form.get("status"), changed=changed)


@router.get(
    "/{client_id}/document",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def print_client(
    client_id: int,
    service: ClientDocumentService = Depends(get_client_document_service),
) -> Response:
    """Render the client as a one-page PDF."""
    try:
        content = await service.render(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="client-{client_id}.pdf"'},
    )
