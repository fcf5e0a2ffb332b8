"""Application service that prints a persisted client record as a one-page document."""

import logging
from collections.abc import Callable

from app.application.interfaces import ClientRecordRepository, DocumentRenderer
from app.domain.entities import ClientRecord, Placement
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

# Layout in page units (PDF points, A4 portrait).
_LEFT = 56.0
_VALUE_X = 220.0
_TOP = 80.0
_ROW_HEIGHT = 28.0
_LEADER_GAP = 6.0
_LABEL_WIDTH = 120.0


def _display(value: object) -> str:
    if value is None or value == "":
        return "-"
    return str(value)


def client_sheet_rows(record: ClientRecord) -> list[tuple[str, str]]:
    """Label/value pairs printed for a client, in page order."""
    return [
        ("Name", _display(record.name)),
        ("Identity number", _display(record.identity_number)),
        ("Status", "Active" if record.status else "Inactive"),
        ("Email", _display(record.email)),
        ("Cellphone", _display(record.cellphone)),
        ("Birth date", _display(record.birth_date.isoformat() if record.birth_date else None)),
        ("Postal code", _display(record.postal_code)),
        ("State", _display(record.state)),
        ("City", _display(record.city)),
        ("District", _display(record.district)),
        ("Street", _display(record.street)),
        ("Number", _display(record.number)),
    ]


class ClientDocumentService:
    """Renders a stored client into a fixed-layout document.

    A fresh renderer is built per document through ``renderer_factory``.
    """

    def __init__(
        self,
        repository: ClientRecordRepository,
        renderer_factory: Callable[[], DocumentRenderer],
    ):
        self._repository = repository
        self._renderer_factory = renderer_factory

    async def render(self, client_id: int) -> bytes:
        await self._repository.wait_ready()
        record = await self._repository.find_by_id(client_id)
        if record is None:
            raise EntityNotFoundError("ClientRecord", client_id)
        return self.render_record(record)

    def render_record(self, record: ClientRecord) -> bytes:
        renderer = self._renderer_factory()

        renderer.add_label_and_value(
            Placement(_LEFT, _TOP - _ROW_HEIGHT, _VALUE_X, _TOP - _ROW_HEIGHT),
            "Client record",
            f"#{record.id}" if record.is_persisted else "",
        )

        for row, (label, value) in enumerate(client_sheet_rows(record)):
            y = _TOP + _ROW_HEIGHT * (row + 1)
            renderer.add_label_and_value(Placement(_LEFT, y, _VALUE_X, y), label, value)
            renderer.add_dot(
                Placement(_LEFT + _LABEL_WIDTH, y, _VALUE_X - _LEADER_GAP, y)
            )

        logger.debug("Rendered document for client %s", record.id)
        return renderer.to_bytes()
