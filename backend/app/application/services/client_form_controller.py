"""Client form controller — load, edit, address lookup, save and status changes.

The controller owns one ClientForm and talks to the outside world only
through the ports injected at construction. Each public handler awaits its
single outstanding call before touching the form again and is the final
catcher for its own failures: nothing raised by a collaborator escapes.
"""

import logging
from typing import Any

from app.application.interfaces import (
    AddressLookupGateway,
    ClientRecordRepository,
    ConfirmationPrompt,
    Notifier,
)
from app.application.services.client_form import ClientForm
from app.domain.entities import Address, ClientRecord
from app.domain.exceptions import AddressLookupError, EntityNotFoundError
from app.domain.validators import POSTAL_CODE_LENGTH

logger = logging.getLogger(__name__)

LOAD_FAILED = "Could not load the client."
SAVE_SUCCEEDED = "Client saved successfully."
SAVE_FAILED = "Could not save the client."

_STATUS_ACTIONS: dict[bool, dict[str, str]] = {
    True: {
        "message": "Do you want to activate the client",
        "action": "Activate",
        "failure": "Could not activate the client.",
    },
    False: {
        "message": "Do you want to deactivate the client",
        "action": "Deactivate",
        "failure": "Could not deactivate the client.",
    },
}


def parse_client_id(raw: str | None) -> int | None:
    """Parse a positive client id from the navigation context."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw.isdigit():
        return None
    client_id = int(raw)
    return client_id or None


class PostalCodeWatch:
    """One-step memory over the postal code field.

    A lookup is due when the new value has exactly 8 characters and differs
    from the value it replaces. Only the immediately preceding value is
    remembered, so re-entering a code after any other edit fires again.
    """

    def __init__(self, initial: str = ""):
        self._previous = initial or ""

    @property
    def previous(self) -> str:
        return self._previous

    def advance(self, value: Any) -> bool:
        value = "" if value is None else str(value)
        previous, self._previous = self._previous, value
        return len(value) == POSTAL_CODE_LENGTH and value != previous

    def rebase(self, value: Any) -> None:
        """Move the baseline without evaluating a change."""
        self._previous = "" if value is None else str(value)


class ClientFormController:
    """Orchestrates the client form. Depends on ports only (DI)."""

    def __init__(
        self,
        repository: ClientRecordRepository,
        address_gateway: AddressLookupGateway,
        confirmation: ConfirmationPrompt,
        notifier: Notifier,
        *,
        dismiss_label: str = "OK",
        notification_duration_ms: int = 2000,
    ):
        self._repository = repository
        self._address_gateway = address_gateway
        self._confirmation = confirmation
        self._notifier = notifier
        self._dismiss_label = dismiss_label
        self._notification_duration_ms = notification_duration_ms
        self.form = ClientForm()
        self._postal_code_watch = PostalCodeWatch(self.form.get("postal_code"))

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def _notify(self, message: str) -> None:
        self._notifier.show(message, self._dismiss_label, self._notification_duration_ms)

    def _patch(self, values: dict[str, Any]) -> None:
        self.form.patch(values)
        self._postal_code_watch.rebase(self.form.get("postal_code"))

    # ── Startup ──────────────────────────────────────────────────────

    async def initialize(self, route_id: str | None) -> ClientRecord | None:
        """Start a new form, or load the client named by the navigation context."""
        client_id = parse_client_id(route_id)
        if client_id is None:
            return None
        self.form.set_value("id", client_id)
        return await self.load(client_id)

    async def load(self, client_id: int) -> ClientRecord | None:
        try:
            await self._repository.wait_ready()
            record = await self._repository.find_by_id(client_id)
            if record is None:
                raise EntityNotFoundError("ClientRecord", client_id)
        except Exception:
            logger.exception("Failed to load client %s", client_id)
            self._notify(LOAD_FAILED)
            return None

        self._patch(record.as_dict())
        logger.debug("Loaded client %s into the form", client_id)
        return record

    # ── Editing ──────────────────────────────────────────────────────

    async def edit(self, field: str, value: Any) -> None:
        """Apply an operator edit to one field.

        Editing the postal code may trigger an address lookup, which is
        awaited before this returns.
        """
        self.form.set_value(field, value)
        if field == "postal_code" and self._postal_code_watch.advance(value):
            await self.find_address(self._postal_code_watch.previous)

    async def find_address(self, postal_code: str) -> Address | None:
        try:
            address = await self._address_gateway.lookup(postal_code)
        except AddressLookupError as e:
            logger.warning("Address lookup failed: %s", e)
            return None
        except Exception:
            logger.exception("Address lookup for %s failed unexpectedly", postal_code)
            return None

        self._patch(address.as_dict())
        logger.debug("Address for %s applied to the form", postal_code)
        return address

    # ── Status ───────────────────────────────────────────────────────

    async def activate(self) -> bool:
        return await self._change_status(True)

    async def deactivate(self) -> bool:
        return await self._change_status(False)

    async def _change_status(self, target: bool) -> bool:
        """Confirm with the operator, persist the new status, then mirror it in the form."""
        labels = _STATUS_ACTIONS[target]
        client = self.form.value
        client_id = client["id"]
        if not client_id:
            logger.warning("%s requested for a client that was never saved", labels["action"])
            return False

        try:
            confirmed = await self._confirmation.open(
                message=labels["message"],
                subject_label=client["name"] or "",
                action_label=labels["action"],
            )
            if not confirmed:
                return False

            await self._repository.wait_ready()
            await self._repository.update_fields(client_id, {"status": target})
        except Exception:
            logger.exception("%s of client %s failed", labels["action"], client_id)
            self._notify(labels["failure"])
            return False

        self.form.set_value("status", target)
        logger.info("Client %s status set to %s", client_id, "active" if target else "inactive")
        return True

    # ── Submit ───────────────────────────────────────────────────────

    async def submit(self) -> ClientRecord | None:
        """Persist the form when every field validator passes.

        An invalid form is rejected silently. A form without an id is saved
        as a new record; with an id the stored record is overwritten.
        """
        if not self.form.valid:
            return None

        try:
            record = self.form.to_record()
            await self._repository.wait_ready()
            saved = await self._repository.save(record)
        except Exception:
            logger.exception("Failed to save client")
            self._notify(SAVE_FAILED)
            return None

        self.form.set_value("id", saved.id)
        self._notify(SAVE_SUCCEEDED)
        logger.info("Client %s saved", saved.id)
        return saved
