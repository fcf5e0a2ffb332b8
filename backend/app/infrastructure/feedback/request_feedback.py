"""HTTP adapters for ConfirmationPrompt and Notifier.

Over the REST API there is no modal dialog or banner: the answer to the
confirmation travels with the request, and notifications are queued so the
endpoint can put them in its response.
"""

import logging
from dataclasses import dataclass

from app.application.interfaces import ConfirmationPrompt, Notifier

logger = logging.getLogger(__name__)


class PresetConfirmation(ConfirmationPrompt):
    """Answers every prompt with the value supplied by the caller."""

    def __init__(self, answer: bool | None):
        self._answer = answer

    async def open(self, *, message: str, subject_label: str, action_label: str) -> bool | None:
        logger.info("%s '%s'? [%s] → %s", message, subject_label, action_label, self._answer)
        return self._answer


@dataclass(frozen=True)
class Notification:
    message: str
    dismiss_label: str
    duration_ms: int


class QueuedNotifier(Notifier):
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def show(self, message: str, dismiss_label: str, duration_ms: int) -> None:
        self.notifications.append(Notification(message, dismiss_label, duration_ms))

    @property
    def last_message(self) -> str | None:
        return self.notifications[-1].message if self.notifications else None
