"""Abstract interfaces (ports) for the operator-facing prompts of the client form."""

from abc import ABC, abstractmethod


class ConfirmationPrompt(ABC):
    """Modal yes/no question shown before a destructive or state-changing action."""

    @abstractmethod
    async def open(self, *, message: str, subject_label: str, action_label: str) -> bool | None:
        """Ask the operator to confirm.

        Returns:
            True when confirmed. False or None (dismissed) means not confirmed.
        """
        ...


class Notifier(ABC):
    """Short-lived notification banner. Fire and forget."""

    @abstractmethod
    def show(self, message: str, dismiss_label: str, duration_ms: int) -> None:
        ...
