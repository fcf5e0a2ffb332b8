"""Request-scoped stand-ins for the operator prompts of the client form."""

from .request_feedback import PresetConfirmation, QueuedNotifier

__all__ = ["PresetConfirmation", "QueuedNotifier"]
