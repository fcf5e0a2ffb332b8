"""Abstract interface (port) for fixed-layout document rendering."""

from abc import ABC, abstractmethod

from app.domain.entities import Placement

DEFAULT_DASH_LENGTH = 2.5


class DocumentRenderer(ABC):
    """Stateful builder over a single output page.

    Callers place every element by absolute coordinates; there is no
    automatic layout, wrapping or pagination, and coordinates are not
    checked against the page bounds.
    """

    title_font_size: float
    text_font_size: float

    @abstractmethod
    def add_label_and_value(self, position: Placement, label: str, value: str) -> None:
        """Draw ``label`` emphasized at the start point and ``value`` at the end point."""
        ...

    @abstractmethod
    def add_dot(self, position: Placement, dash_length: float = DEFAULT_DASH_LENGTH) -> None:
        """Draw a dashed straight line from the start point to the end point."""
        ...

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Serialize the document."""
        ...
