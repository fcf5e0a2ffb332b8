"""PyMuPDF implementation of the DocumentRenderer port."""

import fitz  # PyMuPDF

from app.application.interfaces.document_renderer import DEFAULT_DASH_LENGTH, DocumentRenderer
from app.domain.entities import Placement

A4_WIDTH = 595.0
A4_HEIGHT = 842.0

_TITLE_FONT = "hebo"  # Helvetica-Bold
_TEXT_FONT = "helv"  # Helvetica
_BLACK = (0, 0, 0)


class PyMuPdfDocumentRenderer(DocumentRenderer):
    """Single-page PDF builder.

    Text positions are baseline origins in PDF points, measured from the
    top-left corner of the page.
    """

    def __init__(
        self,
        *,
        title_font_size: float = 14,
        text_font_size: float = 12,
        line_width: float = 0.1,
        page_width: float = A4_WIDTH,
        page_height: float = A4_HEIGHT,
    ):
        self.title_font_size = title_font_size
        self.text_font_size = text_font_size
        self._line_width = line_width
        self._doc = fitz.open()
        self._page = self._doc.new_page(width=page_width, height=page_height)

    @property
    def page(self) -> fitz.Page:
        return self._page

    def add_label_and_value(self, position: Placement, label: str, value: str) -> None:
        self._page.insert_text(
            fitz.Point(position.start_x, position.start_y),
            label,
            fontsize=self.title_font_size,
            fontname=_TITLE_FONT,
        )
        self._page.insert_text(
            fitz.Point(position.end_x, position.end_y),
            value,
            fontsize=self.text_font_size,
            fontname=_TEXT_FONT,
        )

    def add_dot(self, position: Placement, dash_length: float = DEFAULT_DASH_LENGTH) -> None:
        self._page.draw_line(
            fitz.Point(position.start_x, position.start_y),
            fitz.Point(position.end_x, position.end_y),
            color=_BLACK,
            width=self._line_width,
            dashes=f"[{dash_length}] 0",
        )

    def to_bytes(self) -> bytes:
        return self._doc.tobytes()
