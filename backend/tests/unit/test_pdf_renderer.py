"""Unit tests for the PyMuPDF document renderer."""

import re

import pytest

from app.domain.entities import Placement
from app.infrastructure.pdf import PyMuPdfDocumentRenderer


def _spans(renderer: PyMuPdfDocumentRenderer) -> dict[str, dict]:
    """Map each text span on the page to its PyMuPDF span info."""
    result = {}
    for block in renderer.page.get_text("dict")["blocks"]:
        for line in block.get("lines", []):
            for span in line["spans"]:
                result[span["text"]] = span
    return result


def _dash_values(dashes: str) -> list[float]:
    return [float(v) for v in re.findall(r"\d+(?:\.\d+)?", dashes.split("]")[0])]


def test_label_and_value_are_placed_at_their_own_coordinates():
    renderer = PyMuPdfDocumentRenderer()

    renderer.add_label_and_value(Placement(50, 100, 300, 120), "Name", "Ana")

    spans = _spans(renderer)
    assert spans["Name"]["origin"] == pytest.approx((50, 100), abs=0.5)
    assert spans["Ana"]["origin"] == pytest.approx((300, 120), abs=0.5)


def test_label_is_emphasized_and_value_is_plain():
    renderer = PyMuPdfDocumentRenderer()

    renderer.add_label_and_value(Placement(50, 100, 300, 100), "Name", "Ana")

    spans = _spans(renderer)
    assert "Bold" in spans["Name"]["font"]
    assert spans["Name"]["size"] == pytest.approx(14)
    assert "Bold" not in spans["Ana"]["font"]
    assert spans["Ana"]["size"] == pytest.approx(12)


def test_placement_does_not_depend_on_text_length():
    renderer = PyMuPdfDocumentRenderer()
    long_value = "Avenida Paulista, conjunto comercial, bloco B, sala 1001"

    renderer.add_label_and_value(Placement(50, 200, 120, 240), "A very long label for a street", long_value)

    spans = _spans(renderer)
    assert spans["A very long label for a street"]["origin"] == pytest.approx((50, 200), abs=0.5)
    assert spans[long_value]["origin"] == pytest.approx((120, 240), abs=0.5)


def test_font_sizes_are_configurable_per_document():
    renderer = PyMuPdfDocumentRenderer(title_font_size=16, text_font_size=10)

    renderer.add_label_and_value(Placement(50, 100, 300, 100), "City", "Recife")

    spans = _spans(renderer)
    assert spans["City"]["size"] == pytest.approx(16)
    assert spans["Recife"]["size"] == pytest.approx(10)


def test_add_dot_draws_dashed_line_between_points():
    renderer = PyMuPdfDocumentRenderer()

    renderer.add_dot(Placement(170, 100, 290, 100))

    drawings = renderer.page.get_drawings()
    assert len(drawings) == 1
    kind, start, end = drawings[0]["items"][0]
    assert kind == "l"
    assert (start.x, start.y) == pytest.approx((170, 100), abs=0.5)
    assert (end.x, end.y) == pytest.approx((290, 100), abs=0.5)
    assert _dash_values(drawings[0]["dashes"]) == pytest.approx([2.5])


def test_add_dot_dash_length_can_be_overridden():
    renderer = PyMuPdfDocumentRenderer()

    renderer.add_dot(Placement(10, 10, 10, 200), dash_length=4)

    drawings = renderer.page.get_drawings()
    assert _dash_values(drawings[0]["dashes"]) == pytest.approx([4])


def test_to_bytes_produces_a_pdf():
    renderer = PyMuPdfDocumentRenderer()
    renderer.add_label_and_value(Placement(50, 100, 300, 100), "Name", "Ana")

    assert renderer.to_bytes().startswith(b"%PDF")
