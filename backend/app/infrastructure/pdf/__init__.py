"""PDF infrastructure package."""

from .pymupdf_renderer import PyMuPdfDocumentRenderer

__all__ = ["PyMuPdfDocumentRenderer"]
