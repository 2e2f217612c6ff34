"""
Tests for permanent redaction
"""
import fitz  # PyMuPDF
import pytest

from pdf_engine.core.models import Redaction
from pdf_engine.core.pdf_document import PDFDocument
from pdf_engine.tools import RedactionTool


@pytest.fixture
def secret_doc():
    source = fitz.open()
    for _ in range(2):
        page = source.new_page(width=612, height=792)
        page.insert_text((72, 72), "KEEP", fontsize=11)
        page.insert_text((72, 200), "SECRET", fontsize=11)
    doc = PDFDocument()
    doc.load(source.tobytes())
    source.close()
    yield doc
    doc.reset()


def test_content_under_region_is_removed(secret_doc, settings):
    applied = RedactionTool(secret_doc, settings).apply_redactions(
        [Redaction(page_number=1, x=60, y=180, width=200, height=40)]
    )
    assert applied == 1

    # Survives a save/reload, so the text is really gone
    reloaded = fitz.open(stream=secret_doc.save(), filetype="pdf")
    assert "SECRET" not in reloaded[0].get_text()
    assert "KEEP" in reloaded[0].get_text()
    assert "SECRET" in reloaded[1].get_text()


def test_region_is_filled_black(secret_doc, settings):
    RedactionTool(secret_doc, settings).apply_redactions([Redaction(1, 60, 180, 200, 40)])
    fills = [d["fill"] for d in secret_doc.get_page(0).get_drawings() if d.get("fill") is not None]
    assert (0.0, 0.0, 0.0) in [tuple(f) for f in fills]


def test_scaled_screen_coordinates(secret_doc, settings):
    RedactionTool(secret_doc, settings).apply_redactions([Redaction(2, 120, 360, 400, 80)], scale=2.0)
    assert "SECRET" not in secret_doc.get_page(1).get_text()


def test_missing_pages_are_skipped(secret_doc, settings):
    applied = RedactionTool(secret_doc, settings).apply_redactions([
        Redaction(page_number=9, x=0, y=0, width=10, height=10),
        Redaction(page_number=0, x=0, y=0, width=10, height=10),
        Redaction(page_number=2, x=60, y=180, width=200, height=40),
    ])
    assert applied == 1
    assert "SECRET" in secret_doc.get_page(0).get_text()
    assert "SECRET" not in secret_doc.get_page(1).get_text()
