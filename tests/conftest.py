"""
Shared fixtures: real in-memory PDFs built with PyMuPDF
"""
import base64
import io
from typing import List, Optional

import fitz  # PyMuPDF
import pytest
from PIL import Image

from pdf_engine.core.pdf_document import PDFDocument
from pdf_engine.utils.settings import CONFIG_ENV_VAR, Settings

PAGE_WIDTH = 612
PAGE_HEIGHT = 792


def make_pdf(page_count: int = 3, password: Optional[str] = None, toc: Optional[list] = None,
             with_field: bool = False) -> bytes:
    """A letter-size PDF whose pages are labelled page-0, page-1, ..."""
    doc = fitz.open()
    for i in range(page_count):
        page = doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        page.insert_text((72, 72), f"page-{i}", fontsize=11)

    if toc:
        doc.set_toc(toc)

    if with_field:
        widget = fitz.Widget()
        widget.field_type = fitz.PDF_WIDGET_TYPE_TEXT
        widget.field_name = "full_name"
        widget.rect = fitz.Rect(72, 100, 272, 120)
        doc[0].add_widget(widget)

    if password:
        data = doc.tobytes(encryption=fitz.PDF_ENCRYPT_AES_256, user_pw=password, owner_pw=password)
    else:
        data = doc.tobytes()
    doc.close()
    return data


def page_labels(data_or_doc) -> List[Optional[str]]:
    """The page-N label of every page (None for blank pages)"""
    if isinstance(data_or_doc, (bytes, bytearray)):
        doc = fitz.open(stream=data_or_doc, filetype="pdf")
    else:
        doc = data_or_doc
    labels = []
    for page in doc:
        words = [w for w in page.get_text().split() if w.startswith("page-")]
        labels.append(words[0] if words else None)
    return labels


def encode_image(fmt: str = "PNG", size=(4, 4), color=(255, 0, 0)) -> str:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture(autouse=True)
def no_config_file(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def pdf_bytes():
    return make_pdf(3)


@pytest.fixture
def pdf_doc(pdf_bytes):
    doc = PDFDocument()
    doc.load(pdf_bytes)
    yield doc
    doc.reset()


@pytest.fixture
def five_page_doc():
    doc = PDFDocument()
    doc.load(make_pdf(5))
    yield doc
    doc.reset()


@pytest.fixture
def single_page_doc():
    doc = PDFDocument()
    doc.load(make_pdf(1))
    yield doc
    doc.reset()


@pytest.fixture
def png_payload():
    return encode_image("PNG")


@pytest.fixture
def jpeg_payload():
    return encode_image("JPEG")
