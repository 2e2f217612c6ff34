"""
Core PDF Document Model
Handles PDF loading, serialization, and page access
"""
import logging
from typing import Dict, List, Optional, Tuple

import fitz  # PyMuPDF

from .errors import (
    DocumentLoadError,
    InvalidPassword,
    InvalidPageIndex,
    NotLoaded,
    PasswordRequired,
    UnsupportedCapability,
)
from ..utils.export import PDFSerializer

logger = logging.getLogger(__name__)

# Suppress MuPDF warnings about minor PDF syntax issues
fitz.TOOLS.mupdf_display_errors(False)


def open_pdf_bytes(data: bytes, password: Optional[str] = None) -> Tuple[fitz.Document, bool]:
    """
    Open PDF bytes, honouring the encryption guard.

    Returns the document and whether a password was used to unlock it. An
    encrypted source needs a password that PyMuPDF accepts; without one the
    pages cannot be read at all, so a rejected password fails the load.
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise DocumentLoadError(f"Failed to parse PDF document: {e}") from e

    verified = False
    if doc.needs_pass:
        if not password:
            doc.close()
            raise PasswordRequired()
        if not doc.authenticate(password):
            doc.close()
            raise InvalidPassword()
        verified = True
    return doc, verified


class PDFDocument:
    """Main PDF document handler"""

    def __init__(self):
        self.doc: Optional[fitz.Document] = None
        self.original_bytes: Optional[bytes] = None
        self.password: Optional[str] = None
        self.password_verified: bool = False

    @property
    def is_loaded(self) -> bool:
        return self.doc is not None

    @property
    def page_count(self) -> int:
        return self.doc.page_count if self.doc else 0

    def require(self) -> fitz.Document:
        """Return the loaded document or raise NotLoaded"""
        if self.doc is None:
            raise NotLoaded()
        return self.doc

    def load(self, data: bytes, password: Optional[str] = None):
        """Load a PDF from bytes, replacing any current document"""
        doc, verified = open_pdf_bytes(data, password)
        self.reset()
        self.doc = doc
        self.original_bytes = bytes(data)
        self.password = password or None
        self.password_verified = verified
        logger.info(f"Loaded PDF: {doc.page_count} page(s), {len(data)} bytes")

    def load_file(self, file_path: str, password: Optional[str] = None):
        """Load a PDF file from disk"""
        with open(file_path, 'rb') as f:
            self.load(f.read(), password)

    def reset(self):
        """Close the current document and forget everything about it"""
        if self.doc:
            self.doc.close()
        self.doc = None
        self.original_bytes = None
        self.password = None
        self.password_verified = False

    def get_password(self) -> Optional[str]:
        return self.password

    def set_password(self, password: Optional[str]):
        """Carry a password with the document (no encryption is applied)"""
        self.password = password or None

    def encrypt(self, user_password: str, owner_password: Optional[str] = None) -> bytes:
        raise UnsupportedCapability("PDF encryption")

    # Page access

    def get_page(self, page_index: int) -> fitz.Page:
        """Get a page by zero-based index"""
        doc = self.require()
        if not isinstance(page_index, int) or not 0 <= page_index < doc.page_count:
            raise InvalidPageIndex()
        return doc[page_index]

    def find_page(self, page_index: int) -> Optional[fitz.Page]:
        """Like get_page, but None for an index with no page"""
        doc = self.require()
        if isinstance(page_index, int) and 0 <= page_index < doc.page_count:
            return doc[page_index]
        return None

    def get_page_size(self, page_index: int) -> Tuple[float, float]:
        """Get page size in points"""
        rect = self.get_page(page_index).rect
        return (rect.width, rect.height)

    def get_page_rotation(self, page_index: int) -> int:
        return self.get_page(page_index).rotation

    # Serialization

    def save(self) -> bytes:
        return PDFSerializer.to_bytes(self.require())

    def save_to_file(self, output_path: str):
        with open(output_path, 'wb') as f:
            f.write(self.save())

    def get_size(self) -> int:
        """Size in bytes; runs a full serialization pass"""
        return PDFSerializer.size(self.require())

    def compress(self) -> bytes:
        data = PDFSerializer.to_compressed_bytes(self.require())
        logger.info(f"Compressed PDF to {len(data)} bytes")
        return data

    def get_compressed_size(self) -> int:
        return PDFSerializer.compressed_size(self.require())

    # Forms and annotations

    def fill_form_field(self, field_name: str, value: str):
        """Fill a text form field. Failures are logged, never raised."""
        doc = self.require()
        for page in doc:
            for widget in page.widgets():
                if widget.field_name != field_name:
                    continue
                if widget.field_type != fitz.PDF_WIDGET_TYPE_TEXT:
                    logger.warning(f"Could not fill field {field_name}: not a text field")
                    return
                try:
                    widget.field_value = value
                    widget.update()
                except (RuntimeError, ValueError) as e:
                    logger.warning(f"Could not fill field {field_name}: {e}")
                return
        logger.warning(f"Could not fill field {field_name}: no such field")

    def get_field_values(self) -> Dict[str, str]:
        """Current values of all text form fields"""
        values = {}
        for page in self.require():
            for widget in page.widgets():
                if widget.field_type == fitz.PDF_WIDGET_TYPE_TEXT:
                    values[widget.field_name] = widget.field_value or ""
        return values

    def flatten_annotations(self):
        """Bake annotations and form fields into the page content"""
        self.require().bake(annots=True, widgets=True)
        logger.info("Flattened annotations and form fields")

    # Outline

    def get_outline(self) -> List[Dict]:
        """Existing outline entries as {level, title, page} (page is 1-based)"""
        return [
            {'level': level, 'title': title, 'page': page}
            for level, title, page, *_ in self.require().get_toc()
        ]

    def add_bookmark(self, title: str, page_index: int):
        raise UnsupportedCapability("Bookmark writing")
