"""
Base Tool Class
All page-drawing tools inherit from this
"""
import logging
from enum import Enum
from typing import Optional

import fitz  # PyMuPDF

from ..core.errors import InvalidPageIndex
from ..core.pdf_document import PDFDocument
from ..utils.colors import hex_to_rgb
from ..utils.settings import Settings

logger = logging.getLogger(__name__)


class ToolType(Enum):
    """Types of tools available"""
    TEXT = "text"
    IMAGE = "image"
    PEN = "pen"
    SHAPE = "shape"
    STICKY_NOTE = "sticky_note"
    LINK = "link"
    REDACTION = "redaction"
    WATERMARK = "watermark"
    HEADER_FOOTER = "header_footer"


# Base14 Helvetica variants, keyed by (bold, italic)
HELVETICA = {
    (False, False): "helv",
    (True, False): "hebo",
    (False, True): "heit",
    (True, True): "hebi",
}


class BaseTool:
    """Base class for all tools that draw onto document pages"""

    def __init__(self, tool_type: ToolType, pdf_doc: PDFDocument, settings: Optional[Settings] = None):
        self.type = tool_type
        self.pdf_doc = pdf_doc
        self.settings = settings or Settings()

    def page_for_number(self, page_number: int) -> fitz.Page:
        """Page for a 1-based annotation page number"""
        self.pdf_doc.require()
        if not isinstance(page_number, int) or page_number < 1:
            raise InvalidPageIndex()
        return self.pdf_doc.get_page(page_number - 1)

    @staticmethod
    def color(hex_color: Optional[str]) -> tuple:
        """Normalized RGB, black when unparseable"""
        return hex_to_rgb(hex_color)

    @staticmethod
    def font_name(bold: bool = False, italic: bool = False) -> str:
        return HELVETICA[(bool(bold), bool(italic))]

    @staticmethod
    def text_width(text: str, font_size: float, fontname: str = "helv") -> float:
        """Rendered width of a single line of text in points"""
        return fitz.get_text_length(text, fontname=fontname, fontsize=font_size)
