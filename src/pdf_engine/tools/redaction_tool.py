"""
Redaction Tool
Permanently removes page content under screen-space regions
"""
import logging
from typing import Dict, Iterable

import fitz  # PyMuPDF

from .base_tool import BaseTool, ToolType
from ..core.coordinates import page_height, screen_rect_to_document, to_page_rect
from ..core.models import Redaction

logger = logging.getLogger(__name__)

REDACTION_FILL = (0, 0, 0)


class RedactionTool(BaseTool):
    """Applies opaque, content-destroying redactions"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.REDACTION, pdf_doc, settings)

    def apply_redactions(self, redactions: Iterable[Redaction], scale: float = 1.0) -> int:
        """
        Redact every region whose page exists; regions on missing pages are
        skipped. Returns the number of regions applied.
        """
        self.pdf_doc.require()
        touched: Dict[int, fitz.Page] = {}
        applied = 0

        for redaction in redactions:
            page = self.pdf_doc.find_page(redaction.page_number - 1)
            if page is None:
                logger.debug(f"Skipping redaction on missing page {redaction.page_number}")
                continue

            doc_rect = screen_rect_to_document(
                redaction.x, redaction.y, redaction.width, redaction.height,
                page_height(page), scale,
            )
            page.add_redact_annot(to_page_rect(page, *doc_rect), fill=REDACTION_FILL)
            touched[page.number] = page
            applied += 1

        for page in touched.values():
            page.apply_redactions(images=fitz.PDF_REDACT_IMAGE_PIXELS)

        logger.info(f"Applied {applied} redaction(s) on {len(touched)} page(s)")
        return applied
