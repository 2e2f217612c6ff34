"""
Header/Footer Tool
Running headers and footers with {page}, {total} and {date} tokens
"""
import logging
from datetime import date
from typing import Optional

import fitz  # PyMuPDF

from .base_tool import BaseTool, ToolType
from ..core.coordinates import page_height, to_page_point
from ..core.models import HeaderFooterConfig, HeaderFooterSlot
from ..utils.tokens import DATE_FORMATS, page_tokens, substitute

logger = logging.getLogger(__name__)

TEXT_COLOR = (0, 0, 0)


class HeaderFooterTool(BaseTool):
    """Writes left/center/right header and footer text on every page"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.HEADER_FOOTER, pdf_doc, settings)

    def add_header_footer(self, config: HeaderFooterConfig, today: Optional[date] = None) -> int:
        """Decorate every page; returns the number of text runs written"""
        doc = self.pdf_doc.require()
        if config.date_format not in DATE_FORMATS:
            raise ValueError(f"Unknown date format: {config.date_format}")

        today = today or date.today()
        total = doc.page_count
        written = 0

        for index, page in enumerate(doc):
            values = page_tokens(index + 1, total, today, config.date_format)
            height = page_height(page)
            if config.header.enabled:
                # Header baseline sits one line below the top margin
                baseline = height - config.margin - config.font_size
                written += self._write_slot(page, config.header, values, baseline, config)
            if config.footer.enabled:
                written += self._write_slot(page, config.footer, values, config.margin, config)

        logger.info(f"Added header/footer to {total} page(s)")
        return written

    def _write_slot(self, page: fitz.Page, slot: HeaderFooterSlot, values, baseline: float,
                    config: HeaderFooterConfig) -> int:
        width = page.cropbox.width
        written = 0
        for align, template in (("left", slot.left), ("center", slot.center), ("right", slot.right)):
            text = substitute(template, values)
            if not text.strip():
                continue

            text_width = self.text_width(text, config.font_size)
            if align == "left":
                x = config.margin
            elif align == "center":
                x = (width - text_width) / 2
            else:
                x = width - config.margin - text_width

            page.insert_text(
                to_page_point(page, x, baseline),
                text,
                fontsize=config.font_size,
                fontname="helv",
                color=TEXT_COLOR,
            )
            written += 1
        return written
