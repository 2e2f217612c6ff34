"""
Annotation Tools: Sticky Notes, Link markers
"""
import logging
from typing import Union

import fitz  # PyMuPDF

from .base_tool import BaseTool, ToolType
from ..core.coordinates import page_height, screen_rect_to_document, screen_to_document, to_page_rect
from ..core.errors import InvalidPageIndex, InvalidSourcePageIndex, InvalidTargetPageIndex
from ..core.models import LinkPlaceholder, LinkRect, StickyNote

logger = logging.getLogger(__name__)

BUBBLE_GAP = 5
BUBBLE_FILL = (1.0, 1.0, 0.9)
BORDER = (0.2, 0.2, 0.2)


def note_preview(content: str, limit: int = 50) -> str:
    """First `limit` characters of a note, with an ellipsis when cut"""
    content = content.strip()
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


class StickyNoteTool(BaseTool):
    """Sticky note glyph plus an optional preview bubble"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.STICKY_NOTE, pdf_doc, settings)

    def add_sticky_note(self, note: StickyNote, scale: float = 1.0):
        self.pdf_doc.require()
        page = self.page_for_number(note.page_number)
        height = page_height(page)

        size = self.settings.get('sticky_note.size', 20)
        color = self.color(note.color or self.settings.get('sticky_note.color', '#FFFF00'))

        # Glyph: screen-space box of `size` points at the note position
        gx, gy = screen_to_document(note.x, note.y, height, scale)
        glyph = to_page_rect(page, gx, gy - size, size, size)

        shape = page.new_shape()
        shape.draw_rect(glyph)
        shape.finish(color=BORDER, fill=color, width=0.5)

        # Folded corner
        fold = size * 0.3
        shape.draw_polyline([
            (glyph.x1 - fold, glyph.y0),
            (glyph.x1 - fold, glyph.y0 + fold),
            (glyph.x1, glyph.y0 + fold),
        ])
        shape.finish(color=BORDER, width=0.5, closePath=False)
        shape.commit()

        if note.content and note.content.strip():
            self._add_bubble(page, glyph, note)

        logger.debug(f"Added sticky note on page {note.page_number}")

    def _add_bubble(self, page, glyph, note: StickyNote):
        limit = self.settings.get('sticky_note.preview_length', 50)
        width = self.settings.get('sticky_note.bubble_width', 160)
        font_size = self.settings.get('sticky_note.bubble_font_size', 8)

        preview = note_preview(note.content, limit)
        if note.author:
            preview = f"{note.author}: {preview}"

        bubble = fitz.Rect(
            glyph.x1 + BUBBLE_GAP,
            glyph.y0,
            glyph.x1 + BUBBLE_GAP + width,
            glyph.y0 + glyph.height * 2,
        )
        shape = page.new_shape()
        shape.draw_rect(bubble)
        shape.finish(color=BORDER, fill=BUBBLE_FILL, width=0.5)
        shape.commit()

        page.insert_textbox(bubble + (3, 3, -3, -3), preview, fontsize=font_size, fontname="helv", color=BORDER)


class LinkTool(BaseTool):
    """
    Link markers. Only a translucent rectangle is drawn: no clickable link
    object is written, and every call returns a placeholder saying so.
    """

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.LINK, pdf_doc, settings)

    def add_url_link(self, page_index: int, rect: LinkRect, url: str, scale: float = 1.0) -> LinkPlaceholder:
        self.pdf_doc.require()
        if self.pdf_doc.find_page(page_index) is None:
            raise InvalidPageIndex()
        return self._draw_placeholder(page_index, rect, url, scale)

    def add_page_link(self, page_index: int, rect: LinkRect, target_page_index: int,
                      scale: float = 1.0) -> LinkPlaceholder:
        self.pdf_doc.require()
        if self.pdf_doc.find_page(page_index) is None:
            raise InvalidSourcePageIndex()
        if self.pdf_doc.find_page(target_page_index) is None:
            raise InvalidTargetPageIndex()
        return self._draw_placeholder(page_index, rect, target_page_index, scale)

    def _draw_placeholder(self, page_index: int, rect: LinkRect, target: Union[str, int],
                          scale: float) -> LinkPlaceholder:
        if isinstance(rect, dict):
            rect = LinkRect(**rect)
        page = self.pdf_doc.get_page(page_index)
        doc_rect = screen_rect_to_document(rect.x, rect.y, rect.width, rect.height, page_height(page), scale)

        color = self.color(self.settings.get('link.color', '#2563EB'))
        opacity = self.settings.get('link.opacity', 0.2)

        shape = page.new_shape()
        shape.draw_rect(to_page_rect(page, *doc_rect))
        shape.finish(color=color, fill=color, width=1, fill_opacity=opacity, stroke_opacity=min(1.0, opacity * 3))
        shape.commit()

        logger.warning(f"Link to {target!r} on page {page_index} drawn as a non-interactive placeholder")
        return LinkPlaceholder(page_index=page_index, rect=doc_rect, target=target)
