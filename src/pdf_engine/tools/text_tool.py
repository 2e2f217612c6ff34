"""
Text Insertion Tool
"""
import logging

from .base_tool import BaseTool, ToolType
from ..core.coordinates import to_page_point
from ..core.models import TextAnnotation

logger = logging.getLogger(__name__)


class TextTool(BaseTool):
    """Writes text annotations into page content"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.TEXT, pdf_doc, settings)

    def add_text(self, annotation: TextAnnotation) -> bool:
        """
        Draw the annotation's text with its baseline starting at (x, y).
        Returns False, without touching the page, for blank text.
        """
        self.pdf_doc.require()
        if not annotation.text or not annotation.text.strip():
            return False

        page = self.page_for_number(annotation.page_number)
        font_size = annotation.font_size or self.settings.get('text.font_size', 12)

        page.insert_text(
            to_page_point(page, annotation.x, annotation.y),
            annotation.text,
            fontsize=font_size,
            fontname=self.font_name(annotation.bold, annotation.italic),
            color=self.color(annotation.color),
        )
        logger.debug(f"Added text {annotation.id} on page {annotation.page_number}")
        return True
