"""
Image Insertion Tool
"""
import logging

from .base_tool import BaseTool, ToolType
from ..core.coordinates import to_page_rect
from ..core.models import ImageAnnotation
from ..utils.images import decode_image_payload

logger = logging.getLogger(__name__)


class ImageTool(BaseTool):
    """Embeds PNG/JPEG images into page content"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.IMAGE, pdf_doc, settings)

    def add_image(self, annotation: ImageAnnotation):
        """Place the image with its lower-left corner at (x, y), scaled to width x height"""
        self.pdf_doc.require()
        page = self.page_for_number(annotation.page_number)
        image_bytes, image = decode_image_payload(annotation.image_data)

        rect = to_page_rect(page, annotation.x, annotation.y, annotation.width, annotation.height)
        page.insert_image(rect, stream=image_bytes, keep_proportion=False)
        logger.debug(
            f"Added {image.format} image {annotation.id} ({image.width}x{image.height}px) "
            f"on page {annotation.page_number}"
        )
