"""
Annotation Engine
Single entry point for every per-page annotation tool
"""
from typing import Optional

from .annotation_tools import LinkTool, StickyNoteTool
from .drawing_tools import PenTool
from .image_tool import ImageTool
from .shape_tools import ShapeTool
from .text_tool import TextTool
from ..core.models import (
    DrawingPath,
    DrawingShape,
    ImageAnnotation,
    LinkPlaceholder,
    LinkRect,
    StickyNote,
    TextAnnotation,
)
from ..core.pdf_document import PDFDocument
from ..utils.settings import Settings


class AnnotationEngine:
    """Places text, images, drawings, shapes, notes and link markers onto pages"""

    def __init__(self, pdf_doc: PDFDocument, settings: Optional[Settings] = None):
        settings = settings or Settings()
        self.text_tool = TextTool(pdf_doc, settings)
        self.image_tool = ImageTool(pdf_doc, settings)
        self.pen_tool = PenTool(pdf_doc, settings)
        self.shape_tool = ShapeTool(pdf_doc, settings)
        self.note_tool = StickyNoteTool(pdf_doc, settings)
        self.link_tool = LinkTool(pdf_doc, settings)

    def add_text(self, annotation: TextAnnotation) -> bool:
        return self.text_tool.add_text(annotation)

    def add_image(self, annotation: ImageAnnotation):
        self.image_tool.add_image(annotation)

    def add_drawing_path(self, path: DrawingPath, scale: float = 1.0) -> bool:
        return self.pen_tool.add_drawing_path(path, scale)

    def add_drawing_shape(self, shape: DrawingShape, scale: float = 1.0):
        self.shape_tool.add_drawing_shape(shape, scale)

    def add_sticky_note(self, note: StickyNote, scale: float = 1.0):
        self.note_tool.add_sticky_note(note, scale)

    def add_url_link(self, page_index: int, rect: LinkRect, url: str, scale: float = 1.0) -> LinkPlaceholder:
        return self.link_tool.add_url_link(page_index, rect, url, scale)

    def add_page_link(self, page_index: int, rect: LinkRect, target_page_index: int,
                      scale: float = 1.0) -> LinkPlaceholder:
        return self.link_tool.add_page_link(page_index, rect, target_page_index, scale)
