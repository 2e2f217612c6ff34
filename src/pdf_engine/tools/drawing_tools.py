"""
Drawing Tools: Pen, Highlighter
"""
import logging

from .base_tool import BaseTool, ToolType
from ..core.coordinates import page_height, screen_to_document, to_page_point
from ..core.models import DrawingPath, DrawingTool

logger = logging.getLogger(__name__)

ROUND = 1  # PDF line cap/join style


class PenTool(BaseTool):
    """Freehand strokes as vector polylines"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.PEN, pdf_doc, settings)

    def add_drawing_path(self, path: DrawingPath, scale: float = 1.0) -> bool:
        """Draw a connected polyline through the path's points; False if nothing was drawn"""
        self.pdf_doc.require()
        if len(path.points) < 2:
            return False

        page = self.page_for_number(path.page_number)
        height = page_height(page)
        points = [
            to_page_point(page, *screen_to_document(x, y, height, scale))
            for x, y in path.points
        ]

        opacity = max(0.0, min(1.0, path.opacity))
        if path.tool == DrawingTool.HIGHLIGHTER:
            # Highlighter ink never goes fully opaque
            opacity = min(opacity, self.settings.get('highlighter.opacity', 0.4))

        shape = page.new_shape()
        shape.draw_polyline(points)
        shape.finish(
            color=self.color(path.color),
            width=path.stroke_width,
            stroke_opacity=opacity,
            lineCap=ROUND,
            lineJoin=ROUND,
            closePath=False,
        )
        shape.commit()
        logger.debug(f"Added {path.tool.value} path {path.id} ({len(points)} points) on page {path.page_number}")
        return True
