"""
Shape Drawing Tools: Rectangle, Circle, Line, Arrow
"""
import logging
import math
from typing import List, Tuple

from .base_tool import BaseTool, ToolType
from ..core.coordinates import page_height, screen_to_document, to_page_point, to_page_rect
from ..core.models import DrawingShape, ShapeType

logger = logging.getLogger(__name__)

ARROW_HEAD_LENGTH = 15
ARROW_HEAD_ANGLE = math.pi / 6  # 30 degrees either side of the shaft


def arrow_head(x1: float, y1: float, x2: float, y2: float,
               length: float = ARROW_HEAD_LENGTH) -> List[Tuple[float, float]]:
    """End points of the two barbs of an arrow pointing from (x1, y1) to (x2, y2)"""
    angle = math.atan2(y2 - y1, x2 - x1)
    return [
        (x2 - length * math.cos(angle - ARROW_HEAD_ANGLE), y2 - length * math.sin(angle - ARROW_HEAD_ANGLE)),
        (x2 - length * math.cos(angle + ARROW_HEAD_ANGLE), y2 - length * math.sin(angle + ARROW_HEAD_ANGLE)),
    ]


def bounding_box(x1: float, y1: float, x2: float, y2: float) -> Tuple[float, float, float, float]:
    """Lower-left corner and positive size of the box spanned by two corners"""
    return min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1)


class ShapeTool(BaseTool):
    """Rectangle, circle, line and arrow shapes as vector graphics"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.SHAPE, pdf_doc, settings)

    def add_drawing_shape(self, shape_data: DrawingShape, scale: float = 1.0):
        self.pdf_doc.require()
        page = self.page_for_number(shape_data.page_number)
        height = page_height(page)

        # The flip inverts the vertical delta, so corners are re-normalized
        # after conversion rather than before.
        x1, y1 = screen_to_document(shape_data.start_x, shape_data.start_y, height, scale)
        x2, y2 = screen_to_document(shape_data.end_x, shape_data.end_y, height, scale)

        shape = page.new_shape()
        tool = shape_data.tool

        if tool in (ShapeType.RECTANGLE, ShapeType.CIRCLE):
            box = bounding_box(x1, y1, x2, y2)
            if box[2] == 0 or box[3] == 0:
                logger.debug(f"Skipping empty {tool.value} {shape_data.id}")
                return
            rect = to_page_rect(page, *box)
            if tool == ShapeType.RECTANGLE:
                shape.draw_rect(rect)
            else:
                shape.draw_oval(rect)

        elif tool == ShapeType.LINE:
            shape.draw_line(to_page_point(page, x1, y1), to_page_point(page, x2, y2))

        elif tool == ShapeType.ARROW:
            end = to_page_point(page, x2, y2)
            shape.draw_line(to_page_point(page, x1, y1), end)
            for bx, by in arrow_head(x1, y1, x2, y2):
                shape.draw_line(end, to_page_point(page, bx, by))

        shape.finish(
            color=self.color(shape_data.color),
            width=shape_data.stroke_width,
            closePath=False,
        )
        shape.commit()
        logger.debug(f"Added {tool.value} {shape_data.id} on page {shape_data.page_number}")
