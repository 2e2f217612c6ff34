"""
Coordinate Transform
Screen space (top-left origin, zoomed) <-> document space (bottom-left origin, points)

Every component that draws onto a page goes through these helpers, so the
Y-flip lives in exactly one place.
"""
from typing import Tuple
import fitz  # PyMuPDF


def screen_to_document(x: float, y: float, page_height: float, scale: float = 1.0) -> Tuple[float, float]:
    """Convert a screen-space point to document space"""
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")
    return x / scale, page_height - y / scale


def document_to_screen(x: float, y: float, page_height: float, scale: float = 1.0) -> Tuple[float, float]:
    """Convert a document-space point back to screen space"""
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")
    return x * scale, (page_height - y) * scale


def screen_rect_to_document(x: float, y: float, width: float, height: float,
                            page_height: float, scale: float = 1.0) -> Tuple[float, float, float, float]:
    """
    Convert a screen-space rectangle (top-left corner + size) to a
    document-space rectangle (bottom-left corner + size).
    Negative sizes are normalized so the result always has width, height >= 0.
    """
    x0, y0 = screen_to_document(x, y, page_height, scale)
    x1, y1 = screen_to_document(x + width, y + height, page_height, scale)
    return min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0)


def page_height(page: fitz.Page) -> float:
    """Height of the unrotated page in points"""
    return page.cropbox.height


def to_page_point(page: fitz.Page, x: float, y: float) -> fitz.Point:
    """Map a document-space point to PyMuPDF's top-left page coordinates"""
    return fitz.Point(x, y) * page.transformation_matrix


def to_page_rect(page: fitz.Page, x: float, y: float, width: float, height: float) -> fitz.Rect:
    """Map a document-space rectangle (bottom-left corner + size) to a PyMuPDF rect"""
    p1 = to_page_point(page, x, y)
    p2 = to_page_point(page, x + width, y + height)
    return fitz.Rect(p1, p2).normalize()
