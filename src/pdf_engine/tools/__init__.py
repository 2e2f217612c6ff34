"""
Tools module for the PDF engine
Everything that draws onto document pages
"""
from .base_tool import BaseTool, ToolType
from .text_tool import TextTool
from .image_tool import ImageTool
from .drawing_tools import PenTool
from .shape_tools import ShapeTool
from .annotation_tools import StickyNoteTool, LinkTool
from .annotation_engine import AnnotationEngine
from .redaction_tool import RedactionTool
from .watermark_tool import WatermarkTool
from .header_footer_tool import HeaderFooterTool

__all__ = [
    'BaseTool',
    'ToolType',
    'TextTool',
    'ImageTool',
    'PenTool',
    'ShapeTool',
    'StickyNoteTool',
    'LinkTool',
    'AnnotationEngine',
    'RedactionTool',
    'WatermarkTool',
    'HeaderFooterTool',
]
