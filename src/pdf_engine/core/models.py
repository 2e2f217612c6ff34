"""
Annotation and configuration models
Plain data handed to the engine by the editing UI
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())


class DrawingTool(Enum):
    """Freehand tools"""
    PEN = "pen"
    HIGHLIGHTER = "highlighter"


class ShapeType(Enum):
    """Vector shape tools"""
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    LINE = "line"
    ARROW = "arrow"


class WatermarkType(Enum):
    TEXT = "text"
    IMAGE = "image"


class WatermarkPosition(Enum):
    """9-way anchor keyword: vertical band then horizontal band"""
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    CENTER_LEFT = "center-left"
    CENTER = "center"
    CENTER_RIGHT = "center-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @property
    def vertical(self) -> str:
        return "center" if self is WatermarkPosition.CENTER else self.value.split('-')[0]

    @property
    def horizontal(self) -> str:
        return "center" if self is WatermarkPosition.CENTER else self.value.split('-')[1]


@dataclass
class TextAnnotation:
    """Text placed with its baseline start at (x, y) in document space"""
    text: str
    x: float
    y: float
    page_number: int  # 1-based
    font_size: float = 12
    color: str = "#000000"
    bold: bool = False
    italic: bool = False
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TextAnnotation':
        return cls(**data)


@dataclass
class ImageAnnotation:
    """Image with its lower-left corner at (x, y) in document space"""
    image_data: str  # base64, optionally as a data URL
    x: float
    y: float
    width: float
    height: float
    page_number: int  # 1-based
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ImageAnnotation':
        return cls(**data)


@dataclass
class DrawingPath:
    """Freehand stroke; points are in screen space. Highlighter strokes are
    capped at the highlighter.opacity setting."""
    points: List[Tuple[float, float]]
    page_number: int
    tool: DrawingTool = DrawingTool.PEN
    color: str = "#000000"
    stroke_width: float = 2
    opacity: float = 1.0
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        self.tool = DrawingTool(self.tool)


@dataclass
class DrawingShape:
    """Vector shape between two screen-space corners"""
    tool: ShapeType
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    page_number: int
    color: str = "#000000"
    stroke_width: float = 2
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        self.tool = ShapeType(self.tool)


@dataclass
class StickyNote:
    """Note glyph anchored at a screen-space point"""
    page_number: int
    x: float
    y: float
    content: str = ""
    author: Optional[str] = None
    color: Optional[str] = None


@dataclass
class LinkRect:
    """Screen-space rectangle, top-left corner + size"""
    x: float
    y: float
    width: float
    height: float


@dataclass
class LinkPlaceholder:
    """
    Result of a link call. Only the visual marker exists in the document;
    `interactive` is False because no clickable link object is written.
    """
    page_index: int
    rect: Tuple[float, float, float, float]  # document space x, y, width, height
    target: Any
    interactive: bool = False


@dataclass
class Redaction:
    """Screen-space region to destroy permanently"""
    page_number: int
    x: float
    y: float
    width: float
    height: float


@dataclass
class WatermarkConfig:
    type: WatermarkType = WatermarkType.TEXT
    text: str = "CONFIDENTIAL"
    image_data: Optional[str] = None
    font_size: float = 48
    opacity: float = 30  # percent, 0-100
    rotation: float = -45  # degrees, counter-clockwise positive
    position: WatermarkPosition = WatermarkPosition.CENTER
    color: str = "#9CA3AF"
    image_scale: float = 0.5

    def __post_init__(self):
        # Accept the plain keyword strings the UI sends
        self.type = WatermarkType(self.type)
        self.position = WatermarkPosition(self.position)


@dataclass
class HeaderFooterSlot:
    left: str = ""
    center: str = ""
    right: str = ""
    enabled: bool = False


@dataclass
class HeaderFooterConfig:
    header: HeaderFooterSlot = field(default_factory=HeaderFooterSlot)
    footer: HeaderFooterSlot = field(default_factory=lambda: HeaderFooterSlot(enabled=True))
    font_size: float = 10
    margin: float = 30
    date_format: str = "short"
