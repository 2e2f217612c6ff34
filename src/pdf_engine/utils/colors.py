"""
Color helpers
"""
import logging
from typing import Tuple

logger = logging.getLogger(__name__)

BLACK = (0.0, 0.0, 0.0)


def hex_to_rgb(hex_color: str, default: Tuple[float, float, float] = BLACK) -> Tuple[float, float, float]:
    """Convert hex color to RGB tuple (0-1 range), falling back to `default`"""
    if not isinstance(hex_color, str):
        return default

    value = hex_color.strip().lstrip('#')
    if len(value) == 3:
        value = ''.join(c * 2 for c in value)
    if len(value) != 6:
        logger.debug(f"Unparseable color {hex_color!r}, using default")
        return default

    try:
        return tuple(int(value[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    except ValueError:
        logger.debug(f"Unparseable color {hex_color!r}, using default")
        return default
