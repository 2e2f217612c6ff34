"""
Watermark Tool
Stamps a text or image watermark onto every page
"""
import logging
from typing import Tuple

import fitz  # PyMuPDF
from PIL import Image

from .base_tool import BaseTool, ToolType
from ..core.coordinates import page_height, to_page_point, to_page_rect
from ..core.models import WatermarkConfig, WatermarkPosition, WatermarkType
from ..utils.images import decode_image_payload, image_to_png

logger = logging.getLogger(__name__)

# Baseline offset that visually centers capital letters on the anchor
CAP_HEIGHT_RATIO = 0.35


def watermark_anchor(position: WatermarkPosition, width: float, height: float,
                     inset: float) -> Tuple[float, float]:
    """Document-space anchor point for a 9-way position keyword"""
    x = {
        "left": inset,
        "center": width / 2,
        "right": width - inset,
    }[position.horizontal]
    y = {
        "top": height - inset,
        "center": height / 2,
        "bottom": inset,
    }[position.vertical]
    return x, y


def opacity_fraction(percent: float) -> float:
    """0-100 percent to a 0.0-1.0 opacity"""
    return max(0.0, min(1.0, percent / 100.0))


class WatermarkTool(BaseTool):
    """Applies the same watermark to all pages"""

    def __init__(self, pdf_doc, settings=None):
        super().__init__(ToolType.WATERMARK, pdf_doc, settings)

    def add_watermark(self, config: WatermarkConfig) -> int:
        """Watermark every page; returns the number of pages stamped"""
        doc = self.pdf_doc.require()
        margin = self.settings.get('watermark.margin', 50)
        opacity = opacity_fraction(config.opacity)

        image_png, image_size = None, (0.0, 0.0)
        if config.type == WatermarkType.IMAGE:
            image_png, image_size = self._prepare_image(config, opacity)

        for page in doc:
            width, height = page.cropbox.width, page_height(page)
            anchor = watermark_anchor(config.position, width, height, margin + config.font_size)
            if image_png is not None:
                self._stamp_image(page, anchor, image_png, image_size)
            else:
                self._stamp_text(page, anchor, config, opacity)

        logger.info(f"Added {config.type.value} watermark at {config.position.value} to {doc.page_count} page(s)")
        return doc.page_count

    def _stamp_text(self, page: fitz.Page, anchor: Tuple[float, float], config: WatermarkConfig, opacity: float):
        if not config.text or not config.text.strip():
            return
        text_width = self.text_width(config.text, config.font_size)
        ax, ay = anchor
        start = to_page_point(page, ax - text_width / 2, ay - config.font_size * CAP_HEIGHT_RATIO)

        page.insert_text(
            start,
            config.text,
            fontsize=config.font_size,
            fontname="helv",
            color=self.color(config.color),
            fill_opacity=opacity,
            stroke_opacity=opacity,
            # Counter-clockwise in document space is clockwise-negative in page space
            morph=(to_page_point(page, ax, ay), fitz.Matrix(-config.rotation)),
        )

    def _prepare_image(self, config: WatermarkConfig, opacity: float) -> Tuple[bytes, Tuple[float, float]]:
        """Fade and rotate the watermark image once; returns PNG bytes and its size in points"""
        _, image = decode_image_payload(config.image_data)
        image = image.convert("RGBA")

        alpha = image.getchannel("A").point(lambda a: int(a * opacity))
        image.putalpha(alpha)
        if config.rotation % 360:
            image = image.rotate(config.rotation, expand=True, resample=Image.Resampling.BICUBIC)

        scale = config.image_scale or self.settings.get('watermark.image_scale', 0.5)
        return image_to_png(image), (image.width * scale, image.height * scale)

    def _stamp_image(self, page: fitz.Page, anchor: Tuple[float, float], image_png: bytes,
                     size: Tuple[float, float]):
        ax, ay = anchor
        w, h = size
        page.insert_image(to_page_rect(page, ax - w / 2, ay - h / 2, w, h), stream=image_png)
