"""
Tests for color parsing, image payload decoding and model coercion
"""
import pytest

from pdf_engine.core.errors import DecodeError
from pdf_engine.core.models import (
    DrawingPath,
    DrawingTool,
    TextAnnotation,
    WatermarkConfig,
    WatermarkPosition,
    WatermarkType,
)
from pdf_engine.utils.colors import hex_to_rgb
from pdf_engine.utils.images import declared_format, decode_image_payload

from conftest import encode_image


class TestColors:
    def test_six_digit(self):
        assert hex_to_rgb("#FF0000") == (1.0, 0.0, 0.0)

    def test_three_digit(self):
        assert hex_to_rgb("#0f0") == (0.0, 1.0, 0.0)

    @pytest.mark.parametrize("value", ["", "#12", "#GGGGGG", None, 42])
    def test_unparseable_is_black(self, value):
        assert hex_to_rgb(value) == (0.0, 0.0, 0.0)


class TestImages:
    def test_declared_format(self):
        assert declared_format("data:image/png;base64,AAAA") == "PNG"
        assert declared_format("data:image/jpg;base64,AAAA") == "JPEG"
        assert declared_format("AAAA") is None

    def test_sniffs_undeclared_payload(self):
        raw, image = decode_image_payload(encode_image("JPEG"))
        assert image.format == "JPEG"
        assert raw[:2] == b"\xff\xd8"

    def test_rejects_other_formats(self):
        with pytest.raises(DecodeError):
            decode_image_payload(encode_image("GIF"))

    def test_rejects_mismatched_declaration(self):
        with pytest.raises(DecodeError):
            decode_image_payload("data:image/png;base64," + encode_image("JPEG"))


class TestModels:
    def test_watermark_keywords_are_coerced(self):
        config = WatermarkConfig(type="image", position="bottom-left")
        assert config.type is WatermarkType.IMAGE
        assert config.position is WatermarkPosition.BOTTOM_LEFT

    @pytest.mark.parametrize("position, vertical, horizontal", [
        (WatermarkPosition.CENTER, "center", "center"),
        (WatermarkPosition.TOP_RIGHT, "top", "right"),
        (WatermarkPosition.CENTER_LEFT, "center", "left"),
        (WatermarkPosition.BOTTOM_CENTER, "bottom", "center"),
    ])
    def test_position_bands(self, position, vertical, horizontal):
        assert position.vertical == vertical
        assert position.horizontal == horizontal

    def test_drawing_tool_coerced(self):
        assert DrawingPath(points=[], page_number=1, tool="highlighter").tool is DrawingTool.HIGHLIGHTER

    def test_text_annotation_dict(self):
        annotation = TextAnnotation(text="Hi", x=1, y=2, page_number=1, bold=True)
        assert TextAnnotation.from_dict(annotation.to_dict()) == annotation
