"""Tests for OCR transformation helpers."""

import io
from importlib.util import find_spec

import pytest

from receiptline.receipt.ocr_helpers import lines_from_detection_result, resize_image_bytes

HAS_PIL = find_spec("PIL") is not None


def test_lines_keep_only_line_blocks_in_order() -> None:
    raw_result = {
        "DocumentMetadata": {"Pages": 1},
        "Blocks": [
            {"BlockType": "PAGE", "Id": "p1"},
            {"BlockType": "LINE", "Text": "Robinson Malls"},
            {"BlockType": "WORD", "Text": "Robinson"},
            {"BlockType": "WORD", "Text": "Malls"},
            {"BlockType": "LINE", "Text": "Caloocan City"},
            {"BlockType": "LINE", "Text": "Robinson Malls"},
        ],
    }

    assert lines_from_detection_result(raw_result) == ["Robinson Malls", "Caloocan City", "Robinson Malls"]


def test_lines_with_missing_text_become_empty_strings() -> None:
    raw_result = {"Blocks": [{"BlockType": "LINE"}, {"BlockType": "LINE", "Text": None}, "garbage"]}

    assert lines_from_detection_result(raw_result) == ["", ""]


def test_no_blocks_means_no_lines() -> None:
    assert lines_from_detection_result({}) == []


@pytest.mark.skipif(not HAS_PIL, reason="Pillow not installed")
def test_resize_image_bytes_limits_largest_dimension() -> None:
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (400, 100), "white").save(buffer, format="PNG")

    resized = resize_image_bytes(buffer.getvalue(), max_dimension=200)

    img = Image.open(io.BytesIO(resized))
    assert img.format == "JPEG"
    assert img.size == (200, 50)


@pytest.mark.skipif(not HAS_PIL, reason="Pillow not installed")
def test_resize_image_bytes_keeps_small_images() -> None:
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("L", (120, 80), 255).save(buffer, format="PNG")

    img = Image.open(io.BytesIO(resize_image_bytes(buffer.getvalue())))
    assert img.size == (120, 80)
