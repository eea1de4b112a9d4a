"""Pure OCR transformation helpers for receipt interpretation."""

import io
from typing import Any

MAX_IMAGE_DIMENSION = 3000  # Resize if either dimension exceeds this
LINE_BLOCK_TYPE = "LINE"


def resize_image_bytes(image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION) -> bytes:
    """
    Resize image bytes if it exceeds max_dimension on either side.

    Args:
        image_bytes: Image data as bytes
        max_dimension: Maximum allowed dimension (width or height)

    Returns:
        Image bytes (JPEG format), resized if necessary
    """
    from PIL import Image, ImageOps

    img = Image.open(io.BytesIO(image_bytes))

    # Apply EXIF orientation so the OCR service reads the receipt upright
    img = ImageOps.exif_transpose(img)

    width, height = img.size

    if width > max_dimension or height > max_dimension:
        if width > height:
            new_width = max_dimension
            new_height = int(height * (max_dimension / width))
        else:
            new_height = max_dimension
            new_width = int(width * (max_dimension / height))
        img = img.resize((new_width, new_height), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    img.convert("RGB").save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def lines_from_detection_result(raw_result: dict[str, Any]) -> list[str]:
    """
    Extract text lines from a document-text-detection response.

    Only ``LINE`` blocks are kept (``PAGE`` and ``WORD`` blocks are layout
    detail the interpreter does not use), in the order the service returned
    them.
    """
    lines: list[str] = []
    for block in raw_result.get("Blocks", []):
        if not isinstance(block, dict) or block.get("BlockType") != LINE_BLOCK_TYPE:
            continue
        text = block.get("Text")
        lines.append(text if isinstance(text, str) else "")
    return lines
