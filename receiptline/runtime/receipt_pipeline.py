"""Runtime helpers for the receipt OCR boundary (non-interpreting)."""

import os
import time
from pathlib import Path

import httpx

from receiptline.receipt.ocr_helpers import lines_from_detection_result, resize_image_bytes
from receiptline.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_OCR_URL = "http://localhost:8001"
OCR_TIMEOUT_SECONDS = 60.0


def get_ocr_url() -> str:
    """OCR service URL from RECEIPTLINE_OCR_URL, or the local default."""
    return os.environ.get("RECEIPTLINE_OCR_URL", DEFAULT_OCR_URL)


class ReceiptBoundaryError(RuntimeError):
    """Raised when lines could not be produced for interpretation."""

    error_code = "BOUNDARY_ERROR"


class ReceiptFileUnreadable(ReceiptBoundaryError):
    """Raised when the receipt image cannot be read or decoded."""

    error_code = "FILE_UNREADABLE"


class OCRServiceUnavailable(ReceiptBoundaryError):
    """Raised when the OCR service cannot be reached or returns an error."""

    error_code = "OCR_FAILED"


def read_receipt_image(receipt_path: Path) -> bytes:
    """Read and normalize a receipt image for upload."""
    try:
        image_bytes = receipt_path.read_bytes()
    except OSError as e:
        raise ReceiptFileUnreadable(f"Failed to read file: {receipt_path}") from e

    from PIL import Image

    try:
        return resize_image_bytes(image_bytes)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        # PIL raises UnidentifiedImageError (an OSError) for non-image payloads
        raise ReceiptFileUnreadable(f"Failed to decode image: {receipt_path}") from e


def call_ocr_service(receipt_path: Path, ocr_url: str, client: httpx.Client | None = None) -> list[str]:
    """
    Send a receipt image to the OCR service and return its text lines.

    Args:
        receipt_path: Image file to upload
        ocr_url: Base URL of the document-text-detection service
        client: Optional preconfigured httpx client

    Returns:
        OCR text lines in reading order

    Raises:
        ReceiptFileUnreadable: if the image cannot be read
        OCRServiceUnavailable: if the service is unreachable or fails
    """
    image_bytes = read_receipt_image(receipt_path)

    ocr_url = ocr_url.rstrip("/")
    logger.info("Sending receipt to OCR service at %s...", ocr_url)

    owns_client = client is None
    http = client if client is not None else httpx.Client(timeout=OCR_TIMEOUT_SECONDS)
    try:
        start_time = time.time()
        response = http.post(
            f"{ocr_url}/detect-text",
            files={"file": (receipt_path.name, image_bytes, "image/jpeg")},
        )
        elapsed_time = time.time() - start_time
        logger.info("OCR service returned in %.2f seconds", elapsed_time)

        if response.status_code != 200:
            logger.error("OCR service error: %s", response.status_code)
            raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

        try:
            raw_result = response.json()
        except ValueError as e:
            raise OCRServiceUnavailable("OCR service returned invalid JSON") from e
        if not isinstance(raw_result, dict) or not isinstance(raw_result.get("Blocks", []), list):
            raise OCRServiceUnavailable("OCR service returned an unexpected response shape")

        lines = lines_from_detection_result(raw_result)
        logger.debug("OCR service detected %d lines", len(lines))
        return lines

    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e
    finally:
        if owns_client:
            http.close()
