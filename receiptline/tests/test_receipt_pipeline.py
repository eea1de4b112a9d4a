"""Tests for the OCR boundary and the scan workflow."""

from __future__ import annotations

from decimal import Decimal
from importlib.util import find_spec
from pathlib import Path

import httpx
import pytest
from _pytest.monkeypatch import MonkeyPatch

from receiptline.application.receipts import scan as scan_workflow
from receiptline.runtime import receipt_pipeline
from receiptline.runtime.receipt_pipeline import (
    OCRServiceUnavailable,
    ReceiptBoundaryError,
    ReceiptFileUnreadable,
    call_ocr_service,
    get_ocr_url,
)

HAS_PIL = find_spec("PIL") is not None


def _line_blocks(lines: list[str]) -> dict:
    return {"Blocks": [{"BlockType": "PAGE"}] + [{"BlockType": "LINE", "Text": line} for line in lines]}


@pytest.fixture
def receipt_image(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    image_path = tmp_path / "receipt.jpg"
    image_path.write_bytes(b"fake-jpeg-bytes")
    monkeypatch.setattr(receipt_pipeline, "resize_image_bytes", lambda image_bytes: image_bytes)
    return image_path


def test_call_ocr_service_returns_line_texts(receipt_image: Path) -> None:
    seen: list[tuple[str, bytes]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((str(request.url), request.content))
        return httpx.Response(200, json=_line_blocks(["Robinson Malls", "Cash", "200.00"]))

    client = httpx.Client(transport=httpx.MockTransport(handler))

    lines = call_ocr_service(receipt_image, "http://ocr.test/", client=client)

    assert lines == ["Robinson Malls", "Cash", "200.00"]
    assert len(seen) == 1
    assert seen[0][0] == "http://ocr.test/detect-text"
    assert b"fake-jpeg-bytes" in seen[0][1]


def test_call_ocr_service_error_status_is_tagged(receipt_image: Path) -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(500, text="boom")))

    with pytest.raises(OCRServiceUnavailable) as exc_info:
        call_ocr_service(receipt_image, "http://ocr.test", client=client)

    assert exc_info.value.error_code == "OCR_FAILED"
    assert "500" in str(exc_info.value)


def test_call_ocr_service_connection_failure_is_tagged(receipt_image: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))

    with pytest.raises(OCRServiceUnavailable) as exc_info:
        call_ocr_service(receipt_image, "http://ocr.test", client=client)

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_call_ocr_service_rejects_non_json(receipt_image: Path) -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>")))

    with pytest.raises(OCRServiceUnavailable):
        call_ocr_service(receipt_image, "http://ocr.test", client=client)


def test_call_ocr_service_rejects_non_list_blocks(receipt_image: Path) -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"Blocks": None})))

    with pytest.raises(OCRServiceUnavailable) as exc_info:
        call_ocr_service(receipt_image, "http://ocr.test", client=client)

    assert "unexpected response shape" in str(exc_info.value)


def test_unreadable_file_is_tagged(tmp_path: Path) -> None:
    with pytest.raises(ReceiptFileUnreadable) as exc_info:
        call_ocr_service(tmp_path / "missing.jpg", "http://ocr.test")

    assert exc_info.value.error_code == "FILE_UNREADABLE"
    assert isinstance(exc_info.value, ReceiptBoundaryError)


@pytest.mark.skipif(not HAS_PIL, reason="Pillow not installed")
def test_undecodable_image_is_tagged(tmp_path: Path) -> None:
    image_path = tmp_path / "notes.jpg"
    image_path.write_bytes(b"this is not an image")

    with pytest.raises(ReceiptFileUnreadable):
        call_ocr_service(image_path, "http://ocr.test")


@pytest.mark.skipif(not HAS_PIL, reason="Pillow not installed")
def test_oversized_image_is_tagged(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    from PIL import Image

    image_path = tmp_path / "huge.png"
    Image.new("RGB", (100, 100), "white").save(image_path, format="PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    with pytest.raises(ReceiptFileUnreadable) as exc_info:
        call_ocr_service(image_path, "http://ocr.test")

    assert isinstance(exc_info.value.__cause__, Image.DecompressionBombError)


def test_get_ocr_url_reads_environment(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv("RECEIPTLINE_OCR_URL", raising=False)
    assert get_ocr_url() == "http://localhost:8001"

    monkeypatch.setenv("RECEIPTLINE_OCR_URL", "http://ocr.internal:9000")
    assert get_ocr_url() == "http://ocr.internal:9000"


def test_run_receipt_scan_interprets_detected_lines(
    tmp_path: Path, monkeypatch: MonkeyPatch, robinson_lines: list[str]
) -> None:
    image_path = tmp_path / "receipt.jpg"
    image_path.write_bytes(b"jpeg")
    monkeypatch.setattr(scan_workflow, "call_ocr_service", lambda path, url: list(robinson_lines))

    result = scan_workflow.run_receipt_scan(
        scan_workflow.ReceiptScanRequest(image_path=image_path, ocr_url="http://ocr.test")
    )

    assert result.status == "interpreted"
    assert not result.failed
    assert result.lines == tuple(robinson_lines)
    assert result.receipt is not None
    assert result.receipt.subtotal == Decimal("107.60")


def test_run_receipt_scan_raw_lines_only(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    image_path = tmp_path / "receipt.jpg"
    image_path.write_bytes(b"jpeg")
    monkeypatch.setattr(scan_workflow, "call_ocr_service", lambda path, url: ["Name"])

    result = scan_workflow.run_receipt_scan(
        scan_workflow.ReceiptScanRequest(image_path=image_path, ocr_url="http://ocr.test", interpret_lines=False)
    )

    assert result.status == "lines_detected"
    assert result.lines == ("Name",)
    assert result.receipt is None


def test_run_receipt_scan_missing_file(tmp_path: Path) -> None:
    result = scan_workflow.run_receipt_scan(
        scan_workflow.ReceiptScanRequest(image_path=tmp_path / "nope.jpg", ocr_url="http://ocr.test")
    )

    assert result.status == "file_not_found"
    assert result.failed
    assert result.receipt is None


def test_run_receipt_scan_surfaces_ocr_failure(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    image_path = tmp_path / "receipt.jpg"
    image_path.write_bytes(b"jpeg")

    def failing_ocr(path: Path, url: str) -> list[str]:
        raise OCRServiceUnavailable("OCR service error: 503")

    monkeypatch.setattr(scan_workflow, "call_ocr_service", failing_ocr)

    result = scan_workflow.run_receipt_scan(
        scan_workflow.ReceiptScanRequest(image_path=image_path, ocr_url="http://ocr.test")
    )

    assert result.status == "ocr_unavailable"
    assert result.error_code == "OCR_FAILED"
    assert result.receipt is None
