"""Receipt scan workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from receiptline.receipt.defaults import DEFAULT_RECEIPT_DEFAULTS, ReceiptDefaults
from receiptline.receipt.interpreter import interpret
from receiptline.runtime import get_logger
from receiptline.runtime.receipt_pipeline import ReceiptBoundaryError, call_ocr_service

if TYPE_CHECKING:
    from receiptline.domain.receipt import Receipt

logger = get_logger(__name__)

ScanStatus = Literal[
    "file_not_found",
    "file_unreadable",
    "ocr_unavailable",
    "lines_detected",
    "interpreted",
]

_STATUS_BY_ERROR_CODE: dict[str, ScanStatus] = {
    "FILE_UNREADABLE": "file_unreadable",
    "OCR_FAILED": "ocr_unavailable",
}


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for running receipt scan workflow."""

    image_path: Path
    ocr_url: str
    interpret_lines: bool = True
    defaults: ReceiptDefaults = DEFAULT_RECEIPT_DEFAULTS


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from receipt scan workflow."""

    status: ScanStatus
    lines: tuple[str, ...] = ()
    receipt: Receipt | None = None
    error: str | None = None
    error_code: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow: OCR -> interpret (unless only raw lines were requested)."""
    if not request.image_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.image_path}",
            error_code="FILE_NOT_FOUND",
        )

    try:
        lines = tuple(call_ocr_service(request.image_path, request.ocr_url))
    except ReceiptBoundaryError as exc:
        logger.error("[%s] %s", exc.error_code, exc)
        return ReceiptScanResult(
            status=_STATUS_BY_ERROR_CODE.get(exc.error_code, "ocr_unavailable"),
            error=str(exc),
            error_code=exc.error_code,
        )

    if not request.interpret_lines:
        return ReceiptScanResult(status="lines_detected", lines=lines)

    receipt = interpret(lines, defaults=request.defaults)
    logger.info("Interpreted %s with %d items", receipt.merchant_name, len(receipt.items))
    return ReceiptScanResult(status="interpreted", lines=lines, receipt=receipt)
