"""Unified command-line interface for receiptline.

Usage:
    receiptline interpret lines.txt
    receiptline interpret - --summary < lines.txt
    receiptline scan <image> [--ocr-url URL] [--defaults receiptline.toml]
    receiptline raw-text <image>
"""
