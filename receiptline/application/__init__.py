"""Application workflows composing the OCR boundary and the interpreter."""
