"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Convert between units of ten everyday categories with magnitude-aware formatting.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
}


__all__ = ["manifest"]
