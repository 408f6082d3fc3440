"""Unit detector plugin."""

manifest = {
    "title": "Unit Detector",
    "summary": "Find quantities with units in free text and convert a highlighted selection.",
    "blueprint": "unit_detector",
    "category": "General Utilities",
}


__all__ = ["manifest"]
