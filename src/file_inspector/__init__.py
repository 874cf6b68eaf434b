"""FileInspector package initialisation."""

__all__ = [
    "core",
    "byte_analysis",
    "text_analysis",
    "crypto_detection",
    "sources",
    "reporting",
    "shared",
    "conversion",
]
