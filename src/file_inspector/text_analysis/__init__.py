"""Analiza tekstu: wzorce (URL, e-mail, IP, base64) i zgadywanie kodowań."""

from .patterns import PatternSet, TextReport, analyze_text, detect_encodings, find_text_patterns

__all__ = ["PatternSet", "TextReport", "analyze_text", "detect_encodings", "find_text_patterns"]
