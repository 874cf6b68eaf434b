"""Wyszukiwanie wzorców w zdekodowanym tekście.

Każda kategoria (URL, e-mail, adres IPv4, token base64) jest wyszukiwana
niezależnie, więc ten sam fragment może trafić do kilku kategorii. Adresy IP
nie są walidowane zakresowo: ``999.999.999.999`` również pasuje.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

URL_PATTERN = re.compile(r"https?://[^\s]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
IPV4_PATTERN = re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b", re.ASCII)
BASE64_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9+/]{32,}={0,2}")

_BASE64_TEXT = re.compile(r"[A-Za-z0-9+/]*={0,2}")
_HEX_TEXT = re.compile(r"[0-9a-fA-F]+")
_URL_ESCAPE_PREFIX = re.compile(r"%[0-9a-fA-F]{2}")


@dataclass(frozen=True, slots=True)
class PatternSet:
    """Dopasowania wzorców w tekście, w kolejności wystąpienia."""

    urls: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    ip_addresses: List[str] = field(default_factory=list)
    base64_strings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "urls": list(self.urls),
            "emails": list(self.emails),
            "ipAddresses": list(self.ip_addresses),
            "base64Strings": list(self.base64_strings),
        }


@dataclass(frozen=True, slots=True)
class TextReport:
    """Wynik analizy pliku tekstowego."""

    length: int
    lines: int
    patterns: PatternSet
    possible_encodings: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": self.length,
            "lines": self.lines,
            "patterns": self.patterns.to_dict(),
            "possibleEncodings": list(self.possible_encodings),
        }


def find_text_patterns(text: str) -> PatternSet:
    return PatternSet(
        urls=URL_PATTERN.findall(text),
        emails=EMAIL_PATTERN.findall(text),
        ip_addresses=IPV4_PATTERN.findall(text),
        base64_strings=BASE64_TOKEN_PATTERN.findall(text),
    )


def detect_encodings(text: str) -> List[str]:
    """Zgaduje kodowanie na podstawie całego tekstu.

    Heurystyki są niezależne: wynik może być pusty albo zawierać kilka
    nazw naraz (np. ``"cafe"`` to zarówno poprawny base64, jak i hex).
    """

    encodings: List[str] = []
    if _BASE64_TEXT.fullmatch(text):
        encodings.append("base64")
    if _HEX_TEXT.fullmatch(text):
        encodings.append("hex")
    if _URL_ESCAPE_PREFIX.match(text):
        encodings.append("url-encoded")
    return encodings


def count_lines(text: str) -> int:
    return len(text.split("\n"))


def analyze_text(text: str) -> TextReport:
    return TextReport(
        length=len(text),
        lines=count_lines(text),
        patterns=find_text_patterns(text),
        possible_encodings=detect_encodings(text),
    )


__all__ = [
    "PatternSet",
    "TextReport",
    "analyze_text",
    "count_lines",
    "detect_encodings",
    "find_text_patterns",
]
