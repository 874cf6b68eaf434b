"""Interfejs bazowy dla uchwytów analizowanych plików."""

from __future__ import annotations

from typing import Protocol


class ReadError(RuntimeError):
    """Nie udało się odczytać lub zdekodować zawartości pliku."""


class FileSource(Protocol):
    """Minimalny interfejs pliku przekazywanego do analizy."""

    name: str
    media_type: str

    @property
    def size(self) -> int:
        """Rozmiar pliku w bajtach."""

    async def read_bytes(self) -> bytes:
        """Czyta całą zawartość pliku jako bajty."""

    async def read_text(self) -> str:
        """Czyta całą zawartość pliku i dekoduje ją jako tekst."""
