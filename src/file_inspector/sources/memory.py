"""Uchwyt pliku przechowywanego w pamięci (np. przesłanego przez warstwę UI)."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ReadError


@dataclass(frozen=True, slots=True)
class MemoryFileSource:
    name: str
    media_type: str
    content: bytes
    encoding: str = "utf-8"

    @property
    def size(self) -> int:
        return len(self.content)

    async def read_bytes(self) -> bytes:
        return bytes(self.content)

    async def read_text(self) -> str:
        try:
            return self.content.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ReadError(f"Nie udało się zdekodować pliku {self.name}: {exc}") from exc
