"""Uchwyt pliku z lokalnego systemu plików."""

from __future__ import annotations

import asyncio
import mimetypes
from pathlib import Path

from .base import ReadError

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(path: Path) -> str:
    media_type, _encoding = mimetypes.guess_type(path.name)
    return media_type or DEFAULT_MEDIA_TYPE


class LocalFileSource:
    """Plik na dysku; odczyt odbywa się w wątku roboczym."""

    def __init__(self, path: Path, *, media_type: str | None = None, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.name = self.path.name
        self.media_type = media_type or guess_media_type(self.path)
        self.encoding = encoding

    @property
    def size(self) -> int:
        try:
            return self.path.stat().st_size
        except OSError:
            return 0

    async def read_bytes(self) -> bytes:
        try:
            return await asyncio.to_thread(self.path.read_bytes)
        except OSError as exc:
            raise ReadError(f"Nie udało się odczytać pliku {self.path}: {exc}") from exc

    async def read_text(self) -> str:
        data = await self.read_bytes()
        try:
            return data.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ReadError(f"Nie udało się zdekodować pliku {self.path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"LocalFileSource(path={str(self.path)!r}, media_type={self.media_type!r})"
