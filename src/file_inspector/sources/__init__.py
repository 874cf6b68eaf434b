"""Uchwyty plików dostarczanych do analizy (pamięć, lokalny dysk)."""

from .base import FileSource, ReadError
from .local import LocalFileSource, guess_media_type
from .memory import MemoryFileSource

__all__ = ["FileSource", "ReadError", "LocalFileSource", "MemoryFileSource", "guess_media_type"]
