"""Moduły współdzielone: konfiguracja i logowanie."""

from .config import AppConfig
from .logging import configure_logging

__all__ = [
	"AppConfig",
	"configure_logging",
]
