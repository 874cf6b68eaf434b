"""Konfiguracja aplikacji."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from file_inspector.crypto_detection.decryptor import DEFAULT_KEYS

DEFAULT_MAX_CONCURRENCY = 8


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Konfiguracja ogólna aplikacji."""

    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    candidate_keys: tuple[str, ...] = DEFAULT_KEYS
    signatures_path: Path | None = None

    @classmethod
    def default(cls) -> "AppConfig":
        """Tworzy domyślną konfigurację."""

        return cls()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Tworzy konfigurację na podstawie zmiennych środowiskowych.

        Obsługiwane zmienne:
        - ``FILEINSPECTOR_MAX_CONCURRENCY`` – liczba równoległych analiz (> 0)
        - ``FILEINSPECTOR_KEYS`` – lista haseł oddzielonych przecinkami
        - ``FILEINSPECTOR_SIGNATURES`` – ścieżka do własnego pliku sygnatur

        Niepoprawne wartości są ignorowane (zostaje wartość domyślna).
        """

        max_concurrency = DEFAULT_MAX_CONCURRENCY
        raw = (os.getenv("FILEINSPECTOR_MAX_CONCURRENCY") or "").strip()
        if raw.isdigit() and int(raw) > 0:
            max_concurrency = int(raw)

        keys = tuple(
            key.strip() for key in (os.getenv("FILEINSPECTOR_KEYS") or "").split(",") if key.strip()
        )

        signatures = (os.getenv("FILEINSPECTOR_SIGNATURES") or "").strip()

        return cls(
            max_concurrency=max_concurrency,
            candidate_keys=keys or DEFAULT_KEYS,
            signatures_path=Path(signatures) if signatures else None,
        )
