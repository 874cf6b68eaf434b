"""Próby odszyfrowania treści słownikiem popularnych haseł."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

import structlog

from .envelope import DecryptionError, decrypt

DEFAULT_KEYS: tuple[str, ...] = ("password", "secret", "key")

_logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DecryptionAttempt:
    """Wynik próby odszyfrowania jednym kluczem."""

    key: str
    plaintext: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return bool(self.plaintext)


@dataclass(frozen=True, slots=True)
class DecryptionReport:
    possible_decryptions: Dict[str, str]
    original_length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "possibleDecryptions": dict(self.possible_decryptions),
            "originalLength": self.original_length,
        }


def try_key(text: str, key: str) -> DecryptionAttempt:
    try:
        return DecryptionAttempt(key=key, plaintext=decrypt(text, key))
    except DecryptionError as exc:
        return DecryptionAttempt(key=key, error=str(exc))


def attempt_decryption(text: str, keys: Iterable[str] = DEFAULT_KEYS) -> DecryptionReport:
    """Próbuje każdego klucza i zbiera tylko niepuste, poprawnie odszyfrowane teksty.

    Nigdy nie zgłasza wyjątku: w najgorszym razie mapowanie jest puste.
    """

    attempts: List[DecryptionAttempt] = [try_key(text, key) for key in keys]

    decryptions: Dict[str, str] = {}
    for attempt in attempts:
        if attempt.succeeded:
            _logger.info("decryption-key-matched", key=attempt.key)
            decryptions[attempt.key] = attempt.plaintext  # type: ignore[assignment]
        else:
            _logger.debug("decryption-key-rejected", key=attempt.key, reason=attempt.error)

    return DecryptionReport(possible_decryptions=decryptions, original_length=len(text))


__all__ = ["DEFAULT_KEYS", "DecryptionAttempt", "DecryptionReport", "attempt_decryption", "try_key"]
