"""Heurystyczne wykrywanie zaszyfrowanej treści tekstowej.

Filtr jest zgrubny: długie identyfikatory heksadecymalne lub tokeny base64
również zostaną oznaczone jako potencjalnie zaszyfrowane.
"""

from __future__ import annotations

import re

ENVELOPE_MARKER = "U2F"
MIN_CIPHERTEXT_LENGTH = 32

_BASE64_CIPHERTEXT = re.compile(r"[A-Za-z0-9+/]{%d,}={0,2}" % MIN_CIPHERTEXT_LENGTH)
_HEX_CIPHERTEXT = re.compile(r"[0-9a-fA-F]{%d,}" % MIN_CIPHERTEXT_LENGTH)


def looks_like_base64_ciphertext(text: str) -> bool:
    return _BASE64_CIPHERTEXT.fullmatch(text) is not None


def looks_like_hex_ciphertext(text: str) -> bool:
    return _HEX_CIPHERTEXT.fullmatch(text) is not None


def has_envelope_marker(text: str) -> bool:
    """Sprawdza nagłówek koperty "Salted__" zakodowanej w base64."""

    return text.startswith(ENVELOPE_MARKER)


def is_encrypted(text: str) -> bool:
    return (
        looks_like_base64_ciphertext(text)
        or has_envelope_marker(text)
        or looks_like_hex_ciphertext(text)
    )


__all__ = [
    "ENVELOPE_MARKER",
    "has_envelope_marker",
    "is_encrypted",
    "looks_like_base64_ciphertext",
    "looks_like_hex_ciphertext",
]
