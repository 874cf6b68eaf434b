"""Moduły odpowiedzialne za wykrywanie i próby łamania szyfrowania."""

from .decryptor import DEFAULT_KEYS, DecryptionAttempt, DecryptionReport, attempt_decryption
from .envelope import DecryptionError, decrypt, encrypt
from .heuristics import is_encrypted

__all__ = [
	"DEFAULT_KEYS",
	"DecryptionAttempt",
	"DecryptionReport",
	"DecryptionError",
	"attempt_decryption",
	"decrypt",
	"encrypt",
	"is_encrypted",
]
