"""Koperta szyfrogramu w formacie OpenSSL ("Salted__").

Format: base64(``b"Salted__"`` + sól (8 B) + szyfrogram). Klucz i wektor IV
są wyprowadzane z hasła schematem EVP_BytesToKey (MD5, jedna iteracja),
szyfr AES-256-CBC z dopełnieniem PKCS#7.
"""

from __future__ import annotations

import base64
import binascii
import os

from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

SALT_HEADER = b"Salted__"
SALT_LENGTH = 8
KEY_LENGTH = 32
IV_LENGTH = 16
BLOCK_SIZE_BITS = 128


class DecryptionError(ValueError):
    """Nie udało się odszyfrować koperty podanym hasłem."""


def _md5(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.MD5())
    digest.update(data)
    return digest.finalize()


def derive_key_and_iv(passphrase: bytes, salt: bytes) -> tuple[bytes, bytes]:
    """Wyprowadza klucz i IV zgodnie z EVP_BytesToKey (MD5)."""

    derived = b""
    block = b""
    while len(derived) < KEY_LENGTH + IV_LENGTH:
        block = _md5(block + passphrase + salt)
        derived += block
    return derived[:KEY_LENGTH], derived[KEY_LENGTH : KEY_LENGTH + IV_LENGTH]


def encrypt(plaintext: str, passphrase: str, *, salt: bytes | None = None) -> str:
    """Szyfruje tekst hasłem i zwraca kopertę zakodowaną w base64."""

    salt = os.urandom(SALT_LENGTH) if salt is None else salt
    if len(salt) != SALT_LENGTH:
        raise ValueError(f"Sól musi mieć {SALT_LENGTH} bajtów")

    key, iv = derive_key_and_iv(passphrase.encode("utf-8"), salt)
    padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
    padded = padder.update(plaintext.encode("utf-8")) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return base64.b64encode(SALT_HEADER + salt + ciphertext).decode("ascii")


def _split_envelope(envelope: str) -> tuple[bytes, bytes]:
    try:
        raw = base64.b64decode(envelope.strip())
    except (binascii.Error, ValueError) as exc:
        raise DecryptionError(f"Niepoprawne kodowanie base64: {exc}") from exc

    if not raw.startswith(SALT_HEADER):
        raise DecryptionError("Brak nagłówka Salted__")

    salt = raw[len(SALT_HEADER) : len(SALT_HEADER) + SALT_LENGTH]
    ciphertext = raw[len(SALT_HEADER) + SALT_LENGTH :]
    if len(salt) != SALT_LENGTH or not ciphertext or len(ciphertext) % (BLOCK_SIZE_BITS // 8):
        raise DecryptionError("Uszkodzona koperta szyfrogramu")
    return salt, ciphertext


def decrypt(envelope: str, passphrase: str) -> str:
    """Odszyfrowuje kopertę; każdy błąd zgłaszany jest jako ``DecryptionError``."""

    salt, ciphertext = _split_envelope(envelope)

    try:
        key, iv = derive_key_and_iv(passphrase.encode("utf-8"), salt)
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except ValueError as exc:
        raise DecryptionError(str(exc) or exc.__class__.__name__) from exc


__all__ = ["DecryptionError", "decrypt", "derive_key_and_iv", "encrypt"]
