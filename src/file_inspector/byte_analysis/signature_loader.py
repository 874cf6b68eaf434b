"""Ładowanie tabel sygnatur formatów (magic numbers).

Tabele są zasobem pakietu (`format_signatures.json`) podzielonym na grupy
(``image``, ``audio``). Kolejność wpisów w grupie jest istotna: przy
wykrywaniu formatu wygrywa pierwszy pasujący prefiks.
"""

from __future__ import annotations

import json
import string
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping

_DATA_PACKAGE = "file_inspector.data"
_DEFAULT_FILE = "format_signatures.json"

IMAGE_GROUP = "image"
AUDIO_GROUP = "audio"


class SignatureConfigError(ValueError):
    """Niepoprawna definicja sygnatury w pliku konfiguracyjnym."""


@dataclass(frozen=True, slots=True)
class FormatSignature:
    """Prefiks heksadecymalny nagłówka przypisany do nazwy formatu."""

    prefix: str
    name: str

    def matches(self, header: str) -> bool:
        return header.startswith(self.prefix)


def _load_raw_config(path: Path | None = None) -> dict:
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as handle:
            return json.load(handle)
    with resources.files(_DATA_PACKAGE).joinpath(_DEFAULT_FILE).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _parse_signature(raw: dict) -> FormatSignature:
    try:
        prefix = str(raw["prefix"]).strip().lower()
        name = str(raw["name"]).strip()
    except (KeyError, TypeError) as exc:
        raise SignatureConfigError(f"Niekompletna definicja sygnatury: {raw!r}") from exc

    if not prefix or len(prefix) % 2 or any(ch not in string.hexdigits for ch in prefix):
        raise SignatureConfigError(f"Niepoprawny prefiks sygnatury: {prefix!r}")
    if not name:
        raise SignatureConfigError(f"Brak nazwy formatu dla prefiksu {prefix!r}")
    return FormatSignature(prefix=prefix, name=name)


def _parse_group(entries: Iterable[dict]) -> List[FormatSignature]:
    return [_parse_signature(entry) for entry in entries]


def as_table(signatures: Iterable[FormatSignature]) -> Mapping[str, str]:
    """Zamienia listę sygnatur na niemodyfikowalne mapowanie prefiks -> format."""

    table: dict[str, str] = {}
    for signature in signatures:
        table.setdefault(signature.prefix, signature.name)
    return MappingProxyType(table)


def load_signatures(path: Path | None = None) -> dict[str, Mapping[str, str]]:
    """Wczytuje wszystkie grupy sygnatur z zasobu pakietu lub wskazanego pliku."""

    raw_config = _load_raw_config(path)
    if not isinstance(raw_config, dict):
        raise SignatureConfigError("Plik sygnatur musi zawierać obiekt z grupami")
    return {group: as_table(_parse_group(entries)) for group, entries in raw_config.items()}


@lru_cache(maxsize=1)
def load_default_signatures() -> Mapping[str, Mapping[str, str]]:
    """Wczytuje i cache'uje sygnatury z zasobu pakietu."""

    return MappingProxyType(load_signatures())


def image_signatures() -> Mapping[str, str]:
    return load_default_signatures()[IMAGE_GROUP]


def audio_signatures() -> Mapping[str, str]:
    return load_default_signatures()[AUDIO_GROUP]


__all__ = [
    "AUDIO_GROUP",
    "IMAGE_GROUP",
    "FormatSignature",
    "SignatureConfigError",
    "as_table",
    "audio_signatures",
    "image_signatures",
    "load_default_signatures",
    "load_signatures",
]
