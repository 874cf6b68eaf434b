"""Klasyfikacja surowych danych binarnych.

Czyste funkcje operujące na buforze bajtów: wyciąganie ciągów drukowalnych,
zliczanie serii powtórzeń oraz rozpoznawanie formatu po nagłówku.

Uwaga: ``extract_strings`` nie emituje ciągu, który dochodzi do końca bufora.
To zachowanie jest celowo utrzymywane dla zgodności wyników.
Inaczej niż tam, ``count_sequences`` i ``find_repeating_bytes`` uwzględniają
serię kończącą się na ostatnim bajcie bufora.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

PRINTABLE_MIN = 32
PRINTABLE_MAX = 126
MIN_STRING_LENGTH = 4
MIN_SEQUENCE_LENGTH = 4
MIN_REPEAT_LENGTH = 5
HEADER_LENGTH = 8
UNKNOWN_FORMAT = "Unknown"


@dataclass(frozen=True, slots=True)
class MediaMetadata:
    header: str
    possible_format: str

    def to_dict(self) -> Dict[str, Any]:
        return {"header": self.header, "possibleFormat": self.possible_format}


@dataclass(frozen=True, slots=True)
class HiddenData:
    """Sygnały potencjalnie ukrytych danych w buforze."""

    strings: List[str] = field(default_factory=list)
    null_sequences: int = 0
    repeating_bytes: Dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strings": list(self.strings),
            "patterns": {
                "nullSequences": self.null_sequences,
                "repeatingBytes": dict(self.repeating_bytes),
            },
        }


@dataclass(frozen=True, slots=True)
class MediaReport:
    """Wynik analizy pliku graficznego lub dźwiękowego."""

    size: int
    media_type: str
    metadata: MediaMetadata
    hidden_data: HiddenData

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "type": self.media_type,
            "metadata": self.metadata.to_dict(),
            "hiddenData": self.hidden_data.to_dict(),
        }


def _is_printable(value: int) -> bool:
    return PRINTABLE_MIN <= value <= PRINTABLE_MAX


def extract_strings(data: bytes, *, min_length: int = MIN_STRING_LENGTH) -> List[str]:
    """Zwraca unikalne ciągi drukowalnego ASCII w kolejności pierwszego wystąpienia."""

    found: dict[str, None] = {}
    current = bytearray()

    for byte in data:
        if _is_printable(byte):
            current.append(byte)
            continue
        if len(current) >= min_length:
            found.setdefault(current.decode("ascii"), None)
        current.clear()

    return list(found)


def count_sequences(data: bytes, target: int, *, min_length: int = MIN_SEQUENCE_LENGTH) -> int:
    """Liczy rozłączne serie bajtu ``target`` o długości co najmniej ``min_length``."""

    sequences = 0
    run = 0
    for byte in data:
        if byte == target:
            run += 1
            continue
        if run >= min_length:
            sequences += 1
        run = 0

    if run >= min_length:
        sequences += 1
    return sequences


def find_repeating_bytes(data: bytes, *, min_length: int = MIN_REPEAT_LENGTH) -> Dict[int, int]:
    """Mapuje wartość bajtu na długość jego serii (ostatnia kwalifikująca się seria wygrywa)."""

    repetitions: Dict[int, int] = {}
    if not data:
        return repetitions

    last = data[0]
    run = 1
    for byte in data[1:]:
        if byte == last:
            run += 1
            continue
        if run >= min_length:
            repetitions[last] = run
        last = byte
        run = 1

    if run >= min_length:
        repetitions[last] = run
    return repetitions


def header_hex(data: bytes, *, length: int = HEADER_LENGTH) -> str:
    return bytes(data[:length]).hex()


def detect_format(data: bytes, signatures: Mapping[str, str]) -> str:
    """Dopasowuje nagłówek bufora do tabeli sygnatur (pierwsze trafienie wygrywa)."""

    header = header_hex(data)
    for prefix, name in signatures.items():
        if header.startswith(prefix):
            return name
    return UNKNOWN_FORMAT


def extract_metadata(data: bytes, signatures: Mapping[str, str]) -> MediaMetadata:
    return MediaMetadata(header=header_hex(data), possible_format=detect_format(data, signatures))


def search_for_hidden_data(data: bytes) -> HiddenData:
    return HiddenData(
        strings=extract_strings(data),
        null_sequences=count_sequences(data, 0),
        repeating_bytes=find_repeating_bytes(data),
    )


def analyze_media(data: bytes, *, media_type: str, signatures: Mapping[str, str], size: int | None = None) -> MediaReport:
    """Buduje pełny raport dla pliku multimedialnego."""

    return MediaReport(
        size=len(data) if size is None else size,
        media_type=media_type,
        metadata=extract_metadata(data, signatures),
        hidden_data=search_for_hidden_data(data),
    )


__all__ = [
    "HiddenData",
    "MediaMetadata",
    "MediaReport",
    "UNKNOWN_FORMAT",
    "analyze_media",
    "count_sequences",
    "detect_format",
    "extract_metadata",
    "extract_strings",
    "find_repeating_bytes",
    "header_hex",
    "search_for_hidden_data",
]
