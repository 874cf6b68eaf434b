"""Konwersja pojedynczej wartości między reprezentacjami liczbowymi i tekstem.

Niepoprawne dane wejściowe nie zgłaszają wyjątku: ``convert`` zwraca wtedy
``None`` i wywołujący traktuje to jako błędną wartość.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum

_NON_BINARY = re.compile(r"[^01]")
_NON_HEX = re.compile(r"[^0-9A-Fa-f]")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class InputType(str, Enum):
    TEXT = "text"
    BINARY = "binary"
    DECIMAL = "decimal"
    HEX = "hex"


@dataclass(frozen=True, slots=True)
class ConversionResult:
    binary: str
    decimal: str
    hexadecimal: str
    ascii: str
    text: str


def _parse(value: str, input_type: InputType) -> int | None:
    if input_type is InputType.BINARY:
        digits = _NON_BINARY.sub("", value)
        return int(digits, 2) if digits else None
    if input_type is InputType.HEX:
        digits = _NON_HEX.sub("", value)
        return int(digits, 16) if digits else None
    if input_type is InputType.DECIMAL:
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return ord(value[0])


def convert(value: str, input_type: InputType | str = InputType.TEXT) -> ConversionResult | None:
    """Zwraca wszystkie reprezentacje wartości lub ``None`` dla błędnych danych."""

    if not value.strip():
        return None
    try:
        kind = InputType(input_type)
    except ValueError:
        return None

    number = _parse(value, kind)
    if number is None or not 0 <= number <= sys.maxunicode:
        return None

    char = chr(number)
    if kind is InputType.TEXT and len(value) > 1:
        codes = [ord(ch) for ch in value]
        return ConversionResult(
            binary=" ".join(format(code, "08b") for code in codes),
            decimal=" ".join(str(code) for code in codes),
            hexadecimal=" ".join(format(code, "X") for code in codes),
            ascii=char,
            text=value,
        )

    return ConversionResult(
        binary=format(number, "08b"),
        decimal=str(number),
        hexadecimal=format(number, "X"),
        ascii=char,
        text=char,
    )


__all__ = ["ConversionResult", "InputType", "convert"]
