"""Modele danych używane w rdzeniu aplikacji."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class AnalysisKind(str, Enum):
    """Rodzaj wyniku analizy pojedynczego pliku."""

    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    ENCRYPTED = "encrypted"
    ERROR = "error"


def _freeze(value: Any) -> Any:
    """Zamienia zagnieżdżone słowniki i listy na widoki tylko do odczytu i krotki."""

    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Wynik analizy pojedynczego pliku.

    Dla rodzaju ``error`` pole ``data`` zawiera komunikat tekstowy,
    dla pozostałych rodzajów mapowanie o kształcie zależnym od ``kind``.
    Dane strukturalne są zamrażane: listy stają się krotkami, słowniki
    widokami ``MappingProxyType``.
    """

    file_name: str
    kind: AnalysisKind
    data: str | Mapping[str, Any]

    def __post_init__(self) -> None:
        if self.kind is AnalysisKind.ERROR:
            if not isinstance(self.data, str):
                raise ValueError("Wynik typu error wymaga komunikatu tekstowego")
            return
        if isinstance(self.data, str):
            raise ValueError(f"Wynik typu {self.kind.value} wymaga danych strukturalnych")
        object.__setattr__(self, "data", _freeze(self.data))

    @property
    def is_error(self) -> bool:
        return self.kind is AnalysisKind.ERROR

    @classmethod
    def failure(cls, file_name: str, message: str) -> "AnalysisResult":
        """Tworzy wynik błędu z czytelnym komunikatem."""

        return cls(file_name=file_name, kind=AnalysisKind.ERROR, data=message)

    def to_dict(self) -> dict[str, Any]:
        """Zwraca zwykłą, modyfikowalną kopię wyniku (np. do serializacji JSON)."""

        return {"fileName": self.file_name, "kind": self.kind.value, "data": _thaw(self.data)}
