"""Interfejsy eksportu raportów."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from file_inspector.core.models import AnalysisResult


class ExportFormat(str, Enum):
    """Formaty eksportu raportów."""

    CSV = "csv"
    JSON = "json"


class ReportExporter(Protocol):
    """Interfejs dla mechanizmów eksportu."""

    def export(self, results: Sequence["AnalysisResult"], destination: Path, fmt: ExportFormat) -> Path:
        """Eksportuje wyniki do wybranego formatu i zwraca ścieżkę docelową."""
