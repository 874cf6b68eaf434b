"""Domyślna implementacja eksportu raportów (CSV/JSON)."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Sequence

from .exporter import ExportFormat, ReportExporter

if TYPE_CHECKING:
    from file_inspector.core.models import AnalysisResult

CSV_COLUMNS = ("file_name", "kind", "summary")


class DefaultReportExporter(ReportExporter):
    """Eksporter zapisujący wyniki analizy do plików CSV lub JSON."""

    def export(self, results: Sequence["AnalysisResult"], destination: Path, fmt: ExportFormat) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)

        if fmt is ExportFormat.JSON:
            payload = self._build_json_payload(results)
            destination.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        elif fmt is ExportFormat.CSV:
            self._write_csv(results, destination)
        else:  # pragma: no cover - obsługa przyszłych formatów
            raise ValueError(f"Nieobsługiwany format eksportu: {fmt}")

        return destination

    @staticmethod
    def _build_json_payload(results: Sequence["AnalysisResult"]) -> List[Dict[str, object]]:
        return [result.to_dict() for result in results]

    def _write_csv(self, results: Sequence["AnalysisResult"], destination: Path) -> None:
        with destination.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(CSV_COLUMNS)
            for result in results:
                writer.writerow([result.file_name, result.kind.value, self._summary(result)])

    @staticmethod
    def _summary(result: "AnalysisResult") -> str:
        if isinstance(result.data, str):
            return result.data
        return json.dumps(result.to_dict()["data"], ensure_ascii=False, separators=(",", ":"), sort_keys=True)
