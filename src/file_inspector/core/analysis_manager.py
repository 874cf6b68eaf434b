"""Orkiestracja analizy plików: wybór ścieżki, izolacja błędów, przetwarzanie wsadowe."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import structlog
from structlog.stdlib import BoundLogger

from file_inspector.byte_analysis import analyze_media, load_default_signatures, load_signatures
from file_inspector.byte_analysis.signature_loader import AUDIO_GROUP, IMAGE_GROUP
from file_inspector.crypto_detection import attempt_decryption, is_encrypted
from file_inspector.reporting import ExportFormat, ReportExporter
from file_inspector.shared.config import AppConfig
from file_inspector.sources import FileSource
from file_inspector.text_analysis import analyze_text
from .models import AnalysisKind, AnalysisResult
from .tasks import ProgressReporter


@dataclass
class DefaultProgressReporter:
    """Prosty reporter postępu logujący zdarzenia do konsoli."""

    logger: BoundLogger = field(default_factory=lambda: structlog.get_logger(__name__))

    def update(self, message: str, *, percentage: int | None = None) -> None:
        if percentage is not None:
            self.logger.info("progress", message=message, percentage=percentage)
        else:
            self.logger.info("progress", message=message)


class AnalysisManager:
    """Orkiestrator kierujący plik do analizy obrazu, dźwięku lub tekstu."""

    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        report_exporter: ReportExporter | None = None,
        progress_reporter: ProgressReporter | None = None,
    ) -> None:
        self._config = config or AppConfig.default()
        self._report_exporter = report_exporter
        self._progress_reporter = progress_reporter or DefaultProgressReporter()
        self._logger = structlog.get_logger(__name__)
        self._signatures = self._load_signatures(self._config.signatures_path)

    @property
    def config(self) -> AppConfig:
        return self._config

    # ------------------------------------------------------------------
    # Analiza
    # ------------------------------------------------------------------

    async def analyze(self, source: FileSource) -> AnalysisResult:
        """Analizuje pojedynczy plik; nigdy nie zgłasza wyjątku."""

        try:
            kind, data = await self._dispatch(source)
        except Exception as exc:
            self._logger.warning("file-analysis-failed", file=source.name, error=str(exc))
            return AnalysisResult.failure(source.name, f"Analysis failed: {exc}")

        self._logger.debug("file-analyzed", file=source.name, kind=kind.value)
        return AnalysisResult(file_name=source.name, kind=kind, data=data)

    async def analyze_batch(self, sources: Sequence[FileSource]) -> List[AnalysisResult]:
        """Analizuje pliki współbieżnie; kolejność wyników odpowiada kolejności wejścia."""

        total = len(sources)
        if total == 0:
            return []

        semaphore = asyncio.Semaphore(max(self._config.max_concurrency, 1))
        completed = 0

        async def _run(source: FileSource) -> AnalysisResult:
            nonlocal completed
            async with semaphore:
                result = await self.analyze(source)
            completed += 1
            self._progress(f"Przeanalizowano {source.name}", percentage=int(completed * 100 / total))
            return result

        results = list(await asyncio.gather(*(_run(source) for source in sources)))
        self._logger.info(
            "batch-complete",
            files=total,
            errors=sum(1 for result in results if result.is_error),
        )
        return results

    # ------------------------------------------------------------------
    # Raportowanie
    # ------------------------------------------------------------------

    def export_report(self, results: Sequence[AnalysisResult], destination: Path, fmt: ExportFormat) -> Path:
        """Eksportuje wyniki do wskazanego pliku."""

        if self._report_exporter is None:
            raise RuntimeError("Nie skonfigurowano eksportera raportów")
        path = self._report_exporter.export(results, destination, fmt)
        self._progress("Raport został zapisany", percentage=100)
        return path

    # ------------------------------------------------------------------
    # Operacje pomocnicze
    # ------------------------------------------------------------------

    async def _dispatch(self, source: FileSource) -> tuple[AnalysisKind, Dict[str, Any]]:
        media_type = source.media_type or ""

        if media_type.startswith("image/"):
            return AnalysisKind.IMAGE, await self._analyze_media(source, self._signatures[IMAGE_GROUP])
        if media_type.startswith("audio/"):
            return AnalysisKind.AUDIO, await self._analyze_media(source, self._signatures[AUDIO_GROUP])

        content = await source.read_text()
        if is_encrypted(content):
            report = attempt_decryption(content, self._config.candidate_keys)
            return AnalysisKind.ENCRYPTED, report.to_dict()
        return AnalysisKind.TEXT, analyze_text(content).to_dict()

    async def _analyze_media(self, source: FileSource, signatures: Mapping[str, str]) -> Dict[str, Any]:
        data = await source.read_bytes()
        report = analyze_media(data, media_type=source.media_type, signatures=signatures, size=source.size)
        return report.to_dict()

    def _progress(self, message: str, *, percentage: int | None = None) -> None:
        try:
            self._progress_reporter.update(message, percentage=percentage)
        except Exception as exc:
            self._logger.warning("progress-report-failed", message=message, error=str(exc))

    @staticmethod
    def _load_signatures(path: Path | None) -> Mapping[str, Mapping[str, str]]:
        defaults = load_default_signatures()
        if path is None:
            return defaults
        custom = load_signatures(path)
        return {group: custom.get(group, defaults[group]) for group in (IMAGE_GROUP, AUDIO_GROUP)}


async def analyze(source: FileSource, *, config: AppConfig | None = None) -> AnalysisResult:
    """Analizuje pojedynczy plik z domyślną konfiguracją."""

    return await AnalysisManager(config=config).analyze(source)
