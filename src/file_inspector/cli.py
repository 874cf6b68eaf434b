"""Interfejs wiersza poleceń do analizy lokalnych plików."""

from __future__ import annotations

import asyncio
import sys
from argparse import ArgumentParser, Namespace
from dataclasses import replace
from pathlib import Path

import structlog

from file_inspector.core import AnalysisManager
from file_inspector.reporting import DefaultReportExporter, ExportFormat
from file_inspector.shared import AppConfig, configure_logging
from file_inspector.sources import LocalFileSource


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="file-inspector",
        description="Heurystyczna analiza plików: ciągi znaków, sygnatury, kodowania i szyfrowanie.",
    )
    parser.add_argument(
        "paths",
        type=Path,
        nargs="*",
        help="Ścieżki do analizowanych plików",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("report.json"),
        help="Ścieżka do pliku wynikowego (domyślnie: report.json)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Format raportu (domyślnie: json)",
    )
    parser.add_argument(
        "--max-concurrency",
        type=int,
        help="Maksymalna liczba równolegle analizowanych plików",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Wyświetla szczegółowe logi",
    )
    return parser


def _run_analysis(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)

    if not args.paths:
        logger.error("no-input-files")
        return 1
    if not any(path.exists() for path in args.paths):
        logger.error("input-files-not-found", paths=[str(path) for path in args.paths])
        return 1

    config = AppConfig.from_env()
    if args.max_concurrency is not None and args.max_concurrency > 0:
        config = replace(config, max_concurrency=args.max_concurrency)

    manager = AnalysisManager(config=config, report_exporter=DefaultReportExporter())
    sources = [LocalFileSource(path) for path in args.paths]

    logger.info("starting-analysis", files=len(sources))
    results = asyncio.run(manager.analyze_batch(sources))

    for result in results:
        if result.is_error:
            logger.warning("file-result", file=result.file_name, kind=result.kind.value, error=result.data)
        else:
            logger.info("file-result", file=result.file_name, kind=result.kind.value)

    fmt = ExportFormat.JSON if args.format == "json" else ExportFormat.CSV
    try:
        output_path = manager.export_report(results, args.output, fmt)
    except OSError as exc:
        logger.error("report-write-failed", path=str(args.output), error=str(exc))
        return 1

    logger.info(
        "analysis-complete",
        files=len(results),
        errors=sum(1 for result in results if result.is_error),
        report=str(output_path),
    )
    return 0


def main() -> int:
    parser = _build_parser()
    args = parser.parse_args()
    configure_logging(level=10 if args.verbose else 20)
    return _run_analysis(args)


if __name__ == "__main__":
    sys.exit(main())
