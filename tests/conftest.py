"""Wspólne fixtury testów."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from file_inspector.core import AnalysisManager
from file_inspector.reporting import DefaultReportExporter


@dataclass
class RecordingReporter:
    """Reporter postępu zapamiętujący przekazane komunikaty."""

    updates: List[tuple[str, int | None]] = field(default_factory=list)

    def update(self, message: str, *, percentage: int | None = None) -> None:
        self.updates.append((message, percentage))


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def manager(reporter: RecordingReporter) -> AnalysisManager:
    return AnalysisManager(report_exporter=DefaultReportExporter(), progress_reporter=reporter)
