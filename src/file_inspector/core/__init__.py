"""Warstwa logiki domenowej i orkiestracji analizy plików."""

from . import models, tasks
from .analysis_manager import AnalysisManager, DefaultProgressReporter, analyze
from .models import AnalysisKind, AnalysisResult

__all__ = [
	"models",
	"tasks",
	"AnalysisKind",
	"AnalysisManager",
	"AnalysisResult",
	"DefaultProgressReporter",
	"analyze",
]
