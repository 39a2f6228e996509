# src/pulseai/__init__.py
from .parser import parse_capture, validate_csv_upload
from .core.models import (
    Capture,
    FormatGuess,
    ChannelProfile,
    ProtocolGuess,
    AnalysisOutcome,
)
from .heuristics import sniff_format, profile_channels, classify_protocol
from .reporting import classify, render_report
from .llm_analyzer import LLMAnalyzer
from .history import AnalysisHistory
from .service import analyze_capture, quick_analyze, health

__version__ = "0.1.0"

__all__ = [
    "parse_capture",
    "validate_csv_upload",
    "Capture",
    "FormatGuess",
    "ChannelProfile",
    "ProtocolGuess",
    "AnalysisOutcome",
    "sniff_format",
    "profile_channels",
    "classify_protocol",
    "classify",
    "render_report",
    "LLMAnalyzer",
    "AnalysisHistory",
    "analyze_capture",
    "quick_analyze",
    "health",
]
