"""Analysis entry points combining the AI backend and heuristic fallback."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from .core.config import Settings, settings as default_settings
from .core.constants import SERVICE_NAME, SOURCE_AI, SOURCE_HEURISTIC, SOURCE_QUICK_FALLBACK
from .core.decorators import log_performance
from .core.models import AnalysisOutcome
from .exceptions import AIAnalysisError
from .history import AnalysisHistory
from .llm_analyzer import LLMAnalyzer
from .logging import get_logger
from .reporting import classify

logger = get_logger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _resolve_analyzer(analyzer: Optional[LLMAnalyzer], cfg: Settings) -> LLMAnalyzer:
    if analyzer is not None:
        return analyzer
    return LLMAnalyzer.from_settings(cfg)


def quick_fallback_text(file_name: str, file_size: int) -> str:
    """Return the canned summary used when a quick AI analysis fails."""
    return (
        "QUICK ANALYSIS (Fallback):\n"
        "• Serial communication detected\n"
        "• Multiple devices likely present\n"
        "• Analyze timing for protocol identification\n"
        f"• File: {file_name}, {file_size} bytes"
    )


@log_performance
def analyze_capture(
    content: str,
    file_name: str = "",
    *,
    file_size: Optional[int] = None,
    analyzer: Optional[LLMAnalyzer] = None,
    use_ai: bool = True,
    history: Optional[AnalysisHistory] = None,
    settings: Optional[Settings] = None,
) -> AnalysisOutcome:
    """Return an analysis of ``content``, preferring the AI backend.

    When the AI backend is disabled, unconfigured or fails, the heuristic
    report from :func:`pulseai.reporting.classify` is returned instead and
    the outcome's ``source`` is ``"mock"``.
    """
    cfg = settings or default_settings
    size = len(content.encode("utf-8")) if file_size is None else file_size
    logger.info("Processing file: %s (%d bytes)", file_name, size)

    result: Optional[str] = None
    source = SOURCE_AI
    if use_ai:
        try:
            llm = _resolve_analyzer(analyzer, cfg)
            result = llm.analyze(llm.build_prompt(content), timeout=cfg.ai_timeout)
            logger.info("AI analysis completed successfully")
        except AIAnalysisError as exc:
            logger.info("AI analysis failed, using heuristic analysis: %s", exc)
    if result is None:
        result = classify(content)
        source = SOURCE_HEURISTIC

    outcome = AnalysisOutcome(
        result=result,
        source=source,
        file_name=file_name,
        file_size=size,
        timestamp=_now_iso(),
    )
    if history is not None and cfg.history_enabled:
        history.record(outcome)
    return outcome


@log_performance
def quick_analyze(
    content: str,
    file_name: str = "",
    *,
    file_size: Optional[int] = None,
    analyzer: Optional[LLMAnalyzer] = None,
    settings: Optional[Settings] = None,
) -> AnalysisOutcome:
    """Return a short AI summary of the first lines of ``content``."""
    cfg = settings or default_settings
    size = len(content.encode("utf-8")) if file_size is None else file_size
    logger.info("Quick analysis for: %s", file_name)
    try:
        llm = _resolve_analyzer(analyzer, cfg)
        result = llm.analyze(llm.build_quick_prompt(content), timeout=cfg.quick_ai_timeout)
        source = SOURCE_AI
    except AIAnalysisError as exc:
        logger.info("Quick analysis failed, using fallback text: %s", exc)
        result = quick_fallback_text(file_name, size)
        source = SOURCE_QUICK_FALLBACK
    return AnalysisOutcome(
        result=result,
        source=source,
        file_name=file_name,
        file_size=size,
        timestamp=_now_iso(),
    )


def health(settings: Optional[Settings] = None) -> dict[str, str]:
    """Return the service status payload."""
    cfg = settings or default_settings
    return {
        "status": "OK",
        "service": SERVICE_NAME,
        "environment": cfg.environment,
        "timestamp": _now_iso(),
    }
