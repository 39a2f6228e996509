"""In-memory history of analyses with simple usage analytics."""

from __future__ import annotations

from dataclasses import asdict
from typing import Dict, List, Optional

import pandas as pd

from .core.config import settings
from .core.constants import SOURCE_AI, SOURCE_HEURISTIC
from .core.models import AnalysisOutcome, AnalysisRecord

_COLUMNS = ["file_name", "file_size", "result", "source", "timestamp"]


class AnalysisHistory:
    """Keep a truncated copy of every rendered report."""

    def __init__(self, result_chars: Optional[int] = None) -> None:
        self.result_chars = settings.history_result_chars if result_chars is None else result_chars
        self._records: List[AnalysisRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[AnalysisRecord, ...]:
        return tuple(self._records)

    def record(self, outcome: AnalysisOutcome) -> AnalysisRecord:
        """Store ``outcome`` and return the saved record."""
        entry = AnalysisRecord(
            file_name=outcome.file_name,
            file_size=outcome.file_size,
            result=outcome.result[: self.result_chars],
            source=outcome.source,
            timestamp=outcome.timestamp,
        )
        self._records.append(entry)
        return entry

    def clear(self) -> None:
        self._records.clear()

    def to_dataframe(self) -> pd.DataFrame:
        if not self._records:
            return pd.DataFrame(columns=_COLUMNS)
        return pd.DataFrame([asdict(r) for r in self._records], columns=_COLUMNS)

    def analytics(self) -> Dict[str, int]:
        """Return analysis counts per source and the AI success rate."""
        df = self.to_dataframe()
        counts = df["source"].value_counts()
        total = int(len(df))
        ai_count = int(counts.get(SOURCE_AI, 0))
        return {
            "total_analyses": total,
            "deepseek_analyses": ai_count,
            "mock_analyses": int(counts.get(SOURCE_HEURISTIC, 0)),
            "success_rate": round(ai_count / total * 100) if total > 0 else 0,
        }
