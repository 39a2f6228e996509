"""Core data structures for captures, channel fingerprints and results."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    CLOCK_MIN_TRANSITIONS,
    DATA_MAX_TRANSITIONS,
    DIGITAL_MAX_DISTINCT,
)


@dataclass(frozen=True)
class Capture:
    """A logic analyzer CSV split into a header row and sample rows.

    Rows may be ragged; fields are kept exactly as split and stripped.
    """

    header: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def sample_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.header


@dataclass(frozen=True)
class FormatGuess:
    format_label: str
    format_type: str


@dataclass(frozen=True)
class ChannelProfile:
    """Statistical fingerprint of one capture column."""

    name: str
    index: int
    distinct_value_count: int
    transition_count: int

    @property
    def is_digital(self) -> bool:
        return self.distinct_value_count <= DIGITAL_MAX_DISTINCT

    @property
    def is_clock_like(self) -> bool:
        return self.transition_count > CLOCK_MIN_TRANSITIONS

    @property
    def is_data_like(self) -> bool:
        return 0 < self.transition_count <= DATA_MAX_TRANSITIONS


@dataclass(frozen=True)
class ProtocolGuess:
    protocol_name: str
    confidence_level: str
    pin_roles: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AnalysisOutcome:
    """Report text produced for one uploaded capture."""

    result: str
    source: str
    file_name: str = ""
    file_size: int = 0
    timestamp: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "success": True,
            "result": self.result,
            "fileName": self.file_name,
            "timestamp": self.timestamp,
            "source": self.source,
        }


@dataclass(frozen=True)
class AnalysisRecord:
    """Entry kept by :class:`pulseai.history.AnalysisHistory`."""

    file_name: str
    file_size: int
    result: str
    source: str
    timestamp: str
