"""Per-channel statistical fingerprints over a bounded sample window."""

from __future__ import annotations

from typing import Sequence

from ..core.constants import MISSING_VALUE, PROFILE_WINDOW_ROWS, TIME_COLUMN_MARKERS
from ..core.models import ChannelProfile


def _is_time_column(index: int, token: str) -> bool:
    # Only column 0 can be a time column, and only when its name says so.
    if index != 0:
        return False
    lowered = token.lower()
    return any(marker in lowered for marker in TIME_COLUMN_MARKERS)


def _channel_name(token: str) -> str:
    return token.replace('"', "").replace("'", "").strip()


def _field(row: Sequence[str], index: int) -> str:
    """Return the stripped field at ``index`` or ``MISSING_VALUE``."""
    if index >= len(row):
        return MISSING_VALUE
    value = row[index].strip()
    return value or MISSING_VALUE


def count_transitions(values: Sequence[str]) -> int:
    """Return how many adjacent pairs in ``values`` differ."""
    return sum(1 for prev, cur in zip(values, values[1:]) if cur != prev)


def profile_channel(index: int, token: str, window: Sequence[Sequence[str]]) -> ChannelProfile:
    values = tuple(_field(row, index) for row in window)
    return ChannelProfile(
        name=_channel_name(token),
        index=index,
        distinct_value_count=len(set(values)),
        transition_count=count_transitions(values),
    )


def profile_channels(
    header_tokens: Sequence[str],
    data_rows: Sequence[Sequence[str]],
) -> tuple[ChannelProfile, ...]:
    """Return a :class:`ChannelProfile` for each non-time column.

    Parameters
    ----------
    header_tokens:
        Column names from the capture's first row.
    data_rows:
        Sample rows following the header. Only the first
        ``PROFILE_WINDOW_ROWS`` rows are examined, so cost does not grow with
        the capture length.
    """
    window = data_rows[:PROFILE_WINDOW_ROWS]
    return tuple(
        profile_channel(index, token, window)
        for index, token in enumerate(header_tokens)
        if not _is_time_column(index, token)
    )
