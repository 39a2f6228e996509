"""Guess which analyzer tool exported a capture from its header row."""

from __future__ import annotations

from typing import Callable, Sequence

from ..core.models import FormatGuess

UNKNOWN_FORMAT = FormatGuess("Unknown", "unknown")

# Ordered (predicate, guess) pairs over the lower-cased joined header.
# The first matching predicate wins.
FORMAT_RULES: tuple[tuple[Callable[[str], bool], FormatGuess], ...] = (
    (lambda h: "time" in h and "channel" in h, FormatGuess("Saleae Logic", "standard")),
    (lambda h: "sample" in h or "logic" in h, FormatGuess("PulseView/Sigrok", "open_source")),
    (lambda h: "timestamp" in h or "state" in h, FormatGuess("Digilent/WaveForms", "digilent")),
    (lambda h: "tick" in h or "clk" in h, FormatGuess("Generic/Raw", "raw")),
)


def sniff_format(header_tokens: Sequence[str]) -> FormatGuess:
    """Return the probable source tool for a capture with ``header_tokens``.

    Matching is substring containment on the comma-joined, lower-cased
    header. Headers matching no rule yield ``UNKNOWN_FORMAT``.
    """
    joined = ",".join(header_tokens).lower()
    for predicate, guess in FORMAT_RULES:
        if predicate(joined):
            return guess
    return UNKNOWN_FORMAT
