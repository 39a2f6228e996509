"""Text rendering of the heuristic analysis report."""

from __future__ import annotations

from typing import Sequence

from ..core.constants import DEFAULT_PRIMARY_DEVICE, FALLBACK_PIN_ROLE, PRIMARY_DEVICE_MAP
from ..core.models import Capture, ChannelProfile, FormatGuess, ProtocolGuess
from ..heuristics import classify_protocol, profile_channels, sniff_format
from ..parser import parse_capture

REPORT_TITLE = "PULSEAI DETAILED ANALYSIS REPORT"
REPORT_RULE = "=" * 50

RECOMMENDATIONS: tuple[str, ...] = (
    "Verify protocol settings match device datasheets",
    "Check signal integrity and voltage levels",
    "Review timing constraints for reliable communication",
)


def assign_pin_roles(channels: Sequence[ChannelProfile], protocol: ProtocolGuess) -> tuple[str, ...]:
    """Return one pin-role label per channel in ``channels``.

    Roles go to digital channels in order of appearance. Channels past the
    end of ``protocol.pin_roles`` and non-digital channels get
    ``FALLBACK_PIN_ROLE``.
    """
    roles = []
    digital_seen = 0
    for channel in channels:
        role = FALLBACK_PIN_ROLE
        if channel.is_digital:
            if digital_seen < len(protocol.pin_roles):
                role = protocol.pin_roles[digital_seen]
            digital_seen += 1
        roles.append(role)
    return tuple(roles)


def _pin_mapping_lines(channels: Sequence[ChannelProfile], protocol: ProtocolGuess) -> list[str]:
    lines = []
    for channel, role in zip(channels, assign_pin_roles(channels, protocol)):
        clock = "(Clock-like)" if channel.is_clock_like else ""
        data = "(Data)" if channel.is_data_like else ""
        lines.append(f"• {channel.name}: {role} {clock} {data}")
    return lines


def _signal_lines(channels: Sequence[ChannelProfile]) -> list[str]:
    return [
        f"• {ch.name}: {ch.transition_count} transitions, {ch.distinct_value_count} unique states"
        for ch in channels
    ]


def render_report(
    capture: Capture,
    format_guess: FormatGuess,
    channels: Sequence[ChannelProfile],
    protocol: ProtocolGuess,
) -> str:
    """Return the plain-text report for the three heuristic stage outputs."""
    primary = PRIMARY_DEVICE_MAP.get(protocol.protocol_name, DEFAULT_PRIMARY_DEVICE)
    secondary = (
        "Connected peripheral(s) detected"
        if len(channels) > 1
        else "No secondary device detected"
    )
    sections = [
        [REPORT_TITLE, REPORT_RULE],
        [
            "FILE METADATA:",
            f"• Analyzer Format: {format_guess.format_label}",
            f"• Total Samples: {capture.sample_count}",
            f"• Data Channels: {len(channels)}",
        ],
        [
            "DETECTED PROTOCOL:",
            f"• Protocol: {protocol.protocol_name}",
            f"• Confidence: {protocol.confidence_level}",
        ],
        ["PIN MAPPING ANALYSIS:", *_pin_mapping_lines(channels, protocol)],
        ["SIGNAL CHARACTERISTICS:", *_signal_lines(channels)],
        [
            "ESTIMATED DEVICES:",
            f"• Primary: {primary}",
            f"• Secondary: {secondary}",
        ],
        [
            "RECOMMENDATIONS:",
            *(f"{i}. {text}" for i, text in enumerate(RECOMMENDATIONS, start=1)),
        ],
    ]
    return "\n\n".join("\n".join(section) for section in sections)


def classify(raw_csv_text: str) -> str:
    """Return the heuristic report for ``raw_csv_text``.

    Never raises for any string input; empty or malformed captures produce
    an ``Unknown`` report.
    """
    capture = parse_capture(raw_csv_text)
    format_guess = sniff_format(capture.header)
    channels = profile_channels(capture.header, capture.rows)
    protocol = classify_protocol(channels)
    return render_report(capture, format_guess, channels, protocol)
