"""Rule-based protocol guess from channel fingerprints."""

from __future__ import annotations

from typing import Callable, Sequence

from ..core.constants import (
    CONFIDENCE_HIGH,
    CONFIDENCE_LOW,
    CONFIDENCE_MEDIUM,
    I2C_PIN_ROLES,
    PARALLEL_MIN_CHANNELS,
    PROTOCOL_I2C,
    PROTOCOL_PARALLEL,
    PROTOCOL_SPI,
    PROTOCOL_UART,
    PROTOCOL_UNKNOWN,
    SPI_MAX_CHANNELS,
    SPI_MIN_CHANNELS,
    SPI_PIN_ROLES,
    UART_PIN_ROLES,
)
from ..core.models import ChannelProfile, ProtocolGuess

Channels = tuple[ChannelProfile, ...]


def _looks_like_i2c(digital: Channels) -> bool:
    if len(digital) != 2:
        return False
    has_clock = any(ch.is_clock_like for ch in digital)
    has_data = any(ch.is_data_like and not ch.is_clock_like for ch in digital)
    return has_clock and has_data


def _looks_like_spi(digital: Channels) -> bool:
    if not SPI_MIN_CHANNELS <= len(digital) <= SPI_MAX_CHANNELS:
        return False
    clock_like = sum(1 for ch in digital if ch.is_clock_like)
    data_like = sum(1 for ch in digital if ch.is_data_like)
    return clock_like >= 1 and data_like >= 2


def _looks_like_uart(digital: Channels) -> bool:
    return len(digital) in (1, 2)


def _looks_parallel(digital: Channels) -> bool:
    return len(digital) >= PARALLEL_MIN_CHANNELS


def _numbered_roles(prefix: str, count: int) -> tuple[str, ...]:
    return tuple(f"{prefix}_{i}" for i in range(count))


# Ordered (predicate, result) pairs; the first matching predicate wins.
PROTOCOL_RULES: tuple[tuple[Callable[[Channels], bool], Callable[[Channels], ProtocolGuess]], ...] = (
    (_looks_like_i2c, lambda d: ProtocolGuess(PROTOCOL_I2C, CONFIDENCE_HIGH, I2C_PIN_ROLES)),
    (_looks_like_spi, lambda d: ProtocolGuess(PROTOCOL_SPI, CONFIDENCE_HIGH, SPI_PIN_ROLES)),
    (_looks_like_uart, lambda d: ProtocolGuess(PROTOCOL_UART, CONFIDENCE_MEDIUM, UART_PIN_ROLES)),
    (
        _looks_parallel,
        lambda d: ProtocolGuess(PROTOCOL_PARALLEL, CONFIDENCE_LOW, _numbered_roles("Data", len(d))),
    ),
)


def _unknown(digital: Channels) -> ProtocolGuess:
    return ProtocolGuess(PROTOCOL_UNKNOWN, CONFIDENCE_LOW, _numbered_roles("Channel", len(digital)))


def digital_channels(channels: Sequence[ChannelProfile]) -> Channels:
    """Return the channels that plausibly carry a logic-level signal."""
    return tuple(ch for ch in channels if ch.is_digital)


def classify_protocol(channels: Sequence[ChannelProfile]) -> ProtocolGuess:
    """Return the best protocol guess for ``channels``.

    Non-digital channels are ignored. Captures matching none of the rules in
    :data:`PROTOCOL_RULES` are reported as ``Unknown`` with one generic pin
    role per digital channel.
    """
    digital = digital_channels(channels)
    for predicate, build in PROTOCOL_RULES:
        if predicate(digital):
            return build(digital)
    return _unknown(digital)
