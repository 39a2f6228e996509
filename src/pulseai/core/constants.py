"""Centralized constant definitions for pulseai."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Channel profiling policy
# ---------------------------------------------------------------------------
PROFILE_WINDOW_ROWS: int = 20  # data rows examined per channel
MISSING_VALUE: str = "0"  # stands in for missing or empty fields
DIGITAL_MAX_DISTINCT: int = 4  # distinct values <= this -> digital
CLOCK_MIN_TRANSITIONS: int = 5  # transitions > this -> clock-like
DATA_MAX_TRANSITIONS: int = 10  # 0 < transitions <= this -> data-like

# Header tokens marking column 0 as a timestamp / sample-index column
TIME_COLUMN_MARKERS: tuple[str, ...] = ("time", "sample")

# ---------------------------------------------------------------------------
# Protocol labels and pin roles
# ---------------------------------------------------------------------------
PROTOCOL_I2C: str = "I2C"
PROTOCOL_SPI: str = "SPI"
PROTOCOL_UART: str = "UART/Serial"
PROTOCOL_PARALLEL: str = "Parallel/Unknown"
PROTOCOL_UNKNOWN: str = "Unknown"

CONFIDENCE_HIGH: str = "High"
CONFIDENCE_MEDIUM: str = "Medium"
CONFIDENCE_LOW: str = "Low"

I2C_PIN_ROLES: tuple[str, ...] = ("SDA (Data)", "SCL (Clock)")
SPI_PIN_ROLES: tuple[str, ...] = ("MOSI", "MISO", "SCK", "CS/SS")
UART_PIN_ROLES: tuple[str, ...] = ("TX", "RX")

SPI_MIN_CHANNELS: int = 3
SPI_MAX_CHANNELS: int = 5
PARALLEL_MIN_CHANNELS: int = 9

FALLBACK_PIN_ROLE: str = "Data Line"

# Static device table keyed by protocol name
PRIMARY_DEVICE_MAP: dict[str, str] = {
    PROTOCOL_I2C: "I2C Master (Microcontroller)",
    PROTOCOL_SPI: "SPI Master",
}
DEFAULT_PRIMARY_DEVICE: str = "Unknown Master"

# ---------------------------------------------------------------------------
# Analysis sources
# ---------------------------------------------------------------------------
SOURCE_AI: str = "deepseek"
SOURCE_HEURISTIC: str = "mock"
SOURCE_QUICK_FALLBACK: str = "quick-fallback"

SERVICE_NAME: str = "PulseAi"

__all__ = [
    "PROFILE_WINDOW_ROWS",
    "MISSING_VALUE",
    "DIGITAL_MAX_DISTINCT",
    "CLOCK_MIN_TRANSITIONS",
    "DATA_MAX_TRANSITIONS",
    "TIME_COLUMN_MARKERS",
    "PROTOCOL_I2C",
    "PROTOCOL_SPI",
    "PROTOCOL_UART",
    "PROTOCOL_PARALLEL",
    "PROTOCOL_UNKNOWN",
    "CONFIDENCE_HIGH",
    "CONFIDENCE_MEDIUM",
    "CONFIDENCE_LOW",
    "I2C_PIN_ROLES",
    "SPI_PIN_ROLES",
    "UART_PIN_ROLES",
    "SPI_MIN_CHANNELS",
    "SPI_MAX_CHANNELS",
    "PARALLEL_MIN_CHANNELS",
    "FALLBACK_PIN_ROLE",
    "PRIMARY_DEVICE_MAP",
    "DEFAULT_PRIMARY_DEVICE",
    "SOURCE_AI",
    "SOURCE_HEURISTIC",
    "SOURCE_QUICK_FALLBACK",
    "SERVICE_NAME",
]
