from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

# Offset column width for this build. Packagers targeting 32-bit hosts set this to 32.
DEFAULT_OFFSET_BITS = 64
SUPPORTED_OFFSET_BITS = (32, 64)

PAGE_SIZE = 0x100
ROW_SIZE = 0x10

OFFSET_BITS_ENV = "HEXICON_OFFSET_BITS"
PALETTE_ENV = "HEXICON_PALETTE"
LOG_LEVEL_ENV = "HEXICON_LOG_LEVEL"

DEFAULT_PALETTE = "default"
PALETTE_NAMES = ("default", "dim", "high-contrast")
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigError(ValueError):
    """Raised when an environment override holds an unsupported value."""


@dataclass(frozen=True)
class Layout:
    """Offset column geometry shared by the header and every row."""

    offset_bits: int = DEFAULT_OFFSET_BITS

    def __post_init__(self) -> None:
        if self.offset_bits not in SUPPORTED_OFFSET_BITS:
            raise ConfigError(f"offset bits must be one of {SUPPORTED_OFFSET_BITS}, got {self.offset_bits}")

    @property
    def offset_digits(self) -> int:
        return self.offset_bits // 4

    @property
    def alignment(self) -> str:
        """Blank prefix that lines header labels up with the first byte column."""
        return " " * (self.offset_digits + len(": "))


@dataclass(frozen=True)
class Settings:
    layout: Layout = Layout()
    palette: str = DEFAULT_PALETTE
    log_level: int = logging.WARNING


def _parse_offset_bits(raw: str) -> int:
    try:
        bits = int(raw, 10)
    except ValueError:
        raise ConfigError(f"{OFFSET_BITS_ENV} must be an integer, got {raw!r}") from None
    if bits not in SUPPORTED_OFFSET_BITS:
        raise ConfigError(f"{OFFSET_BITS_ENV} must be 32 or 64, got {raw!r}")
    return bits


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"{LOG_LEVEL_ENV} is not a logging level: {raw!r}")
    return level


def load_settings(environ: Mapping[str, str]) -> Settings:
    """Build settings from environment overrides, falling back to build defaults."""
    bits = DEFAULT_OFFSET_BITS
    raw_bits = environ.get(OFFSET_BITS_ENV)
    if raw_bits:
        bits = _parse_offset_bits(raw_bits)

    palette = environ.get(PALETTE_ENV) or DEFAULT_PALETTE
    if palette not in PALETTE_NAMES:
        choices = ", ".join(PALETTE_NAMES)
        raise ConfigError(f"{PALETTE_ENV} must be one of {choices}, got {palette!r}")

    level = _parse_log_level(environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL)
    return Settings(layout=Layout(bits), palette=palette, log_level=level)
