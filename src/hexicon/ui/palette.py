from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    header_fg: str
    offset_fg: str
    offset_punct: str
    byte_fg: str
    byte_zero_fg: str


DEFAULT = Palette(
    header_fg="#4c75c6",
    offset_fg="#8892a0",
    offset_punct="#6b7280",
    byte_fg="#d8dee9",
    byte_zero_fg="#6b7280",
)

DIM = Palette(
    header_fg="#888888",
    offset_fg="#777777",
    offset_punct="#666666",
    byte_fg="#cccccc",
    byte_zero_fg="#666666",
)

HIGH_CONTRAST = Palette(
    header_fg="#00ffff",
    offset_fg="#aaaaaa",
    offset_punct="#888888",
    byte_fg="#ffffff",
    byte_zero_fg="#888888",
)

PALETTES = {
    "default": DEFAULT,
    "dim": DIM,
    "high-contrast": HIGH_CONTRAST,
}

# Selected palette for now
PALETTE = DEFAULT
