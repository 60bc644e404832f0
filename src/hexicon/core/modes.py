from __future__ import annotations

MODE_LETTERS = frozenset("bwdBWD")

# Bytes per group, keyed by the upper-cased mode letter.
GROUP_SIZES = {"B": 1, "W": 2, "D": 4}
DEFAULT_GROUP_SIZE = 4


class InvalidMode(ValueError):
    """Raised when the display mode argument is not a single b/w/d letter."""

    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(f"invalid display mode: {mode!r}")


def is_valid_mode(mode: str) -> bool:
    return len(mode) == 1 and mode in MODE_LETTERS


def group_size(mode: str) -> int:
    """Return bytes per group (1, 2 or 4) for a display mode letter."""
    if not is_valid_mode(mode):
        raise InvalidMode(mode)
    return GROUP_SIZES.get(mode.upper(), DEFAULT_GROUP_SIZE)
