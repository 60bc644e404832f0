"""Plain-text formatting for page headers and hex rows."""

from __future__ import annotations

from collections.abc import Iterable

from hexicon.config import ROW_SIZE, Layout


def format_byte(value: int) -> str:
    return f"{value:02X}"


def format_rank(rank: int, digits: int) -> str:
    return f"{rank:0{digits}X}"


def header_labels(group_size: int) -> str:
    """Column labels, one per group, each padded to the width of its group."""
    return "".join(f"{col:X}" + "  " * group_size for col in range(0, ROW_SIZE, group_size))


def header_line(group_size: int, layout: Layout) -> str:
    return layout.alignment + header_labels(group_size)


def iter_groups(row: bytes, group_size: int) -> Iterable[str]:
    for start in range(0, len(row), group_size):
        yield "".join(format_byte(b) for b in row[start : start + group_size])


def format_groups(row: bytes, group_size: int) -> str:
    return " ".join(iter_groups(row, group_size))


def format_row(rank: int, row: bytes, group_size: int, layout: Layout) -> str:
    return f"{format_rank(rank, layout.offset_digits)}: {format_groups(row, group_size)}"
