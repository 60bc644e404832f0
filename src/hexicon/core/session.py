from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from hexicon.config import PAGE_SIZE, ROW_SIZE, Layout
from hexicon.core.io import ByteStream
from hexicon.core.regress import regress_target

logger = logging.getLogger(__name__)

REGRESS = "-"
QUIT = "."


@dataclass(frozen=True)
class Page:
    """Bytes consumed by one render, starting at file offset `offset`."""

    offset: int
    data: bytes

    def rows(self) -> Iterator[tuple[int, bytes]]:
        for start in range(0, len(self.data), ROW_SIZE):
            yield self.offset + start, self.data[start : start + ROW_SIZE]


@dataclass
class Session:
    """State of one viewing session over a single open stream."""

    stream: ByteStream
    group_size: int
    layout: Layout = field(default_factory=Layout)
    last_command: str = ""

    def __post_init__(self) -> None:
        if self.group_size not in (1, 2, 4):
            raise ValueError(f"group size must be 1, 2 or 4, got {self.group_size}")

    @property
    def rank(self) -> int:
        """Offset shown beside the next row; always the stream position."""
        return self.stream.position

    def render_page(self) -> Page:
        """Consume up to one page of bytes, stopping early at EOF."""
        offset = self.stream.position
        data = bytearray()
        while len(data) < PAGE_SIZE:
            value = self.stream.read_byte()
            if value is None:
                break
            data.append(value)
        logger.debug("rendered %d bytes at 0x%X", len(data), offset)
        return Page(offset=offset, data=bytes(data))

    def regress(self) -> bool:
        """Step back to the previously displayed page. Returns False if the seek failed."""
        position = self.stream.position
        target = regress_target(position)
        if target == position:
            return True
        logger.debug("regress 0x%X -> 0x%X", position, target)
        return self.stream.seek(target)
