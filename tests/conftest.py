from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from hexicon.config import Layout
from hexicon.core.io import ByteStream
from hexicon.core.session import Session


def make_fixture_file(tmp_path: Path, size: int, name: str = "fixture.bin") -> Path:
    # Deterministic content: 0..255 repeating
    p = tmp_path / name
    p.write_bytes(bytes(i % 256 for i in range(size)))
    return p


def capture_console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=200, color_system=None), buf


def output_lines(buf: io.StringIO) -> list[str]:
    return [line.rstrip() for line in buf.getvalue().splitlines()]


@pytest.fixture
def open_session(tmp_path: Path):
    streams: list[ByteStream] = []

    def _open(data: bytes, group_size: int = 1, layout: Layout | None = None) -> Session:
        p = tmp_path / "session.bin"
        p.write_bytes(data)
        stream = ByteStream.open(str(p))
        streams.append(stream)
        return Session(stream, group_size, layout or Layout(64))

    yield _open
    for stream in streams:
        stream.close()
