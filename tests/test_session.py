from __future__ import annotations

import io

import pytest

from hexicon.config import Layout
from hexicon.core.io import ByteStream
from hexicon.core.session import Page, Session


def test_full_page_has_sixteen_rows(open_session) -> None:
    session = open_session(bytes(range(256)))
    page = session.render_page()
    rows = list(page.rows())
    assert len(rows) == 16
    assert rows[0] == (0, bytes(range(16)))
    assert rows[-1][0] == 0xF0
    # Next page hits EOF immediately
    assert list(session.render_page().rows()) == []


def test_short_file_not_padded(open_session) -> None:
    session = open_session(bytes(range(10)))
    page = session.render_page()
    assert page == Page(offset=0, data=bytes(range(10)))
    assert session.rank == 10


def test_rank_follows_position(open_session) -> None:
    session = open_session(bytes(600))
    assert session.rank == 0
    session.render_page()
    assert session.rank == 0x100
    page = session.render_page()
    assert [rank for rank, _ in page.rows()][:2] == [0x100, 0x110]


def test_regress_at_start_is_noop(open_session) -> None:
    session = open_session(bytes(range(256)) * 3)
    assert session.regress() is True
    assert session.rank == 0
    assert session.render_page().offset == 0


def test_regress_then_render_repeats_single_page(open_session) -> None:
    session = open_session(bytes(range(256)) * 2)
    first = session.render_page()
    session.regress()
    assert session.render_page() == first


def test_regress_returns_to_previous_page(open_session) -> None:
    data = bytes((i * 7) % 256 for i in range(0x400))
    session = open_session(data)
    session.render_page()
    page_1 = session.render_page()
    session.render_page()
    session.regress()
    assert session.render_page() == page_1


def test_regress_after_short_page(open_session) -> None:
    session = open_session(bytes(range(256)) + b"\xAA" * 44)
    first = session.render_page()
    tail = session.render_page()
    assert tail.offset == 0x100 and len(tail.data) == 44
    session.regress()
    assert session.rank == 0
    assert session.render_page() == first


def test_regress_after_eof_page(open_session) -> None:
    session = open_session(bytes(range(256)))
    first = session.render_page()
    assert session.render_page().data == b""
    session.regress()
    assert session.render_page() == first


def test_regress_on_unseekable_stream_is_noop() -> None:
    class _Pipe(io.BytesIO):
        def seek(self, *args, **kwargs):
            raise io.UnsupportedOperation("seek")

    session = Session(ByteStream(_Pipe(bytes(300))), 2, Layout(32))
    session.render_page()
    assert session.regress() is False
    assert session.rank == 0x100
    assert len(session.render_page().data) == 44


def test_invalid_group_size(open_session) -> None:
    with pytest.raises(ValueError):
        open_session(b"", group_size=3)
