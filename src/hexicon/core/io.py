from __future__ import annotations

import logging
from contextlib import suppress
from typing import BinaryIO

logger = logging.getLogger(__name__)


class InvalidOffset(ValueError):
    """Raised when an invalid (e.g., negative) offset is provided."""


class ByteStream:
    """Sequential byte reader over a binary file handle.

    Bytes are consumed one at a time. The position is tracked here rather than
    queried with `tell()`, so pipes and FIFOs can still be read forward; seeking
    on such streams fails softly and leaves the position untouched.
    """

    def __init__(self, fh: BinaryIO, *, name: str = "<stream>") -> None:
        self._fh = fh
        self._name = name
        self._position = 0

    @classmethod
    def open(cls, path: str) -> ByteStream:
        """Open `path` for binary reading. Raises `OSError` when it cannot be opened."""
        fh = open(path, "rb")  # noqa: SIM115
        return cls(fh, name=path)

    def close(self) -> None:
        with suppress(OSError):
            self._fh.close()

    def __enter__(self) -> ByteStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def name(self) -> str:
        return self._name

    @property
    def position(self) -> int:
        """Byte offset of the next byte to be read."""
        return self._position

    def read_byte(self) -> int | None:
        """Return the next byte value, or None at EOF."""
        chunk = self._fh.read(1)
        if not chunk:
            return None
        self._position += 1
        return chunk[0]

    def seek(self, offset: int) -> bool:
        """Move to absolute `offset`; return False if the stream refused.

        Negative offsets raise `InvalidOffset`.
        """
        if offset < 0:
            raise InvalidOffset("offset must be >= 0")
        try:
            self._fh.seek(offset)
        except OSError as exc:
            logger.warning("seek to 0x%X failed on %s: %s", offset, self._name, exc)
            return False
        self._position = offset
        return True
