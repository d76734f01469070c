"""Bounds-checked read cursor over an in-memory buffer."""
from __future__ import annotations

import re

from .errors import TruncatedRecord

_NON_ZERO = re.compile(rb"[^\x00]")


class ByteCursor:
    """Forward-only view of ``buf`` starting at ``pos``.

    Every read goes through :meth:`take` or :meth:`skip`, both of which refuse
    to move past the end of the buffer. Bytes returned by :meth:`take` are
    copies, so records never alias the container.
    """

    def __init__(self, buf: bytes | bytearray | memoryview, pos: int = 0):
        self._view = memoryview(buf).cast("B")
        if pos < 0 or pos > len(self._view):
            raise ValueError(f"Cursor position {pos} outside buffer of {len(self._view)} bytes")
        self.pos = pos

    def __len__(self) -> int:
        return len(self._view)

    @property
    def remaining(self) -> int:
        return len(self._view) - self.pos

    def _check(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Negative read length {n}")
        if n > self.remaining:
            raise TruncatedRecord(f"need {n} bytes at offset {self.pos}, {self.remaining} left")

    def take(self, n: int) -> bytes:
        self._check(n)
        out = bytes(self._view[self.pos:self.pos + n])
        self.pos += n
        return out

    def skip(self, n: int) -> None:
        self._check(n)
        self.pos += n

    def skip_zeros(self) -> int:
        """Advance over a run of zero bytes. Returns how many were skipped."""
        start = self.pos
        m = _NON_ZERO.search(self._view, start)
        self.pos = m.start() if m else len(self._view)
        return self.pos - start
