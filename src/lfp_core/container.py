"""LFP container walker: signature check, record headers, payload copy."""
from __future__ import annotations

import struct
from dataclasses import dataclass
from warnings import warn

from .cursor import ByteCursor
from .errors import NotAContainer, TruncatedRecord, OversizedPayloadDeclaration
from .protocol import (
    MAGIC_LFP_FILE,
    MAGIC_LEN,
    FILE_HEADER_LEN,
    REC_HEADER_LEN,
    REC_MAGIC_LEN,
    REC_TYPE_LEN,
    REC_LENGTH_FMT,
    REC_LENGTH_LEN,
    REC_HASH_LEN,
    REC_BLANK_LEN,
)

OK = "OK"
END = "END"
E_TRUNCATED_RECORD = TruncatedRecord.code
E_OVERSIZED_PAYLOAD = OversizedPayloadDeclaration.code


@dataclass(frozen=True)
class Record:
    type: bytes
    length: int
    hash: bytes
    data: bytes
    offset: int = 0

    @property
    def hash_text(self) -> str:
        """Hash field as text, trailing NUL padding removed."""
        return self.hash.rstrip(b"\x00").decode("ascii", errors="replace")

    @property
    def type_text(self) -> str:
        return self.type.decode("latin-1")


def is_lfp(buf: bytes) -> bool:
    """True if ``buf`` is longer than the signature and starts with it."""
    return len(buf) > MAGIC_LEN and bytes(buf[:MAGIC_LEN]) == MAGIC_LFP_FILE


def parse_record(cur: ByteCursor) -> tuple[str, Record | None]:
    """Consume one record from ``cur``.

    Returns ``("OK", record)`` on success. Otherwise returns ``("END", None)``
    when only zero padding was left, or an error code when the header or the
    declared payload does not fit in what remains. The caller stops walking
    on anything but ``"OK"``.
    """
    cur.skip_zeros()
    if cur.remaining == 0:
        return END, None

    # Header must fit with at least one byte to spare.
    if cur.remaining <= REC_HEADER_LEN:
        return E_TRUNCATED_RECORD, None

    offset = cur.pos
    magic = cur.take(REC_MAGIC_LEN)
    (length,) = struct.unpack(REC_LENGTH_FMT, cur.take(REC_LENGTH_LEN))
    sha1 = cur.take(REC_HASH_LEN)
    cur.skip(REC_BLANK_LEN)

    if length > cur.remaining:
        return E_OVERSIZED_PAYLOAD, None

    data = cur.take(length)
    return OK, Record(type=magic[:REC_TYPE_LEN], length=length, hash=sha1, data=data, offset=offset)


def read_records(buf: bytes) -> tuple[list[Record], str]:
    """Walk every record in an LFP buffer.

    Raises NotAContainer if the signature is wrong. Otherwise returns the
    records parsed before the walk stopped, and the status that stopped it.
    """
    if not is_lfp(buf):
        raise NotAContainer(f"{len(buf)} byte buffer")

    records: list[Record] = []
    if len(buf) <= FILE_HEADER_LEN:
        return records, END

    cur = ByteCursor(buf, FILE_HEADER_LEN)
    while True:
        start_off = cur.pos
        stat, rec = parse_record(cur)
        if stat != OK:
            break
        records.append(rec)

    if stat == E_TRUNCATED_RECORD:
        warn(f"Truncated record header at offset {start_off}. Stopping after {len(records)} record(s).")
    elif stat == E_OVERSIZED_PAYLOAD:
        warn(f"Record at offset {start_off} declares more data than remains. Stopping after {len(records)} record(s).")

    return records, stat
