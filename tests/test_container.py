import struct

import pytest

from lfp_core import (
    ByteCursor,
    NotAContainer,
    OversizedPayloadDeclaration,
    TruncatedRecord,
    is_lfp,
    parse_record,
    read_records,
)
from lfp_core.pack import pack_container, pack_file_header, pack_header, pack_record
from lfp_core.protocol import MAGIC_LFP_FILE, REC_HEADER_LEN, TYPE_METADATA, TYPE_CHUNK


def test_magic_accepts_signature_plus_one_byte():
    assert is_lfp(MAGIC_LFP_FILE + b"\x00")
    assert is_lfp(pack_file_header())


@pytest.mark.parametrize("n", range(0, 9))
def test_magic_rejects_short_buffers(n):
    assert not is_lfp(MAGIC_LFP_FILE[:n])


def test_magic_rejects_wrong_signature():
    for i in range(len(MAGIC_LFP_FILE)):
        b = bytearray(pack_file_header())
        b[i] ^= 0xFF
        assert not is_lfp(bytes(b))


def test_cursor_refuses_to_overrun():
    cur = ByteCursor(b"abcdef")
    assert cur.take(4) == b"abcd"
    assert cur.remaining == 2
    with pytest.raises(TruncatedRecord):
        cur.take(3)
    assert cur.pos == 4
    with pytest.raises(TruncatedRecord):
        cur.skip(3)
    cur.skip(2)
    assert cur.remaining == 0


def test_cursor_skip_zeros_stops_at_end():
    cur = ByteCursor(b"\x00\x00\x00")
    assert cur.skip_zeros() == 3
    assert cur.remaining == 0


def test_cursor_skip_zeros_stops_at_data():
    cur = ByteCursor(b"ab" + b"\x00" * 100000 + b"\x89rest", pos=2)
    assert cur.skip_zeros() == 100000
    assert cur.take(1) == b"\x89"
    assert cur.skip_zeros() == 0


def test_parse_record_fields():
    sha1 = b"sha1-" + b"a" * 40
    cur = ByteCursor(pack_record(b"hello", TYPE_METADATA, sha1))
    stat, rec = parse_record(cur)

    assert stat == "OK"
    assert rec.type == TYPE_METADATA
    assert rec.length == 5
    assert rec.hash == sha1
    assert rec.hash_text == sha1.decode()
    assert rec.data == b"hello"
    assert cur.remaining == 0


def test_length_is_big_endian():
    header = pack_header(TYPE_CHUNK, 0x0102)
    assert header[12:16] == b"\x00\x00\x01\x02"
    stat, rec = parse_record(ByteCursor(header + b"x" * 0x0102))
    assert stat == "OK"
    assert rec.length == 0x0102


def test_zero_length_payload_is_valid():
    # Trailing byte keeps the header strictly shorter than what remains.
    stat, rec = parse_record(ByteCursor(pack_record(b"") + b"\x01"))
    assert stat == "OK"
    assert rec.data == b""


def test_header_must_leave_room():
    buf = pack_header(TYPE_CHUNK, 0)
    assert len(buf) == REC_HEADER_LEN
    assert parse_record(ByteCursor(buf)) == ("E_TRUNCATED_RECORD", None)


def test_oversized_declaration_allocates_nothing():
    buf = pack_header(TYPE_CHUNK, 100) + b"x" * 99
    assert parse_record(ByteCursor(buf)) == ("E_OVERSIZED_PAYLOAD", None)

    huge = pack_header(TYPE_CHUNK, 0xFFFFFFFF) + b"x" * 10
    assert parse_record(ByteCursor(huge)) == ("E_OVERSIZED_PAYLOAD", None)


def test_only_padding_left_is_end_of_stream():
    assert parse_record(ByteCursor(b"\x00" * 500)) == ("END", None)


def test_read_records_rejects_non_lfp():
    with pytest.raises(NotAContainer):
        read_records(b"\xff\xd8\xff\xe0" + b"\x00" * 200)


def test_read_records_short_primary_header():
    assert read_records(MAGIC_LFP_FILE + b"\x00\x00") == ([], "END")


@pytest.mark.parametrize("padding", [0, 1, 3, 4096])
def test_padding_is_transparent(padding):
    payloads = [b"meta", struct.pack("=3f", 1.0, 2.0, 3.0), b"\xff\xd8jpeg\xff\xd9"]
    buf = pack_container([pack_record(p) for p in payloads], padding=padding) + b"\x00" * padding

    records, stat = read_records(buf)
    assert stat == "END"
    assert [r.data for r in records] == payloads


def test_offsets_point_at_headers():
    recs = [pack_record(b"a" * 7), pack_record(b"b" * 3)]
    buf = pack_container(recs, padding=5)
    records, _ = read_records(buf)
    assert records[0].offset == 16
    assert records[1].offset == 16 + len(recs[0]) + 5


def test_truncated_tail_keeps_earlier_records():
    good = [pack_record(b"one"), pack_record(b"two")]
    buf = pack_container(good) + pack_header(TYPE_CHUNK, 10)[:50]

    with pytest.warns(UserWarning, match="Truncated record header"):
        records, stat = read_records(buf)
    assert stat == "E_TRUNCATED_RECORD"
    assert [r.data for r in records] == [b"one", b"two"]


def test_oversized_tail_keeps_earlier_records():
    buf = pack_container([pack_record(b"one"), pack_header(TYPE_CHUNK, 1000) + b"short"])

    with pytest.warns(UserWarning, match="declares more data"):
        records, stat = read_records(buf)
    assert stat == "E_OVERSIZED_PAYLOAD"
    assert [r.data for r in records] == [b"one"]


def test_records_do_not_alias_input():
    buf = bytearray(pack_container([pack_record(b"abc")]))
    records, _ = read_records(buf)
    buf[-1] = ord("z")
    assert records[0].data == b"abc"


def test_no_record_cap():
    buf = pack_container([pack_record(bytes([i % 251 + 1])) for i in range(250)])
    records, _ = read_records(buf)
    assert len(records) == 250


def test_failure_statuses_are_error_codes():
    buf = pack_header(TYPE_CHUNK, 100) + b"x" * 10
    assert parse_record(ByteCursor(buf))[0] == OversizedPayloadDeclaration.code
    assert parse_record(ByteCursor(buf[:50]))[0] == TruncatedRecord.code
