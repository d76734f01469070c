"""Serialise records into an LFP container.

The inverse of :mod:`lfp_core.container`, used to produce synthetic
packages for tools and tests.
"""
from __future__ import annotations

import struct

from .protocol import (
    MAGIC_LFP_FILE,
    FILE_HEADER_LEN,
    REC_MAGIC_LEN,
    REC_TYPE_LEN,
    REC_LENGTH_FMT,
    REC_HASH_LEN,
    REC_BLANK_LEN,
    TYPE_CHUNK,
)


def pack_header(type_tag: bytes, length: int, sha1: bytes = b"") -> bytes:
    if len(type_tag) != REC_TYPE_LEN:
        raise ValueError(f"Record type must be {REC_TYPE_LEN} bytes, got {len(type_tag)}")
    if len(sha1) > REC_HASH_LEN:
        raise ValueError(f"Hash field is {REC_HASH_LEN} bytes, got {len(sha1)}")
    magic = type_tag + b"\r\n\x1a\n" + b"\x00" * (REC_MAGIC_LEN - REC_TYPE_LEN - 4)
    return (
        magic
        + struct.pack(REC_LENGTH_FMT, length)
        + sha1.ljust(REC_HASH_LEN, b"\x00")
        + b"\x00" * REC_BLANK_LEN
    )


def pack_record(data: bytes, type_tag: bytes = TYPE_CHUNK, sha1: bytes = b"") -> bytes:
    return pack_header(type_tag, len(data), sha1) + data


def pack_file_header() -> bytes:
    version = b"\x00\x00\x00\x01"
    return MAGIC_LFP_FILE + version + b"\x00" * (FILE_HEADER_LEN - len(MAGIC_LFP_FILE) - len(version))


def pack_container(records: list[bytes], padding: int = 0) -> bytes:
    """Concatenate pre-packed records behind a primary header.

    ``padding`` zero bytes are inserted between consecutive records.
    """
    gap = b"\x00" * padding
    return pack_file_header() + gap.join(records)
