"""Depth lookup table decoding."""
from __future__ import annotations

import struct

from .protocol import DEPTH_SAMPLE_FMT, DEPTH_SAMPLE_LEN, DEPTH_LINE_FMT


def depth_values(data: bytes) -> list[float]:
    """Decode packed float32 samples. A trailing partial sample is dropped."""
    usable = len(data) - len(data) % DEPTH_SAMPLE_LEN
    return [v for (v,) in struct.iter_unpack(DEPTH_SAMPLE_FMT, memoryview(data)[:usable])]


def format_depth(value: float) -> str:
    return DEPTH_LINE_FMT.format(value)


def depth_string(data: bytes) -> bytes:
    """Render a depth table as one ``%f`` line per sample."""
    return "".join(format_depth(v) for v in depth_values(data)).encode("ascii")
