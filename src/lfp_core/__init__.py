"""LFP Core - Container parsing and depth table decoding."""
from .container import Record, is_lfp, parse_record, read_records
from .cursor import ByteCursor
from .depth import depth_string, depth_values
from .errors import (
    LFPError,
    NotAContainer,
    TruncatedRecord,
    OversizedPayloadDeclaration,
    InsufficientRecords,
)

__all__ = [
    "Record",
    "ByteCursor",
    "is_lfp",
    "parse_record",
    "read_records",
    "depth_string",
    "depth_values",
    "LFPError",
    "NotAContainer",
    "TruncatedRecord",
    "OversizedPayloadDeclaration",
    "InsufficientRecords",
]
