"""Byte layout of a light-field package.

Signature, header field widths and the positional roles of records.
Both the reader in container.py and the writer in pack.py build on these.
"""

# File signature (first 8 bytes of the primary header)
MAGIC_LFP_FILE = b"\x89LFP\r\n\x1a\n"
MAGIC_LEN = len(MAGIC_LFP_FILE)

# Header: [Magic(12) | Length(4) | Hash(45) | Blank(35)] = 96 bytes
REC_MAGIC_LEN = 12
REC_TYPE_LEN = 4
REC_LENGTH_FMT = ">I"  # big-endian uint32
REC_LENGTH_LEN = 4
REC_HASH_LEN = 45
REC_BLANK_LEN = 35
REC_HEADER_LEN = REC_MAGIC_LEN + REC_LENGTH_LEN + REC_HASH_LEN + REC_BLANK_LEN

# The primary header is a record header without hash, blank or payload.
FILE_HEADER_LEN = REC_MAGIC_LEN + REC_LENGTH_LEN

# Depth samples are host-native float32; the writer never declared an order.
DEPTH_SAMPLE_FMT = "=f"
DEPTH_SAMPLE_LEN = 4
DEPTH_LINE_FMT = "{:f}\n"

# Positional layout of a well-formed package
METADATA_INDEX = 0
DEPTH_INDEX = 1
FIRST_IMAGE_INDEX = 2
MIN_RECORDS = FIRST_IMAGE_INDEX + 1

# Record type tags seen in camera output (informational, never enforced)
TYPE_METADATA = b"\x89LFM"
TYPE_CHUNK = b"\x89LFC"
