"""Positional classification of parsed records."""
from __future__ import annotations

from dataclasses import dataclass, field

from lfp_core.container import Record, read_records
from lfp_core.depth import depth_string
from lfp_core.errors import InsufficientRecords
from lfp_core.protocol import METADATA_INDEX, DEPTH_INDEX, FIRST_IMAGE_INDEX, MIN_RECORDS


@dataclass
class Extraction:
    metadata: Record
    depth: Record
    images: list[Record]
    records: list[Record] = field(default_factory=list)
    status: str = "END"

    @property
    def depth_text(self) -> bytes:
        return depth_string(self.depth.data)

    def roles(self) -> list[tuple[str, int | None, Record]]:
        """(role, image number, record) for every record, in container order."""
        out: list[tuple[str, int | None, Record]] = [
            ("metadata", None, self.metadata),
            ("depth", None, self.depth),
        ]
        out.extend(("image", n, rec) for n, rec in enumerate(self.images))
        return out


def classify(records: list[Record], status: str = "END") -> Extraction:
    """Assign metadata, depth and image roles by position.

    Raises InsufficientRecords when the container holds no image.
    """
    if len(records) < MIN_RECORDS:
        raise InsufficientRecords(len(records))

    return Extraction(
        metadata=records[METADATA_INDEX],
        depth=records[DEPTH_INDEX],
        images=list(records[FIRST_IMAGE_INDEX:]),
        records=list(records),
        status=status,
    )


def split(buf: bytes) -> Extraction:
    """Parse and classify a whole LFP buffer."""
    records, status = read_records(buf)
    return classify(records, status)
