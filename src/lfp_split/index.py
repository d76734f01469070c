from __future__ import annotations

import hashlib
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .classify import Extraction

INDEX_SCHEMA = pa.schema(
    [
        ("index", pa.int32()),
        ("role", pa.string()),
        ("image", pa.int32()),
        ("type", pa.string()),
        ("offset", pa.int64()),
        ("length", pa.int64()),
        ("hash", pa.string()),
        ("content_hash", pa.string()),
        ("file", pa.string()),
    ]
)


def record_rows(extraction: Extraction, files: list[tuple[Path, bytes]] | None = None) -> list[dict]:
    """One row per classified record, in container order.

    ``content_hash`` is a sha256 of the payload for bookkeeping. The ``hash``
    field embedded in the package is carried through as-is and never checked.
    """
    names = [str(p) for p, _ in files] if files else []
    rows: list[dict] = []
    for i, (role, n, rec) in enumerate(extraction.roles()):
        rows.append(
            {
                "index": i,
                "role": role,
                "image": n,
                "type": rec.type_text,
                "offset": int(rec.offset),
                "length": int(rec.length),
                "hash": rec.hash_text,
                "content_hash": hashlib.sha256(rec.data).hexdigest(),
                "file": names[i] if i < len(names) else None,
            }
        )
    return rows


def write_record_index(
    extraction: Extraction,
    out_path: Path,
    files: list[tuple[Path, bytes]] | None = None,
) -> None:
    """Write the record index as a parquet table."""
    df = pd.DataFrame(record_rows(extraction, files))
    df["image"] = df["image"].astype("Int32")

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pandas(df, schema=INDEX_SCHEMA, preserve_index=False)
    pq.write_table(table, out_path)
