"""Output naming and saving for split packages."""
from __future__ import annotations

import sys
from pathlib import Path

from .classify import Extraction


def output_prefix(input_path: Path, out_dir: Path | None = None) -> Path:
    """Input path with its last extension removed, optionally rehomed."""
    p = Path(input_path)
    base = p.with_suffix("") if p.suffix else p
    if out_dir is not None:
        return Path(out_dir) / base.name
    return base


def output_files(extraction: Extraction, prefix: Path) -> list[tuple[Path, bytes]]:
    prefix = str(prefix)
    files = [
        (Path(f"{prefix}_metadata.txt"), extraction.metadata.data),
        (Path(f"{prefix}_depth.txt"), extraction.depth_text),
    ]
    for n, rec in enumerate(extraction.images):
        files.append((Path(f"{prefix}_{n}.jpg"), rec.data))
    return files


def save_data(data: bytes, path: Path) -> bool:
    try:
        path.write_bytes(data)
    except OSError:
        return False
    return True


def save_outputs(files: list[tuple[Path, bytes]]) -> dict[Path, bool]:
    """Write each file on its own; a failed write does not stop the rest."""
    results: dict[Path, bool] = {}
    for path, data in files:
        ok = save_data(data, path)
        if ok:
            print(f"Saved {path}")
        else:
            print(f"Failed to save {path}", file=sys.stderr)
        results[path] = ok
    return results
