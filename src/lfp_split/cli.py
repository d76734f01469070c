"""LFP Splitter - Package to metadata, depth table and JPEG files."""
from __future__ import annotations

import json
from pathlib import Path

import click

from lfp_core.errors import NotAContainer, InsufficientRecords
from lfp_split.classify import Extraction, split
from lfp_split.index import record_rows, write_record_index
from lfp_split.writer import output_prefix, output_files, save_outputs


def load_file(path: Path) -> bytes | None:
    try:
        return Path(path).read_bytes()
    except OSError:
        return None


def list_records(extraction: Extraction) -> None:
    for row in record_rows(extraction):
        click.echo(json.dumps(row, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


def split_file(
    lfp_path: Path,
    out_dir: Path | None = None,
    index_path: Path | None = None,
    list_only: bool = False,
) -> int:
    """Split one package on disk. Returns the process exit code."""
    buf = load_file(lfp_path)
    if buf is None:
        click.echo(f"Failed to open file {lfp_path}", err=True)
        return 1

    try:
        extraction = split(buf)
    except NotAContainer:
        click.echo(f"File {lfp_path} does not look like an lfp", err=True)
        return 1
    except InsufficientRecords:
        # Content problem, not a usage error.
        click.echo(f"Something went wrong, no images found in {lfp_path}", err=True)
        return 0

    if list_only:
        list_records(extraction)
        return 0

    if out_dir is not None:
        try:
            Path(out_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Each output below still reports its own failure.
            click.echo(f"Failed to create {out_dir}: {e}", err=True)

    files = output_files(extraction, output_prefix(lfp_path, out_dir))
    save_outputs(files)

    if index_path is not None:
        try:
            write_record_index(extraction, index_path, files)
            click.echo(f"Saved {index_path}")
        except OSError as e:
            click.echo(f"Failed to save {index_path}: {e}", err=True)

    return 0


@click.command()
@click.argument("lfp", required=False, type=click.Path(path_type=Path))
@click.option("--out-dir", type=click.Path(file_okay=False, path_type=Path), help="Directory for output files")
@click.option("--index", "index_path", type=click.Path(dir_okay=False, path_type=Path), help="Write a parquet record index")
@click.option("--list", "list_only", is_flag=True, help="Print one JSON line per record and write nothing")
def main(lfp: Path | None, out_dir: Path | None, index_path: Path | None, list_only: bool) -> None:
    """Split a light-field package into its records."""
    if lfp is None:
        click.echo("Usage: lfpsplitter file.lfp", err=True)
        raise SystemExit(1)

    raise SystemExit(split_file(lfp, out_dir=out_dir, index_path=index_path, list_only=list_only))


if __name__ == "__main__":
    main()
