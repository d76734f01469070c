import hashlib
import json
import random
import struct
from pathlib import Path

from lfp_core.pack import pack_container, pack_record
from lfp_core.protocol import TYPE_METADATA, TYPE_CHUNK

# --- CONFIGURATION ---
DEPTH_W, DEPTH_H = 20, 20
JPEG_STUB = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 32 + b"\xff\xd9"


def sha1_field(data: bytes) -> bytes:
    return ("sha1-" + hashlib.sha1(data).hexdigest()).encode("ascii")


def generate_package(out_path, images=2, padding=0, seed=None):
    rng = random.Random(seed)

    meta = {
        "picture": {"frameArray": [{"frame": {"imageRef": f"image-{i}"}} for i in range(images)]},
        "depthLut": {"width": DEPTH_W, "height": DEPTH_H, "representation": "float32"},
    }
    meta_bytes = json.dumps(meta, indent=2).encode("utf-8")

    depth = struct.pack(f"={DEPTH_W * DEPTH_H}f", *(rng.uniform(0.0, 10.0) for _ in range(DEPTH_W * DEPTH_H)))

    records = [
        pack_record(meta_bytes, TYPE_METADATA, sha1_field(meta_bytes)),
        pack_record(depth, TYPE_CHUNK, sha1_field(depth)),
    ]
    for _ in range(images):
        jpg = JPEG_STUB[:-2] + rng.randbytes(256) + JPEG_STUB[-2:]
        records.append(pack_record(jpg, TYPE_CHUNK, sha1_field(jpg)))

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(pack_container(records, padding=padding))

    print(f"GENERATED: {out}")
    return out


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/make_lfp.py OUT.lfp [--images N] [--padding N] [--seed N]

    args = [a for a in sys.argv[1:] if a]

    def pop_int(arg_list: list[str], flag: str, default: int | None) -> tuple[int | None, list[str]]:
        """Remove an integer option from an argv-style list."""
        if flag not in arg_list:
            return default, arg_list
        i = arg_list.index(flag)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{flag} requires a value")
        return int(arg_list[i + 1]), arg_list[:i] + arg_list[i + 2:]

    images, args = pop_int(args, "--images", 2)
    padding, args = pop_int(args, "--padding", 0)
    seed, args = pop_int(args, "--seed", None)

    out = args[0] if args else "sample.lfp"
    generate_package(out, images=images, padding=padding, seed=seed)
