import sys
from pathlib import Path

# Primary header (16) + record magic region (12): first record's length field.
LENGTH_OFFSET = 16 + 12


def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_one_byte.py <file>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < 128:
        print("File too small to corrupt safely.")
        raise SystemExit(2)

    # Set the high byte of the big-endian length so it overruns the file.
    idx = LENGTH_OFFSET
    b[idx] ^= 0x7F
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")


if __name__ == "__main__":
    main()
