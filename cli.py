# Huffman Text Codec
# cli.py
# 10/18/26

"""
Command line front end: compress a text file into a .bin container and back

  python cli.py compress notes.txt notes.bin
  python cli.py compress notes.txt notes.bin --codes
  python cli.py decompress notes.bin notes_restored.txt
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Dict, List

import codec
from errors import HuffmanError


def compress_file(src: str | Path, dst: str | Path) -> Dict[str, object]:
    t0 = time.perf_counter()
    # newline="" on both sides keeps "\r\n" byte-exact through a round trip
    with open(src, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    original_bytes = len(text.encode("utf-8"))

    encoding = codec.encode(text)
    data = encoding.to_bytes()
    Path(dst).write_bytes(data)

    return {
        "input": str(src),
        "output": str(dst),
        "original_bytes": original_bytes,
        "compressed_bytes": len(data),
        "unique_symbols": len(encoding.frequency_table),
        "trash_bits": encoding.trash_bits,
        "compression_ratio": len(data) / original_bytes if original_bytes else None,
        "codes": encoding.codes,
        "time_total": time.perf_counter() - t0,
    }


def decompress_file(src: str | Path, dst: str | Path) -> Dict[str, object]:
    t0 = time.perf_counter()
    data = Path(src).read_bytes()
    text = codec.decompress(data)
    # encode before touching dst so a lone surrogate cannot leave an empty file behind
    raw = text.encode("utf-8")
    Path(dst).write_bytes(raw)

    return {
        "input": str(src),
        "output": str(dst),
        "compressed_bytes": len(data),
        "restored_bytes": len(raw),
        "time_total": time.perf_counter() - t0,
    }


def _print_codes(codes: Dict[str, str]) -> None:
    for symbol, code in sorted(codes.items(), key=lambda item: (len(item[1]), item[1])):
        label = "EOF" if symbol == codec.EOF_SYMBOL else repr(symbol)
        print(f"  {label:>10}  {code}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Huffman text compressor")
    sub = ap.add_subparsers(dest="command", required=True)

    c = sub.add_parser("compress", help="Compress a UTF-8 text file")
    c.add_argument("src", help="Text file to compress")
    c.add_argument("dst", help="Where to write the compressed container")
    c.add_argument("--codes", action="store_true", help="Print the generated code table")

    d = sub.add_parser("decompress", help="Restore a text file from a compressed container")
    d.add_argument("src", help="Compressed container")
    d.add_argument("dst", help="Where to write the restored text")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "compress":
            stats = compress_file(args.src, args.dst)
        else:
            stats = decompress_file(args.src, args.dst)
    except (HuffmanError, OSError, UnicodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.command == "compress":
        print(f"Original size:   {stats['original_bytes']} bytes")
        print(f"Compressed size: {stats['compressed_bytes']} bytes")
        if stats["compression_ratio"] is not None:
            print(f"Ratio:           {stats['compression_ratio']:.3f}")
        if args.codes:
            print(f"Codes ({stats['unique_symbols']} symbols):")
            _print_codes(stats["codes"])
    else:
        print(f"Compressed size: {stats['compressed_bytes']} bytes")
        print(f"Restored size:   {stats['restored_bytes']} bytes")
    print(f"Wrote {stats['output']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
