"""Run-length encoding of text, optionally over several threads."""

from __future__ import annotations

import argparse
import itertools
import re
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

DEFAULT_PARTS = 4

_RUN = re.compile(r"(.)([0-9]*)", re.DOTALL)


def rle_compress(text: str) -> str:
    """Encode each run of equal characters as the character then its count."""
    return "".join(
        f"{char}{sum(1 for _ in run)}" for char, run in itertools.groupby(text)
    )


def rle_decompress(text: str) -> str:
    """Expand text produced by :func:`rle_compress`.

    Raises ValueError when a character is not followed by a run length.
    """
    pieces = []
    for match in _RUN.finditer(text):
        char, digits = match.groups()
        if not digits:
            raise ValueError(
                f"missing run length after {char!r} at offset {match.start()}"
            )
        pieces.append(char * int(digits))
    return "".join(pieces)


def split_chunks(data: str, parts: int) -> List[str]:
    """Split *data* into *parts* pieces of equal length; the last takes the rest."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    size = len(data) // parts
    head = [data[i * size:(i + 1) * size] for i in range(parts - 1)]
    return head + [data[(parts - 1) * size:]]


def _map_chunks(func, data: str, parts: int) -> str:
    chunks = split_chunks(data, parts)
    with ThreadPoolExecutor(max_workers=parts) as pool:
        return "".join(pool.map(func, chunks))


def compress_parallel(data: str, parts: int = DEFAULT_PARTS) -> str:
    """Compress each of *parts* chunks in its own thread and join the results."""
    return _map_chunks(rle_compress, data, parts)


def decompress_parallel(data: str, parts: int = DEFAULT_PARTS) -> str:
    """Split compressed text into *parts* chunks and expand each in its own thread.

    The split ignores run boundaries, so a run length cut in two yields wrong
    output or a ValueError.
    """
    return _map_chunks(rle_decompress, data, parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compress an input file single- and multi-threaded, then decompress it."""
    parser = argparse.ArgumentParser(description="Run-length encode a text file.")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("compressed", nargs="?", default="compressed.txt")
    parser.add_argument("decompressed", nargs="?", default="decompressed.txt")
    parser.add_argument("--threads", type=int, default=DEFAULT_PARTS)
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8", newline="") as handle:
            data = handle.read()
    except OSError:
        print(f"Failed to open {args.input}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    rle_compress(data)
    print(f"Single-threaded compression time: {time.perf_counter() - start} sec")

    start = time.perf_counter()
    compressed = compress_parallel(data, args.threads)
    elapsed = time.perf_counter() - start
    for thread_id in range(1, args.threads + 1):
        print(f"Thread {thread_id} completed compression.")
    print(f"Multi-threaded compression time: {elapsed} sec")

    with open(args.compressed, "w", encoding="utf-8", newline="") as handle:
        handle.write(compressed)

    start = time.perf_counter()
    try:
        decompressed = decompress_parallel(compressed, args.threads)
    except ValueError as exc:
        print(f"Decompression failed: {exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start
    for thread_id in range(1, args.threads + 1):
        print(f"Thread {thread_id} completed decompression.")
    print(f"Multi-threaded decompression time: {elapsed} sec")

    with open(args.decompressed, "w", encoding="utf-8", newline="") as handle:
        handle.write(decompressed)
    return 0


if __name__ == "__main__":
    sys.exit(main())