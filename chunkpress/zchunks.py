"""Chunked zlib compression of files using a pool of threads."""

from __future__ import annotations

import argparse
import itertools
import os
import sys
import time
import zlib
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]

CHUNK_SIZE = 16384
NUM_THREADS = 4
DECOMPRESS_LIMIT = CHUNK_SIZE * 2


class ChunkError(Exception):
    """A chunk could not be compressed or decompressed."""


def compress_chunk(data: bytes, level: int = zlib.Z_DEFAULT_COMPRESSION) -> bytes:
    """Compress *data* into one complete zlib stream."""
    try:
        return zlib.compress(data, level)
    except zlib.error as exc:
        raise ChunkError(f"compression failed: {exc}") from exc


def _inflate(data: bytes, limit: int) -> Tuple[bytes, bytes]:
    """Inflate the first stream in *data*; return its output and the bytes after it."""
    if limit < 1:
        raise ValueError("limit must be positive")
    inflater = zlib.decompressobj()
    try:
        output = inflater.decompress(data, limit)
        if not inflater.eof and inflater.unconsumed_tail:
            if inflater.decompress(inflater.unconsumed_tail, 1):
                raise ChunkError(f"decompressed output exceeds {limit} bytes")
    except zlib.error as exc:
        raise ChunkError(f"decompression failed: {exc}") from exc
    if not inflater.eof:
        raise ChunkError("incomplete compressed stream")
    return output, inflater.unused_data


def decompress_chunk(data: bytes, limit: int = DECOMPRESS_LIMIT) -> bytes:
    """Decompress one zlib stream whose output is at most *limit* bytes."""
    output, _ = _inflate(data, limit)
    return output


def split_into_chunks(data: bytes, size: int = CHUNK_SIZE) -> List[bytes]:
    """Cut *data* into pieces of *size* bytes; the last may be shorter."""
    if size < 1:
        raise ValueError("size must be positive")
    return [data[start:start + size] for start in range(0, len(data), size)]


def compress_file(
    input_path: PathLike,
    output_path: PathLike,
    level: int = zlib.Z_BEST_COMPRESSION,
) -> int:
    """Compress *input_path* chunk by chunk into *output_path*.

    Each chunk becomes its own zlib stream; the streams are written one after
    another. Returns the number of chunks.
    """
    chunks = split_into_chunks(Path(input_path).read_bytes())
    with ThreadPoolExecutor(max_workers=NUM_THREADS) as pool:
        compressed = list(pool.map(compress_chunk, chunks, itertools.repeat(level)))
    with open(output_path, "wb") as handle:
        handle.writelines(compressed)
    return len(compressed)


def _streams(data: bytes) -> Iterator[bytes]:
    rest = data
    while rest:
        output, rest = _inflate(rest, DECOMPRESS_LIMIT)
        yield output


def decompress_file(input_path: PathLike, output_path: PathLike) -> int:
    """Expand a file written by :func:`compress_file`; return the number of chunks."""
    pieces = list(_streams(Path(input_path).read_bytes()))
    with open(output_path, "wb") as handle:
        handle.writelines(pieces)
    return len(pieces)


def measure_ms(func: Callable[[], object]) -> int:
    """Call *func* and return how long it took in whole milliseconds."""
    start = time.perf_counter()
    func()
    return int((time.perf_counter() - start) * 1000)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a test file, compress and decompress it, and report the timings."""
    parser = argparse.ArgumentParser(description="Chunked zlib compression benchmark.")
    parser.add_argument("--input", default="test.txt")
    parser.add_argument("--compressed", default="test.txt.gz")
    parser.add_argument("--decompressed", default="test_decompressed.txt")
    parser.add_argument("--lines", type=int, default=1_000_000)
    args = parser.parse_args(argv)

    try:
        with open(args.input, "w", encoding="utf-8") as handle:
            handle.writelines(f"This is a test line. {i}\n" for i in range(args.lines))

        print("Starting compression...")
        elapsed = measure_ms(
            lambda: compress_file(args.input, args.compressed, zlib.Z_BEST_COMPRESSION)
        )
        print(f"Compression time: {elapsed} ms")

        print("Starting decompression...")
        elapsed = measure_ms(lambda: decompress_file(args.compressed, args.decompressed))
        print(f"Decompression time: {elapsed} ms")
    except (OSError, ChunkError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())