# chunkpress

Small tools for compressing data in independent chunks, plus two demos.

## Installation

```
pip install .
```

To run the tests, install the `test` extra as well and run `pytest`:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `chunkpress-zchunks` | Writes a large test file. Compresses it with zlib in 16 KiB chunks spread over four worker threads, then decompresses it again. Prints how long each step took. |
| `chunkpress-rle` | Reads `input.txt` and run-length encodes it, first in one thread and then in four chunks at once. Writes `compressed.txt` and `decompressed.txt`. |
| `chunkpress-textfile` | Writes two lines to `sample.txt`, appends a third line and prints the file's contents. |
| `chunkpress-snake` | Opens a window with a snake game, drawn with pygame. |

## Library use

### zlib chunks

```python
from chunkpress.zchunks import compress_chunk, decompress_chunk, compress_file, decompress_file

packed = compress_chunk(b"hello" * 100, 9)
assert decompress_chunk(packed, 32768) == b"hello" * 100

compress_file("test.txt", "test.txt.gz", 9)
decompress_file("test.txt.gz", "test_decompressed.txt")
```

If a chunk cannot be compressed or decompressed, the error raised is `ChunkError`.

### Run-length encoding

Each run of characters is written as the character followed by the length of the run:

```python
from chunkpress.rle import rle_compress, rle_decompress, compress_parallel

rle_compress("aaabcc")        # "a3b1c2"
rle_decompress("a3b1c2")      # "aaabcc"
compress_parallel("aaaabbbb", 2)
```

### Snake

`SnakeGame` holds the rules of the game and works without a window. Steer the snake with `turn(dx, dy)`, move it one step with `update()`, and start over with `reset()`. The function `run(game)` opens a pygame window and plays the game in it.