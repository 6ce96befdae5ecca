import random

import pytest

from chunkpress.zchunks import (
    CHUNK_SIZE,
    ChunkError,
    compress_chunk,
    compress_file,
    decompress_chunk,
    decompress_file,
    main,
    measure_ms,
    split_into_chunks,
)


def _random_bytes(count, seed=1234):
    rng = random.Random(seed)
    return bytes(rng.getrandbits(8) for _ in range(count))


def test_compressed_chunk_has_zlib_header():
    assert compress_chunk(b"abc", 9)[0] == 0x78


@pytest.mark.parametrize("level", [0, 1, 6, 9])
def test_chunk_round_trip(level):
    data = b"This is a test line. 42\n" * 200
    assert decompress_chunk(compress_chunk(data, level)) == data


def test_compression_shrinks_repetitive_data():
    data = b"repeat " * 1000
    assert len(compress_chunk(data, 9)) < len(data)


def test_invalid_level_raises():
    with pytest.raises(ChunkError):
        compress_chunk(b"data", 42)


def test_decompress_exact_limit():
    data = _random_bytes(100)
    assert decompress_chunk(compress_chunk(data, 9), len(data)) == data


def test_decompress_over_limit_raises():
    data = b"x" * 500
    with pytest.raises(ChunkError):
        decompress_chunk(compress_chunk(data, 9), len(data) - 1)


def test_decompress_truncated_raises():
    blob = compress_chunk(_random_bytes(300), 9)
    with pytest.raises(ChunkError):
        decompress_chunk(blob[: len(blob) // 2])


def test_decompress_garbage_raises():
    with pytest.raises(ChunkError):
        decompress_chunk(b"not a zlib stream at all")


def test_decompress_ignores_trailing_data():
    data = b"first"
    blob = compress_chunk(data, 6) + compress_chunk(b"second", 6)
    assert decompress_chunk(blob) == data


def test_split_into_chunks():
    data = _random_bytes(CHUNK_SIZE * 2 + 10)
    chunks = split_into_chunks(data)
    assert [len(c) for c in chunks] == [CHUNK_SIZE, CHUNK_SIZE, 10]
    assert b"".join(chunks) == data


def test_split_into_chunks_empty_and_invalid():
    assert split_into_chunks(b"") == []
    with pytest.raises(ValueError):
        split_into_chunks(b"abc", 0)


def test_file_round_trip(tmp_path):
    source = tmp_path / "in.bin"
    packed = tmp_path / "in.bin.gz"
    restored = tmp_path / "out.bin"
    data = b"".join(f"This is a test line. {i}\n".encode() for i in range(3000))
    data += _random_bytes(CHUNK_SIZE + 5)
    source.write_bytes(data)
    expected_chunks = len(split_into_chunks(data))
    assert compress_file(source, packed, 9) == expected_chunks
    assert decompress_file(packed, restored) == expected_chunks
    assert restored.read_bytes() == data


def test_empty_file_round_trip(tmp_path):
    source = tmp_path / "empty"
    source.write_bytes(b"")
    assert compress_file(source, tmp_path / "e.gz") == 0
    assert (tmp_path / "e.gz").read_bytes() == b""
    assert decompress_file(tmp_path / "e.gz", tmp_path / "e.out") == 0
    assert (tmp_path / "e.out").read_bytes() == b""


def test_compress_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        compress_file(tmp_path / "missing", tmp_path / "out")


def test_decompress_corrupt_file(tmp_path):
    bad = tmp_path / "bad.gz"
    bad.write_bytes(b"\x00\x01\x02garbage")
    with pytest.raises(ChunkError):
        decompress_file(bad, tmp_path / "out")


def test_measure_ms_calls_function():
    calls = []
    elapsed = measure_ms(lambda: calls.append(sum(range(10000))))
    assert calls == [sum(range(10000))]
    assert elapsed >= 0


def test_main_round_trip(tmp_path, capsys):
    source = tmp_path / "test.txt"
    packed = tmp_path / "test.txt.gz"
    restored = tmp_path / "restored.txt"
    result = main([
        "--input", str(source),
        "--compressed", str(packed),
        "--decompressed", str(restored),
        "--lines", "2000",
    ])
    assert result == 0
    assert restored.read_bytes() == source.read_bytes()
    out = capsys.readouterr().out
    assert "Starting compression..." in out
    assert "Done." in out