import io
import random

import pytest

from LZ77 import LZ77
from lz_errors import (
    ConfigurationError,
    EmptyInputError,
    InputTooSmallError,
    SinkUnavailableError,
    SourceUnavailableError,
)

TEXT = (
    b"It was the best of times, it was the worst of times, it was the age of "
    b"wisdom, it was the age of foolishness, it was the epoch of belief, it "
    b"was the epoch of incredulity, it was the season of Light, it was the "
    b"season of Darkness, it was the spring of hope, it was the winter of "
    b"despair."
)
REFRAIN = b"to be or not to be, that is the question. " * 20


def random_bytes(seed, length, alphabet=None):
    rng = random.Random(seed)
    if alphabet is None:
        return bytes(rng.randrange(256) for _ in range(length))
    return bytes(rng.choice(alphabet) for _ in range(length))


def round_trip(data, **kwargs):
    compressed, _ = LZ77.compress_bytes(data, **kwargs)
    restored, _ = LZ77.decompress_bytes(compressed, **kwargs)
    return compressed, restored


class TestRoundTrip:
    @pytest.mark.parametrize("length", [100, 101, 102, 139, 140, 141, 1000, 4096])
    def test_small_alphabet(self, length):
        data = random_bytes(length, length, b"abcd")
        _, restored = round_trip(data)
        assert restored == data

    @pytest.mark.parametrize("length", [100, 101, 777])
    def test_random_bytes(self, length):
        data = random_bytes(length, length)
        compressed, restored = round_trip(data)
        assert restored == data
        # nothing repeats, so the body is mostly two-byte literals
        assert len(compressed) > len(data)

    @pytest.mark.parametrize(
        "window_size, lookahead_size",
        [(2, 1), (8, 4), (16, 15), (100, 50), (254, 253)],
    )
    def test_configurations(self, window_size, lookahead_size):
        options = dict(window_size=window_size, lookahead_size=lookahead_size)
        for seed in range(4):
            length = window_size + lookahead_size + seed * 37
            data = random_bytes(seed, length, b"xyz")
            _, restored = round_trip(data, **options)
            assert restored == data

    def test_every_tail_length(self):
        # covers every way the stream can end for a small buffer
        options = dict(window_size=8, lookahead_size=4)
        for extra in range(30):
            for alphabet in (b"a", b"ab", b"abcdefghijklmnop"):
                data = random_bytes(extra, 12 + extra, alphabet)
                _, restored = round_trip(data, **options)
                assert restored == data

    def test_text(self):
        _, restored = round_trip(TEXT * 4)
        assert restored == TEXT * 4

    def test_periodic_text_compresses(self):
        compressed, restored = round_trip(REFRAIN)
        assert restored == REFRAIN
        assert len(compressed) < len(REFRAIN) // 2

    def test_long_run(self):
        data = b"\x00" * 10000
        compressed, restored = round_trip(data)
        assert restored == data
        assert len(compressed) < len(data) // 10


class TestLZ77:
    def test_default_sizes(self):
        compressor = LZ77()
        assert compressor.window_size == 60
        assert compressor.lookahead_size == 40

    def test_invalid_sizes(self):
        with pytest.raises(ConfigurationError):
            LZ77(window_size=40, lookahead_size=40)

    def test_counts_and_log(self):
        compressor = LZ77()
        sink = io.BytesIO()
        log = compressor.compress(io.BytesIO(b"a" * 100), sink)
        assert compressor.bytes_consumed == 100
        assert compressor.bytes_produced == 62 == len(sink.getvalue())
        assert "Input size: 100 bytes" in log
        assert "Size reduced by 38 bytes" in log

        restored = io.BytesIO()
        log = compressor.decompress(io.BytesIO(sink.getvalue()), restored)
        assert restored.getvalue() == b"a" * 100
        assert compressor.bytes_produced == 100
        assert "Size increased by 38 bytes" in log

    def test_rejects_small_input(self):
        with pytest.raises(InputTooSmallError):
            LZ77.compress_bytes(b"a" * 99)

    def test_rejects_empty_input(self):
        with pytest.raises(EmptyInputError):
            LZ77.compress_bytes(b"")


class TestFiles:
    def test_file_round_trip(self, tmp_path):
        source = tmp_path / "text.txt"
        source.write_bytes(REFRAIN)
        packed = tmp_path / "text.lz77"
        restored = tmp_path / "restored.txt"

        log = LZ77.compress_file(str(source), str(packed))
        assert "Size reduced" in log
        LZ77.decompress_file(str(packed), str(restored))
        assert restored.read_bytes() == REFRAIN

    def test_missing_input(self, tmp_path):
        target = tmp_path / "out.lz77"
        with pytest.raises(SourceUnavailableError):
            LZ77.compress_file(str(tmp_path / "missing.txt"), str(target))
        assert not target.exists()

    def test_rejected_input_leaves_no_output(self, tmp_path):
        source = tmp_path / "tiny.txt"
        source.write_bytes(b"tiny")
        target = tmp_path / "tiny.lz77"
        with pytest.raises(InputTooSmallError):
            LZ77.compress_file(str(source), str(target))
        assert not target.exists()

    def test_custom_sizes_through_file_helpers(self, tmp_path):
        source = tmp_path / "data.bin"
        source.write_bytes(TEXT)
        packed = tmp_path / "data.lz77"
        restored = tmp_path / "data.out"
        options = dict(window_size=120, lookahead_size=30)

        LZ77.compress_file(str(source), str(packed), **options)
        LZ77.decompress_file(str(packed), str(restored), **options)
        assert restored.read_bytes() == TEXT

    def test_unwritable_output(self, tmp_path):
        source = tmp_path / "text.txt"
        source.write_bytes(REFRAIN)
        target = tmp_path / "missing_dir" / "text.lz77"
        with pytest.raises(SinkUnavailableError):
            LZ77.compress_file(str(source), str(target))
        assert not target.exists()

    def test_output_same_as_input_keeps_input(self, tmp_path):
        source = tmp_path / "text.txt"
        source.write_bytes(REFRAIN)
        with pytest.raises(SinkUnavailableError):
            LZ77.compress_file(str(source), str(source))
        assert source.read_bytes() == REFRAIN

    def test_same_file_decompression_keeps_input(self, tmp_path):
        packed = tmp_path / "text.lz77"
        packed.write_bytes(LZ77.compress_bytes(REFRAIN)[0])
        with pytest.raises(OSError):
            LZ77.decompress_file(str(packed), str(packed))
        assert LZ77.decompress_bytes(packed.read_bytes())[0] == REFRAIN
