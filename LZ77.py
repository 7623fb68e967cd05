"""
This class implements the sliding-window LZ77 compression algorithm.
It compresses data by finding repeated sequences inside a fixed window and
encoding them as (offset, length, literal) records.
"""

from typing import BinaryIO, Optional

from byte_streaming import ByteInputStream, ByteOutputStream
from compressor_ABC import Compressor
from lz77_decoder import LZ77Decoder
from lz77_encoder import LZ77Encoder
from lz_config import DEFAULT_LOOKAHEAD_SIZE, DEFAULT_WINDOW_SIZE, LZ77Config


class LZ77(Compressor):
    """
    LZ77 compression algorithm implementation.

    The compressed stream starts with the first `window_size` bytes of the
    input, followed by records:

        [0xFF][byte]                 literal
        [offset][length][byte]       match plus trailing literal
        [offset][length]             match that ends the stream

    Both directions must be run with the same window and lookahead sizes.
    """

    def __init__(
        self,
        window_size: Optional[int] = None,
        lookahead_size: Optional[int] = None,
        verbose: bool = False,
    ):
        if window_size is None:
            window_size = DEFAULT_WINDOW_SIZE
        if lookahead_size is None:
            lookahead_size = DEFAULT_LOOKAHEAD_SIZE
        self.config = LZ77Config(window_size, lookahead_size)
        self.verbose = verbose
        self.bytes_consumed = 0
        self.bytes_produced = 0

    @property
    def window_size(self) -> int:
        return self.config.window_size

    @property
    def lookahead_size(self) -> int:
        return self.config.lookahead_size

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        byte_in = ByteInputStream(input_stream)
        byte_out = ByteOutputStream(output_stream)
        if self.verbose:
            print(
                f"Compressing with window={self.window_size}, "
                f"lookahead={self.lookahead_size}"
            )

        LZ77Encoder(byte_in, byte_out, self.config, self.verbose).process()
        byte_out.flush()

        self.bytes_consumed = byte_in.get_count()
        self.bytes_produced = byte_out.get_count()
        return self._log_sizes()

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        byte_in = ByteInputStream(input_stream)
        byte_out = ByteOutputStream(output_stream)
        if self.verbose:
            print(
                f"Decompressing with window={self.window_size}, "
                f"lookahead={self.lookahead_size}"
            )

        LZ77Decoder(byte_in, byte_out, self.config, self.verbose).process()
        byte_out.flush()

        self.bytes_consumed = byte_in.get_count()
        self.bytes_produced = byte_out.get_count()
        return self._log_sizes()

    def _log_sizes(self) -> str:
        log = [
            f"Input size: {self.bytes_consumed} bytes",
            f"Output size: {self.bytes_produced} bytes",
        ]
        diff = self.bytes_consumed - self.bytes_produced
        if diff > 0:
            ratio = diff / self.bytes_consumed * 100
            log.append(f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)")
        else:
            log.append(f"Size increased by {-diff} bytes")
        return "\n".join(log)
