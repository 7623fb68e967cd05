"""
LZ77 encoder driving one combined dictionary + lookahead buffer.
"""

from typing import Iterator, Optional

from byte_streaming import ByteInputStream, ByteOutputStream
from lz_config import LZ77Config
from lz_errors import EmptyInputError, InputTooSmallError
from lz_window import LZWindow, find_longest_match
from LZ_Record import LZRecord


class LZ77Encoder:
    """
    Compresses a byte stream into a W-byte header followed by LZ77 records.

    The combined buffer holds the window (first W bytes) and the lookahead
    (last B bytes). Near the end of the input the tail of the lookahead
    stops holding real bytes; `end_offset` counts those virtual slots and
    shrinks the searched length until nothing real is left.
    """

    def __init__(
        self,
        byte_in: ByteInputStream,
        byte_out: ByteOutputStream,
        config: Optional[LZ77Config] = None,
        verbose: bool = False,
    ):
        self.in_stream = byte_in
        self.out_stream = byte_out
        self.config = config or LZ77Config()
        self.verbose = verbose
        self.buffer = LZWindow(self.config.buffer_size)
        self.at_end = False
        self.end_offset = 0
        self.position = 0

    def process(self) -> int:
        """Encode the whole input; return total output byte count."""
        header = self.prime()
        self.out_stream.write(header)
        records = 0
        for record in self.records():
            self.out_stream.write(record.to_bytes())
            records += 1
        if self.verbose:
            print(
                f"Encoded {self.in_stream.get_count()} bytes into "
                f"{records} records ({self.out_stream.get_count()} bytes)"
            )
        return self.out_stream.get_count()

    def prime(self) -> bytes:
        """
        Fill the combined buffer from the source and return the header
        (the first W bytes). Nothing is written here, so a rejected input
        leaves the sink untouched.
        """
        required = self.config.buffer_size
        initial = self.in_stream.read(required)
        if not initial:
            raise EmptyInputError("Input is empty")
        if len(initial) < required:
            raise InputTooSmallError(len(initial), required)
        self.buffer.load(initial)
        self.at_end = False
        self.end_offset = 0
        self.position = self.config.window_size
        return initial[: self.config.window_size]

    def records(self) -> Iterator[LZRecord]:
        """Yield the records for everything after the header."""
        window_size = self.config.window_size
        lookahead_size = self.config.lookahead_size

        while True:
            next_byte = self._read_next()

            size = lookahead_size - self.end_offset
            if size <= 0:
                break

            window = self.buffer.view(0, window_size)
            lookahead = self.buffer.view(window_size)
            match = find_longest_match(window, lookahead, size)

            if match is None:
                record = LZRecord.literal_record(lookahead[0])
                shift = 1
            else:
                pos, length = match
                offset = window_size - pos
                if length == lookahead_size:
                    shift = lookahead_size + 1
                    if self.at_end:
                        record = LZRecord(offset, length)
                        self.end_offset = 1
                    else:
                        record = LZRecord(offset, length, next_byte)
                elif length + self.end_offset == lookahead_size:
                    # match ends exactly at the last real byte
                    record = LZRecord(offset, length)
                    self._trace(record)
                    yield record
                    break
                else:
                    record = LZRecord(offset, length, int(lookahead[length]))
                    shift = length + 1

            self._trace(record)
            yield record
            self.position += record.span
            self._advance(shift, next_byte)

    def _read_next(self) -> Optional[int]:
        if self.at_end:
            return None
        try:
            return self.in_stream.read_byte()
        except EOFError:
            self.at_end = True
            return None

    def _advance(self, shift: int, next_byte: Optional[int]):
        capacity = self.config.buffer_size
        self.buffer.shift(shift)

        if self.at_end:
            self.end_offset += shift
            return

        self.buffer[capacity - shift] = next_byte
        if shift > 1:
            refill = self.in_stream.read(shift - 1)
            self.buffer.load(refill, capacity - shift + 1)
            self.end_offset += shift - 1 - len(refill)

    def _trace(self, record: LZRecord):
        if not self.verbose:
            return
        if record.is_literal:
            print(f"Literal at position {self.position}: {record.literal}")
        else:
            print(
                f"Match at position {self.position}: offset={record.offset}, "
                f"length={record.length}, literal={record.literal}"
            )
