from typing import Iterator, Optional

from byte_streaming import ByteInputStream, ByteOutputStream
from lz_config import SENTINEL, LZ77Config
from lz_errors import EmptyInputError, MalformedRecordError, TruncatedStreamError
from lz_window import LZWindow
from LZ_Record import LZRecord


class LZ77Decoder:
    """
    Replays LZ77 records from a byte stream, using the same window and
    lookahead sizes the stream was compressed with.
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
        self.window = LZWindow(self.config.window_size)
        self.done = False

    def process(self) -> int:
        """Decode the whole stream; return total output byte count."""
        header = self.prime()
        self.out_stream.write(header)
        for record in self.records():
            self._write_bytes(self._replay(record))
        if self.verbose:
            print(
                f"Decoded {self.in_stream.get_count()} bytes into "
                f"{self.out_stream.get_count()} bytes"
            )
        return self.out_stream.get_count()

    def prime(self) -> bytes:
        """Load the window from the header and return it."""
        window_size = self.config.window_size
        header = self.in_stream.read(window_size)
        if not header:
            raise EmptyInputError("Compressed stream is empty")
        if len(header) < window_size:
            raise TruncatedStreamError(
                f"Header has {len(header)} of {window_size} bytes"
            )
        self.window.load(header)
        self.done = False
        return header

    def records(self) -> Iterator[LZRecord]:
        """Parse the body into records until the stream ends."""
        while not self.done:
            pair = self.in_stream.read(2)
            if not pair:
                break
            if len(pair) < 2:
                raise TruncatedStreamError(
                    f"Stream ends inside a record at byte {self.in_stream.get_count()}"
                )
            offset, length = pair
            if offset == SENTINEL:
                yield LZRecord.literal_record(length)
                continue

            self._check_match(offset, length)
            try:
                literal = self.in_stream.read_byte()
            except EOFError:
                # last record, the match runs to the end of the stream
                self.done = True
                literal = None
            yield LZRecord(offset, length, literal)

    def _check_match(self, offset: int, length: int):
        if not 1 <= offset <= self.config.window_size:
            raise MalformedRecordError(f"Offset {offset} outside the window")
        if not 1 <= length <= self.config.lookahead_size:
            raise MalformedRecordError(f"Length {length} outside the lookahead")
        if length > offset:
            raise MalformedRecordError(
                f"Length {length} runs past the window end from offset {offset}"
            )

    def _replay(self, record: LZRecord) -> bytes:
        if record.is_literal:
            produced = bytes([record.literal])
        else:
            produced = self.window.get_bytes(record.offset, record.length)
            if record.literal is not None:
                produced += bytes([record.literal])
        if self.verbose:
            print(f"  {record!r} -> {len(produced)} bytes")
        self.window.append(produced)
        return produced

    def _write_bytes(self, data: bytes):
        self.out_stream.write(data)
