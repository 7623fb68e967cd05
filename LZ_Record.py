# LZ_Record.py

from typing import Optional

from lz_config import SENTINEL


class LZRecord:
    """
    One record of the compressed body:
    - literal: offset is None, `literal` holds the raw byte,
      written as [0xFF][literal]
    - match: copy `length` bytes from `offset` bytes back in the window,
      then the trailing `literal` byte, written as [offset][length][literal].
      The trailing literal is None only for the last record of a stream.
    """

    __slots__ = ("offset", "length", "literal")

    def __init__(
        self, offset: Optional[int], length: int, literal: Optional[int] = None
    ):
        self.offset = offset
        self.length = length
        self.literal = literal

    @classmethod
    def literal_record(cls, value: int) -> "LZRecord":
        return cls(None, 0, int(value))

    @property
    def is_literal(self) -> bool:
        return self.offset is None

    @property
    def span(self) -> int:
        """Number of original bytes this record stands for."""
        return self.length + (self.literal is not None)

    def to_bytes(self) -> bytes:
        if self.is_literal:
            return bytes((SENTINEL, self.literal))
        if self.literal is None:
            return bytes((self.offset, self.length))
        return bytes((self.offset, self.length, self.literal))

    def __eq__(self, other):
        if not isinstance(other, LZRecord):
            return NotImplemented
        return (self.offset, self.length, self.literal) == (
            other.offset,
            other.length,
            other.literal,
        )

    def __hash__(self):
        return hash((self.offset, self.length, self.literal))

    def __repr__(self):
        if self.is_literal:
            return f"<LZRecord literal={self.literal}>"
        return (f"<LZRecord offset={self.offset} length={self.length} "
                f"literal={self.literal}>")
