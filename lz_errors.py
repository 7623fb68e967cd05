"""
Exceptions raised by the LZ77 compressor and decompressor.
"""


class LZ77Error(Exception):
    """Base class for every LZ77 failure."""


class ConfigurationError(LZ77Error, ValueError):
    """Window / lookahead sizes violate 0 < lookahead < window < 255."""


class SourceUnavailableError(LZ77Error, OSError):
    """The input cannot be opened or read."""


class SinkUnavailableError(LZ77Error, OSError):
    """The output cannot be opened or written, or it is the input itself."""


class EmptyInputError(LZ77Error, ValueError):
    """The input holds zero bytes."""


class InputTooSmallError(LZ77Error, ValueError):
    """
    The input is shorter than window + lookahead bytes.
    The format has no encoding for such inputs.
    """

    def __init__(self, length: int, required: int):
        super().__init__(
            f"Input has {length} bytes, at least {required} are required"
        )
        self.length = length
        self.required = required


class TruncatedStreamError(LZ77Error, EOFError):
    """The compressed stream ends in the middle of the header or a record."""


class MalformedRecordError(LZ77Error, ValueError):
    """A record carries an offset or length outside the configured bounds."""
