"""
Byte source and byte sink used by the LZ77 encoder and decoder.
Both wrap a binary file-like object and count the bytes that pass through.
"""
from lz_errors import SinkUnavailableError, SourceUnavailableError


class ByteInputStream:
    """A utility class for reading byte streams."""

    def __init__(self, in_stream):
        """
        Create a new byte input stream.

        Args:
            in_stream: A readable binary stream
        """
        self.in_stream = in_stream
        self.count = 0
        self.exhausted = False

    def get_count(self):
        """
        Return the number of bytes read.

        Returns:
            The byte count
        """
        return self.count

    def read_byte(self):
        """
        Read a single byte.

        Returns:
            The byte value
        """
        b = self.read(1)
        if not b:
            raise EOFError("End of file reached")
        return b[0]

    def read(self, n):
        """
        Read up to n bytes. Fewer than n are returned only at end of data.

        Args:
            n: The number of bytes wanted

        Returns:
            The bytes read
        """
        chunks = []
        remaining = n
        while remaining > 0 and not self.exhausted:
            try:
                chunk = self.in_stream.read(remaining)
            except OSError as exc:
                raise SourceUnavailableError(f"Read failed: {exc}") from exc
            if not chunk:
                self.exhausted = True
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        self.count += len(data)
        return data


class ByteOutputStream:
    """A utility class for writing byte streams."""

    def __init__(self, out_stream):
        """
        Create a new byte output stream.

        Args:
            out_stream: A writable binary stream
        """
        self.out_stream = out_stream
        self.count = 0

    def get_count(self):
        """
        Return the number of bytes written.

        Returns:
            The byte count
        """
        return self.count

    def write(self, b):
        """
        Write an array of bytes.

        Args:
            b: The byte array
        """
        data = bytes(b)
        try:
            self.out_stream.write(data)
        except OSError as exc:
            raise SinkUnavailableError(f"Write failed: {exc}") from exc
        self.count += len(data)

    def flush(self):
        """Flush the underlying stream, if it can be flushed."""
        flush = getattr(self.out_stream, "flush", None)
        if flush is not None:
            flush()
