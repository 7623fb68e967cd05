# lz_window.py

from typing import Optional, Tuple, Union

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

ByteData = Union[bytes, bytearray, memoryview, np.ndarray]


class LZWindow:
    """
    Fixed-capacity byte buffer for LZ77.

    Used as the combined dictionary + lookahead buffer by the encoder and
    as the dictionary window by the decoder. Bytes leave at the front
    (oldest) and enter at the back (newest).
    """

    def __init__(self, size: int):
        """
        :param size: capacity in bytes
        """
        if size <= 0:
            raise ValueError("Window size must be positive")
        self.max_size = size
        self.buffer = np.zeros(size, dtype=np.uint8)

    def __len__(self) -> int:
        return self.max_size

    def __getitem__(self, index):
        return self.buffer[index]

    def __setitem__(self, index, value):
        self.buffer[index] = value

    def load(self, data: ByteData, at: int = 0) -> int:
        """
        Writes data into the buffer starting at position `at`.
        Returns the number of bytes written.
        """
        chunk = _as_array(data)
        if at < 0 or at + len(chunk) > self.max_size:
            raise ValueError(
                f"Cannot load {len(chunk)} bytes at {at} into a buffer of {self.max_size}"
            )
        self.buffer[at : at + len(chunk)] = chunk
        return len(chunk)

    def shift(self, n: int):
        """
        Drops the n oldest bytes, moving everything else towards the front.
        The last n slots keep stale values until they are refilled.
        """
        if n < 0 or n > self.max_size:
            raise ValueError(f"Cannot shift a buffer of {self.max_size} by {n}")
        if n == 0:
            return
        self.buffer[: self.max_size - n] = self.buffer[n:].copy()

    def append(self, data: ByteData):
        """
        Slides the buffer by len(data) and writes data at the tail.
        """
        chunk = _as_array(data)
        if len(chunk) > self.max_size:
            chunk = chunk[-self.max_size :]
        self.shift(len(chunk))
        self.load(chunk, self.max_size - len(chunk))

    def view(self, start: int = 0, stop: Optional[int] = None) -> np.ndarray:
        return self.buffer[start:stop]

    def get_bytes(self, dist: int, length: int) -> bytes:
        """
        Returns `length` bytes starting `dist` bytes back from the tail.
        """
        if not 0 < dist <= self.max_size or length > dist:
            raise ValueError(f"Cannot copy {length} bytes from distance {dist}")
        start = self.max_size - dist
        return self.buffer[start : start + length].tobytes()

    def tobytes(self) -> bytes:
        return self.buffer.tobytes()


def _as_array(data: ByteData) -> np.ndarray:
    if isinstance(data, np.ndarray):
        return data.astype(np.uint8, copy=False)
    return np.frombuffer(bytes(data), dtype=np.uint8)


def find_longest_match(
    window: ByteData, candidate: ByteData, max_len: int
) -> Optional[Tuple[int, int]]:
    """
    Finds the longest prefix of candidate (at most max_len bytes) that occurs
    entirely inside window.

    Lengths are tried from max_len down to 1 and window positions left to
    right, so among equal-length matches the oldest one wins. The search is
    done in one pass: for every window position the length of the common
    prefix with candidate is computed, then the first maximum is taken.

    Args:
        window: Dictionary bytes, position 0 is the oldest
        candidate: Lookahead bytes to match
        max_len: Longest match length to consider

    Returns:
        Tuple of (position, length) if a match is found, None otherwise
    """
    if max_len <= 0:
        return None
    target = _as_array(candidate)[:max_len].astype(np.int16)
    haystack = _as_array(window).astype(np.int16)
    max_len = len(target)
    if max_len == 0 or len(haystack) == 0:
        return None

    # -1 never equals a byte, so no match runs past the end of the window
    padded = np.concatenate((haystack, np.full(max_len - 1, -1, dtype=np.int16)))
    hits = sliding_window_view(padded, max_len) == target
    lengths = np.where(hits.all(axis=1), max_len, hits.argmin(axis=1))

    position = int(np.argmax(lengths))
    length = int(lengths[position])
    if length == 0:
        return None
    return position, length
