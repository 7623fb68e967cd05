"""
Window and lookahead sizes shared by the encoder and the decoder.
"""

from dataclasses import dataclass

from lz_errors import ConfigurationError

# Offsets and lengths are written as single bytes, 0xFF is reserved
DEFAULT_WINDOW_SIZE = 60
DEFAULT_LOOKAHEAD_SIZE = 40
SENTINEL = 0xFF


@dataclass(frozen=True)
class LZ77Config:
    """
    Sizes of the dictionary window (W) and the lookahead buffer (B).

    Both sides of a stream must use the same pair, the format does not
    record it.
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    lookahead_size: int = DEFAULT_LOOKAHEAD_SIZE

    def __post_init__(self):
        if not 0 < self.lookahead_size < self.window_size < SENTINEL:
            raise ConfigurationError(
                f"Need 0 < lookahead_size < window_size < {SENTINEL}, "
                f"got window_size={self.window_size}, "
                f"lookahead_size={self.lookahead_size}"
            )

    @property
    def buffer_size(self) -> int:
        """Capacity of the combined window + lookahead buffer."""
        return self.window_size + self.lookahead_size
