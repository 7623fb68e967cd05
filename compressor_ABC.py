from abc import ABC, abstractmethod
import io
import os
from typing import BinaryIO, Tuple

from lz_errors import LZ77Error, SinkUnavailableError, SourceUnavailableError


class Compressor(ABC):
    """
    Interface for stream compressors.

    Subclasses implement `compress` / `decompress` over binary streams; the
    file and bytes helpers build an instance from keyword arguments and
    wrap the streams.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads bytes from the input stream and writes the compressed form to
        the output stream.

        Args:
            input_stream: Input stream with the original data
            output_stream: Output stream for the compressed data

        Returns:
            Log information about the run
        """
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads compressed bytes from the input stream and writes the restored
        data to the output stream.

        Args:
            input_stream: Input stream with the compressed data
            output_stream: Output stream for the restored data

        Returns:
            Log information about the run
        """
        pass

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper that compresses one file into another.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file
            **kwargs: Options passed to the compressor constructor

        Returns:
            Log information about the run
        """
        compressor = cls(**kwargs)
        return cls._run_on_files(compressor.compress, input_file, output_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper that decompresses one file into another.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file
            **kwargs: Options passed to the compressor constructor

        Returns:
            Log information about the run
        """
        compressor = cls(**kwargs)
        return cls._run_on_files(compressor.decompress, input_file, output_file)

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper that compresses a bytes object.

        Args:
            data: Input data
            **kwargs: Options passed to the compressor constructor

        Returns:
            Tuple (compressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper that decompresses a bytes object.

        Args:
            data: Compressed data
            **kwargs: Options passed to the compressor constructor

        Returns:
            Tuple (decompressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @staticmethod
    def _run_on_files(operation, input_file: str, output_file: str) -> str:
        # a failed run must not leave a partial output file behind
        try:
            in_file = open(input_file, 'rb')
        except OSError as exc:
            raise SourceUnavailableError(
                f"Unable to open input file {input_file}: {exc}"
            ) from exc

        with in_file:
            if os.path.exists(output_file) and os.path.samefile(input_file, output_file):
                raise SinkUnavailableError(
                    f"Output file {output_file} is the input file"
                )
            try:
                out_file = open(output_file, 'wb')
            except OSError as exc:
                raise SinkUnavailableError(
                    f"Unable to open output file {output_file}: {exc}"
                ) from exc

            try:
                with out_file:
                    return operation(in_file, out_file)
            except (LZ77Error, OSError):
                if os.path.exists(output_file):
                    os.remove(output_file)
                raise
