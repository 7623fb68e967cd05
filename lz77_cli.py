"""
Command line front-end for the LZ77 compressor.

Usage::

    lz77 -c notes.txt                      # writes notes.txt.lz77
    lz77 -d notes.txt.lz77 -o restored.txt
    lz77 -c notes.txt -w 120 -l 80 -v

Options:
    -c / -d             Compress or decompress INPUT
    -o, --output        Output path (default: INPUT.lz77 when compressing,
                        INPUT without .lz77 when decompressing)
    -w, --window-size   Dictionary window size (default: 60)
    -l, --lookahead-size
                        Lookahead buffer size (default: 40)
    -v, --verbose       Print every record
"""

import argparse
import sys
import time
from typing import List, Optional

from LZ77 import LZ77
from lz_config import DEFAULT_LOOKAHEAD_SIZE, DEFAULT_WINDOW_SIZE
from lz_errors import EmptyInputError, InputTooSmallError, LZ77Error

COMPRESSED_SUFFIX = ".lz77"


def default_output(input_file: str, decompress: bool) -> str:
    if not decompress:
        return input_file + COMPRESSED_SUFFIX
    if input_file.endswith(COMPRESSED_SUFFIX) and len(input_file) > len(COMPRESSED_SUFFIX):
        return input_file[: -len(COMPRESSED_SUFFIX)]
    return input_file + ".out"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lz77",
        description="Sliding-window LZ77 compressor",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-c", "--compress", action="store_true", help="compress INPUT")
    mode.add_argument("-d", "--decompress", action="store_true", help="decompress INPUT")
    parser.add_argument("input", help="file to process")
    parser.add_argument("-o", "--output", help="output file")
    parser.add_argument(
        "-w", "--window-size", type=int, default=DEFAULT_WINDOW_SIZE,
        help=f"dictionary window size (default: {DEFAULT_WINDOW_SIZE})",
    )
    parser.add_argument(
        "-l", "--lookahead-size", type=int, default=DEFAULT_LOOKAHEAD_SIZE,
        help=f"lookahead buffer size (default: {DEFAULT_LOOKAHEAD_SIZE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="print every record")
    return parser


def run(args: argparse.Namespace) -> int:
    output = args.output or default_output(args.input, args.decompress)
    options = dict(
        window_size=args.window_size,
        lookahead_size=args.lookahead_size,
        verbose=args.verbose,
    )

    if args.decompress:
        try:
            log = LZ77.decompress_file(args.input, output, **options)
        except LZ77Error as exc:
            print(f"Decompression FAIL: {exc}", file=sys.stderr)
            return 1
        print(log)
        print("Decompression OK")
        return 0

    try:
        log = LZ77.compress_file(args.input, output, **options)
    except EmptyInputError:
        print("File is EMPTY", file=sys.stderr)
        return 1
    except InputTooSmallError as exc:
        print(f"File too small: {exc}", file=sys.stderr)
        return 1
    except LZ77Error as exc:
        print(f"Compression FAIL: {exc}", file=sys.stderr)
        return 1
    print(log)
    print("Compression OK")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    begin = time.time()
    status = run(args)
    end = time.time()

    print(f"Execution time: {end - begin:f} [seconds]")
    return status


if __name__ == "__main__":
    sys.exit(main())
