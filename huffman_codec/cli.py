"""
Command line front end for the Huffman codec
"""
import argparse
import os
import sys

from huffman_codec.compressor import HuffmanCompressor
from huffman_codec.errors import HuffmanError
from huffman_codec.frequency import char_frequency
from huffman_codec.huffman_coding import HuffmanTree

SUFFIX = ".huf"


def default_output(input_file: str, encode: bool) -> str:
    if encode:
        return input_file + SUFFIX
    root, ext = os.path.splitext(input_file)
    if ext == SUFFIX:
        return root
    return input_file + ".out"


def print_codes(input_file: str) -> None:
    with open(input_file, "rb") as f:
        data = f.read()
    tree = HuffmanTree.build_from_freq(char_frequency(data))
    for line in tree.describe_codes():
        print(line)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huffman-codec", description="Huffman file compressor")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--encode", dest="encode", action="store_true", default=True,
                      help="Compress FILE (default)")
    mode.add_argument("--decode", dest="encode", action="store_false",
                      help="Decompress FILE")
    p.add_argument("-f", "--file", dest="infile", required=True, help="Input file")
    p.add_argument("-o", "--out", dest="outfile", default=None,
                   help=f"Output file (default: FILE{SUFFIX} on encode, FILE without {SUFFIX} on decode)")
    p.add_argument("--codes", action="store_true", help="Print the code table of FILE (encode only)")
    p.add_argument("-v", "--verbose", action="store_true", help="Print stage information")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.codes and not args.encode:
        parser.error("--codes can only be used when encoding")
    outfile = args.outfile or default_output(args.infile, args.encode)

    try:
        if args.encode:
            print(f"Encoding {args.infile} -> {outfile}")
            if args.codes:
                print_codes(args.infile)
            log_info = HuffmanCompressor.compress_file(args.infile, outfile, verbose=args.verbose)
        else:
            print(f"Decoding {args.infile} -> {outfile}")
            log_info = HuffmanCompressor.decompress_file(args.infile, outfile, verbose=args.verbose)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except HuffmanError as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(log_info)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
