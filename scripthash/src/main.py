"""
scripthash - Main Entry Point
Computes the from-scratch SHA-256 digest of a string from the command line.
"""

import argparse
import logging
import sys

from src.core_crypto.bits import SUPPORTED_ENCODINGS
from src.core_crypto.sha256 import hash_input
from src.integrity.line_item import secure_compare


def build_parser():
    parser = argparse.ArgumentParser(
        prog="scripthash",
        description="Compute the SHA-256 digest of a string as lowercase hex.",
    )
    parser.add_argument("input", help="text to hash, or a 0x-prefixed hex string")
    parser.add_argument(
        "-e", "--encoding",
        choices=SUPPORTED_ENCODINGS,
        default="ascii",
        help="how to interpret INPUT (default: ascii)",
    )
    parser.add_argument(
        "--expect",
        metavar="HASH",
        help="compare the digest with HASH; exit 1 if they differ",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv=None):
    """Main entry point for scripthash."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        digest = hash_input(args.input, args.encoding)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(digest)

    if args.expect is not None and not secure_compare(digest, args.expect):
        print("mismatch", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
