#!/usr/bin/env python3

"""Command line decoder for hex-encoded Cardano transactions.

Prints the decoded transaction as JSON; exits with 1 when decoding failed.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .canonjson import dumps_pretty
from .cardano import DecodeOptions, decode_cardano_transaction
from .codec.hashes import compute_transaction_hash
from .runtime.errors import HashComputationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tx-decoder",
        description="Decode a hex-encoded Cardano transaction into JSON",
    )
    parser.add_argument("payload", nargs="?", default="-",
                        help="Hex payload, or - to read it from stdin (default)")
    parser.add_argument("--hash", action="store_true",
                        help="Also compute the Blake2b-256 transaction id")
    parser.add_argument("--drop-unknown-fields", action="store_true",
                        help="Drop body keys outside the known field table")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Fail on CBOR nesting deeper than this")
    parser.add_argument("--indent", type=int, default=2,
                        help="JSON indentation (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = DecodeOptions(
            keep_unknown_fields=not args.drop_unknown_fields,
            max_depth=args.max_depth,
        )
    except ValidationError as e:
        parser.error(f"invalid options: {e.errors()[0]['msg']}")

    payload = sys.stdin.read() if args.payload == "-" else args.payload
    result = decode_cardano_transaction(payload, options)
    output = result.to_dict()

    if args.hash and result.ok:
        try:
            output["transaction_hash"] = compute_transaction_hash(payload)
        except HashComputationError as e:
            logger.warning(f"Could not compute transaction hash: {e}")
            output["transaction_hash"] = None

    print(dumps_pretty(output, indent=args.indent))
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
