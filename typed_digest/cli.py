#!/usr/bin/env python3
"""
typed-digest command line interface

Usage:
    typed-digest <file|-> [--part digest|domain|message|type] [--json] [--sign] [-v]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict

from .config import settings
from .eip712 import domain_separator, eip712_hash, encode_type, hash_struct
from .errors import SigningError, TypedDataError, create_structured_error_response
from .hexutil import bytes_to_hex
from .schemas import TypedMessage
from .signing import sign_digest

logger = logging.getLogger(__name__)

PARTS = ("digest", "domain", "message", "type")


def compute_parts(typed: TypedMessage, digest: bytes) -> Dict[str, str]:
    """Every printable piece of a typed message's hash."""
    return {
        "type": encode_type(typed.primary_type, typed.types).decode("utf-8"),
        "domain": bytes_to_hex(domain_separator(typed.domain, typed.types)),
        "message": bytes_to_hex(hash_struct(typed.primary_type, typed.message, typed.types)),
        "digest": bytes_to_hex(digest),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="typed-digest", description="Compute EIP-712 typed-data hashes")
    parser.add_argument("file", help="Typed-data JSON document, '-' for stdin")
    parser.add_argument("--part", choices=PARTS, default="digest", help="Which value to print (default: digest)")
    parser.add_argument("--json", action="store_true", help="Print every part as one JSON object")
    parser.add_argument("--sign", action="store_true", help="Sign the digest with TYPED_DIGEST_PRIVATE_KEY")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_document(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.sign and not settings.TYPED_DIGEST_PRIVATE_KEY:
        print("[CONFIG] Missing env var: TYPED_DIGEST_PRIVATE_KEY", file=sys.stderr)
        return 2

    try:
        text = load_document(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    try:
        typed = TypedMessage.from_json(text)
        digest = eip712_hash(typed.primary_type, typed.message, typed.types, typed.domain)
        parts = compute_parts(typed, digest)
        signature = None
        if args.sign:
            signature = sign_digest(settings.TYPED_DIGEST_PRIVATE_KEY, digest)
    except SigningError as e:
        print(json.dumps(create_structured_error_response(e)), file=sys.stderr)
        return 2
    except TypedDataError as e:
        logger.debug("typed data rejected: %s", e.details)
        print(json.dumps(create_structured_error_response(e)), file=sys.stderr)
        return 1

    if args.json:
        out = dict(parts)
        if signature:
            out["signature"] = signature
        print(json.dumps(out, indent=2))
    elif signature:
        print(json.dumps(signature, indent=2))
    else:
        print(parts[args.part])
    return 0


if __name__ == "__main__":
    sys.exit(main())
