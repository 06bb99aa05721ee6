# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Command-line interface for symmetric HD key derivation.

Secrets are passed as hex. Derived key material is printed to stdout and is
never logged.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .codec import secret_from_hex
from .config import configure_logging, get_settings
from .keys import HDKey, lineage, master, node
from .path import parse_path
from .primitives import get_algorithm
from .schema import parse_schema

logger = logging.getLogger(__name__)


def print_key(key: HDKey) -> None:
    """Print the public and secret parts of a key."""
    print(f"Depth:       {key.depth}")
    print(f"Key:         {key.key_hex}")
    print(f"Chain code:  {key.chain_code_hex}")
    print(f"Fingerprint: {key.fingerprint_hex}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    config = get_settings()

    parser = argparse.ArgumentParser(
        prog='symmetric_hd',
        description='Symmetric hierarchical deterministic key derivation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Derive the key at the default path from an all-zero secret
  python -m symmetric_hd derive --secret 00000000000000000000000000000000

  # Derive with a custom path and schema
  python -m symmetric_hd derive --secret 7265706c696372 \\
      --schema "m / app: str / index: num" --path m/wallet/7

  # Verify that the key at a path is the child of its parent path
  python -m symmetric_hd lineage --secret 7265706c696372 --path m/42/0/1/0

  # Validate a schema
  python -m symmetric_hd schema "m / application: any / index: num"
        """
    )

    parser.add_argument(
        '--algorithm',
        default=config.hash_algorithm,
        help=f'Hash algorithm (default: {config.hash_algorithm})'
    )

    parser.add_argument(
        '--log-level',
        default=config.log_level,
        help=f'Logging level (default: {config.log_level})'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    for name, help_text in (
        ('derive', 'Derive the master key or the key at a path'),
        ('lineage', 'Verify the key at a path against its parent'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            '--secret',
            required=True,
            help='Secret as a hex string'
        )
        sub.add_argument(
            '--path',
            default=config.default_path,
            help=f'Derivation path (default: {config.default_path})'
        )
        sub.add_argument(
            '--schema',
            default=config.default_schema,
            help='Derivation path schema (default: %(default)s)'
        )

    schema_parser = subparsers.add_parser('schema', help='Validate a schema')
    schema_parser.add_argument('text', help='Schema string')

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command and return the exit code."""
    if args.command == 'schema':
        schema = parse_schema(args.text)
        print(schema)
        return 0

    algorithm = get_algorithm(args.algorithm)
    schema = parse_schema(args.schema)
    secret = secret_from_hex(args.secret)

    master_key = master(algorithm, secret)
    path = parse_path(algorithm, args.path, schema)

    if args.command == 'derive':
        print_key(node(algorithm, master_key, path) if len(path) else master_key)
        return 0

    # lineage
    if len(path) == 0:
        print("Error: lineage needs a path with at least one index")
        return 1

    key = node(algorithm, master_key, path)
    parent = master_key if len(path) == 1 else node(algorithm, master_key, path.indices[:-1])
    verified = lineage(algorithm, key, parent)
    print(f"Lineage {'verified' if verified else 'NOT verified'} for {path}")
    return 0 if verified else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        return run(args)
    except ValueError as e:
        logger.debug(f"{type(e).__name__} raised by {args.command}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
