# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Symmetric HD - Hierarchical Deterministic Symmetric Keys

Derives a tree of symmetric keys from a single secret using only keyed hashing
(HMAC) and HKDF, in the manner of hierarchical deterministic wallets but
without elliptic-curve operations.

Modules:
    codec: index string classification and 32-bit encoding
    primitives: salts, fingerprints, constant-time comparison
    kdf: HKDF extract-then-expand
    schema: derivation path schema parsing
    path: derivation path parsing against a schema
    keys: master, child, node derivation and lineage verification

Example Usage:
    >>> from cryptography.hazmat.primitives import hashes
    >>> from symmetric_hd import master, node, lineage, parse_schema, parse_path
    >>>
    >>> h = hashes.SHA256()
    >>> schema = parse_schema("m / application: any / purpose: any / context: any / index: num")
    >>> path = parse_path(h, "m/42/0/1/0", schema)
    >>>
    >>> m = master(h, bytes(32))
    >>> key = node(h, m, path)
    >>> key.key_hex
    '7bc626147a8441fd808a42dbfb889a083f1cbd3065b5921e1a28a53db0d3781f'
"""

__version__ = "0.1.0"

# Index codec
from .codec import (
    SegmentType,
    alphabetic_index,
    classify_index,
    encode_index,
    parse_numeric_index,
    resolve_index,
    secret_from_hex,
)

# Errors
from .exceptions import (
    HDKeyError,
    InvalidPath,
    InvalidSchema,
    LineageShapeError,
    PrimitiveFailure,
)

# Keyed-hash primitives
from .primitives import (
    calc_salt,
    constant_time_compare,
    fingerprint,
    get_algorithm,
)

# Key derivation
from .kdf import derive
from .schema import DEFAULT_SCHEMA, Schema, Segment, parse_schema
from .path import Path, parse_path
from .keys import (
    HDKey,
    child,
    derive_child,
    derive_path,
    lineage,
    master,
    node,
)

# Define public API
__all__ = [
    # Codec
    "SegmentType",
    "alphabetic_index",
    "classify_index",
    "encode_index",
    "parse_numeric_index",
    "resolve_index",
    "secret_from_hex",
    # Errors
    "HDKeyError",
    "InvalidPath",
    "InvalidSchema",
    "LineageShapeError",
    "PrimitiveFailure",
    # Primitives
    "calc_salt",
    "constant_time_compare",
    "fingerprint",
    "get_algorithm",
    "derive",
    # Schema and path
    "DEFAULT_SCHEMA",
    "Schema",
    "Segment",
    "parse_schema",
    "Path",
    "parse_path",
    # Keys
    "HDKey",
    "child",
    "derive_child",
    "derive_path",
    "lineage",
    "master",
    "node",
]
