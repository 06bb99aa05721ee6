# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Symmetric hierarchical deterministic key derivation.

Derivation is a linear walk over depths:

    master(secret) -> child(index_0) -> child(index_1) -> ...

Master:  salt = calc_salt(secret)
         okm  = HKDF(secret, salt, "MASTER", 64)
         key, chain_code = okm[:32], okm[32:]
         fingerprint = HMAC(secret, key)[:16]

Child:   salt = calc_salt(parent.chain_code, context=index as 4 BE bytes)
         okm  = HKDF(parent.chain_code, salt, "CHILD<index>", 64)
         key, chain_code = okm[:32], okm[32:]
         fingerprint = HMAC(parent.key, key)[:16]

Salt and HKDF inputs come from the chain code while the fingerprint comes from
the key. A derived key keeps no reference to its parent; lineage is re-verified
by recomputing the fingerprint.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence, Union

from cryptography.hazmat.primitives import hashes

from .codec import MAX_INDEX, SegmentType, encode_index, resolve_index
from .exceptions import InvalidPath, LineageShapeError, PrimitiveFailure
from .kdf import derive
from .path import parse_path
from .primitives import FINGERPRINT_LENGTH, calc_salt, constant_time_compare, fingerprint
from .schema import Schema

logger = logging.getLogger(__name__)

KEY_LENGTH = 32
CHAIN_CODE_LENGTH = 32

MASTER_INFO = "MASTER"
CHILD_INFO_PREFIX = "CHILD"


@dataclass(frozen=True)
class HDKey:
    """
    A symmetric hierarchical deterministic key.

    Attributes:
        key: 32-byte cryptographic key
        chain_code: 32-byte chain code, only used to derive children
        depth: 0 for a master key, parent depth + 1 otherwise
        fingerprint: 16-byte MAC over the key, keyed by the parent key
            (or the secret for a master key)
    """

    key: bytes = field(repr=False)
    chain_code: bytes = field(repr=False)
    depth: int
    fingerprint: bytes

    def __post_init__(self) -> None:
        """Validate field constraints."""
        for name in ("key", "chain_code", "fingerprint"):
            value = getattr(self, name)
            if not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
            object.__setattr__(self, name, bytes(value))

        if len(self.key) != KEY_LENGTH:
            raise ValueError(f"Key must be {KEY_LENGTH} bytes, got {len(self.key)}")
        if len(self.chain_code) != CHAIN_CODE_LENGTH:
            raise ValueError(
                f"Chain code must be {CHAIN_CODE_LENGTH} bytes, got {len(self.chain_code)}"
            )
        if self.depth < 0:
            raise ValueError(f"Depth must be non-negative, got {self.depth}")

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    @property
    def chain_code_hex(self) -> str:
        return self.chain_code.hex()

    @property
    def fingerprint_hex(self) -> str:
        return self.fingerprint.hex()


def _split(algorithm: hashes.HashAlgorithm, okm: bytes, depth: int, parent_material: bytes) -> HDKey:
    """Split HKDF output into key and chain code and fingerprint the key."""
    key = okm[:KEY_LENGTH]
    code = okm[KEY_LENGTH:KEY_LENGTH + CHAIN_CODE_LENGTH]
    return HDKey(
        key=key,
        chain_code=code,
        depth=depth,
        fingerprint=fingerprint(algorithm, parent_material, key),
    )


def master(algorithm: hashes.HashAlgorithm, secret: bytes) -> HDKey:
    """
    Derive a master key from a secret.

    Args:
        algorithm: Hash primitive (e.g. hashes.SHA256())
        secret: Secret bytes

    Returns:
        Depth-0 HDKey

    Raises:
        PrimitiveFailure: If any primitive call fails

    Example:
        >>> m = master(hashes.SHA256(), bytes(32))
        >>> m.depth
        0
    """
    try:
        salt = calc_salt(algorithm, secret)
        okm = derive(algorithm, secret, salt, MASTER_INFO, KEY_LENGTH + CHAIN_CODE_LENGTH)
        key = _split(algorithm, okm, 0, secret)
    except PrimitiveFailure as e:
        raise PrimitiveFailure(f"Master key derivation failed: {e}") from e

    logger.debug(f"Derived master key with {algorithm.name}")
    return key


def child(algorithm: hashes.HashAlgorithm, parent: HDKey, index: int) -> HDKey:
    """
    Derive the child of a key at an index.

    Args:
        algorithm: Hash primitive
        parent: Parent key (not modified)
        index: Child index in [0, 2**32 - 1]

    Returns:
        HDKey at parent.depth + 1

    Raises:
        InvalidPath: If the index is not an int or is outside the 32-bit unsigned range
        PrimitiveFailure: If any primitive call fails
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidPath(f"Child index must be an integer, got {type(index).__name__}")

    try:
        context = encode_index(index)
    except ValueError as e:
        raise InvalidPath(f"Child index {index} out of range [0, {MAX_INDEX}]") from e

    try:
        salt = calc_salt(algorithm, parent.chain_code, context)
        okm = derive(
            algorithm,
            parent.chain_code,
            salt,
            f"{CHILD_INFO_PREFIX}{index}",
            KEY_LENGTH + CHAIN_CODE_LENGTH,
        )
        key = _split(algorithm, okm, parent.depth + 1, parent.key)
    except PrimitiveFailure as e:
        raise PrimitiveFailure(f"Child key derivation at index {index} failed: {e}") from e

    logger.debug(f"Derived child key at depth {key.depth}, index {index}")
    return key


def node(algorithm: hashes.HashAlgorithm, master_key: HDKey, path: Sequence[int]) -> HDKey:
    """
    Derive the key at the end of a path by folding child derivation.

    Args:
        algorithm: Hash primitive
        master_key: Starting key (usually a master key)
        path: Parsed Path or any sequence of indices, at least one long

    Returns:
        HDKey at master_key.depth + len(path)

    Raises:
        InvalidPath: If the path is empty or an index is out of range
        PrimitiveFailure: If any step fails
    """
    if len(path) == 0:
        raise InvalidPath("Derivation path must contain at least one index")

    key = master_key
    for index in path:
        key = child(algorithm, key, index)
    return key


def lineage(algorithm: hashes.HashAlgorithm, child_key: HDKey, parent_key: HDKey) -> bool:
    """
    Check whether a key is the direct child of an alleged parent.

    The fingerprint is recomputed from the parent and child keys and compared
    with the child's stored fingerprint in constant time.

    Returns:
        True if the child's fingerprint matches, False otherwise

    Raises:
        LineageShapeError: If either fingerprint is not 16 bytes
        PrimitiveFailure: If the fingerprint cannot be recomputed
    """
    expected = fingerprint(algorithm, parent_key.key, child_key.key)

    if len(child_key.fingerprint) != FINGERPRINT_LENGTH or len(expected) != FINGERPRINT_LENGTH:
        raise LineageShapeError(
            f"Fingerprints for lineage verification must be {FINGERPRINT_LENGTH} bytes each, "
            f"got {len(child_key.fingerprint)} and {len(expected)}"
        )

    return constant_time_compare(child_key.fingerprint, expected)


def derive_child(
    algorithm: hashes.HashAlgorithm,
    parent: HDKey,
    index: Union[int, str],
) -> HDKey:
    """
    Derive a child from an integer index or an index string.

    Strings resolve like an "any" schema segment: decimal digits as a number,
    letters and hyphens through the alphabetic hash mapping.

    Example:
        >>> m = master(hashes.SHA256(), bytes(32))
        >>> derive_child(hashes.SHA256(), m, "42") == child(hashes.SHA256(), m, 42)
        True
    """
    if isinstance(index, str):
        try:
            index = resolve_index(algorithm, index, SegmentType.EITHER)
        except PrimitiveFailure:
            raise
        except ValueError as e:
            raise InvalidPath(str(e)) from e

    return child(algorithm, parent, index)


def derive_path(
    algorithm: hashes.HashAlgorithm,
    master_key: HDKey,
    text: str,
    schema: Schema,
) -> HDKey:
    """Parse a path string against a schema and derive the key it names."""
    return node(algorithm, master_key, parse_path(algorithm, text, schema))
