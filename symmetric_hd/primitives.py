# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Keyed-hash primitives for symmetric HD key derivation.

The hash primitive is any ``cryptography`` HashAlgorithm instance. Every call
builds fresh HMAC / Hash contexts from it; contexts are never reused.

Provides:
- calc_salt: 16-byte domain-separated salt (HMAC over message || b"SALT")
- fingerprint: 16-byte HMAC binding a child key to its parent key material
- constant_time_compare: XOR-accumulate byte comparison
"""

from typing import Callable, Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac

from .exceptions import PrimitiveFailure

SALT_LENGTH = 16
FINGERPRINT_LENGTH = 16

# Domain-separation tag appended to every salt MAC input
SALT_DOMAIN = b"SALT"

ALGORITHMS: dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha3_256": hashes.SHA3_256,
    "sha3_512": hashes.SHA3_512,
    "blake2b": lambda: hashes.BLAKE2b(64),
    "blake2s": lambda: hashes.BLAKE2s(32),
}


def _normalize_name(name: str) -> str:
    return name.strip().lower().replace("-", "").replace("_", "")


_ALGORITHMS_BY_NORMALIZED_NAME = {_normalize_name(k): v for k, v in ALGORITHMS.items()}


def get_algorithm(name: Optional[str] = None) -> hashes.HashAlgorithm:
    """
    Resolve a textual algorithm name to a fresh HashAlgorithm instance.

    Args:
        name: One of the keys of ALGORITHMS, case-insensitive, with "-" and "_"
            ignored ("SHA-512", "sha512" and "sha_512" are equivalent). None
            selects the configured SYMMETRIC_HD_HASH_ALGORITHM.

    Returns:
        HashAlgorithm instance

    Raises:
        PrimitiveFailure: If the name is unknown

    Example:
        >>> get_algorithm("sha256").digest_size
        32
    """
    if name is None:
        from .config import settings

        name = settings.hash_algorithm

    factory = _ALGORITHMS_BY_NORMALIZED_NAME.get(_normalize_name(name))
    if factory is None:
        raise PrimitiveFailure(
            f"Unsupported hash algorithm {name!r}, expected one of {sorted(ALGORITHMS)}"
        )
    return factory()


def check_algorithm(algorithm: hashes.HashAlgorithm) -> None:
    """
    Verify that an object can serve as the keyed-hash primitive.

    Raises:
        PrimitiveFailure: If it is not a fixed-size HashAlgorithm with a
            digest of at least 16 bytes
    """
    if not isinstance(algorithm, hashes.HashAlgorithm):
        raise PrimitiveFailure(
            f"Expected a HashAlgorithm instance, got {type(algorithm).__name__}"
        )
    if isinstance(algorithm, hashes.ExtendableOutputFunction):
        raise PrimitiveFailure(f"{algorithm.name} is an XOF and cannot be used as a MAC")
    if algorithm.digest_size < SALT_LENGTH:
        raise PrimitiveFailure(
            f"{algorithm.name} digest is {algorithm.digest_size} bytes, need at least {SALT_LENGTH}"
        )


def mac_digest(algorithm: hashes.HashAlgorithm, key: bytes, *parts: bytes) -> bytes:
    """
    Compute an HMAC over the concatenation of parts with a fresh context.

    Raises:
        PrimitiveFailure: If the primitive rejects the key or input
    """
    check_algorithm(algorithm)
    try:
        mac = hmac.HMAC(key, algorithm)
        for part in parts:
            mac.update(part)
        return mac.finalize()
    except (UnsupportedAlgorithm, TypeError, ValueError) as e:
        raise PrimitiveFailure(f"{algorithm.name} HMAC failed: {e}") from e


def hash_digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
    """
    Compute an unkeyed digest with a fresh hash context.

    Raises:
        PrimitiveFailure: If the primitive rejects the input
    """
    check_algorithm(algorithm)
    try:
        digest = hashes.Hash(algorithm)
        digest.update(data)
        return digest.finalize()
    except (UnsupportedAlgorithm, TypeError, ValueError) as e:
        raise PrimitiveFailure(f"{algorithm.name} hash failed: {e}") from e


def calc_salt(
    algorithm: hashes.HashAlgorithm,
    message: bytes,
    context: Optional[bytes] = None,
) -> bytes:
    """
    Derive a 16-byte domain-separated salt.

    When context is given it is hashed and truncated to 16 bytes to normalize
    its length; otherwise a 16-byte zero block is used. The salt is the first
    16 bytes of HMAC(key=context, message || b"SALT").

    Args:
        algorithm: Hash primitive
        message: Salt input (the secret for master keys, the chain code for children)
        context: Optional context info (the encoded index for children)

    Returns:
        16-byte salt

    Example:
        >>> salt = calc_salt(hashes.SHA256(), bytes(32))
        >>> len(salt)
        16
    """
    if context is not None:
        key = hash_digest(algorithm, context)[:SALT_LENGTH]
    else:
        key = bytes(SALT_LENGTH)

    return mac_digest(algorithm, key, message, SALT_DOMAIN)[:SALT_LENGTH]


def fingerprint(
    algorithm: hashes.HashAlgorithm,
    parent_key: bytes,
    child_key: bytes,
) -> bytes:
    """
    Compute the 16-byte fingerprint binding a child key to its parent.

    For a master key, parent_key is the original secret.

    Args:
        algorithm: Hash primitive
        parent_key: Parent key bytes (HMAC key)
        child_key: Child key bytes (HMAC message)

    Returns:
        First 16 bytes of HMAC(parent_key, child_key)
    """
    return mac_digest(algorithm, parent_key, child_key)[:FINGERPRINT_LENGTH]


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two equal-length byte strings without short-circuiting.

    Every byte pair is XORed into an accumulator; the inputs are equal iff the
    accumulator is zero at the end.

    Raises:
        ValueError: If the lengths differ
    """
    if len(a) != len(b):
        raise ValueError(f"Cannot compare {len(a)} bytes with {len(b)} bytes")

    result = 0
    for x, y in zip(a, b):
        result |= x ^ y
    return result == 0
