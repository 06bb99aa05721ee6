# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Key derivation using HKDF (RFC 5869) over a caller-chosen hash primitive.

Extract: PRK = HMAC(salt, ikm)
Expand:  T(i) = HMAC(PRK, T(i-1) || info || i), concatenated and truncated
         to the requested length

The same (algorithm, ikm, salt, info, length) always yields the same output;
master and child derivation depend on this.
"""

from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .exceptions import PrimitiveFailure
from .primitives import check_algorithm


def derive(
    algorithm: hashes.HashAlgorithm,
    ikm: bytes,
    salt: bytes,
    info: Union[str, bytes],
    length: int,
) -> bytes:
    """
    Derive output key material with HKDF extract-then-expand.

    Args:
        algorithm: Hash primitive (e.g. hashes.SHA256())
        ikm: Input keying material
        salt: Extract salt
        info: Context label bound into every expand block (str is UTF-8 encoded)
        length: Number of output bytes

    Returns:
        Exactly `length` bytes of output key material

    Raises:
        PrimitiveFailure: If the primitive rejects its input or the length
            exceeds 255 blocks of the digest size

    Example:
        >>> okm = derive(hashes.SHA256(), bytes(32), bytes(16), "MASTER", 64)
        >>> len(okm)
        64
    """
    check_algorithm(algorithm)

    if isinstance(info, str):
        info = info.encode("utf-8")

    try:
        hkdf = HKDF(
            algorithm=algorithm,
            length=length,
            salt=salt,
            info=info,
        )
        return hkdf.derive(ikm)
    except (UnsupportedAlgorithm, TypeError, ValueError) as e:
        raise PrimitiveFailure(f"{algorithm.name} HKDF failed: {e}") from e
