# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Conversions between textual indices and their 32-bit binary forms.

Index strings are either numeric (ASCII decimal digits) or alphabetic (ASCII
letters and hyphens). The two patterns are disjoint, so a string never
qualifies as both.
"""

import re
from enum import Enum
from typing import Optional

from cryptography.hazmat.primitives import hashes

from .primitives import hash_digest

MAX_INDEX = 0xFFFFFFFF

# Alphabetic indices are reduced into [0, 2**31 - 1]
ALPHABETIC_MODULUS = 2**31

NUMERIC_PATTERN = re.compile(r"[0-9]+")
ALPHABETIC_PATTERN = re.compile(r"[A-Za-z-]+")


class SegmentType(str, Enum):
    """Index type declared by a schema segment."""

    NUMERIC = "num"
    ALPHABETIC = "str"
    EITHER = "any"


def encode_index(index: int) -> bytes:
    """
    Encode an index as 4 big-endian bytes.

    Raises:
        ValueError: If the index is outside the 32-bit unsigned range
    """
    if not 0 <= index <= MAX_INDEX:
        raise ValueError(f"Index {index} out of range [0, {MAX_INDEX}]")
    return index.to_bytes(4, byteorder="big")


def classify_index(text: str) -> Optional[SegmentType]:
    """
    Classify an index string by its shape.

    Returns:
        SegmentType.NUMERIC, SegmentType.ALPHABETIC, or None if it is neither

    Example:
        >>> classify_index("42")
        <SegmentType.NUMERIC: 'num'>
        >>> classify_index("key-ring")
        <SegmentType.ALPHABETIC: 'str'>
        >>> classify_index("4x") is None
        True
    """
    if NUMERIC_PATTERN.fullmatch(text):
        return SegmentType.NUMERIC
    if ALPHABETIC_PATTERN.fullmatch(text):
        return SegmentType.ALPHABETIC
    return None


def parse_numeric_index(text: str) -> int:
    """
    Parse a base-10 unsigned 32-bit index.

    Raises:
        ValueError: If the string is not decimal digits or exceeds 32 bits
    """
    if not NUMERIC_PATTERN.fullmatch(text):
        raise ValueError(f"invalid numeric index {text!r}")

    value = int(text, 10)
    if value > MAX_INDEX:
        raise ValueError(f"numeric index {text!r} outside of uint32 range")
    return value


def alphabetic_index(algorithm: hashes.HashAlgorithm, text: str) -> int:
    """
    Map an alphabetic index string to an integer in [0, 2**31 - 1].

    The string is hashed, the first 4 digest bytes are read as a big-endian
    unsigned integer, and the result is reduced modulo 2**31.

    Raises:
        ValueError: If the string is not letters and hyphens
        PrimitiveFailure: If hashing fails
    """
    if not ALPHABETIC_PATTERN.fullmatch(text):
        raise ValueError(f"invalid alphabetic index {text!r}")

    digest = hash_digest(algorithm, text.encode("utf-8"))
    return int.from_bytes(digest[:4], byteorder="big") % ALPHABETIC_MODULUS


def resolve_index(algorithm: hashes.HashAlgorithm, text: str, segment_type: SegmentType) -> int:
    """
    Resolve an index string under a schema segment type.

    EITHER tries numeric resolution first and falls back to alphabetic
    resolution only when the string is not purely numeric.

    Raises:
        ValueError: If the string does not resolve under the type
        PrimitiveFailure: If hashing fails
    """
    segment_type = SegmentType(segment_type)

    if segment_type is SegmentType.NUMERIC:
        return parse_numeric_index(text)

    if segment_type is SegmentType.ALPHABETIC:
        return alphabetic_index(algorithm, text)

    kind = classify_index(text)
    if kind is SegmentType.NUMERIC:
        return parse_numeric_index(text)
    if kind is SegmentType.ALPHABETIC:
        return alphabetic_index(algorithm, text)
    raise ValueError(f"invalid index {text!r}, expected digits or letters and hyphens")


def secret_from_hex(text: str) -> bytes:
    """
    Decode a hex-encoded secret.

    Raises:
        ValueError: If the text is not valid hex (the text is not echoed back)
    """
    cleaned = text.strip()
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        raise ValueError("Secret must be a hex string of whole bytes") from None
