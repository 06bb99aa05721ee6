# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Exception types raised by symmetric HD key derivation.

All errors derive from ValueError so existing callers that guard input
validation with ``except ValueError`` keep working. Messages never include
secret, key, or chain-code bytes.
"""

from typing import Optional


class HDKeyError(ValueError):
    """Base class for all symmetric HD key errors."""


class PrimitiveFailure(HDKeyError):
    """Raised when the keyed-hash primitive rejects its key, input, or algorithm."""


class InvalidSchema(HDKeyError):
    """Raised when a derivation path schema is malformed."""


class InvalidPath(HDKeyError):
    """
    Raised when a derivation path is malformed or an index fails to resolve.

    Attributes:
        position: Zero-based index position that failed, if known
        label: Schema label at that position, if known
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        label: Optional[str] = None,
    ):
        super().__init__(message)
        self.position = position
        self.label = label


class LineageShapeError(HDKeyError):
    """Raised when a fingerprint supplied for lineage checks is not 16 bytes."""
