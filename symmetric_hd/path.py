# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Derivation path parsing.

A path such as "m/42/0/1/0" is split on "/", the root marker is checked, and
each remaining index string is resolved under the schema segment at the same
position.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from cryptography.hazmat.primitives import hashes

from .codec import resolve_index
from .exceptions import InvalidPath, PrimitiveFailure
from .schema import ROOT_MARKER, Schema

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class Path:
    """Resolved 32-bit indices, one per schema level present in the path."""

    indices: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __getitem__(self, position: int) -> int:
        return self.indices[position]

    def __str__(self) -> str:
        return PATH_SEPARATOR.join([ROOT_MARKER, *(str(i) for i in self.indices)])


def parse_path(algorithm: hashes.HashAlgorithm, text: str, schema: Schema) -> Path:
    """
    Parse and validate a derivation path against a schema.

    Args:
        algorithm: Hash primitive used to map alphabetic indices to integers
        text: Path string, e.g. "m/42/0/1/0"
        schema: Parsed schema the path must satisfy

    Returns:
        Path of resolved indices

    Raises:
        InvalidPath: If the root is not "m", there are more indices than schema
            segments, or an index does not resolve under its segment type
        PrimitiveFailure: If hashing an alphabetic index fails

    Example:
        >>> from symmetric_hd.schema import DEFAULT_SCHEMA, parse_schema
        >>> schema = parse_schema(DEFAULT_SCHEMA)
        >>> parse_path(hashes.SHA256(), "m/42/0/1/0", schema).indices
        (42, 0, 1, 0)
    """
    raw_segments = text.split(PATH_SEPARATOR)

    if raw_segments[0] != ROOT_MARKER:
        raise InvalidPath(
            f"Master key in derivation path must be designated by {ROOT_MARKER!r}, "
            f"got {raw_segments[0]!r}"
        )

    raw_indices = raw_segments[1:]
    if len(raw_indices) > len(schema):
        raise InvalidPath(
            f"Too many indices in derivation path: got {len(raw_indices)}, "
            f"expected at most {len(schema)}"
        )

    indices = []
    for position, (raw, segment) in enumerate(zip(raw_indices, schema)):
        try:
            index = resolve_index(algorithm, raw, segment.type)
        except PrimitiveFailure:
            raise
        except ValueError as e:
            logger.warning(f"Path position {position} ({segment.label}) failed to resolve")
            raise InvalidPath(
                f"Derivation path position {position} label {segment.label!r}, {e}",
                position=position,
                label=segment.label,
            ) from e
        indices.append(index)

    return Path(indices=tuple(indices))
