# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Derivation path schemas.

A schema string looks like:

    m / application: any / purpose: any / context: any / index: num

The first segment is the root marker "m"; every following segment is
"<label>: <type>" with type one of num, str, any.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from .codec import SegmentType
from .exceptions import InvalidSchema

logger = logging.getLogger(__name__)

ROOT_MARKER = "m"
SCHEMA_SEPARATOR = " / "

# Includes the root segment
MAX_SCHEMA_SEGMENTS = 256

DEFAULT_SCHEMA = "m / application: any / purpose: any / context: any / index: num"


@dataclass(frozen=True)
class Segment:
    """One labelled, typed level of a schema."""

    label: str
    type: SegmentType

    def __str__(self) -> str:
        return f"{self.label}: {self.type.value}"


@dataclass(frozen=True)
class Schema:
    """Ordered (label, type) constraints, excluding the root marker."""

    segments: Tuple[Segment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, position: int) -> Segment:
        return self.segments[position]

    def __str__(self) -> str:
        return SCHEMA_SEPARATOR.join([ROOT_MARKER, *(str(s) for s in self.segments)])


def parse_schema(text: str) -> Schema:
    """
    Parse a derivation path schema.

    Args:
        text: Schema string, segments separated by " / "

    Returns:
        Parsed Schema

    Raises:
        InvalidSchema: If there are more than 256 segments, the root is not "m",
            a segment lacks a label or type, or a type is unknown

    Example:
        >>> schema = parse_schema("m / application: any / index: num")
        >>> [(s.label, s.type.value) for s in schema]
        [('application', 'any'), ('index', 'num')]
    """
    raw_segments = text.split(SCHEMA_SEPARATOR)

    if len(raw_segments) > MAX_SCHEMA_SEGMENTS:
        raise InvalidSchema(
            f"Derivation path schema cannot exceed {MAX_SCHEMA_SEGMENTS} segments, "
            f"got {len(raw_segments)}"
        )

    if raw_segments[0] != ROOT_MARKER:
        raise InvalidSchema(
            f"Root segment in schema must be designated by {ROOT_MARKER!r}, got {raw_segments[0]!r}"
        )

    segments = []
    for raw in raw_segments[1:]:
        label, sep, type_name = raw.partition(":")
        label = label.strip()
        type_name = type_name.strip()

        if not sep or not label or not type_name:
            logger.warning(f"Rejected schema segment {raw!r}")
            raise InvalidSchema(f"Invalid segment in schema, {raw!r}")

        try:
            segment_type = SegmentType(type_name)
        except ValueError:
            logger.warning(f"Rejected schema type {type_name!r} for label {label!r}")
            raise InvalidSchema(
                f"Invalid type {type_name!r} for label {label!r} in schema, "
                f"expected one of {[t.value for t in SegmentType]}"
            ) from None

        segments.append(Segment(label=label, type=segment_type))

    return Schema(segments=tuple(segments))
