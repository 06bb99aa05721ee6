# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""Pytest configuration and fixtures."""

import pytest
from cryptography.hazmat.primitives import hashes

from symmetric_hd import DEFAULT_SCHEMA, master, parse_schema


@pytest.fixture
def sha256():
    """Default hash primitive."""
    return hashes.SHA256()


@pytest.fixture
def zero_secret() -> bytes:
    """32 zero bytes, the secret used by the regression vectors."""
    return bytes(32)


@pytest.fixture
def schema():
    """Parsed default schema."""
    return parse_schema(DEFAULT_SCHEMA)


@pytest.fixture
def master_key(sha256, zero_secret):
    """Master key derived from the zero secret."""
    return master(sha256, zero_secret)
