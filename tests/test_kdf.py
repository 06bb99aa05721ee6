# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Unit tests for the HKDF extract-then-expand construction.
"""

import hashlib
import hmac as std_hmac

import pytest
from cryptography.hazmat.primitives import hashes

from symmetric_hd.exceptions import PrimitiveFailure
from symmetric_hd.kdf import derive


def reference_hkdf(ikm: bytes, salt: bytes, info: bytes, length: int) -> bytes:
    """Plain RFC 5869 HKDF-SHA256 for comparison."""
    prk = std_hmac.new(salt, ikm, hashlib.sha256).digest()
    t = b""
    okm = b""
    i = 1
    while len(okm) < length:
        t = std_hmac.new(prk, t + info + bytes([i]), hashlib.sha256).digest()
        okm += t
        i += 1
    return okm[:length]


class TestDerive:
    """Test HKDF key derivation."""

    def test_rfc5869_case_1(self, sha256):
        """Test RFC 5869 test case 1 (SHA-256)."""
        ikm = bytes.fromhex("0b" * 22)
        salt = bytes.fromhex("000102030405060708090a0b0c")
        info = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9")

        okm = derive(sha256, ikm, salt, info, 42)

        assert okm.hex() == (
            "3cb25f25faacd57a90434f64d0362f2a"
            "2d2d0a90cf1a5a4c5db02d56ecc4c5bf"
            "34007208d5b887185865"
        )

    def test_matches_reference(self, sha256):
        """Test against a hand-rolled extract-then-expand."""
        ikm = b"\x00" * 32
        salt = b"\x11" * 16

        assert derive(sha256, ikm, salt, "MASTER", 64) == reference_hkdf(ikm, salt, b"MASTER", 64)

    def test_output_length(self, sha256):
        for length in [1, 16, 32, 33, 64, 100]:
            assert len(derive(sha256, b"ikm", b"salt", "ctx", length)) == length

    def test_deterministic(self, sha256):
        assert derive(sha256, b"ikm", b"salt", "CHILD7", 64) == derive(sha256, b"ikm", b"salt", "CHILD7", 64)

    def test_info_binding(self, sha256):
        """Test that str and bytes info are equivalent and that info separates outputs."""
        assert derive(sha256, b"ikm", b"salt", "CHILD1", 64) == derive(sha256, b"ikm", b"salt", b"CHILD1", 64)
        assert derive(sha256, b"ikm", b"salt", "CHILD1", 64) != derive(sha256, b"ikm", b"salt", "CHILD2", 64)

    def test_too_long(self, sha256):
        """Test that more than 255 blocks is a primitive failure."""
        with pytest.raises(PrimitiveFailure, match="HKDF"):
            derive(sha256, b"ikm", b"salt", "ctx", 255 * 32 + 1)

    def test_rejects_non_algorithm(self):
        with pytest.raises(PrimitiveFailure):
            derive("sha256", b"ikm", b"salt", "ctx", 32)

    def test_other_algorithm(self):
        okm = derive(hashes.SHA512(), b"ikm", b"salt", "ctx", 64)
        assert len(okm) == 64
        assert okm != derive(hashes.SHA256(), b"ikm", b"salt", "ctx", 64)
