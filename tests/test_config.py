# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Unit tests for settings loading.
"""

import pytest
from pydantic import ValidationError

from symmetric_hd.config import (
    Settings,
    default_algorithm,
    default_schema,
    get_settings,
)
from symmetric_hd.schema import DEFAULT_SCHEMA


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SYMMETRIC_HD_HASH_ALGORITHM", raising=False)
        config = Settings()

        assert config.hash_algorithm == "sha256"
        assert config.default_schema == DEFAULT_SCHEMA
        assert config.default_path == "m/42/0/1/0"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SYMMETRIC_HD_HASH_ALGORITHM", "sha512")
        monkeypatch.setenv("SYMMETRIC_HD_DEFAULT_PATH", "m/1")

        config = get_settings()

        assert config.hash_algorithm == "sha512"
        assert config.default_path == "m/1"
        assert default_algorithm(config).name == "sha512"

    def test_invalid_algorithm(self, monkeypatch):
        monkeypatch.setenv("SYMMETRIC_HD_HASH_ALGORITHM", "md5")
        with pytest.raises(ValidationError):
            get_settings()

    def test_default_schema(self):
        config = Settings(default_schema="m / app: str / index: num")
        schema = default_schema(config)

        assert [s.label for s in schema] == ["app", "index"]
