# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""Configuration management for symmetric HD key derivation."""

import logging
from typing import Literal, Optional

from cryptography.hazmat.primitives import hashes
from pydantic_settings import BaseSettings, SettingsConfigDict

from .primitives import get_algorithm
from .schema import DEFAULT_SCHEMA, Schema, parse_schema


class Settings(BaseSettings):
    """Settings loaded from SYMMETRIC_HD_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SYMMETRIC_HD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Derivation defaults
    hash_algorithm: Literal[
        "sha256", "sha384", "sha512", "sha3_256", "sha3_512", "blake2b", "blake2s"
    ] = "sha256"
    default_schema: str = DEFAULT_SCHEMA
    default_path: str = "m/42/0/1/0"

    # Logging
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Re-read settings from the environment."""
    return Settings()


# Global settings instance
settings = Settings()


def default_algorithm(config: Optional[Settings] = None) -> hashes.HashAlgorithm:
    """Return a fresh instance of the configured hash algorithm."""
    config = config or settings
    return get_algorithm(config.hash_algorithm)


def default_schema(config: Optional[Settings] = None) -> Schema:
    """Parse the configured default schema."""
    config = config or settings
    return parse_schema(config.default_schema)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
