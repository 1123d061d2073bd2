# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""Settings that drive the secure-value decryption filter.

Values are read from ``STRONGBOX_*`` environment variables and from the
.env files applicable to the current environment.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from strongbox.config.environment import Environment, find_env_files

DEFAULT_SECURE_PREFIX = "_secure_"


class PaddingScheme(str, Enum):
    """RSA padding scheme the ciphertexts were produced with."""

    PKCS1V15 = "pkcs1v15"
    OAEP = "oaep"


class FilterSettings(BaseSettings):
    """Configuration for :class:`strongbox.filters.DecryptionFilter`."""

    model_config = SettingsConfigDict(
        env_prefix="STRONGBOX_",
        extra="ignore",
        case_sensitive=False,
    )

    decryption_key: str | None = Field(
        default=None,
        description="Path to a PEM private key, or the PEM text itself",
    )
    key_passphrase: SecretStr | None = Field(
        default=None, description="Passphrase protecting the private key"
    )
    secure_prefix: str = Field(
        default=DEFAULT_SECURE_PREFIX,
        description="Key-name prefix marking a value as encrypted",
    )
    padding: PaddingScheme = Field(
        default=PaddingScheme.PKCS1V15, description="RSA padding scheme"
    )

    @field_validator("secure_prefix")
    @classmethod
    def validate_secure_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("secure_prefix must not be empty")
        return v

    @field_validator("padding", mode="before")
    @classmethod
    def normalize_padding(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def load(
        cls, env: Environment | None = None, base_dir: Path | None = None
    ) -> FilterSettings:
        """Load settings from the environment and applicable .env files.

        Args:
            env: Environment to load for (default: current environment)
            base_dir: Directory holding the .env files (default: cwd)

        Returns:
            FilterSettings: Loaded and validated settings instance.
        """
        env = env or Environment.get_current()
        env_files = find_env_files(env, base_dir)
        return cls(_env_file=tuple(env_files) or None)
