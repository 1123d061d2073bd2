# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""Configuration management for strongbox.

This module provides the settings, environment handling and error types
used by the secure-value decryption filter.
"""

from strongbox.config.environment import Environment, find_env_files
from strongbox.config.errors import (
    CiphertextDecodeError,
    CiphertextDecryptionError,
    ConfigEnvironmentError,
    ConfigError,
    ConfigValidationError,
    DecryptionKeyError,
    DecryptionKeyInvalidError,
    DecryptionKeyNotFoundError,
    DeserializationError,
    SecureConfigError,
    SecureValueError,
    SettingsTreeError,
)
from strongbox.config.settings import (
    DEFAULT_SECURE_PREFIX,
    FilterSettings,
    PaddingScheme,
)

__all__ = [
    "DEFAULT_SECURE_PREFIX",
    "Environment",
    "FilterSettings",
    "PaddingScheme",
    "find_env_files",
    # Errors
    "CiphertextDecodeError",
    "CiphertextDecryptionError",
    "ConfigEnvironmentError",
    "ConfigError",
    "ConfigValidationError",
    "DecryptionKeyError",
    "DecryptionKeyInvalidError",
    "DecryptionKeyNotFoundError",
    "DeserializationError",
    "SecureConfigError",
    "SecureValueError",
    "SettingsTreeError",
]
