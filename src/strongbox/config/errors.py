# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Configuration-specific error classes for strongbox.

Two families live here: errors about configuring the filter itself
(``CONFIG``) and errors raised while turning one secure value into
plaintext (``CONFIG_SECURE``). The filter catches the second family per
value and keeps the value unchanged, so those default to WARNING severity.
"""

from __future__ import annotations

from typing import Any, ClassVar, Final

from strongbox.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, StrongboxError

CONFIG: Final = ErrorCategory.get_or_create("CONFIG")
CONFIG_ERROR: Final = ErrorCode.get_or_create("CONFIG_ERROR", CONFIG)
CONFIG_VALIDATION_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_VALIDATION_ERROR", CONFIG
)
CONFIG_ENVIRONMENT_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_ENVIRONMENT_ERROR", CONFIG
)
CONFIG_SETTINGS_TREE_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_SETTINGS_TREE_ERROR", CONFIG
)

SECURE: Final = ErrorCategory.get_or_create("CONFIG_SECURE", CONFIG)
CONFIG_SECURE_ERROR: Final = ErrorCode.get_or_create("CONFIG_SECURE_ERROR", SECURE)
CONFIG_SECURE_KEY_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_SECURE_KEY_ERROR", SECURE
)
CONFIG_SECURE_KEY_NOT_FOUND_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_SECURE_KEY_NOT_FOUND_ERROR", SECURE
)
CONFIG_SECURE_KEY_INVALID_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_SECURE_KEY_INVALID_ERROR", SECURE
)
CONFIG_SECURE_DECODE_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_SECURE_DECODE_ERROR", SECURE
)
CONFIG_SECURE_DECRYPTION_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_SECURE_DECRYPTION_ERROR", SECURE
)
CONFIG_SECURE_DESERIALIZATION_ERROR: Final = ErrorCode.get_or_create(
    "CONFIG_SECURE_DESERIALIZATION_ERROR", SECURE
)


class ConfigError(StrongboxError):
    """Base class for all configuration-related errors."""

    default_code = CONFIG_ERROR


class ConfigValidationError(ConfigError):
    """Raised when a filter option has an unusable value."""

    default_code = CONFIG_VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: Any | None = None,
        **kwargs: Any,
    ) -> None:
        if config_key:
            kwargs["config_key"] = config_key
        if config_value is not None:
            kwargs["config_value"] = str(config_value)
        super().__init__(message, **kwargs)


class ConfigEnvironmentError(ConfigError):
    """Raised when the deployment environment name is not recognised."""

    default_code = CONFIG_ENVIRONMENT_ERROR

    def __init__(
        self, message: str, environment: str | None = None, **kwargs: Any
    ) -> None:
        if environment:
            kwargs["environment"] = environment
        super().__init__(message, **kwargs)


class SettingsTreeError(ConfigError):
    """Raised when the top-level settings tree handed to a filter is not a mapping."""

    default_code = CONFIG_SETTINGS_TREE_ERROR

    def __init__(
        self, received_type: str, message: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(
            message or f"Settings tree must be a mapping, got {received_type}",
            received_type=received_type,
            **kwargs,
        )


class SecureConfigError(ConfigError):
    """Base class for secure config related errors."""

    default_code = CONFIG_SECURE_ERROR


class DecryptionKeyError(SecureConfigError):
    """Raised when decryption key material cannot be produced."""

    default_code = CONFIG_SECURE_KEY_ERROR


class DecryptionKeyNotFoundError(DecryptionKeyError):
    """Raised when the key reference points at nothing readable."""

    default_code = CONFIG_SECURE_KEY_NOT_FOUND_ERROR

    def __init__(self, key_path: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Decryption key could not be read: {key_path}",
            key_path=key_path,
            **kwargs,
        )


class DecryptionKeyInvalidError(DecryptionKeyError):
    """Raised when key material is readable but is not a usable RSA private key."""

    default_code = CONFIG_SECURE_KEY_INVALID_ERROR

    def __init__(self, reason: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Decryption key is not usable: {reason}",
            reason=reason,
            **kwargs,
        )


class SecureValueError(SecureConfigError):
    """A single secure value could not be turned into plaintext."""

    default_severity = ErrorSeverity.WARNING
    summary: ClassVar[str] = "Secure value could not be processed"

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(f"{self.summary}: {reason}", reason=reason, **kwargs)


class CiphertextDecodeError(SecureValueError):
    default_code = CONFIG_SECURE_DECODE_ERROR
    summary = "Secure value is not valid base64"


class CiphertextDecryptionError(SecureValueError):
    default_code = CONFIG_SECURE_DECRYPTION_ERROR
    summary = "Secure value could not be decrypted"


class DeserializationError(SecureValueError):
    default_code = CONFIG_SECURE_DESERIALIZATION_ERROR
    summary = "Decrypted value could not be deserialized"
