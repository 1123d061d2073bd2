# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
The decryption filter applied to a merged settings tree.

The filter walks the tree and, for every value under a secure key, tries to
base64-decode, RSA-decrypt and deserialize it. A value is replaced only when
all three steps succeed; otherwise it is kept exactly as it was. The input
tree is never modified, a new tree of the same shape is returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cryptography.hazmat.primitives.asymmetric.padding import AsymmetricPadding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from strongbox.config.errors import (
    ConfigValidationError,
    DeserializationError,
    SettingsTreeError,
)
from strongbox.config.settings import (
    DEFAULT_SECURE_PREFIX,
    FilterSettings,
    PaddingScheme,
)
from strongbox.filters.decryptor import (
    PassThrough,
    PassThroughReason,
    decrypt_candidate,
    padding_for,
)
from strongbox.filters.deserializer import deserialize_plaintext
from strongbox.filters.key_loader import KeyReference, load_decryption_key
from strongbox.filters.secure_keys import SettingsLeaf, is_secure_key, join_path
from strongbox.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FilterReport:
    """Result of one filter run.

    Attributes:
        settings: The filtered settings tree
        decrypted: Paths of the values that were decrypted
        passed_through: Paths of secure values that were kept unchanged
    """

    settings: dict[str, Any]
    decrypted: tuple[str, ...] = ()
    passed_through: tuple[str, ...] = ()


class _TreeWalk:
    """State for a single pass over one settings tree."""

    def __init__(
        self, key: RSAPrivateKey | None, padding: AsymmetricPadding, prefix: str
    ) -> None:
        self.key = key
        self.padding = padding
        self.prefix = prefix
        self.decrypted: list[str] = []
        self.passed_through: list[str] = []

    def mapping(self, node: Mapping[Any, Any], parent: str) -> dict[Any, Any]:
        return {
            key: self.value(key, value, join_path(parent, key))
            for key, value in node.items()
        }

    def value(self, key: Any, value: Any, path: str, inherited: bool = False) -> Any:
        if isinstance(value, Mapping):
            return self.mapping(value, path)

        if isinstance(value, (list, tuple)):
            secure = inherited or is_secure_key(key, self.prefix)
            items = [
                self.value(key, item, f"{path}[{index}]", inherited=secure)
                for index, item in enumerate(value)
            ]
            return tuple(items) if isinstance(value, tuple) else items

        leaf = SettingsLeaf.classify(path, key, value, self.prefix, inherited)
        if not leaf.is_secure:
            return value
        return self.decrypt(leaf)

    def decrypt(self, leaf: SettingsLeaf) -> Any:
        outcome = decrypt_candidate(leaf.value, self.key, self.padding)
        if isinstance(outcome, PassThrough):
            self.pass_through(leaf, outcome.reason, outcome.detail)
            return leaf.value

        try:
            value = deserialize_plaintext(outcome.plaintext)
        except DeserializationError as e:
            self.pass_through(
                leaf, PassThroughReason.UNDESERIALIZABLE, e.context["reason"]
            )
            return leaf.value

        self.decrypted.append(leaf.path)
        return value

    def pass_through(
        self, leaf: SettingsLeaf, reason: PassThroughReason, detail: str | None
    ) -> None:
        self.passed_through.append(leaf.path)
        logger.debug(
            "Secure setting left unchanged",
            extra={"setting": leaf.path, "reason": reason.value, "detail": detail},
        )


class DecryptionFilter:
    """Decrypts the values of secure keys in a settings tree.

    The key reference is resolved at the start of every run and not kept,
    so one filter can serve repeated reloads while the key file changes.
    """

    def __init__(
        self,
        decryption_key: KeyReference | None = None,
        *,
        passphrase: str | bytes | None = None,
        secure_prefix: str = DEFAULT_SECURE_PREFIX,
        padding: PaddingScheme | str = PaddingScheme.PKCS1V15,
    ) -> None:
        """Initialize the filter.

        Args:
            decryption_key: Path, PEM text, PEM bytes or private key; None
                leaves every value unchanged
            passphrase: Passphrase for an encrypted PEM key
            secure_prefix: Key-name prefix that marks encrypted values
            padding: RSA padding scheme of the ciphertexts

        Raises:
            ConfigValidationError: If the prefix is empty or the padding unknown
        """
        if not secure_prefix:
            raise ConfigValidationError(
                "secure_prefix must not be empty",
                config_key="secure_prefix",
                config_value=secure_prefix,
            )
        try:
            self.padding = PaddingScheme(padding)
        except ValueError:
            raise ConfigValidationError(
                f"Unknown padding scheme: {padding}",
                config_key="padding",
                config_value=padding,
            ) from None
        self.decryption_key = decryption_key
        self.passphrase = passphrase
        self.secure_prefix = secure_prefix

    @classmethod
    def from_settings(cls, settings: FilterSettings | None = None) -> DecryptionFilter:
        """Build a filter from ``STRONGBOX_*`` settings."""
        settings = settings or FilterSettings.load()
        passphrase = (
            settings.key_passphrase.get_secret_value()
            if settings.key_passphrase
            else None
        )
        return cls(
            settings.decryption_key,
            passphrase=passphrase,
            secure_prefix=settings.secure_prefix,
            padding=settings.padding,
        )

    @classmethod
    def execute(
        cls,
        data: Mapping[str, Any],
        decryption_key: KeyReference | None = None,
        **options: Any,
    ) -> dict[str, Any]:
        """Filter ``data`` once and return the new settings tree.

        Args:
            data: Settings tree
            decryption_key: Key reference, see ``__init__``
            **options: ``passphrase``, ``secure_prefix`` or ``padding``

        Returns:
            A new settings tree with decryptable secure values replaced
        """
        return cls(decryption_key, **options).run(data).settings

    def run(self, data: Mapping[str, Any]) -> FilterReport:
        """Filter ``data`` and report which values were decrypted.

        Raises:
            SettingsTreeError: If ``data`` is not a mapping
        """
        if not isinstance(data, Mapping):
            raise SettingsTreeError(type(data).__name__)

        key = load_decryption_key(self.decryption_key, self.passphrase)
        walk = _TreeWalk(key, padding_for(self.padding), self.secure_prefix)
        settings = walk.mapping(data, "")

        if walk.decrypted or walk.passed_through:
            logger.info(
                "Filtered secure settings",
                extra={
                    "decrypted": len(walk.decrypted),
                    "passed_through": len(walk.passed_through),
                    "key_available": key is not None,
                },
            )
        return FilterReport(
            settings=settings,
            decrypted=tuple(walk.decrypted),
            passed_through=tuple(walk.passed_through),
        )


def decrypt_settings(
    data: Mapping[str, Any],
    decryption_key: KeyReference | None = None,
    **options: Any,
) -> dict[str, Any]:
    """Function form of :meth:`DecryptionFilter.execute`."""
    return DecryptionFilter.execute(data, decryption_key, **options)
