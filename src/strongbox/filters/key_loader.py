# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Resolution of a decryption key reference into an RSA private key.

A reference may be a filesystem path, PEM text, PEM bytes or an already
loaded ``RSAPrivateKey``. ``read_decryption_key`` raises on any problem;
``load_decryption_key`` reports every problem as "no key available" by
returning None, which makes the decryption filter pass values through.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from strongbox.config.errors import (
    DecryptionKeyError,
    DecryptionKeyInvalidError,
    DecryptionKeyNotFoundError,
)
from strongbox.logging.logger import get_logger

logger = get_logger(__name__)

KeyReference = Union[str, os.PathLike, bytes, RSAPrivateKey]

_PEM_MARKER = "-----BEGIN"


def _read_key_bytes(reference: object) -> bytes:
    if isinstance(reference, bytes):
        return reference
    if isinstance(reference, str) and reference.lstrip().startswith(_PEM_MARKER):
        return reference.encode("utf-8")
    if not isinstance(reference, (str, os.PathLike)):
        # e.g. an EC or Ed25519 key object
        raise DecryptionKeyInvalidError(
            f"expected a path, PEM data or an RSA private key, "
            f"got {type(reference).__name__}"
        )

    path = Path(reference)
    try:
        return path.read_bytes()
    except (OSError, ValueError) as e:
        # ValueError: embedded null byte in the path
        raise DecryptionKeyNotFoundError(
            str(path), reason=getattr(e, "strerror", None) or type(e).__name__
        ) from e


def read_decryption_key(
    reference: KeyReference, passphrase: str | bytes | None = None
) -> RSAPrivateKey:
    """Load an RSA private key, raising if it cannot be produced.

    Args:
        reference: Path, PEM text, PEM bytes or a loaded private key
        passphrase: Passphrase for an encrypted PEM, if any

    Returns:
        The RSA private key

    Raises:
        DecryptionKeyNotFoundError: If a key path cannot be read
        DecryptionKeyInvalidError: If the material is not an RSA private key
            or the passphrase is wrong or missing
    """
    if isinstance(reference, RSAPrivateKey):
        return reference

    pem = _read_key_bytes(reference)
    if isinstance(passphrase, str):
        passphrase = passphrase.encode("utf-8")

    try:
        key = serialization.load_pem_private_key(pem, password=passphrase or None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        # TypeError covers a missing or unexpected passphrase
        raise DecryptionKeyInvalidError(str(e) or type(e).__name__) from e

    if not isinstance(key, RSAPrivateKey):
        raise DecryptionKeyInvalidError(
            f"expected an RSA private key, got {type(key).__name__}"
        )
    return key


def load_decryption_key(
    reference: KeyReference | None, passphrase: str | bytes | None = None
) -> RSAPrivateKey | None:
    """Load an RSA private key, or return None when none is available.

    Args:
        reference: Path, PEM text, PEM bytes, a loaded private key, or None
        passphrase: Passphrase for an encrypted PEM, if any

    Returns:
        The RSA private key, or None
    """
    if reference is None or reference == "" or reference == b"":
        logger.debug("No decryption key reference supplied")
        return None

    try:
        return read_decryption_key(reference, passphrase)
    except DecryptionKeyError as e:
        logger.debug(
            "Decryption key unavailable",
            extra={"error_code": e.code.code, "reason": e.context.get("reason")},
        )
        return None
