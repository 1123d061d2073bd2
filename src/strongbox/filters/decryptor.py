# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Base64 decoding and RSA decryption of secure settings values.

``decrypt_candidate`` never raises for a bad value. Every failure, whatever
its cause, comes back as a ``PassThrough`` that records why, so the caller
keeps the original value and may log the reason.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding as asym_padding
from cryptography.hazmat.primitives.asymmetric.padding import AsymmetricPadding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from strongbox.config.errors import CiphertextDecodeError, CiphertextDecryptionError
from strongbox.config.settings import PaddingScheme


class PassThroughReason(str, Enum):
    """Why a secure value was left as it was."""

    NO_KEY = "no_key"
    NOT_A_STRING = "not_a_string"
    MALFORMED_ENCODING = "malformed_encoding"
    DECRYPTION_FAILED = "decryption_failed"
    UNDESERIALIZABLE = "undeserializable"


@dataclass(frozen=True, slots=True)
class Decrypted:
    """Successful decryption; ``plaintext`` still needs deserializing."""

    plaintext: bytes


@dataclass(frozen=True, slots=True)
class PassThrough:
    """The candidate could not be decrypted and must be kept unchanged."""

    reason: PassThroughReason
    detail: str | None = None


DecryptionOutcome = Union[Decrypted, PassThrough]


def padding_for(scheme: PaddingScheme) -> AsymmetricPadding:
    """Build the cryptography padding object for a configured scheme."""
    if scheme == PaddingScheme.OAEP:
        return asym_padding.OAEP(
            mgf=asym_padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        )
    return asym_padding.PKCS1v15()


def decode_ciphertext(candidate: str) -> bytes:
    """Decode standard base64, rejecting any character outside the alphabet.

    Raises:
        CiphertextDecodeError: On bad padding, stray characters or non-ASCII input
    """
    try:
        return base64.b64decode(candidate.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise CiphertextDecodeError(str(e)) from e


def decrypt_ciphertext(
    ciphertext: bytes, key: RSAPrivateKey, padding: AsymmetricPadding
) -> bytes:
    """Decrypt RSA ciphertext with the private key.

    Raises:
        CiphertextDecryptionError: On a length mismatch with the key, a
            padding check failure or a ciphertext made for another key
    """
    try:
        return key.decrypt(ciphertext, padding)
    except ValueError as e:
        raise CiphertextDecryptionError(str(e) or "decryption failed") from e


def decrypt_candidate(
    candidate: Any,
    key: RSAPrivateKey | None,
    padding: AsymmetricPadding | None = None,
) -> DecryptionOutcome:
    """Try to turn a secure value into plaintext bytes.

    Args:
        candidate: The value stored under a secure key
        key: Private key, or None when no key is available
        padding: RSA padding (PKCS#1 v1.5 if None)

    Returns:
        ``Decrypted`` with the plaintext, or ``PassThrough`` with the reason
    """
    if key is None:
        return PassThrough(PassThroughReason.NO_KEY)
    if not isinstance(candidate, str):
        return PassThrough(PassThroughReason.NOT_A_STRING, type(candidate).__name__)

    try:
        ciphertext = decode_ciphertext(candidate)
    except CiphertextDecodeError as e:
        return PassThrough(PassThroughReason.MALFORMED_ENCODING, e.context["reason"])

    try:
        plaintext = decrypt_ciphertext(
            ciphertext, key, padding or asym_padding.PKCS1v15()
        )
    except CiphertextDecryptionError as e:
        return PassThrough(PassThroughReason.DECRYPTION_FAILED, e.context["reason"])

    return Decrypted(plaintext)
