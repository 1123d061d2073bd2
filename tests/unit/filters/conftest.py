"""Fixtures for the decryption filter tests."""

from __future__ import annotations

import base64
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey


def _pem(key: RSAPrivateKey, password: bytes | None = None) -> bytes:
    encryption = (
        serialization.BestAvailableEncryption(password)
        if password
        else serialization.NoEncryption()
    )
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=encryption,
    )


@pytest.fixture(scope="session")
def rsa_key() -> RSAPrivateKey:
    """The key the secure values in these tests are encrypted for."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_key() -> RSAPrivateKey:
    """A second, unrelated key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def key_path(tmp_path: Path, rsa_key: RSAPrivateKey) -> Path:
    path = tmp_path / "settings_key.pem"
    path.write_bytes(_pem(rsa_key))
    return path


@pytest.fixture
def other_key_path(tmp_path: Path, other_rsa_key: RSAPrivateKey) -> Path:
    path = tmp_path / "other_key.pem"
    path.write_bytes(_pem(other_rsa_key))
    return path


@pytest.fixture
def protected_key_path(tmp_path: Path, rsa_key: RSAPrivateKey) -> Path:
    path = tmp_path / "protected_key.pem"
    path.write_bytes(_pem(rsa_key, password=b"correct horse"))
    return path


@pytest.fixture
def pem_bytes(rsa_key: RSAPrivateKey) -> bytes:
    return _pem(rsa_key)


@pytest.fixture
def encrypt_raw(rsa_key: RSAPrivateKey) -> Callable[..., str]:
    """Encrypt raw bytes for ``rsa_key`` and base64-encode the result."""

    def encrypt(plaintext: bytes, scheme: str = "pkcs1v15") -> str:
        if scheme == "oaep":
            pad = padding.OAEP(
                mgf=padding.MGF1(algorithm=hashes.SHA256()),
                algorithm=hashes.SHA256(),
                label=None,
            )
        else:
            pad = padding.PKCS1v15()
        ciphertext = rsa_key.public_key().encrypt(plaintext, pad)
        return base64.b64encode(ciphertext).decode("ascii")

    return encrypt


@pytest.fixture
def encrypt(encrypt_raw: Callable[..., str]) -> Callable[..., str]:
    """Serialize a value as JSON, encrypt it and base64-encode the result."""

    def encrypt_value(value: Any, scheme: str = "pkcs1v15") -> str:
        return encrypt_raw(json.dumps(value).encode("utf-8"), scheme)

    return encrypt_value
