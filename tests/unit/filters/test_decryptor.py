"""Tests for base64 decoding and RSA decryption of candidates."""

from __future__ import annotations

import base64

import pytest

from strongbox.config.errors import CiphertextDecodeError, CiphertextDecryptionError
from strongbox.config.settings import PaddingScheme
from strongbox.filters.decryptor import (
    Decrypted,
    PassThrough,
    PassThroughReason,
    decode_ciphertext,
    decrypt_candidate,
    decrypt_ciphertext,
    padding_for,
)


class TestDecryptCandidate:
    def test_decrypts_valid_ciphertext(self, encrypt_raw, rsa_key) -> None:
        outcome = decrypt_candidate(encrypt_raw(b'"hello"'), rsa_key)

        assert outcome == Decrypted(b'"hello"')

    def test_no_key(self, encrypt_raw) -> None:
        outcome = decrypt_candidate(encrypt_raw(b"x"), None)

        assert outcome == PassThrough(PassThroughReason.NO_KEY)

    @pytest.mark.parametrize("candidate", [12345, None, True, b"bytes", 1.5])
    def test_non_string_candidate(self, candidate, rsa_key) -> None:
        outcome = decrypt_candidate(candidate, rsa_key)

        assert isinstance(outcome, PassThrough)
        assert outcome.reason is PassThroughReason.NOT_A_STRING

    @pytest.mark.parametrize(
        "candidate",
        ["hello", "abc\\def==", "not base64!", "café", "abc"],
    )
    def test_malformed_encoding(self, candidate, rsa_key) -> None:
        outcome = decrypt_candidate(candidate, rsa_key)

        assert isinstance(outcome, PassThrough)
        assert outcome.reason is PassThroughReason.MALFORMED_ENCODING
        assert outcome.detail

    def test_inserted_backslash_is_malformed(self, encrypt_raw, rsa_key) -> None:
        ciphertext = encrypt_raw(b"x")
        outcome = decrypt_candidate(ciphertext[:9] + "\\" + ciphertext[9:], rsa_key)

        assert outcome.reason is PassThroughReason.MALFORMED_ENCODING

    @pytest.mark.parametrize(
        "candidate",
        [
            "",
            base64.b64encode(b"short").decode(),
            base64.b64encode(b"\x00" * 128).decode(),
        ],
    )
    def test_decryption_failure(self, candidate, rsa_key) -> None:
        outcome = decrypt_candidate(candidate, rsa_key)

        assert isinstance(outcome, PassThrough)
        assert outcome.reason is PassThroughReason.DECRYPTION_FAILED

    def test_wrong_key(self, encrypt_raw, other_rsa_key) -> None:
        outcome = decrypt_candidate(
            encrypt_raw(b"x", scheme="oaep"),
            other_rsa_key,
            padding_for(PaddingScheme.OAEP),
        )

        assert isinstance(outcome, PassThrough)
        assert outcome.reason is PassThroughReason.DECRYPTION_FAILED

    def test_surrounding_whitespace_is_ignored(self, encrypt_raw, rsa_key) -> None:
        outcome = decrypt_candidate(f"  {encrypt_raw(b'1')}\n", rsa_key)

        assert outcome == Decrypted(b"1")


class TestSteps:
    def test_decode_ciphertext(self) -> None:
        assert decode_ciphertext("aGVsbG8=") == b"hello"

    def test_decode_ciphertext_rejects_urlsafe_alphabet(self) -> None:
        with pytest.raises(CiphertextDecodeError):
            decode_ciphertext("a-_b")

    def test_decrypt_ciphertext_error(self, rsa_key) -> None:
        with pytest.raises(CiphertextDecryptionError) as exc_info:
            decrypt_ciphertext(b"too short", rsa_key, padding_for(PaddingScheme.PKCS1V15))

        assert exc_info.value.code.code == "CONFIG_SECURE_DECRYPTION_ERROR"

    def test_padding_for(self) -> None:
        assert padding_for(PaddingScheme.PKCS1V15).name == "EMSA-PKCS1-v1_5"
        assert padding_for(PaddingScheme.OAEP).name == "EME-OAEP"
