# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""Filters applied to merged settings trees.

The decryption filter replaces the values of secure keys with their
decrypted plaintext where possible.
"""

from strongbox.filters.decryption import (
    DecryptionFilter,
    FilterReport,
    decrypt_settings,
)
from strongbox.filters.decryptor import (
    Decrypted,
    DecryptionOutcome,
    PassThrough,
    PassThroughReason,
    decrypt_candidate,
)
from strongbox.filters.deserializer import deserialize_plaintext
from strongbox.filters.key_loader import load_decryption_key, read_decryption_key
from strongbox.filters.secure_keys import SettingsLeaf, is_secure_key, secure_keys

__all__ = [
    "DecryptionFilter",
    "FilterReport",
    "decrypt_settings",
    # Pipeline steps
    "Decrypted",
    "DecryptionOutcome",
    "PassThrough",
    "PassThroughReason",
    "decrypt_candidate",
    "deserialize_plaintext",
    "load_decryption_key",
    "read_decryption_key",
    # Secure keys
    "SettingsLeaf",
    "is_secure_key",
    "secure_keys",
]
