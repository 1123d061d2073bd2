# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""Decryption of secure values in hierarchical settings."""

from strongbox.config import FilterSettings, PaddingScheme
from strongbox.filters import DecryptionFilter, FilterReport, decrypt_settings

__all__ = [
    "DecryptionFilter",
    "FilterReport",
    "FilterSettings",
    "PaddingScheme",
    "decrypt_settings",
]
