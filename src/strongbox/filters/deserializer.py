# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Recovery of typed values from decrypted secure settings.

Values are serialized as JSON before they are encrypted, so a secure
setting can hold an integer, a boolean, a list or a nested object as well
as a string. Parsing is also the last check that decryption really worked:
PKCS#1 v1.5 decryption with the wrong key can return random bytes instead
of failing, and those must never replace a setting.
"""

from __future__ import annotations

import json
from typing import Any

from strongbox.config.errors import DeserializationError


def deserialize_plaintext(plaintext: bytes) -> Any:
    """Reconstruct the value that was serialized before encryption.

    Args:
        plaintext: Decrypted bytes

    Returns:
        The deserialized value

    Raises:
        DeserializationError: If the plaintext is not UTF-8 encoded JSON
    """
    try:
        return json.loads(plaintext.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DeserializationError(str(e), length=len(plaintext)) from e
    except json.JSONDecodeError as e:
        raise DeserializationError(e.msg, length=len(plaintext)) from e
