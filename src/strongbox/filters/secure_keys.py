# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Recognition of settings keys whose values are encrypted at rest.

A key is secure when its name starts with the secure prefix (``_secure_`` by
default). The prefix has to open the key: ``secure_password`` and
``db_secure_password`` are ordinary keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from strongbox.config.settings import DEFAULT_SECURE_PREFIX


def is_secure_key(key: Any, prefix: str = DEFAULT_SECURE_PREFIX) -> bool:
    """Return True if ``key`` is a string beginning with ``prefix``."""
    return isinstance(key, str) and key.startswith(prefix)


@dataclass(frozen=True, slots=True)
class SettingsLeaf:
    """A scalar settings value tagged with whether it sits under a secure key.

    Attributes:
        path: Dotted path of the value inside the settings tree
        value: The value as found in the tree
        is_secure: Whether the owning key carries the secure prefix
    """

    path: str
    value: Any
    is_secure: bool

    @classmethod
    def classify(
        cls,
        path: str,
        key: Any,
        value: Any,
        prefix: str = DEFAULT_SECURE_PREFIX,
        inherited: bool = False,
    ) -> SettingsLeaf:
        """Build a leaf, tagging it secure if ``key`` or an enclosing key is."""
        return cls(path, value, inherited or is_secure_key(key, prefix))


def join_path(parent: str, key: Any) -> str:
    """Dotted path of ``key`` below ``parent`` (the empty string is the root)."""
    return f"{parent}.{key}" if parent else str(key)


def secure_keys(
    tree: Mapping[str, Any], prefix: str = DEFAULT_SECURE_PREFIX
) -> list[str]:
    """List the dotted paths of every secure-marked value in ``tree``.

    Nested mappings are searched; a secure key holding a mapping is not itself
    listed, only the secure keys inside it.

    Args:
        tree: Settings tree to inspect
        prefix: Secure key prefix

    Returns:
        Dotted key paths in tree order
    """
    found: list[str] = []

    def visit(node: Mapping[str, Any], parent: str) -> None:
        for key, value in node.items():
            path = join_path(parent, key)
            if isinstance(value, Mapping):
                visit(value, path)
            elif is_secure_key(key, prefix):
                found.append(path)

    visit(tree, "")
    return found
