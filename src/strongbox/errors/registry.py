# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""Process-wide index of the error categories and codes strongbox declares.

Error modules declare their codes at import time, so the registry fills up
as ``strongbox.config`` and ``strongbox.filters`` are imported. Declaring the
same name twice returns the object registered first.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from strongbox.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Singleton holding every declared category and code, keyed by name."""

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def add_category(self, category: ErrorCategory) -> ErrorCategory:
        with self._lock:
            return self._categories.setdefault(category.name, category)

    def add_code(self, code: ErrorCode) -> ErrorCode:
        with self._lock:
            return self._codes.setdefault(code.code, code)

    def lookup_code(self, name: str) -> ErrorCode | None:
        with self._lock:
            return self._codes.get(name)

    def codes_in(self, category: ErrorCategory) -> list[ErrorCode]:
        """List the codes of ``category`` and of all its subcategories."""
        with self._lock:
            return [
                code
                for code in self._codes.values()
                if code.category.is_subcategory_of(category)
            ]


registry = ErrorRegistry()
