# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Structured errors for strongbox.

Every strongbox error carries an ``ErrorCode`` that names the failure, a
severity and a context dictionary. Codes belong to hierarchical categories
so callers can tell, for example, any secure-value failure from a plain
configuration error without matching on exception classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar

from strongbox.errors.registry import registry


class ErrorSeverity(str, Enum):
    """How bad a failure is for the operation that hit it."""

    # The operation could not do its job
    ERROR = "error"
    # One value was skipped; the operation carried on
    WARNING = "warning"


@dataclass(frozen=True)
class ErrorCategory:
    """Named group of error codes, optionally nested in a parent category."""

    name: str
    parent: ErrorCategory | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.name

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        """True if ``category`` is this category or one of its ancestors."""
        current: ErrorCategory | None = self
        while current is not None:
            if current == category:
                return True
            current = current.parent
        return False

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        return registry.add_category(cls(name, parent))


@dataclass(frozen=True)
class ErrorCode:
    """Stable identifier of one kind of failure."""

    code: str
    category: ErrorCategory = field(compare=False)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        return registry.add_code(cls(name, category))

    @classmethod
    def get_by_code(cls, code: str, *, raise_if_missing: bool = True) -> ErrorCode | None:
        """Find a declared code by name.

        Raises:
            ValueError: If the code was never declared and ``raise_if_missing``
        """
        error_code = registry.lookup_code(code)
        if error_code is None and raise_if_missing:
            raise ValueError(f"Error code '{code}' not found in registry")
        return error_code


class StrongboxError(Exception):
    """
    Base class of strongbox errors.

    Subclasses set ``default_code`` (and ``default_severity`` where it is not
    ERROR); the base class itself cannot be raised.
    """

    default_code: ClassVar[ErrorCode | None] = None
    default_severity: ClassVar[ErrorSeverity] = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        severity: ErrorSeverity | None = None,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error message
            code: Overrides the class's ``default_code``
            severity: Overrides the class's ``default_severity``
            context: Additional contextual information (copied)
            **kwargs: Extra context keys, merged into context
        """
        if type(self) is StrongboxError:
            raise TypeError("StrongboxError is abstract; raise a subclass")

        code = code if code is not None else self.default_code
        if not isinstance(code, ErrorCode):
            raise TypeError(
                f"{type(self).__name__} needs an ErrorCode, got {type(code).__name__}"
            )

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity or self.default_severity
        self.context: dict[str, Any] = {**(context or {}), **kwargs}
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> StrongboxError:
        self.context[key] = value
        return self

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation, e.g. for structured logs."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
