# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox

"""
Error handling for strongbox.
"""

from __future__ import annotations

from strongbox.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    StrongboxError,
)

__all__ = [
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "StrongboxError",
]
