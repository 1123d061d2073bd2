# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: strongbox
"""
Deployment environments and the .env files each one reads.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from strongbox.config.errors import ConfigEnvironmentError

# Checked in order; the first one set wins
ENVIRONMENT_VARIABLES = ("STRONGBOX_ENV", "ENVIRONMENT", "ENV")

_ALIASES = {"dev": "development", "test": "testing", "prod": "production"}


class Environment(str, Enum):
    """Deployment environment strongbox settings are loaded for."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str | None) -> Environment:
        """Parse an environment name or its short alias (``dev``, ``prod``...).

        None means development.

        Raises:
            ConfigEnvironmentError: If the name is not recognised
        """
        if value is None:
            return cls.DEVELOPMENT

        name = value.strip().lower()
        try:
            return cls(_ALIASES.get(name, name))
        except ValueError:
            raise ConfigEnvironmentError(
                f"Invalid environment: {value}", environment=value
            ) from None

    @classmethod
    def get_current(cls) -> Environment:
        value = next(
            (os.environ[var] for var in ENVIRONMENT_VARIABLES if os.environ.get(var)),
            None,
        )
        return cls.from_string(value)


def find_env_files(env: Environment, base_dir: Path | None = None) -> list[Path]:
    """Return the .env files that exist for ``env``, lowest precedence first.

    ``.env`` applies everywhere, ``.env.<environment>`` overrides it and
    ``.env.local`` holds developer overrides, which production ignores.

    Args:
        env: The environment to load for
        base_dir: Directory holding the files (defaults to the working directory)
    """
    base_dir = base_dir or Path.cwd()
    names = [".env", f".env.{env.value}"]
    if env is not Environment.PRODUCTION:
        names.append(".env.local")
    return [base_dir / name for name in names if (base_dir / name).is_file()]
