"""Top-level pytest configuration for strongbox."""

import os

import pytest

# Import modules for their side effects so error codes are registered
import strongbox.errors.base
import strongbox.config.errors


_STRONGBOX_ENV_PREFIXES = ("STRONGBOX_",)
_ENVIRONMENT_VARS = ("ENVIRONMENT", "ENV")


@pytest.fixture(autouse=True)
def clean_strongbox_env(monkeypatch):
    """Keep settings tests independent of the developer's shell environment."""
    for name in list(os.environ):
        if name.startswith(_STRONGBOX_ENV_PREFIXES) or name in _ENVIRONMENT_VARS:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def env_dir(tmp_path, monkeypatch):
    """A temporary working directory for .env files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
