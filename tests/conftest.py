"""
Shared pytest fixtures and configuration for optionstore tests.

This module puts the workspace ``src/`` first on the import path and resets
the process-wide logging and settings state around every test.
"""

import os
import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parent.parent

# Put `src/` first so `import optionstore` uses workspace code.
sys.path.insert(0, str(_REPO_ROOT / "src"))
# Put repo root early so `import tests.*` resolves locally.
sys.path.insert(1, str(_REPO_ROOT))

from optionstore import OptionsStore, Whitelist  # noqa: E402
from optionstore.core.utils.config import ENV_PREFIX, reset_settings  # noqa: E402
from optionstore.core.utils.logger import reset_logging  # noqa: E402
from tests.fixtures.option_types import Point  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Strip OPTIONSTORE_* variables and reset cached settings and logging."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    # Keep load_dotenv() away from any .env in the developer's checkout.
    monkeypatch.chdir(tmp_path)
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def mixed_whitelist() -> Whitelist:
    """One option of each built-in type plus two opaque ones."""
    return Whitelist(
        {
            "flag": bool,
            "count": "int",
            "name": "string",
            "origin": Point,
            "colour": "palette.Colour",
        }
    )


@pytest.fixture
def store(mixed_whitelist) -> OptionsStore:
    return OptionsStore(mixed_whitelist)
