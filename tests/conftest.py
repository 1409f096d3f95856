"""Root pytest configuration.

Test Structure:
    tests/
    └── unit/
        ├── domain/            # Aggregation, reports, validation
        ├── application/       # Queries, commands, cache, session
        ├── infrastructure/    # API client, mappers, session files
        ├── presentation/      # CLI
        ├── bilancio_auth/     # Token inspection
        ├── bilancio_config/   # Settings
        └── contracts/         # Wire models

A ``config/.env.test`` file, when present, is loaded before the tests run.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from bilancio_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

TEST_ENV = PROJECT_ROOT / "config" / ".env.test"
if TEST_ENV.exists():
    load_dotenv(TEST_ENV)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Keep sessions out of the home directory and reset cached settings."""
    monkeypatch.setenv("BILANCIO_STATE_DIR", str(tmp_path / "state"))
    clear_settings_cache()
    yield
    clear_settings_cache()
