import os
from collections.abc import Generator
from pathlib import Path

import pytest

from treeqr.config.settings import Settings
from treeqr.database.connection import close_firebase, init_firebase


def _test_settings() -> Settings:
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def firebase_app(test_settings: Settings) -> Generator[None, None, None]:
    if not Path(test_settings.firebase_credentials_path).is_file():
        pytest.skip(
            "Firebase credentials not available. "
            "Set FIREBASE_CREDENTIALS_PATH and FIREBASE_DATABASE_URL to run integration tests."
        )
    try:
        init_firebase(test_settings)
    except Exception as e:
        pytest.skip(f"Firebase not available: {e}")
    try:
        yield
    finally:
        close_firebase()


@pytest.fixture(scope="session")
def existing_tree_id() -> str:
    tree_id = os.environ.get("INTEGRATION_TREE_ID", "")
    if not tree_id:
        pytest.skip("Set INTEGRATION_TREE_ID to a tree stored in the test database")
    return tree_id
