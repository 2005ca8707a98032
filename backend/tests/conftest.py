import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# In-memory database for anything that imports app.database
os.environ.setdefault("PYTEST_RUN", "1")

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / ".env.test")


@pytest.fixture(autouse=True)
def reset_dependency_overrides():
    """Endpoint tests swap get_db / auth dependencies; never leak them."""
    yield
    from app.main import app

    app.dependency_overrides.clear()
