"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all tests.
"""

import os
import sys
import pytest
from pathlib import Path

# Add backend to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Set test environment
os.environ["GROCERY_ENVIRONMENT"] = "test"
os.environ["GROCERY_SUBMIT_DELAY_MIN_S"] = "0"
os.environ["GROCERY_SUBMIT_DELAY_MAX_S"] = "0"


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def app():
    """FastAPI test application with an empty submission store."""
    from grocery_list.main import app
    app.state.submission_store.clear()
    return app


@pytest.fixture
def client(app):
    """Sync test client for API tests."""
    from fastapi.testclient import TestClient
    return TestClient(app)


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def sample_list_text():
    """A hand-written list in the usual mixed format."""
    return """Weekly shopping

Meats -
.Chicken Breast (2x)
.Ground Beef 3x
.
Bacon

Produce -
. Bananas (6)
Spinach
.

Pantry
Olive Oil
Rice (12)
Pasta 2x

Cleaning Supplies
Dish Soap
..Sponges (3x)

Meats -
Turkey Slices
"""


@pytest.fixture
def sample_list_file(tmp_path, sample_list_text):
    """The sample list written to disk."""
    path = tmp_path / "items.txt"
    path.write_text(sample_list_text, encoding="utf-8")
    return path


@pytest.fixture
def sample_items():
    """Parsed records for a short list."""
    from grocery_list.models.grocery import GroceryItem
    return [
        GroceryItem(category="Meats", item="Chicken Breast", quantity=2),
        GroceryItem(category="Meats", item="Ground Beef", quantity=3),
        GroceryItem(category="Pantry", item="Olive Oil", quantity=1),
    ]
