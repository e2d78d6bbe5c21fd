"""
Root pytest configuration for the Django project.

pytest-django reads DJANGO_SETTINGS_MODULE from pyproject.toml and sets
Django up before collection. App-specific fixtures are defined in each
app's tests/conftest.py.
"""

import pytest
from django.core.cache import cache


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_payment_details.py, test_factory.py → integration
    - everything else → unit (the payments app has no database access)

    Explicit markers on test functions/classes take precedence.
    """
    integration_patterns = [
        "test_payment_details.py",
        "test_factory.py",
    ]

    for item in items:
        # Skip if test already has unit/integration marker
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration"}:
            continue

        filename = str(item.fspath).split("/")[-1]

        if any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def clear_cache():
    """Start every test with an empty local-memory cache."""
    cache.clear()
    yield
    cache.clear()
