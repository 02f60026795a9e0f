"""Integration test configuration.

Integration tests run against a real PostgreSQL database named by
MUSE_INTEGRATION_DATABASE_URL and are skipped when it is unset.
"""

import os

import pytest

INTEGRATION_DATABASE_URL = os.environ.get("MUSE_INTEGRATION_DATABASE_URL")

if INTEGRATION_DATABASE_URL:
    os.environ["DATABASE__URL"] = INTEGRATION_DATABASE_URL


def pytest_collection_modifyitems(config, items):
    if INTEGRATION_DATABASE_URL:
        return
    skip = pytest.mark.skip(reason="MUSE_INTEGRATION_DATABASE_URL is not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
