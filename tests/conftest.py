"""Test configuration and fixtures."""

import os

import logfire
import pytest

# Settings are read from the environment when containers are built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-signing-secret-0123456789abcdef0123456789")
# Cheap Argon2 parameters keep hashing fast under test
os.environ.setdefault("AUTH__PASSWORD_TIME_COST", "1")
os.environ.setdefault("AUTH__PASSWORD_MEMORY_COST", "1024")
os.environ.setdefault("AUTH__PASSWORD_PARALLELISM", "1")

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def password() -> str:
    """A password that satisfies every input rule."""
    return "correct horse battery staple"
