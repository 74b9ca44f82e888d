"""Root conftest — shared test configuration."""

import os

# Tests must never reach a real Postgres instance
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
