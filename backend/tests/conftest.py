"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real upstream
os.environ.setdefault(
    "UPSTREAM_BASE_URL",
    "http://upstream.test/api/v1/employee",
)
os.environ.setdefault("LOG_FORMAT", "text")
