import os

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked as integration (downloads tokenizer data).",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly enabled."""
    if config.getoption("--run-integration") or os.getenv("RUN_INTEGRATION_TESTS") == "1":
        return
    skip_marker = pytest.mark.skip(
        reason="Integration tests are disabled by default. Use --run-integration or set RUN_INTEGRATION_TESTS=1."
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_marker)
