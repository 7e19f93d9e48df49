"""
Root conftest.py: registers custom markers.

Markers:
  @pytest.mark.interactive: writes to a real TTY; skipped unless
                             INTERM_INTERACTIVE_TESTS=1 or --interactive
"""
from __future__ import annotations

import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "interactive: mark test as requiring a real terminal on stdout (run with --interactive)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--interactive",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.interactive (requires a TTY)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.interactive tests unless --interactive or INTERM_INTERACTIVE_TESTS=1 is set."""
    run_interactive = config.getoption("--interactive") or os.environ.get(
        "INTERM_INTERACTIVE_TESTS", ""
    ).lower() in ("1", "true", "yes")
    skip_interactive = pytest.mark.skip(reason="Needs a TTY; run with --interactive or INTERM_INTERACTIVE_TESTS=1")
    for item in items:
        if "interactive" in item.keywords and not run_interactive:
            item.add_marker(skip_interactive)
