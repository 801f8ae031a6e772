"""Shared fixtures for sqlbatch tests."""

from __future__ import annotations

import pytest

# (EOL, EOF) combinations every line-sensitive test runs under
EOL_EOF_CASES = [
    pytest.param(("\n", ""), id="lf-noeol"),
    pytest.param(("\r\n", ""), id="crlf-noeol"),
    pytest.param(("\n", "\n"), id="lf-eol"),
    pytest.param(("\r\n", "\r\n"), id="crlf-eol"),
]

BATCH_SEPARATORS = ["GO", "Go", "gO", "go"]


@pytest.fixture(params=EOL_EOF_CASES)
def eol_eof(request: pytest.FixtureRequest) -> tuple[str, str]:
    """Line break used between lines, and text that ends the script."""
    return request.param


@pytest.fixture(params=BATCH_SEPARATORS)
def separator(request: pytest.FixtureRequest) -> str:
    return request.param
