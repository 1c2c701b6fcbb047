import pytest
from starlette.requests import Request


@pytest.fixture
def make_request():
    """Build a bare HTTP request carrying the given raw authorization headers."""

    def _make(*values: str) -> Request:
        raw = [(b"authorization", v.encode("latin-1")) for v in values]
        return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})

    return _make
