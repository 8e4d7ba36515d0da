import sys
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fuze.core.http import FetchError, FetchResult


class FakeSite:
    """In-memory fetch capability: url -> html, (status, html) or an exception."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    async def __call__(self, url):
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            return FetchResult(404, "")
        if isinstance(page, Exception):
            raise page
        if isinstance(page, tuple):
            return FetchResult(*page)
        return FetchResult(200, page)


@pytest.fixture
def fake_site():
    return FakeSite


@pytest.fixture
def refused():
    def _refused(url):
        return FetchError(url, "connection refused")
    return _refused
