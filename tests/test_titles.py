"""Tests for titles module."""

import pytest
import requests

from devports import titles
from devports.titles import fetch_page_title


class FakeResponse:
    def __init__(self, text, status_code=200, content_type="text/html; charset=utf-8"):
        self.text = text
        self.status_code = status_code
        self.headers = {"content-type": content_type}

    @property
    def ok(self):
        return self.status_code < 400


@pytest.fixture
def serve(monkeypatch):
    """Patch requests.get to return a canned response."""
    requests_made = []

    def install(response):
        def fake_get(url, **kwargs):
            requests_made.append((url, kwargs))
            if isinstance(response, Exception):
                raise response
            return response

        monkeypatch.setattr(titles.requests, "get", fake_get)
        return requests_made

    return install


def test_fetch_page_title(serve):
    """Test a project title is returned."""
    made = serve(FakeResponse("<html><head><title> Shop Admin </title></head></html>"))

    assert fetch_page_title(5173) == "Shop Admin"
    url, kwargs = made[0]
    assert url == "http://localhost:5173"
    assert kwargs["timeout"] == 0.8


def test_fetch_page_title_generic(serve):
    """Test generic framework titles are suppressed."""
    serve(FakeResponse("<title>Vite + React</title>"))
    assert fetch_page_title(5173) is None


def test_fetch_page_title_truncates(serve):
    """Test long titles are cut to 50 characters."""
    serve(FakeResponse(f"<title>{'x' * 80}</title>"))
    assert fetch_page_title(3000) == "x" * 50


def test_fetch_page_title_not_html(serve):
    """Test non-HTML responses have no title."""
    serve(FakeResponse('{"title": "api"}', content_type="application/json"))
    assert fetch_page_title(8000) is None


def test_fetch_page_title_error_status(serve):
    """Test error responses have no title."""
    serve(FakeResponse("<title>Not Found</title>", status_code=404))
    assert fetch_page_title(8000) is None


def test_fetch_page_title_connection_error(serve):
    """Test unreachable servers have no title."""
    serve(requests.ConnectionError("refused"))
    assert fetch_page_title(8000) is None
