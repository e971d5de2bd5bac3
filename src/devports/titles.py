"""Fetch page titles from local HTTP servers."""

import re

import requests

from .console import debug

TITLE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)

# Titles that say nothing about which project is running
GENERIC_TITLES = {
    "vite",
    "vite app",
    "vite + react",
    "vite + vue",
    "vite + svelte",
    "webpack",
    "next.js",
    "nuxt",
    "localhost",
    "index",
    "home",
    "untitled",
}


def fetch_page_title(port: int, timeout: float = 0.8) -> str | None:
    """Try to read the HTML title served on a local port.

    Args:
        port: Local port
        timeout: Request timeout in seconds

    Returns:
        Title truncated to 50 characters, or None if unavailable or generic
    """
    try:
        response = requests.get(
            f"http://localhost:{port}",
            headers={"Accept": "text/html"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        debug(f"No title for port {port}: {e}")
        return None

    if not response.ok:
        return None
    if "text/html" not in response.headers.get("content-type", ""):
        return None

    match = TITLE.search(response.text)
    if not match:
        return None
    title = match.group(1).strip()[:50]

    if not title or title.lower() in GENERIC_TITLES:
        return None
    return title
