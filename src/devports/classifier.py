"""Heuristic service classification from a process command line."""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .discovery import PortRecord

VITE = re.compile(r"vite|@vitejs", re.IGNORECASE)
FASTAPI = re.compile(r"uvicorn|fastapi", re.IGNORECASE)
FLASK = re.compile(r"flask", re.IGNORECASE)
NEXTJS = re.compile(r"next-server|next dev|next start", re.IGNORECASE)
SVELTEKIT = re.compile(r"svelte", re.IGNORECASE)
OTHER_DEV_TOOLS = re.compile(r"webpack|nuxt|remix|astro", re.IGNORECASE)


@dataclass(frozen=True)
class ServiceFlags:
    """Independent framework predicates over one command line.

    Flags are not mutually exclusive. Which one wins for display is decided
    by primary_kind(), not here.
    """

    is_vite: bool = False
    is_fastapi: bool = False  # uvicorn / FastAPI (ASGI)
    is_flask: bool = False  # Flask (WSGI)
    is_nextjs: bool = False
    is_sveltekit: bool = False
    is_dev_server: bool = False

    @property
    def is_restartable(self) -> bool:
        """Whether any framework with a relaunch template matched."""
        return (
            self.is_vite
            or self.is_fastapi
            or self.is_nextjs
            or self.is_flask
            or self.is_sveltekit
        )

    def labels(self) -> list[str]:
        """Display tags for the matched frameworks."""
        tags = [
            (self.is_vite, "Vite"),
            (self.is_sveltekit, "SvelteKit"),
            (self.is_nextjs, "Next.js"),
            (self.is_fastapi, "FastAPI"),
            (self.is_flask, "Flask"),
        ]
        return [label for matched, label in tags if matched]


def classify(command: str) -> ServiceFlags:
    """Classify a command line by the frameworks it mentions.

    Examples:
        "node /app/node_modules/.bin/vite"  -> is_vite, is_dev_server
        "uvicorn main:app --port 8000"      -> is_fastapi, is_dev_server

    Args:
        command: Full command line

    Returns:
        ServiceFlags for the command
    """
    is_vite = bool(VITE.search(command))
    is_fastapi = bool(FASTAPI.search(command))
    is_flask = bool(FLASK.search(command))
    is_nextjs = bool(NEXTJS.search(command))
    is_sveltekit = bool(SVELTEKIT.search(command))
    is_dev_server = (
        is_vite
        or is_fastapi
        or is_flask
        or is_nextjs
        or is_sveltekit
        or bool(OTHER_DEV_TOOLS.search(command))
    )

    return ServiceFlags(
        is_vite=is_vite,
        is_fastapi=is_fastapi,
        is_flask=is_flask,
        is_nextjs=is_nextjs,
        is_sveltekit=is_sveltekit,
        is_dev_server=is_dev_server,
    )


def primary_kind(record: "PortRecord") -> str:
    """Pick the single kind used for a record's icon and style.

    Precedence: container, Vite/SvelteKit, Next.js, FastAPI, Flask,
    other dev server, Python, macOS app, generic.

    Args:
        record: Discovered port record

    Returns:
        One of "container", "vite", "nextjs", "fastapi", "flask",
        "dev", "python", "app", "other"
    """
    flags = record.flags
    if record.container:
        return "container"
    if flags.is_vite or flags.is_sveltekit:
        return "vite"
    if flags.is_nextjs:
        return "nextjs"
    if flags.is_fastapi:
        return "fastapi"
    if flags.is_flask:
        return "flask"
    if flags.is_dev_server:
        return "dev"
    if "python" in record.command:
        return "python"
    if ".app/" in record.command:
        return "app"
    return "other"
