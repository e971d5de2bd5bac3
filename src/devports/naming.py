"""Human-friendly names for listening processes."""

import re

APP_BUNDLE = re.compile(r"/([^/]+)\.app/")
SCRIPT_RUNNER = re.compile(r"(?:node|bun|tsx|ts-node)\s+(\S+)")
PYTHON_SCRIPT = re.compile(r"python3?\s+(?:.*/)?([^/\s]+\.py)")
ABSOLUTE_BINARY = re.compile(r"^/\S+/([^/\s]+)")
HOME_PREFIX = re.compile(r"^/(?:Users|home)/[^/]+/")
NODE_MODULES_SUFFIX = re.compile(r"/node_modules/.*")

# Folders that never name a project
_CWD_SKIP = {"node_modules", ".bin", "src", "dist"}
_SCRIPT_SKIP = _CWD_SKIP | {"bin"}


def display_name(command: str, cwd: str | None = None) -> tuple[str, str | None]:
    """Derive a display name and project path from a command line.

    Tried in order:
    1. macOS .app bundle name
    2. Last folder of the working directory
    3. Project folder of a node/bun/tsx script argument
    4. Python script file name
    5. Binary name of an absolute path
    6. First word of the command

    Args:
        command: Full command line
        cwd: Process working directory, if known

    Returns:
        Tuple of (name, project path or None)

    Examples:
        "/Applications/Figma.app/Contents/MacOS/Figma" -> ("Figma", None)
        "node /work/shop/server.js" -> ("shop", "/work/shop/server.js")
        "python3 /srv/tools/serve.py" -> ("serve.py", None)
    """
    app_match = APP_BUNDLE.search(command)
    if app_match:
        return app_match.group(1), None

    if cwd:
        folders = [part for part in cwd.split("/") if part]
        if folders and folders[-1] not in _CWD_SKIP:
            return folders[-1], cwd

    script_match = SCRIPT_RUNNER.search(command)
    if script_match:
        script_path = script_match.group(1)
        parts = [part for part in script_path.split("/") if part]
        for part in reversed(parts):
            if part not in _SCRIPT_SKIP and not part.endswith(".js"):
                return part, script_path

    python_match = PYTHON_SCRIPT.search(command)
    if python_match:
        return python_match.group(1), None

    binary_match = ABSOLUTE_BINARY.search(command)
    if binary_match:
        return binary_match.group(1), None

    words = command.split()
    first_word = words[0] if words else ""
    return first_word.split("/")[-1] or command[:20], None


def shorten_path(path: str) -> str:
    """Shorten a project path for display.

    Replaces the home directory prefix with ``~/`` and drops anything
    inside node_modules.
    """
    return NODE_MODULES_SUFFIX.sub("", HOME_PREFIX.sub("~/", path))
