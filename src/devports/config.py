"""Configuration management for devports."""

import os
from pathlib import Path

import platformdirs

# Fallback search path for system tools (lsof lives in /usr/sbin on macOS)
SYSTEM_PATH = "/usr/sbin:/usr/bin:/bin:/sbin"

# Preference store key for the hidden port list
HIDDEN_PORTS_KEY = "hidden-ports"


def get_data_dir() -> Path:
    """Get the data directory for devports.

    DEVPORTS_DATA_DIR overrides the platform default.

    Returns:
        Path to data directory
    """
    override = os.getenv("DEVPORTS_DATA_DIR")
    if override:
        data_dir = Path(override)
    else:
        data_dir = Path(platformdirs.user_data_dir("devports", "devports"))
    data_dir.mkdir(parents=True, exist_ok=True, mode=0o700)
    return data_dir


def get_db_path() -> Path:
    """Get the preference database file path.

    Returns:
        Path to database file
    """
    return get_data_dir() / "preferences.db"


def tool_env() -> dict[str, str]:
    """Environment for external tool invocations, with system dirs on PATH."""
    env = dict(os.environ)
    path = env.get("PATH", "")
    env["PATH"] = f"{path}:{SYSTEM_PATH}" if path else SYSTEM_PATH
    return env
