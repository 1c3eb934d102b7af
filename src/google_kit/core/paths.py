"""Library paths and metadata.

This module provides functions for accessing:
- The library version (installed metadata or the source tree)
- Per-user data directory (for stored OAuth tokens)

The module uses platformdirs to determine platform-appropriate paths
for user data.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from platformdirs import user_data_dir

# Library metadata constants
APP_NAME = "google-kit"
APP_ORG = "google-kit"
_DEFAULT_VERSION = "1.0.0"  # Fallback version if unable to determine


def app_version() -> str:
    """Get the library version.

    Tries multiple approaches:
    1. importlib.metadata.version() (works when installed)
    2. Reading pyproject.toml from source tree (development mode)
    3. Returns default version as fallback

    Returns:
        Version string (e.g., "1.0.0")
    """
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        pass

    try:
        # Navigate from src/google_kit/core/paths.py to project root
        project_root = Path(__file__).parent.parent.parent.parent
        pyproject_path = project_root / "pyproject.toml"
        if pyproject_path.exists():
            import tomllib  # Python 3.11+

            with pyproject_path.open("rb") as f:
                data = tomllib.load(f)
                if "project" in data and "version" in data["project"]:
                    return data["project"]["version"]
    except Exception as e:
        log = logging.getLogger(__name__)
        log.debug("Could not read version from pyproject.toml: %s", e)

    return _DEFAULT_VERSION


def app_data_dir() -> Path:
    """Return a per-user data directory for stored credentials."""
    return Path(user_data_dir(appname=APP_NAME, appauthor=APP_ORG, roaming=True))
