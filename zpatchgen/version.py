"""Version utilities for zpatchgen."""

from __future__ import annotations

from importlib import metadata

DISTRIBUTION_NAME = "zpatchgen"


def load_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "0+unknown"
