"""zpatchgen - converts interpreter patch lists into runtime and compile-time formats."""

from .version import load_version

__version__ = load_version()
