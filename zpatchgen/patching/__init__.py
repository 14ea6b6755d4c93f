"""Patch list conversion.

- Patch records and their loader
- Length validation of replacements
- Runtime listing and compile-time table renderers
"""

from .identifier import derive_identifier
from .loader import (
    DEFAULT_PATCHES_FILE,
    load_patches,
    parse_patches,
    strip_comments,
)
from .models import (
    Patch,
    Replacement,
    Serial,
    check_serial,
)
from .renderers import (
    CompiletimeRenderer,
    PatchRenderer,
    RenderMode,
    RuntimeRenderer,
    get_renderer,
    render,
)
from .validator import validate

__all__ = [
    # records
    "Patch",
    "Replacement",
    "Serial",
    "check_serial",
    # loading
    "DEFAULT_PATCHES_FILE",
    "load_patches",
    "parse_patches",
    "strip_comments",
    # checks
    "validate",
    "derive_identifier",
    # output
    "RenderMode",
    "PatchRenderer",
    "RuntimeRenderer",
    "CompiletimeRenderer",
    "get_renderer",
    "render",
]
