"""Patch list loading.

The patch list is a JSON array that may carry ``//``, ``#`` and ``/* */``
comments. Comments are blanked out before parsing and the result is shaped
into Patch records by pydantic.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import PatchLoadError
from .models import Patch

logger = logging.getLogger(__name__)

DEFAULT_PATCHES_FILE = "patches.json"

_PATCH_LIST = TypeAdapter(List[Patch])


def strip_comments(text: str) -> str:
    """Remove comments outside string literals.

    Block comments become whitespace of the same shape: newlines are kept
    so that parser line numbers still point into the original text, and
    tokens on either side of a comment stay apart.
    """
    out: List[str] = []
    in_string = False
    escaped = False
    idx = 0
    size = len(text)
    while idx < size:
        ch = text[idx]
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            idx += 1
            continue
        if ch == '"':
            in_string = True
            out.append(ch)
            idx += 1
            continue
        nxt = text[idx + 1] if idx + 1 < size else ""
        if ch == "#" or (ch == "/" and nxt == "/"):
            end = text.find("\n", idx)
            idx = size if end == -1 else end
            continue
        if ch == "/" and nxt == "*":
            end = text.find("*/", idx + 2)
            stop = size if end == -1 else end + 2
            out.append("".join(c if c == "\n" else " " for c in text[idx:stop]))
            idx = stop
            continue
        out.append(ch)
        idx += 1
    return "".join(out)


def _describe(exc: PydanticValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"


def parse_patches(text: str, source: Optional[str] = None) -> List[Patch]:
    """Parse patch list text into Patch records.

    Args:
        text: JSON text, comments allowed
        source: Name used in error messages (usually the file path)

    Raises:
        PatchLoadError: on malformed JSON, a non-array document or any
            record that does not fit the patch shape
    """
    label = source or "<patches>"
    try:
        data = json.loads(strip_comments(text))
    except json.JSONDecodeError as exc:
        raise PatchLoadError(f"{label}: invalid JSON: {exc}", file_path=source) from exc

    if not isinstance(data, list):
        raise PatchLoadError(
            f"{label}: expected a list of patches, got {type(data).__name__}",
            file_path=source,
        )

    try:
        patches = _PATCH_LIST.validate_python(data)
    except PydanticValidationError as exc:
        raise PatchLoadError(
            f"{label}: invalid patch entry at {_describe(exc)}",
            file_path=source,
            details={"error_count": exc.error_count()},
        ) from exc

    logger.debug("Loaded %d patch(es) from %s", len(patches), label)
    return patches


def load_patches(path: Union[str, Path] = DEFAULT_PATCHES_FILE) -> List[Patch]:
    """Read and parse a patch list file.

    Raises:
        PatchLoadError: if the file cannot be read or parsed
    """
    patch_path = Path(path)
    try:
        text = patch_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PatchLoadError(f"{patch_path}: cannot read patch list: {exc}", file_path=str(patch_path)) from exc
    return parse_patches(text, source=str(patch_path))
