"""Runtime and compile-time renderings of a validated patch list.

Both renderers are pure: they keep no state between calls and emit patches
and replacements in input order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Sequence, Union

from .models import Patch, Replacement

LEGACY_MODE_PREFIX = "bocfel-"


class RenderMode(Enum):
    """Output formats selectable from the command line."""

    RUNTIME = "runtime"
    COMPILETIME = "compiletime"

    @classmethod
    def parse(cls, value: Union[str, "RenderMode"]) -> "RenderMode":
        """Resolve a mode name, accepting the ``bocfel-`` prefixed spellings."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name.startswith(LEGACY_MODE_PREFIX):
            name = name[len(LEGACY_MODE_PREFIX):]
        return cls(name)


def format_bytes_runtime(data: Iterable[int]) -> str:
    return " ".join(f"{byte:02x}" for byte in data)


def format_bytes_compiletime(data: Iterable[int]) -> str:
    return ", ".join(f"0x{byte:02x}" for byte in data)


class PatchRenderer(ABC):
    """Turns a validated patch list into output lines."""

    mode: RenderMode

    @abstractmethod
    def render(self, patches: Sequence[Patch]) -> Iterator[str]:
        """Yield output lines, without trailing newlines."""


class RuntimeRenderer(PatchRenderer):
    """Readable listing, one block per patch followed by a blank line."""

    mode = RenderMode.RUNTIME

    def render(self, patches: Sequence[Patch]) -> Iterator[str]:
        for patch in patches:
            yield f"# {patch.title}"
            yield f"[{patch.identifier}]"
            for replacement in patch.replacements:
                yield self._render_replacement(replacement)
            yield ""

    @staticmethod
    def _render_replacement(replacement: Replacement) -> str:
        return (
            f"0x{replacement.addr:x} {replacement.length} "
            f"[{format_bytes_runtime(replacement.before)}] "
            f"[{format_bytes_runtime(replacement.after)}]"
        )


class CompiletimeRenderer(PatchRenderer):
    """Brace-delimited literal table for inclusion in C sources."""

    mode = RenderMode.COMPILETIME
    indent = "    "

    def render(self, patches: Sequence[Patch]) -> Iterator[str]:
        ind = self.indent
        for patch in patches:
            yield "{"
            yield f'{ind}"{patch.title}", "{patch.serial}", {patch.release}, 0x{patch.checksum:x},'
            yield f"{ind}{{"
            for replacement in patch.replacements:
                yield f"{ind * 2}{{"
                yield f"{ind * 3}0x{replacement.addr:x}, {replacement.length},"
                yield f"{ind * 3}{{{format_bytes_compiletime(replacement.before)}}},"
                yield f"{ind * 3}{{{format_bytes_compiletime(replacement.after)}}},"
                yield f"{ind * 2}}},"
            yield f"{ind}}},"
            yield "},"


_RENDERERS: Dict[RenderMode, PatchRenderer] = {
    renderer.mode: renderer for renderer in (RuntimeRenderer(), CompiletimeRenderer())
}


def get_renderer(mode: Union[str, RenderMode]) -> PatchRenderer:
    """Return the renderer registered for ``mode``.

    Raises:
        ValueError: if ``mode`` names no known format
    """
    return _RENDERERS[RenderMode.parse(mode)]


def render(patches: Sequence[Patch], mode: Union[str, RenderMode]) -> List[str]:
    """Render ``patches`` in the given mode and collect the lines."""
    return list(get_renderer(mode).render(patches))
