from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

# Ensure repo root on path
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def demo_entry() -> Dict[str, Any]:
    return {
        "title": "Demo",
        "serial": "012345",
        "release": 1,
        "checksum": 0x10,
        "replacements": [
            {"addr": 0x100, "in": [0x01, 0x02], "out": [0x03, 0x04]},
        ],
    }


@pytest.fixture
def demo_payload() -> List[Dict[str, Any]]:
    return [demo_entry()]


@pytest.fixture
def demo_patch():
    from zpatchgen.patching import Patch

    return Patch.model_validate(demo_entry())


@pytest.fixture
def write_patches(tmp_path) -> Callable[[Any], Path]:
    """Write a payload (or raw text) to a patch list file and return its path."""

    def _write(payload: Any, name: str = "patches.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
