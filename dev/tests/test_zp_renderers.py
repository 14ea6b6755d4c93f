from __future__ import annotations

import pytest

from zpatchgen.patching import (
    CompiletimeRenderer,
    Patch,
    RenderMode,
    Replacement,
    RuntimeRenderer,
    get_renderer,
    render,
)


def test_runtime_render_of_single_patch(demo_patch) -> None:
    text = "\n".join(render([demo_patch], RenderMode.RUNTIME)) + "\n"
    assert text == "# Demo\n[1-012345-10]\n0x100 2 [01 02] [03 04]\n\n"


def test_compiletime_render_of_single_patch(demo_patch) -> None:
    lines = render([demo_patch], RenderMode.COMPILETIME)
    assert lines == [
        "{",
        '    "Demo", "012345", 1, 0x10,',
        "    {",
        "        {",
        "            0x100, 2,",
        "            {0x01, 0x02},",
        "            {0x03, 0x04},",
        "        },",
        "    },",
        "},",
    ]


def test_byte_formatting_is_zero_padded_lowercase() -> None:
    patch = Patch(
        title="Bytes",
        serial="812345",
        release=2,
        checksum=0xBEEF,
        replacements=[Replacement(addr=0xABCDEF, before=[0x00, 0x0A, 0xFF], after=[0xB0, 0x01, 0x7F])],
    )

    assert render([patch], "runtime") == [
        "# Bytes",
        "[2-812345]",
        "0xabcdef 3 [00 0a ff] [b0 01 7f]",
        "",
    ]
    compiletime = render([patch], "compiletime")
    assert compiletime[1] == '    "Bytes", "812345", 2, 0xbeef,'
    assert compiletime[4] == "            0xabcdef, 3,"
    assert compiletime[5] == "            {0x00, 0x0a, 0xff},"
    assert compiletime[6] == "            {0xb0, 0x01, 0x7f},"


def test_empty_replacement_sequences() -> None:
    empty = Patch(title="Nothing", serial="000000", release=0, checksum=0, replacements=[])
    zero = Patch(
        title="Zero",
        serial="000000",
        release=0,
        checksum=0,
        replacements=[Replacement(addr=0, before=[], after=[])],
    )

    assert render([empty], "runtime") == ["# Nothing", "[0-000000-0]", ""]
    assert render([empty], "compiletime") == [
        "{",
        '    "Nothing", "000000", 0, 0x0,',
        "    {",
        "    },",
        "},",
    ]
    assert render([zero], "runtime")[2] == "0x0 0 [] []"
    assert render([zero], "compiletime")[5:7] == ["            {},", "            {},"]


def test_order_is_preserved_across_patches_and_replacements() -> None:
    patches = [
        Patch(
            title=title,
            serial="123456",
            release=index,
            checksum=index,
            replacements=[
                Replacement(addr=addr, before=[addr & 0xFF], after=[0])
                for addr in (0x30, 0x10, 0x20)
            ],
        )
        for index, title in enumerate(["Zulu", "Alpha", "Mike"])
    ]

    lines = render(patches, "runtime")
    assert [line for line in lines if line.startswith("# ")] == ["# Zulu", "# Alpha", "# Mike"]
    assert [line.split()[0] for line in lines if line.startswith("0x")] == ["0x30", "0x10", "0x20"] * 3

    reversed_lines = render(list(reversed(patches)), "runtime")
    assert reversed_lines[:6] == lines[12:]


@pytest.mark.parametrize("mode", list(RenderMode))
def test_rendering_is_repeatable(demo_patch, mode) -> None:
    assert render([demo_patch, demo_patch], mode) == render([demo_patch, demo_patch], mode)


def test_render_of_empty_batch_is_empty() -> None:
    assert render([], "runtime") == []
    assert render([], "compiletime") == []


def test_mode_parsing_and_registry() -> None:
    assert RenderMode.parse("runtime") is RenderMode.RUNTIME
    assert RenderMode.parse("bocfel-compiletime") is RenderMode.COMPILETIME
    assert RenderMode.parse(RenderMode.RUNTIME) is RenderMode.RUNTIME
    assert isinstance(get_renderer("bocfel-runtime"), RuntimeRenderer)
    assert isinstance(get_renderer(RenderMode.COMPILETIME), CompiletimeRenderer)
    with pytest.raises(ValueError):
        get_renderer("binary")


def test_renderer_output_is_lazy(demo_patch) -> None:
    lines = RuntimeRenderer().render([demo_patch])
    assert next(lines) == "# Demo"


@pytest.mark.parametrize("mode", list(RenderMode))
def test_registry_is_keyed_by_renderer_mode(mode) -> None:
    assert get_renderer(mode).mode is mode
