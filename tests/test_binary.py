from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import lief
import pytest

from bintel.lib.binary import (
    CodeSection,
    UnsupportedBinaryError,
    code_sections,
    function_symbols,
    load_binary,
    load_raw,
    machine_mode,
)


def _elf(machine="ARCH.x86_64", sections=(), functions=()):
    parsed = MagicMock()
    parsed.format = lief.Binary.FORMATS.ELF
    parsed.header.machine_type = machine
    parsed.sections = list(sections)
    parsed.functions = list(functions)
    return parsed


def _pe(machine="MACHINE_TYPES.AMD64", sections=(), imagebase=0x140000000):
    parsed = MagicMock()
    parsed.format = lief.Binary.FORMATS.PE
    parsed.header.machine = machine
    parsed.optional_header.imagebase = imagebase
    parsed.sections = list(sections)
    parsed.functions = []
    return parsed


def _macho(cpu_type="CPU_TYPE.X86_64"):
    parsed = MagicMock()
    parsed.format = lief.Binary.FORMATS.MACHO
    parsed.header.cpu_type = cpu_type
    return parsed


@pytest.mark.parametrize(
    "parsed, expected",
    [
        (_elf("ARCH.x86_64"), 64),
        (_elf("ARCH.i386"), 32),
        (_elf("ARCH.AARCH64"), None),
        (_pe("MACHINE_TYPES.AMD64"), 64),
        (_pe("MACHINE_TYPES.I386"), 32),
        (_macho("CPU_TYPE.X86_64"), 64),
        (_macho("CPU_TYPE.X86"), 32),
        (_macho("CPU_TYPE.ARM64"), None),
    ],
)
def test_machine_mode(parsed, expected):
    assert machine_mode(parsed) == expected


def test_elf_code_sections():
    parsed = _elf(
        sections=[
            SimpleNamespace(name=".text", flags=0x6, virtual_address=0x401000, content=[0x90, 0xC3]),
            SimpleNamespace(name=".data", flags=0x3, virtual_address=0x404000, content=[0x00]),
            SimpleNamespace(name=".init", flags=0x6, virtual_address=0x400000, content=[]),
        ]
    )
    assert code_sections(parsed) == [CodeSection(".text", 0x401000, b"\x90\xc3")]


def test_pe_code_sections_add_image_base():
    parsed = _pe(
        sections=[
            SimpleNamespace(
                name=".text", characteristics=0x60000020, virtual_address=0x1000, content=[0xC3]
            ),
            SimpleNamespace(
                name=".rdata", characteristics=0x40000040, virtual_address=0x2000, content=[0x00]
            ),
        ]
    )
    assert code_sections(parsed) == [CodeSection(".text", 0x140001000, b"\xc3")]


def test_function_symbols():
    parsed = _elf(
        functions=[
            SimpleNamespace(name="main", address=0x401126),
            SimpleNamespace(name="", address=0x401000),
            SimpleNamespace(name="_start", address=0),
            SimpleNamespace(name="main_alias", address=0x401126),
        ]
    )
    with patch("bintel.lib.binary.demangle_symbolic_name", side_effect=lambda n: n):
        assert function_symbols(parsed) == {0x401126: "main"}


def test_function_symbols_unavailable():
    parsed = _elf()
    parsed.functions = None
    assert function_symbols(parsed) == {}


def test_load_binary():
    parsed = _elf(
        sections=[
            SimpleNamespace(name=".text", flags=0x6, virtual_address=0x1000, content=[0xC3]),
        ],
        functions=[SimpleNamespace(name="main", address=0x1000)],
    )
    with patch("bintel.lib.binary.lief.parse", return_value=parsed), patch(
        "bintel.lib.binary.demangle_symbolic_name", side_effect=lambda n: n
    ):
        loaded = load_binary("a.out")
    assert loaded.path == "a.out"
    assert loaded.mode == 64
    assert loaded.sections == [CodeSection(".text", 0x1000, b"\xc3")]
    assert loaded.functions == {0x1000: "main"}


def test_load_binary_not_a_binary():
    with patch("bintel.lib.binary.lief.parse", return_value=None):
        with pytest.raises(UnsupportedBinaryError):
            load_binary("notes.txt")


def test_load_binary_parse_failure():
    with patch("bintel.lib.binary.lief.parse", side_effect=TypeError("bad")):
        with pytest.raises(UnsupportedBinaryError):
            load_binary("broken.bin")


def test_load_binary_arm():
    with patch("bintel.lib.binary.lief.parse", return_value=_elf("ARCH.ARM")):
        with pytest.raises(UnsupportedBinaryError):
            load_binary("arm.elf")


def test_load_raw(tmp_path):
    blob = tmp_path / "code.bin"
    blob.write_bytes(b"\x90\xc3")
    loaded = load_raw(str(blob), base_address=0x400000, mode=32)
    assert loaded.mode == 32
    assert loaded.sections == [CodeSection("raw", 0x400000, b"\x90\xc3")]
    assert loaded.functions == {}
