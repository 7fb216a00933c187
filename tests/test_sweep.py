import pytest

from bintel.lib.intel.errors import TruncatedInstructionError, UnknownOpcodeError
from bintel.lib.intel.opcodes import Opcode
from bintel.lib.intel.parser import disassemble


def test_sweep_skips_unknown_opcode():
    insns = list(disassemble(b"\x90\x0f\x04\xc3", address=0x400000))
    assert [(i.address, i.opcode) for i in insns] == [
        (0x400000, Opcode.NOP),
        (0x400003, Opcode.RETNear),
    ]


def test_sweep_strict_raises():
    with pytest.raises(UnknownOpcodeError):
        list(disassemble(b"\x90\x0f\x04\xc3", skip_invalid=False))


def test_sweep_truncated_tail():
    insns = list(disassemble(b"\x90\xb8\x01"))
    assert [i.opcode for i in insns] == [Opcode.NOP]


def test_sweep_truncated_tail_strict():
    with pytest.raises(TruncatedInstructionError):
        list(disassemble(b"\x90\xb8\x01", skip_invalid=False))


def test_sweep_covers_buffer():
    code = (
        b"\x55"  # push rbp
        b"\x48\x89\xe5"  # mov rbp, rsp
        b"\x48\x83\xec\x10"  # sub rsp, 0x10
        b"\xe8\x00\x00\x00\x00"  # call
        b"\xc9"  # leave
        b"\xc3"  # ret
    )
    insns = list(disassemble(code, address=0x1000))
    assert sum(i.length for i in insns) == len(code)
    assert [i.opcode for i in insns] == [
        Opcode.PUSH,
        Opcode.MOV,
        Opcode.SUB,
        Opcode.CALLNear,
        Opcode.LEAVE,
        Opcode.RETNear,
    ]
    assert insns[3].branch_target() == 0x100d


def test_sweep_empty():
    assert list(disassemble(b"")) == []
