import pytest

from bintel.lib.intel import registers
from bintel.lib.intel.errors import DecodeError, InvalidRegAccessError
from bintel.lib.intel.registers import RegGrp, Register, RGrpAttr, resolve_grp
from bintel.lib.intel.types import NOREX, REXPrefix


@pytest.mark.parametrize(
    "grp, size, attr, rex, expected",
    [
        (RegGrp.RG0, 64, RGrpAttr.AMod11, NOREX, Register.RAX),
        (RegGrp.RG0, 64, RGrpAttr.AMod11, REXPrefix.from_byte(0x41), Register.R8),
        (RegGrp.RG1, 32, RGrpAttr.ARegBits, REXPrefix.from_byte(0x44), Register.R9D),
        (RegGrp.RG1, 32, RGrpAttr.ARegBits, REXPrefix.from_byte(0x41), Register.ECX),
        (RegGrp.RG2, 64, RGrpAttr.ASIBIdx, REXPrefix.from_byte(0x42), Register.R10),
        (RegGrp.RG4, 8, RGrpAttr.AMod11, NOREX, Register.AH),
        (RegGrp.RG4, 8, RGrpAttr.AMod11, REXPrefix.from_byte(0x40), Register.SPL),
        (RegGrp.RG3, 16, RGrpAttr.ARegInOpNoREX, REXPrefix.from_byte(0x41), Register.BX),
        (RegGrp.RG5, 64, RGrpAttr.ARegInOpREX, REXPrefix.from_byte(0x49), Register.R13),
    ],
)
def test_resolve_grp(grp, size, attr, rex, expected):
    assert resolve_grp(grp, size, attr, rex) == expected


def test_resolve_grp_is_pure():
    rex = REXPrefix.from_byte(0x4C)
    assert {resolve_grp(RegGrp.RG7, 64, RGrpAttr.ARegBits, rex) for _ in range(5)} == {
        Register.R15
    }


def test_invalid_register_access():
    with pytest.raises(InvalidRegAccessError):
        resolve_grp(RegGrp.RG0, 48, RGrpAttr.AMod11, NOREX)
    with pytest.raises(InvalidRegAccessError):
        registers.vector(64, 0)
    assert not issubclass(InvalidRegAccessError, DecodeError)


def test_register_sizes():
    assert registers.register_size(Register.AL) == 8
    assert registers.register_size(Register.R8W) == 16
    assert registers.register_size(Register.YMM3) == 256
    assert registers.register_size(Register.RIP) == 64


def test_reserved_codes():
    assert registers.segment(5) == Register.GS
    assert registers.segment(6) is None
    assert registers.bound(4) is None
    assert registers.vector(512, 31) == Register.ZMM31
    assert registers.instruction_pointer(32) == Register.EIP
