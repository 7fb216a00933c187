"""Register identities and register-selection helpers.

Every helper here is a pure function of its arguments. Register tables are
tuples built once at import time and never mutated.
"""
from enum import Enum, IntEnum, IntFlag

from bintel.lib.intel.errors import InvalidRegAccessError

_GPR64 = ("RAX", "RCX", "RDX", "RBX", "RSP", "RBP", "RSI", "RDI") + tuple(
    f"R{i}" for i in range(8, 16)
)
_GPR32 = ("EAX", "ECX", "EDX", "EBX", "ESP", "EBP", "ESI", "EDI") + tuple(
    f"R{i}D" for i in range(8, 16)
)
_GPR16 = ("AX", "CX", "DX", "BX", "SP", "BP", "SI", "DI") + tuple(
    f"R{i}W" for i in range(8, 16)
)
_GPR8 = ("AL", "CL", "DL", "BL", "SPL", "BPL", "SIL", "DIL") + tuple(
    f"R{i}B" for i in range(8, 16)
)
_GPR8_HIGH = ("AH", "CH", "DH", "BH")
_SEGMENTS = ("ES", "CS", "SS", "DS", "FS", "GS")
_POINTERS = ("RIP", "EIP", "IP")

Register = Enum(
    "Register",
    _GPR64
    + _GPR32
    + _GPR16
    + _GPR8
    + _GPR8_HIGH
    + _SEGMENTS
    + _POINTERS
    + tuple(f"ST{i}" for i in range(8))
    + tuple(f"MM{i}" for i in range(8))
    + tuple(f"XMM{i}" for i in range(32))
    + tuple(f"YMM{i}" for i in range(32))
    + tuple(f"ZMM{i}" for i in range(32))
    + tuple(f"CR{i}" for i in range(16))
    + tuple(f"DR{i}" for i in range(16))
    + tuple(f"K{i}" for i in range(8))
    + tuple(f"BND{i}" for i in range(4)),
    module=__name__,
)
Register.__doc__ = "Every architectural register the decoder can name."


class RegGrp(IntEnum):
    """A 3-bit register code as it appears in an opcode, ModR/M or SIB field."""

    RG0 = 0
    RG1 = 1
    RG2 = 2
    RG3 = 3
    RG4 = 4
    RG5 = 5
    RG6 = 6
    RG7 = 7


class RGrpAttr(IntFlag):
    """How extension bits and the presence of REX affect a register code."""

    ANone = 0x0
    # rm field of a register-direct ModR/M (mod = 11)
    AMod11 = 0x1
    # register encoded in the low opcode bits, REX.B extends it
    ARegInOpREX = 0x2
    # register encoded in the low opcode bits, REX never changes it
    ARegInOpNoREX = 0x4
    # reg field of the ModR/M byte
    ARegBits = 0x8
    # base register selected by the rm field of a memory ModR/M
    ABaseRM = 0x10
    ASIBIdx = 0x20
    ASIBBase = 0x40


_GPR_TABLES = {
    16: tuple(Register[n] for n in _GPR16),
    32: tuple(Register[n] for n in _GPR32),
    64: tuple(Register[n] for n in _GPR64),
}
_BYTE_REX = tuple(Register[n] for n in _GPR8)
_BYTE_LEGACY = _BYTE_REX[:4] + tuple(Register[n] for n in _GPR8_HIGH)
_SEGMENT_TABLE = tuple(Register[n] for n in _SEGMENTS)
_X87_TABLE = tuple(Register[f"ST{i}"] for i in range(8))
_MMX_TABLE = tuple(Register[f"MM{i}"] for i in range(8))
_VECTOR_TABLES = {
    128: tuple(Register[f"XMM{i}"] for i in range(32)),
    256: tuple(Register[f"YMM{i}"] for i in range(32)),
    512: tuple(Register[f"ZMM{i}"] for i in range(32)),
}
_CONTROL_TABLE = tuple(Register[f"CR{i}"] for i in range(16))
_DEBUG_TABLE = tuple(Register[f"DR{i}"] for i in range(16))
_OPMASK_TABLE = tuple(Register[f"K{i}"] for i in range(8))
_BOUND_TABLE = tuple(Register[f"BND{i}"] for i in range(4))

_SIZES = {}
for _size, _table in _GPR_TABLES.items():
    _SIZES.update(dict.fromkeys(_table, _size))
for _size, _table in _VECTOR_TABLES.items():
    _SIZES.update(dict.fromkeys(_table, _size))
_SIZES.update(dict.fromkeys(_BYTE_REX + _BYTE_LEGACY, 8))
_SIZES.update(dict.fromkeys(_SEGMENT_TABLE, 16))
_SIZES.update(dict.fromkeys(_X87_TABLE, 80))
_SIZES.update(dict.fromkeys(_MMX_TABLE, 64))
_SIZES.update(dict.fromkeys(_OPMASK_TABLE, 64))
_SIZES.update(dict.fromkeys(_BOUND_TABLE, 128))
_SIZES.update(dict.fromkeys(_CONTROL_TABLE + _DEBUG_TABLE, 64))
_SIZES.update({Register.RIP: 64, Register.EIP: 32, Register.IP: 16})


def register_size(reg):
    """Returns the width of a register in bits."""
    return _SIZES[reg]


def _lookup(table, index, size, attr=None):
    if 0 <= index < len(table):
        return table[index]
    raise InvalidRegAccessError(size, index, attr)


def gpr(size, index, rex_present=False):
    """Returns the general purpose register ``index`` of ``size`` bits.

    Byte registers 4-7 name AH/CH/DH/BH without a REX prefix and
    SPL/BPL/SIL/DIL with one, whatever the REX bits are.
    """
    if size == 8:
        table = _BYTE_REX if rex_present else _BYTE_LEGACY
        return _lookup(table, index, size)
    if size not in _GPR_TABLES:
        raise InvalidRegAccessError(size, index)
    return _lookup(_GPR_TABLES[size], index, size)


def vector(size, index):
    """XMM/YMM/ZMM register for a 128/256/512-bit operand."""
    if size not in _VECTOR_TABLES:
        raise InvalidRegAccessError(size, index)
    return _lookup(_VECTOR_TABLES[size], index, size)


def mmx(index):
    return _lookup(_MMX_TABLE, index & 0x7, 64)


def x87(index):
    return _lookup(_X87_TABLE, index, 80)


def segment(index):
    """Segment register for the reg field of a ModR/M, or None when reserved."""
    if index < len(_SEGMENT_TABLE):
        return _SEGMENT_TABLE[index]
    return None


def control(index):
    return _lookup(_CONTROL_TABLE, index, 64)


def debug(index):
    return _lookup(_DEBUG_TABLE, index, 64)


def opmask(index):
    return _lookup(_OPMASK_TABLE, index, 64)


def bound(index):
    """Bound register, or None for the reserved codes 4-7."""
    if index < len(_BOUND_TABLE):
        return _BOUND_TABLE[index]
    return None


def instruction_pointer(addr_size):
    return {64: Register.RIP, 32: Register.EIP, 16: Register.IP}[addr_size]


def _extension_bit(attr, rex):
    if attr & (RGrpAttr.ARegInOpREX | RGrpAttr.AMod11 | RGrpAttr.ABaseRM | RGrpAttr.ASIBBase):
        return rex.b
    if attr & RGrpAttr.ARegBits:
        return rex.r
    if attr & RGrpAttr.ASIBIdx:
        return rex.x
    return False


def resolve_grp(grp, size, attr, rex):
    """Resolves a register-group code to a general purpose register.

    ``grp`` is the 3-bit code, ``size`` the register width in bits, ``attr``
    the ``RGrpAttr`` describing which extension bit applies and ``rex`` the
    REX descriptor in force (the VEX/EVEX-carried equivalent for vector
    instructions). Raises ``InvalidRegAccessError`` if the combination does
    not name a register.
    """
    if not 0 <= grp <= 7:
        raise InvalidRegAccessError(size, grp, attr)
    index = grp | (0x8 if _extension_bit(attr, rex) else 0)
    if attr & RGrpAttr.ARegInOpNoREX or attr == RGrpAttr.ANone:
        return gpr(size, grp, rex_present=False)
    return gpr(size, index, rex_present=rex.present)
