"""Data model of the x86 decoder.

Operand *descriptors* (``ODModeSize``, ``ODReg``, ``ODRegGrp``, ``ODImmOne``)
are the templates found in the opcode tables. Resolved *operands*
(``OprReg``, ``OprMem``, ``OprDirAddr``, ``OprImm``) are what the decoder
produces for a concrete byte sequence. The two families are kept apart on
purpose: a descriptor such as ``Ev`` denotes "register or memory" while a
resolved operand is always one concrete thing.

Every record here is immutable. Equality and hashing of ``InsInfo`` cover
exactly its six fields.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from typing import Optional, Tuple, Union

from bintel.lib.intel.opcodes import CALL_OPCODES, Opcode
from bintel.lib.intel.registers import Register, RegGrp, RGrpAttr


class Prefix(IntFlag):
    """Legacy instruction prefixes."""

    NONE = 0x0
    LOCK = 0x1
    REPNZ = 0x2
    REPZ = 0x4
    CS = 0x8
    SS = 0x10
    DS = 0x20
    ES = 0x40
    FS = 0x80
    GS = 0x100
    OPSIZE = 0x200
    ADDRSIZE = 0x400


REP_PREFIXES = Prefix.REPNZ | Prefix.REPZ
SEGMENT_PREFIXES = Prefix.CS | Prefix.SS | Prefix.DS | Prefix.ES | Prefix.FS | Prefix.GS

# byte -> (flag, group mask cleared before the flag is set)
LEGACY_PREFIXES = {
    0xF0: (Prefix.LOCK, Prefix.LOCK),
    0xF2: (Prefix.REPNZ, REP_PREFIXES),
    0xF3: (Prefix.REPZ, REP_PREFIXES),
    0x2E: (Prefix.CS, SEGMENT_PREFIXES),
    0x36: (Prefix.SS, SEGMENT_PREFIXES),
    0x3E: (Prefix.DS, SEGMENT_PREFIXES),
    0x26: (Prefix.ES, SEGMENT_PREFIXES),
    0x64: (Prefix.FS, SEGMENT_PREFIXES),
    0x65: (Prefix.GS, SEGMENT_PREFIXES),
    0x66: (Prefix.OPSIZE, Prefix.OPSIZE),
    0x67: (Prefix.ADDRSIZE, Prefix.ADDRSIZE),
}


@dataclass(frozen=True)
class REXPrefix:
    """REX prefix of 64-bit mode. ``present`` is False when there is none."""

    present: bool = False
    w: bool = False
    r: bool = False
    x: bool = False
    b: bool = False

    @classmethod
    def from_byte(cls, byte):
        return cls(
            present=True,
            w=bool(byte & 0x8),
            r=bool(byte & 0x4),
            x=bool(byte & 0x2),
            b=bool(byte & 0x1),
        )

    def __str__(self):
        if not self.present:
            return "NOREX"
        bits = "".join(n for n, v in (("W", self.w), ("R", self.r), ("X", self.x), ("B", self.b)) if v)
        return f"REX{bits}"


NOREX = REXPrefix()


class OpGroup(IntEnum):
    """Opcode groups: the ModR/M reg field selects the final opcode."""

    G1 = 0
    G1Inv64 = 1
    G1A = 2
    G2 = 3
    G3A = 4
    G3B = 5
    G4 = 6
    G5 = 7
    G6 = 8
    G7 = 9
    G8 = 10
    G9 = 11
    G10 = 12
    G11A = 13
    G11B = 14
    G12 = 15
    G13 = 16
    G14 = 17
    G15 = 18
    G16 = 19
    G17 = 20


class OprMode(IntEnum):
    """Operand addressing method (Intel SDM Vol. 2, Appendix A.2.1)."""

    A = 0x1  # direct address
    B = 0x2  # VEX.vvvv selects a general purpose register
    BndR = 0x3
    BndM = 0x4
    C = 0x5  # control register in ModR/M reg
    D = 0x6  # debug register in ModR/M reg
    E = 0x7  # general register or memory
    G = 0x8  # general register in ModR/M reg
    H = 0x9  # VEX.vvvv selects a vector register
    I = 0xA  # unsigned immediate
    SI = 0xB  # signed immediate
    J = 0xC  # instruction-pointer relative offset
    M = 0xD  # memory only
    MZ = 0xE
    N = 0xF  # MMX register in ModR/M rm
    O = 0x10  # offset, no ModR/M
    P = 0x11  # MMX register in ModR/M reg
    Q = 0x12  # MMX register or memory
    R = 0x13  # general register in ModR/M rm
    S = 0x14  # segment register in ModR/M reg
    U = 0x15  # vector register in ModR/M rm
    V = 0x16  # vector register in ModR/M reg
    VZ = 0x17
    W = 0x18  # vector register or memory
    WZ = 0x19
    X = 0x1A  # memory at DS:rSI
    Y = 0x1B  # memory at ES:rDI
    E0 = 0x1C  # general register or memory, ModR/M reg must be 000
    KG = 0x1D  # opmask register in ModR/M reg
    KE = 0x1E  # opmask register or memory
    KR = 0x1F  # opmask register in ModR/M rm
    KH = 0x20  # VEX.vvvv selects an opmask register
    L = 0x21  # vector register in imm8[7:4]
    MV = 0x22  # VSIB memory, index as wide as the vector length
    MVH = 0x23  # VSIB memory, index half the vector length


MODRM_MODES = frozenset(
    {
        OprMode.BndR, OprMode.BndM, OprMode.C, OprMode.D, OprMode.E,
        OprMode.G, OprMode.M, OprMode.MZ, OprMode.N, OprMode.P, OprMode.Q,
        OprMode.R, OprMode.S, OprMode.U, OprMode.V, OprMode.VZ, OprMode.W,
        OprMode.WZ, OprMode.E0, OprMode.KG, OprMode.KE, OprMode.KR, OprMode.MV,
        OprMode.MVH,
    }
)


class OprSize(IntEnum):
    """Operand size codes (Intel SDM Vol. 2, Appendix A.2.2)."""

    NONE = 0x0  # memory block without a fixed width (x87 environment, XSAVE area)
    A = 0x40
    B = 0x80
    Bnd = 0xC0
    D = 0x100
    DB = 0x140
    DQ = 0x180
    DQD = 0x1C0
    DQDQ = 0x200
    DQQ = 0x240
    DQQDQ = 0x280
    DQW = 0x2C0
    DW = 0x300
    DQWD = 0x340
    P = 0x380
    PD = 0x3C0
    PI = 0x400
    PS = 0x440
    PSQ = 0x480
    Q = 0x4C0
    QQ = 0x500
    S = 0x540
    SD = 0x580
    SDQ = 0x5C0
    SS = 0x600
    SSD = 0x640
    SSQ = 0x680
    V = 0x6C0
    W = 0x700
    X = 0x740
    XZ = 0x780
    Y = 0x7C0
    Z = 0x800
    T = 0x840  # 80-bit x87 extended real or packed BCD


@dataclass(frozen=True)
class ODModeSize:
    mode: OprMode
    size: OprSize


@dataclass(frozen=True)
class ODReg:
    reg: Register


@dataclass(frozen=True)
class ODRegGrp:
    grp: RegGrp
    size: OprSize
    attr: RGrpAttr


@dataclass(frozen=True)
class ODImmOne:
    pass


OperandDesc = Union[ODModeSize, ODReg, ODRegGrp, ODImmOne]


class SizeCond(Enum):
    """Operand-size policy of an opcode (Intel SDM Vol. 2, Appendix A.2.5)."""

    SzDef32 = "default-32"  # 32-bit default in 64-bit mode
    SzDef64 = "d64"  # 64-bit default in 64-bit mode
    Sz64 = "f64"  # forced 64-bit in 64-bit mode, 66 is ignored
    SzOnly64 = "o64"
    SzInv64 = "i64"


class Scale(IntEnum):
    X1 = 1
    X2 = 2
    X4 = 4
    X8 = 8


@dataclass(frozen=True)
class ScaledIndex:
    reg: Register
    scale: Scale = Scale.X1


@dataclass(frozen=True)
class Absolute:
    """Far jump/call target ``selector:offset``."""

    selector: int
    offset: int
    size: int


@dataclass(frozen=True)
class Relative:
    """Branch target relative to the end of the instruction."""

    offset: int


class AddressingForm(Enum):
    """Shape of an operand produced by ModR/M decoding."""

    REGISTER = "register"
    BASE = "base"
    BASE_INDEX = "base+index"
    DISPLACEMENT = "displacement"


@dataclass(frozen=True)
class OprReg:
    reg: Register

    @property
    def form(self):
        return AddressingForm.REGISTER


@dataclass(frozen=True)
class OprMem:
    base: Optional[Register]
    index: Optional[ScaledIndex]
    disp: Optional[int]
    size: int

    @property
    def form(self):
        """Addressing form; RIP/EIP-relative references count as displacement-only."""
        if self.index is not None:
            return AddressingForm.BASE_INDEX
        if self.base is None or self.base in (Register.RIP, Register.EIP):
            return AddressingForm.DISPLACEMENT
        return AddressingForm.BASE


@dataclass(frozen=True)
class OprDirAddr:
    target: Union[Absolute, Relative]


@dataclass(frozen=True)
class OprImm:
    value: int
    size: int


Operand = Union[OprReg, OprMem, OprDirAddr, OprImm]


class VEXType(IntFlag):
    VEXTwoByteOp = 0x1
    VEXThreeByteOpOne = 0x2
    VEXThreeByteOpTwo = 0x4
    EVEX = 0x10
    EVEXTwoByteOp = 0x11
    EVEXThreeByteOpOne = 0x12
    EVEXThreeByteOpTwo = 0x14

    @property
    def is_original(self):
        return not self & VEXType.EVEX

    @property
    def is_enhanced(self):
        return bool(self & VEXType.EVEX)

    @property
    def is_two_byte_op(self):
        return bool(self & 0x1)

    @property
    def is_three_byte_op_one(self):
        return bool(self & 0x2)

    @property
    def is_three_byte_op_two(self):
        return bool(self & 0x4)


class ZeroingOrMerging(Enum):
    Zeroing = "zeroing"
    Merging = "merging"


@dataclass(frozen=True)
class EVEXPrefix:
    z: ZeroingOrMerging
    aaa: int  # opmask register specifier
    r_prime: bool = False  # EVEX.R', fifth bit of the ModR/M reg field
    b: bool = False  # broadcast / rounding control


@dataclass(frozen=True)
class VEXInfo:
    vvvv: int
    vector_length: int
    vex_type: VEXType
    vprefixes: Prefix
    vrex: REXPrefix
    evex: Optional[EVEXPrefix] = None


@dataclass(frozen=True)
class MemorySize:
    eff_opr_size: int
    eff_addr_size: int
    eff_reg_size: int


@dataclass(frozen=True)
class InsSize:
    mem_size: MemorySize
    reg_size: int
    operation_size: int
    size_cond: SizeCond


@dataclass(frozen=True)
class InsInfo:
    """The resolved instruction record."""

    prefixes: Prefix
    rex: REXPrefix
    vex_info: Optional[VEXInfo]
    opcode: Opcode
    operands: Tuple[Operand, ...]
    ins_size: InsSize

    @property
    def arity(self):
        return len(self.operands)


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction placed at ``address``, ``length`` bytes long."""

    info: InsInfo
    address: int
    length: int

    @property
    def opcode(self):
        return self.info.opcode

    @property
    def operands(self):
        return self.info.operands

    def branch_target(self):
        """Absolute target of a relative branch, or None."""
        if self.operands and isinstance(self.operands[0], OprDirAddr):
            target = self.operands[0].target
            if isinstance(target, Relative):
                # the instruction pointer is as wide as the operand size
                mask = (1 << self.info.ins_size.reg_size) - 1
                return (self.address + self.length + target.offset) & mask
        return None

    def is_direct_call(self):
        return self.opcode in CALL_OPCODES and self.branch_target() is not None
