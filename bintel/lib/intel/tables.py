"""Opcode tables.

Each opcode space is a dict keyed by opcode byte. A value is one of:

- ``InsDesc``: a terminal entry (opcode, operand descriptors, size policy)
- ``GroupDesc``: the ModR/M reg field selects an entry of ``GROUPS``
- a selector (``ByPrefix``, ``ByW``, ``ByMod``...) choosing between entries
  from some other part of the encoding
- ``X87_ESCAPE`` for D8-DF, resolved through the x87 tables
- ``None`` or a missing key: no instruction

Operand descriptors use the abbreviations of the Intel SDM opcode map
(Vol. 2, Appendix A): ``Ev`` is a general register or memory operand of the
effective operand size, ``Ib`` an 8-bit immediate and so on.
"""
from enum import Enum
from typing import NamedTuple, Tuple

from bintel.lib.intel.opcodes import Opcode as Op
from bintel.lib.intel.registers import Register, RegGrp, RGrpAttr
from bintel.lib.intel.types import (
    ODImmOne,
    ODModeSize,
    ODReg,
    ODRegGrp,
    OpGroup,
    OprMode,
    OprSize,
    SizeCond,
)

_M = OprMode
_S = OprSize


class InsDesc(NamedTuple):
    opcode: Op
    operands: Tuple = ()
    size_cond: SizeCond = SizeCond.SzDef32


class GroupDesc(NamedTuple):
    group: OpGroup
    operands: Tuple = ()
    size_cond: SizeCond = SizeCond.SzDef32


class Selector:
    """Chooses one of several entries from the decode context."""

    __slots__ = ()

    def select(self, ctx):
        raise NotImplementedError


class ByPrefix(Selector):
    """Mandatory prefix selection (none, 66, F3, F2 or VEX/EVEX pp)."""

    __slots__ = ("entries",)

    def __init__(self, none=None, p66=None, pF3=None, pF2=None):
        self.entries = {0: none, 0x66: p66, 0xF3: pF3, 0xF2: pF2}

    def select(self, ctx):
        return ctx.select_mandatory(self.entries)


class ByW(Selector):
    """REX.W (or VEX/EVEX.W) clear / set."""

    __slots__ = ("w0", "w1")

    def __init__(self, w0, w1):
        self.w0 = w0
        self.w1 = w1

    def select(self, ctx):
        return self.w1 if ctx.rex_w else self.w0


class ByL(Selector):
    """VEX.L clear / set."""

    __slots__ = ("l0", "l1")

    def __init__(self, l0, l1):
        self.l0 = l0
        self.l1 = l1

    def select(self, ctx):
        return self.l1 if ctx.vector_length > 128 else self.l0


class ByMod(Selector):
    """Memory form (mod != 11) or register form (mod == 11)."""

    __slots__ = ("mem", "reg")

    def __init__(self, mem, reg):
        self.mem = mem
        self.reg = reg

    def select(self, ctx):
        return self.reg if ctx.modrm() >> 6 == 3 else self.mem


class ByRM(Selector):
    """The ModR/M rm field of a register form picks one of eight entries."""

    __slots__ = ("entries",)

    def __init__(self, *entries):
        self.entries = entries + (None,) * (8 - len(entries))

    def select(self, ctx):
        return self.entries[ctx.modrm() & 0x7]


class ByReg(Selector):
    """The ModR/M reg field picks one of eight entries."""

    __slots__ = ("entries",)

    def __init__(self, *entries):
        self.entries = entries + (None,) * (8 - len(entries))

    def select(self, ctx):
        return self.entries[(ctx.modrm() >> 3) & 0x7]


class ByModRM(Selector):
    """Exact ModR/M byte matches, otherwise ``default``."""

    __slots__ = ("entries", "default")

    def __init__(self, entries, default=None):
        self.entries = entries
        self.default = default

    def select(self, ctx):
        return self.entries.get(ctx.modrm(), self.default)


class ByMode(Selector):
    __slots__ = ("m32", "m64")

    def __init__(self, m32, m64):
        self.m32 = m32
        self.m64 = m64

    def select(self, ctx):
        return self.m64 if ctx.mode == 64 else self.m32


class ByOpSize(Selector):
    """Mnemonic depends on the effective operand size (CBW/CWDE/CDQE...)."""

    __slots__ = ("entries", "size_cond")

    def __init__(self, o16, o32, o64, size_cond=SizeCond.SzDef32):
        self.entries = {16: o16, 32: o32, 64: o64}
        self.size_cond = size_cond

    def select(self, ctx):
        return self.entries[ctx.operand_size(self.size_cond)]


class ByAddrSize(Selector):
    __slots__ = ("entries",)

    def __init__(self, a16, a32, a64):
        self.entries = {16: a16, 32: a32, 64: a64}

    def select(self, ctx):
        return self.entries[ctx.address_size()]


class ByVex(Selector):
    __slots__ = ("legacy", "vex")

    def __init__(self, legacy, vex):
        self.legacy = legacy
        self.vex = vex

    def select(self, ctx):
        return self.vex if ctx.vex is not None else self.legacy


class ByRexB(Selector):
    __slots__ = ("b0", "b1")

    def __init__(self, b0, b1):
        self.b0 = b0
        self.b1 = b1

    def select(self, ctx):
        return self.b1 if ctx.rex.b else self.b0


X87_ESCAPE = object()


class X87Form(Enum):
    """Operand shape of a register-form x87 instruction."""

    NONE = "none"
    ST0_STI = "st0,sti"
    STI_ST0 = "sti,st0"
    STI = "sti"
    AX = "ax"


def _d(mode, size):
    return ODModeSize(mode, size)


Ap = _d(_M.A, _S.P)
By = _d(_M.B, _S.Y)
BndR = _d(_M.BndR, _S.Bnd)
BndM = _d(_M.BndM, _S.Bnd)
Cy = _d(_M.C, _S.Y)
Dy = _d(_M.D, _S.Y)
Eb = _d(_M.E, _S.B)
Ew = _d(_M.E, _S.W)
Ed = _d(_M.E, _S.D)
Eq = _d(_M.E, _S.Q)
Ev = _d(_M.E, _S.V)
Ey = _d(_M.E, _S.Y)
Edb = _d(_M.E, _S.DB)
Edw = _d(_M.E, _S.DW)
Gb = _d(_M.G, _S.B)
Gw = _d(_M.G, _S.W)
Gd = _d(_M.G, _S.D)
Gv = _d(_M.G, _S.V)
Gy = _d(_M.G, _S.Y)
Gz = _d(_M.G, _S.Z)
Hx = _d(_M.H, _S.X)
Hq = _d(_M.H, _S.Q)
Hdq = _d(_M.H, _S.DQ)
Hqq = _d(_M.H, _S.QQ)
Hps = _d(_M.H, _S.PS)
Hpd = _d(_M.H, _S.PD)
Hss = _d(_M.H, _S.SS)
Hsd = _d(_M.H, _S.SD)
Ib = _d(_M.I, _S.B)
Iw = _d(_M.I, _S.W)
Iz = _d(_M.I, _S.Z)
Iv = _d(_M.I, _S.V)
SIb = _d(_M.SI, _S.B)
SIz = _d(_M.SI, _S.Z)
Jb = _d(_M.J, _S.B)
Jz = _d(_M.J, _S.Z)
KGq = _d(_M.KG, _S.Q)
KHq = _d(_M.KH, _S.Q)
KRq = _d(_M.KR, _S.Q)
KEb = _d(_M.KE, _S.B)
KEw = _d(_M.KE, _S.W)
KEd = _d(_M.KE, _S.D)
KEq = _d(_M.KE, _S.Q)
Lx = _d(_M.L, _S.X)
Ma = _d(_M.M, _S.A)
Mb = _d(_M.M, _S.B)
Mw = _d(_M.M, _S.W)
Md = _d(_M.M, _S.D)
Mq = _d(_M.M, _S.Q)
Mdq = _d(_M.M, _S.DQ)
Mqq = _d(_M.M, _S.QQ)
Mp = _d(_M.M, _S.P)
Mps = _d(_M.M, _S.PS)
Mpd = _d(_M.M, _S.PD)
Ms = _d(_M.M, _S.S)
Mt = _d(_M.M, _S.T)
Mv = _d(_M.M, _S.V)
Mx = _d(_M.M, _S.X)
My = _d(_M.M, _S.Y)
Mn = _d(_M.M, _S.NONE)
MVd = _d(_M.MV, _S.D)
MVq = _d(_M.MV, _S.Q)
MVHd = _d(_M.MVH, _S.D)
MVHq = _d(_M.MVH, _S.Q)
Nq = _d(_M.N, _S.Q)
Ob = _d(_M.O, _S.B)
Ov = _d(_M.O, _S.V)
Pq = _d(_M.P, _S.Q)
Ppi = _d(_M.P, _S.PI)
Qq = _d(_M.Q, _S.Q)
Qpi = _d(_M.Q, _S.PI)
Ry = _d(_M.R, _S.Y)
Rv = _d(_M.R, _S.V)
Sw = _d(_M.S, _S.W)
Udq = _d(_M.U, _S.DQ)
Ux = _d(_M.U, _S.X)
Ups = _d(_M.U, _S.PS)
Upd = _d(_M.U, _S.PD)
Uq = _d(_M.U, _S.Q)
Vdq = _d(_M.V, _S.DQ)
Vx = _d(_M.V, _S.X)
Vq = _d(_M.V, _S.Q)
Vqq = _d(_M.V, _S.QQ)
Vps = _d(_M.V, _S.PS)
Vpd = _d(_M.V, _S.PD)
Vss = _d(_M.V, _S.SS)
Vsd = _d(_M.V, _S.SD)
Wb = _d(_M.W, _S.B)
Ww = _d(_M.W, _S.W)
Wd = _d(_M.W, _S.D)
Wq = _d(_M.W, _S.Q)
Wdq = _d(_M.W, _S.DQ)
Wqq = _d(_M.W, _S.QQ)
Wx = _d(_M.W, _S.X)
Wps = _d(_M.W, _S.PS)
Wpd = _d(_M.W, _S.PD)
Wss = _d(_M.W, _S.SS)
Wsd = _d(_M.W, _S.SD)
Wpsq = _d(_M.W, _S.PSQ)
Wdqd = _d(_M.W, _S.DQD)
Wdqq = _d(_M.W, _S.DQQ)
Wdqw = _d(_M.W, _S.DQW)
Wdqdq = _d(_M.W, _S.DQDQ)
Wdqqdq = _d(_M.W, _S.DQQDQ)
Wdqwd = _d(_M.W, _S.DQWD)
VZx = _d(_M.VZ, _S.XZ)
WZx = _d(_M.WZ, _S.XZ)
HZx = _d(_M.H, _S.XZ)
VZdqq = _d(_M.VZ, _S.DQQDQ)
WZdqq = _d(_M.WZ, _S.DQQDQ)
WZdqdq = _d(_M.WZ, _S.DQDQ)
WZdqwd = _d(_M.WZ, _S.DQWD)
Xb = _d(_M.X, _S.B)
Xv = _d(_M.X, _S.V)
Xz = _d(_M.X, _S.Z)
Yb = _d(_M.Y, _S.B)
Yv = _d(_M.Y, _S.V)
Yz = _d(_M.Y, _S.Z)

AL = ODReg(Register.AL)
CL = ODReg(Register.CL)
DX = ODReg(Register.DX)
ES = ODReg(Register.ES)
CS = ODReg(Register.CS)
SS = ODReg(Register.SS)
DS = ODReg(Register.DS)
FS = ODReg(Register.FS)
GS = ODReg(Register.GS)
ONE = ODImmOne()
rAX = ODRegGrp(RegGrp.RG0, _S.V, RGrpAttr.ANone)
eAX = ODRegGrp(RegGrp.RG0, _S.Z, RGrpAttr.ANone)


def _in_opcode(size, attr=RGrpAttr.ARegInOpREX):
    return tuple(ODRegGrp(RegGrp(i), size, attr) for i in range(8))


_RB = _in_opcode(_S.B)
_RV = _in_opcode(_S.V)
_RY = _in_opcode(_S.Y)
_RV_NOREX = _in_opcode(_S.V, RGrpAttr.ARegInOpNoREX)

D32 = SizeCond.SzDef32
D64 = SizeCond.SzDef64
F64 = SizeCond.Sz64
O64 = SizeCond.SzOnly64
I64 = SizeCond.SzInv64

_JCC = (
    Op.JO, Op.JNO, Op.JB, Op.JNB, Op.JZ, Op.JNZ, Op.JBE, Op.JA,
    Op.JS, Op.JNS, Op.JP, Op.JNP, Op.JL, Op.JNL, Op.JLE, Op.JG,
)
_CMOVCC = (
    Op.CMOVO, Op.CMOVNO, Op.CMOVB, Op.CMOVAE, Op.CMOVZ, Op.CMOVNZ, Op.CMOVBE, Op.CMOVA,
    Op.CMOVS, Op.CMOVNS, Op.CMOVP, Op.CMOVNP, Op.CMOVL, Op.CMOVGE, Op.CMOVLE, Op.CMOVG,
)
_SETCC = (
    Op.SETO, Op.SETNO, Op.SETB, Op.SETNB, Op.SETZ, Op.SETNZ, Op.SETBE, Op.SETA,
    Op.SETS, Op.SETNS, Op.SETP, Op.SETNP, Op.SETL, Op.SETNL, Op.SETLE, Op.SETG,
)
_ALU = (Op.ADD, Op.OR, Op.ADC, Op.SBB, Op.AND, Op.SUB, Op.XOR, Op.CMP)

ONE_BYTE = {
    0x06: InsDesc(Op.PUSH, (ES,), I64),
    0x07: InsDesc(Op.POP, (ES,), I64),
    0x0E: InsDesc(Op.PUSH, (CS,), I64),
    0x16: InsDesc(Op.PUSH, (SS,), I64),
    0x17: InsDesc(Op.POP, (SS,), I64),
    0x1E: InsDesc(Op.PUSH, (DS,), I64),
    0x1F: InsDesc(Op.POP, (DS,), I64),
    0x27: InsDesc(Op.DAA, (), I64),
    0x2F: InsDesc(Op.DAS, (), I64),
    0x37: InsDesc(Op.AAA, (), I64),
    0x3F: InsDesc(Op.AAS, (), I64),
    0x60: ByOpSize(
        InsDesc(Op.PUSHA, (), I64), InsDesc(Op.PUSHAD, (), I64), None, I64
    ),
    0x61: ByOpSize(InsDesc(Op.POPA, (), I64), InsDesc(Op.POPAD, (), I64), None, I64),
    0x62: InsDesc(Op.BOUND, (Gv, Ma), I64),
    0x63: ByMode(InsDesc(Op.ARPL, (Ew, Gw)), InsDesc(Op.MOVSXD, (Gv, Ed))),
    0x68: InsDesc(Op.PUSH, (SIz,), D64),
    0x69: InsDesc(Op.IMUL, (Gv, Ev, SIz)),
    0x6A: InsDesc(Op.PUSH, (SIb,), D64),
    0x6B: InsDesc(Op.IMUL, (Gv, Ev, SIb)),
    0x6C: InsDesc(Op.INSB, (Yb, DX)),
    0x6D: ByOpSize(
        InsDesc(Op.INSW, (Yz, DX)), InsDesc(Op.INSD, (Yz, DX)), InsDesc(Op.INSD, (Yz, DX))
    ),
    0x6E: InsDesc(Op.OUTSB, (DX, Xb)),
    0x6F: ByOpSize(
        InsDesc(Op.OUTSW, (DX, Xz)), InsDesc(Op.OUTSD, (DX, Xz)), InsDesc(Op.OUTSD, (DX, Xz))
    ),
    0x80: GroupDesc(OpGroup.G1, (Eb, Ib)),
    0x81: GroupDesc(OpGroup.G1, (Ev, Iz)),
    0x82: GroupDesc(OpGroup.G1Inv64, (Eb, Ib), I64),
    0x83: GroupDesc(OpGroup.G1, (Ev, SIb)),
    0x84: InsDesc(Op.TEST, (Eb, Gb)),
    0x85: InsDesc(Op.TEST, (Ev, Gv)),
    0x86: InsDesc(Op.XCHG, (Eb, Gb)),
    0x87: InsDesc(Op.XCHG, (Ev, Gv)),
    0x88: InsDesc(Op.MOV, (Eb, Gb)),
    0x89: InsDesc(Op.MOV, (Ev, Gv)),
    0x8A: InsDesc(Op.MOV, (Gb, Eb)),
    0x8B: InsDesc(Op.MOV, (Gv, Ev)),
    0x8C: InsDesc(Op.MOV, (Ev, Sw)),
    0x8D: InsDesc(Op.LEA, (Gv, Mv)),
    0x8E: InsDesc(Op.MOV, (Sw, Ew)),
    0x8F: GroupDesc(OpGroup.G1A, (Ev,), D64),
    0x90: ByRexB(InsDesc(Op.NOP), InsDesc(Op.XCHG, (_RV[0], rAX))),
    0x98: ByOpSize(InsDesc(Op.CBW), InsDesc(Op.CWDE), InsDesc(Op.CDQE)),
    0x99: ByOpSize(InsDesc(Op.CWD), InsDesc(Op.CDQ), InsDesc(Op.CQO)),
    0x9A: InsDesc(Op.CALLFar, (Ap,), I64),
    0x9B: InsDesc(Op.WAIT),
    0x9C: ByOpSize(
        InsDesc(Op.PUSHF, (), D64), InsDesc(Op.PUSHFD, (), D64), InsDesc(Op.PUSHFQ, (), D64), D64
    ),
    0x9D: ByOpSize(
        InsDesc(Op.POPF, (), D64), InsDesc(Op.POPFD, (), D64), InsDesc(Op.POPFQ, (), D64), D64
    ),
    0x9E: InsDesc(Op.SAHF),
    0x9F: InsDesc(Op.LAHF),
    0xA0: InsDesc(Op.MOV, (AL, Ob)),
    0xA1: InsDesc(Op.MOV, (rAX, Ov)),
    0xA2: InsDesc(Op.MOV, (Ob, AL)),
    0xA3: InsDesc(Op.MOV, (Ov, rAX)),
    0xA4: InsDesc(Op.MOVSB, (Yb, Xb)),
    0xA5: ByOpSize(
        InsDesc(Op.MOVSW, (Yv, Xv)), InsDesc(Op.MOVSD, (Yv, Xv)), InsDesc(Op.MOVSQ, (Yv, Xv))
    ),
    0xA6: InsDesc(Op.CMPSB, (Xb, Yb)),
    0xA7: ByOpSize(
        InsDesc(Op.CMPSW, (Xv, Yv)), InsDesc(Op.CMPSD, (Xv, Yv)), InsDesc(Op.CMPSQ, (Xv, Yv))
    ),
    0xA8: InsDesc(Op.TEST, (AL, Ib)),
    0xA9: InsDesc(Op.TEST, (rAX, Iz)),
    0xAA: InsDesc(Op.STOSB, (Yb, AL)),
    0xAB: ByOpSize(
        InsDesc(Op.STOSW, (Yv, rAX)), InsDesc(Op.STOSD, (Yv, rAX)), InsDesc(Op.STOSQ, (Yv, rAX))
    ),
    0xAC: InsDesc(Op.LODSB, (AL, Xb)),
    0xAD: ByOpSize(
        InsDesc(Op.LODSW, (rAX, Xv)), InsDesc(Op.LODSD, (rAX, Xv)), InsDesc(Op.LODSQ, (rAX, Xv))
    ),
    0xAE: InsDesc(Op.SCASB, (AL, Yb)),
    0xAF: ByOpSize(
        InsDesc(Op.SCASW, (rAX, Yv)), InsDesc(Op.SCASD, (rAX, Yv)), InsDesc(Op.SCASQ, (rAX, Yv))
    ),
    0xC0: GroupDesc(OpGroup.G2, (Eb, Ib)),
    0xC1: GroupDesc(OpGroup.G2, (Ev, Ib)),
    0xC2: InsDesc(Op.RETNearImm, (Iw,), F64),
    0xC3: InsDesc(Op.RETNear, (), F64),
    0xC4: InsDesc(Op.LES, (Gz, Mp), I64),
    0xC5: InsDesc(Op.LDS, (Gz, Mp), I64),
    0xC6: GroupDesc(OpGroup.G11A, (Eb, Ib)),
    0xC7: GroupDesc(OpGroup.G11B, (Ev, Iz)),
    0xC8: InsDesc(Op.ENTER, (Iw, Ib), D64),
    0xC9: InsDesc(Op.LEAVE, (), D64),
    0xCA: InsDesc(Op.RETFarImm, (Iw,)),
    0xCB: InsDesc(Op.RETFar),
    0xCC: InsDesc(Op.INT3),
    0xCD: InsDesc(Op.INT, (Ib,)),
    0xCE: InsDesc(Op.INTO, (), I64),
    0xCF: ByOpSize(InsDesc(Op.IRETW), InsDesc(Op.IRETD), InsDesc(Op.IRETQ)),
    0xD0: GroupDesc(OpGroup.G2, (Eb, ONE)),
    0xD1: GroupDesc(OpGroup.G2, (Ev, ONE)),
    0xD2: GroupDesc(OpGroup.G2, (Eb, CL)),
    0xD3: GroupDesc(OpGroup.G2, (Ev, CL)),
    0xD4: InsDesc(Op.AAM, (Ib,), I64),
    0xD5: InsDesc(Op.AAD, (Ib,), I64),
    0xD7: InsDesc(Op.XLATB),
    0xE0: InsDesc(Op.LOOPNE, (Jb,), F64),
    0xE1: InsDesc(Op.LOOPE, (Jb,), F64),
    0xE2: InsDesc(Op.LOOP, (Jb,), F64),
    0xE3: ByAddrSize(
        InsDesc(Op.JCXZ, (Jb,), F64), InsDesc(Op.JECXZ, (Jb,), F64), InsDesc(Op.JRCXZ, (Jb,), F64)
    ),
    0xE4: InsDesc(Op.IN, (AL, Ib)),
    0xE5: InsDesc(Op.IN, (eAX, Ib)),
    0xE6: InsDesc(Op.OUT, (Ib, AL)),
    0xE7: InsDesc(Op.OUT, (Ib, eAX)),
    0xE8: InsDesc(Op.CALLNear, (Jz,), F64),
    0xE9: InsDesc(Op.JMPNear, (Jz,), F64),
    0xEA: InsDesc(Op.JMPFar, (Ap,), I64),
    0xEB: InsDesc(Op.JMPNear, (Jb,), F64),
    0xEC: InsDesc(Op.IN, (AL, DX)),
    0xED: InsDesc(Op.IN, (eAX, DX)),
    0xEE: InsDesc(Op.OUT, (DX, AL)),
    0xEF: InsDesc(Op.OUT, (DX, eAX)),
    0xF4: InsDesc(Op.HLT),
    0xF5: InsDesc(Op.CMC),
    0xF6: GroupDesc(OpGroup.G3A, (Eb,)),
    0xF7: GroupDesc(OpGroup.G3B, (Ev,)),
    0xF8: InsDesc(Op.CLC),
    0xF9: InsDesc(Op.STC),
    0xFA: InsDesc(Op.CLI),
    0xFB: InsDesc(Op.STI),
    0xFC: InsDesc(Op.CLD),
    0xFD: InsDesc(Op.STD),
    0xFE: GroupDesc(OpGroup.G4, (Eb,)),
    0xFF: GroupDesc(OpGroup.G5, (Ev,)),
}
for _base, _op in zip(range(0x00, 0x40, 0x8), _ALU):
    ONE_BYTE[_base] = InsDesc(_op, (Eb, Gb))
    ONE_BYTE[_base + 1] = InsDesc(_op, (Ev, Gv))
    ONE_BYTE[_base + 2] = InsDesc(_op, (Gb, Eb))
    ONE_BYTE[_base + 3] = InsDesc(_op, (Gv, Ev))
    ONE_BYTE[_base + 4] = InsDesc(_op, (AL, Ib))
    ONE_BYTE[_base + 5] = InsDesc(_op, (rAX, Iz))
for _i in range(8):
    # 40-4F are REX prefixes in 64-bit mode and never reach this table there
    ONE_BYTE[0x40 + _i] = InsDesc(Op.INC, (_RV_NOREX[_i],), I64)
    ONE_BYTE[0x48 + _i] = InsDesc(Op.DEC, (_RV_NOREX[_i],), I64)
    ONE_BYTE[0x50 + _i] = InsDesc(Op.PUSH, (_RV[_i],), D64)
    ONE_BYTE[0x58 + _i] = InsDesc(Op.POP, (_RV[_i],), D64)
    ONE_BYTE[0xB0 + _i] = InsDesc(Op.MOV, (_RB[_i], Ib))
    ONE_BYTE[0xB8 + _i] = InsDesc(Op.MOV, (_RV[_i], Iv))
    if _i:
        ONE_BYTE[0x90 + _i] = InsDesc(Op.XCHG, (_RV[_i], rAX))
    ONE_BYTE[0xD8 + _i] = X87_ESCAPE
for _i, _op in enumerate(_JCC):
    ONE_BYTE[0x70 + _i] = InsDesc(_op, (Jb,), F64)


def _mmx_sse(op):
    return ByPrefix(none=InsDesc(op, (Pq, Qq)), p66=InsDesc(op, (Vdq, Wdq)))


def _sse(op, *operands):
    return ByPrefix(p66=InsDesc(op, operands or (Vdq, Wdq)))


def _packed_scalar(ops, forms):
    return ByPrefix(
        *(None if op is None else InsDesc(op, operands) for op, operands in zip(ops, forms))
    )


_FP_FORMS = ((Vps, Wps), (Vpd, Wpd), (Vss, Wss), (Vsd, Wsd))
_VFP_FORMS = ((Vps, Hps, Wps), (Vpd, Hpd, Wpd), (Vss, Hss, Wss), (Vsd, Hsd, Wsd))


def _fp(ps=None, pd=None, ss=None, sd=None):
    return _packed_scalar((ps, pd, ss, sd), _FP_FORMS)


_HINT_NOP = InsDesc(Op.NOP, (Ev,))
_PREFETCHW = InsDesc(Op.PREFETCHW, (Mb,))

TWO_BYTE = {
    0x00: GroupDesc(OpGroup.G6),
    0x01: GroupDesc(OpGroup.G7),
    0x02: InsDesc(Op.LAR, (Gv, Ew)),
    0x03: InsDesc(Op.LSL, (Gv, Ew)),
    0x05: InsDesc(Op.SYSCALL, (), O64),
    0x06: InsDesc(Op.CLTS),
    0x07: InsDesc(Op.SYSRET, (), O64),
    0x08: InsDesc(Op.INVD),
    0x09: InsDesc(Op.WBINVD),
    0x0B: InsDesc(Op.UD2),
    0x0D: ByMod(
        ByReg(
            _PREFETCHW, _PREFETCHW, InsDesc(Op.PREFETCHWT1, (Mb,)), _PREFETCHW,
            _PREFETCHW, _PREFETCHW, _PREFETCHW, _PREFETCHW,
        ),
        None,
    ),
    0x10: ByPrefix(
        InsDesc(Op.MOVUPS, (Vps, Wps)),
        InsDesc(Op.MOVUPD, (Vpd, Wpd)),
        InsDesc(Op.MOVSS, (Vss, Wss)),
        InsDesc(Op.MOVSD, (Vsd, Wsd)),
    ),
    0x11: ByPrefix(
        InsDesc(Op.MOVUPS, (Wps, Vps)),
        InsDesc(Op.MOVUPD, (Wpd, Vpd)),
        InsDesc(Op.MOVSS, (Wss, Vss)),
        InsDesc(Op.MOVSD, (Wsd, Vsd)),
    ),
    0x12: ByPrefix(
        ByMod(InsDesc(Op.MOVLPS, (Vq, Mq)), InsDesc(Op.MOVHLPS, (Vq, Uq))),
        InsDesc(Op.MOVLPD, (Vq, Mq)),
        InsDesc(Op.MOVSLDUP, (Vdq, Wdq)),
        InsDesc(Op.MOVDDUP, (Vdq, Wq)),
    ),
    0x13: ByPrefix(InsDesc(Op.MOVLPS, (Mq, Vq)), InsDesc(Op.MOVLPD, (Mq, Vq))),
    0x14: _fp(Op.UNPCKLPS, Op.UNPCKLPD),
    0x15: _fp(Op.UNPCKHPS, Op.UNPCKHPD),
    0x16: ByPrefix(
        ByMod(InsDesc(Op.MOVHPS, (Vdq, Mq)), InsDesc(Op.MOVLHPS, (Vdq, Uq))),
        InsDesc(Op.MOVHPD, (Vdq, Mq)),
        InsDesc(Op.MOVSHDUP, (Vdq, Wdq)),
    ),
    0x17: ByPrefix(InsDesc(Op.MOVHPS, (Mq, Vdq)), InsDesc(Op.MOVHPD, (Mq, Vdq))),
    0x18: GroupDesc(OpGroup.G16),
    0x19: _HINT_NOP,
    0x1A: ByPrefix(
        ByMod(InsDesc(Op.BNDLDX, (BndR, Mn)), None),
        InsDesc(Op.BNDMOV, (BndR, BndM)),
        InsDesc(Op.BNDCL, (BndR, Ey)),
        InsDesc(Op.BNDCU, (BndR, Ey)),
    ),
    0x1B: ByPrefix(
        ByMod(InsDesc(Op.BNDSTX, (Mn, BndR)), None),
        InsDesc(Op.BNDMOV, (BndM, BndR)),
        ByMod(InsDesc(Op.BNDMK, (BndR, My)), None),
        InsDesc(Op.BNDCN, (BndR, Ey)),
    ),
    0x1C: _HINT_NOP,
    0x1D: _HINT_NOP,
    0x1E: ByPrefix(
        _HINT_NOP,
        _HINT_NOP,
        ByModRM(
            {0xFA: InsDesc(Op.ENDBR64), 0xFB: InsDesc(Op.ENDBR32)},
            ByMod(_HINT_NOP, ByReg(_HINT_NOP, InsDesc(Op.RDSSP, (Ry,)), *(_HINT_NOP,) * 6)),
        ),
    ),
    0x1F: _HINT_NOP,
    0x20: InsDesc(Op.MOV, (Ry, Cy), F64),
    0x21: InsDesc(Op.MOV, (Ry, Dy), F64),
    0x22: InsDesc(Op.MOV, (Cy, Ry), F64),
    0x23: InsDesc(Op.MOV, (Dy, Ry), F64),
    0x28: _fp(Op.MOVAPS, Op.MOVAPD),
    0x29: ByPrefix(InsDesc(Op.MOVAPS, (Wps, Vps)), InsDesc(Op.MOVAPD, (Wpd, Vpd))),
    0x2A: ByPrefix(
        InsDesc(Op.CVTPI2PS, (Vps, Qpi)),
        InsDesc(Op.CVTPI2PD, (Vpd, Qpi)),
        InsDesc(Op.CVTSI2SS, (Vss, Ey)),
        InsDesc(Op.CVTSI2SD, (Vsd, Ey)),
    ),
    0x2B: ByPrefix(InsDesc(Op.MOVNTPS, (Mps, Vps)), InsDesc(Op.MOVNTPD, (Mpd, Vpd))),
    0x2C: ByPrefix(
        InsDesc(Op.CVTTPS2PI, (Ppi, Wpsq)),
        InsDesc(Op.CVTTPD2PI, (Ppi, Wpd)),
        InsDesc(Op.CVTTSS2SI, (Gy, Wss)),
        InsDesc(Op.CVTTSD2SI, (Gy, Wsd)),
    ),
    0x2D: ByPrefix(
        InsDesc(Op.CVTPS2PI, (Ppi, Wpsq)),
        InsDesc(Op.CVTPD2PI, (Ppi, Wpd)),
        InsDesc(Op.CVTSS2SI, (Gy, Wss)),
        InsDesc(Op.CVTSD2SI, (Gy, Wsd)),
    ),
    0x2E: ByPrefix(InsDesc(Op.UCOMISS, (Vss, Wss)), InsDesc(Op.UCOMISD, (Vsd, Wsd))),
    0x2F: ByPrefix(InsDesc(Op.COMISS, (Vss, Wss)), InsDesc(Op.COMISD, (Vsd, Wsd))),
    0x30: InsDesc(Op.WRMSR),
    0x31: InsDesc(Op.RDTSC),
    0x32: InsDesc(Op.RDMSR),
    0x33: InsDesc(Op.RDPMC),
    0x34: InsDesc(Op.SYSENTER),
    0x35: InsDesc(Op.SYSEXIT),
    0x37: InsDesc(Op.GETSEC),
    0x50: ByPrefix(InsDesc(Op.MOVMSKPS, (Gy, Ups)), InsDesc(Op.MOVMSKPD, (Gy, Upd))),
    0x51: _fp(Op.SQRTPS, Op.SQRTPD, Op.SQRTSS, Op.SQRTSD),
    0x52: _fp(Op.RSQRTPS, None, Op.RSQRTSS),
    0x53: _fp(Op.RCPPS, None, Op.RCPSS),
    0x54: _fp(Op.ANDPS, Op.ANDPD),
    0x55: _fp(Op.ANDNPS, Op.ANDNPD),
    0x56: _fp(Op.ORPS, Op.ORPD),
    0x57: _fp(Op.XORPS, Op.XORPD),
    0x58: _fp(Op.ADDPS, Op.ADDPD, Op.ADDSS, Op.ADDSD),
    0x59: _fp(Op.MULPS, Op.MULPD, Op.MULSS, Op.MULSD),
    0x5A: ByPrefix(
        InsDesc(Op.CVTPS2PD, (Vpd, Wpsq)),
        InsDesc(Op.CVTPD2PS, (Vps, Wpd)),
        InsDesc(Op.CVTSS2SD, (Vsd, Wss)),
        InsDesc(Op.CVTSD2SS, (Vss, Wsd)),
    ),
    0x5B: ByPrefix(
        InsDesc(Op.CVTDQ2PS, (Vps, Wdq)),
        InsDesc(Op.CVTPS2DQ, (Vdq, Wps)),
        InsDesc(Op.CVTTPS2DQ, (Vdq, Wps)),
    ),
    0x5C: _fp(Op.SUBPS, Op.SUBPD, Op.SUBSS, Op.SUBSD),
    0x5D: _fp(Op.MINPS, Op.MINPD, Op.MINSS, Op.MINSD),
    0x5E: _fp(Op.DIVPS, Op.DIVPD, Op.DIVSS, Op.DIVSD),
    0x5F: _fp(Op.MAXPS, Op.MAXPD, Op.MAXSS, Op.MAXSD),
    0x60: _mmx_sse(Op.PUNPCKLBW),
    0x61: _mmx_sse(Op.PUNPCKLWD),
    0x62: _mmx_sse(Op.PUNPCKLDQ),
    0x63: _mmx_sse(Op.PACKSSWB),
    0x64: _mmx_sse(Op.PCMPGTB),
    0x65: _mmx_sse(Op.PCMPGTW),
    0x66: _mmx_sse(Op.PCMPGTD),
    0x67: _mmx_sse(Op.PACKUSWB),
    0x68: _mmx_sse(Op.PUNPCKHBW),
    0x69: _mmx_sse(Op.PUNPCKHWD),
    0x6A: _mmx_sse(Op.PUNPCKHDQ),
    0x6B: _mmx_sse(Op.PACKSSDW),
    0x6C: _sse(Op.PUNPCKLQDQ),
    0x6D: _sse(Op.PUNPCKHQDQ),
    0x6E: ByPrefix(
        ByW(InsDesc(Op.MOVD, (Pq, Ed)), InsDesc(Op.MOVQ, (Pq, Eq))),
        ByW(InsDesc(Op.MOVD, (Vdq, Ed)), InsDesc(Op.MOVQ, (Vdq, Eq))),
    ),
    0x6F: ByPrefix(
        InsDesc(Op.MOVQ, (Pq, Qq)),
        InsDesc(Op.MOVDQA, (Vdq, Wdq)),
        InsDesc(Op.MOVDQU, (Vdq, Wdq)),
    ),
    0x70: ByPrefix(
        InsDesc(Op.PSHUFW, (Pq, Qq, Ib)),
        InsDesc(Op.PSHUFD, (Vdq, Wdq, Ib)),
        InsDesc(Op.PSHUFHW, (Vdq, Wdq, Ib)),
        InsDesc(Op.PSHUFLW, (Vdq, Wdq, Ib)),
    ),
    0x71: GroupDesc(OpGroup.G12),
    0x72: GroupDesc(OpGroup.G13),
    0x73: GroupDesc(OpGroup.G14),
    0x74: _mmx_sse(Op.PCMPEQB),
    0x75: _mmx_sse(Op.PCMPEQW),
    0x76: _mmx_sse(Op.PCMPEQD),
    0x77: ByPrefix(InsDesc(Op.EMMS)),
    0x78: ByPrefix(InsDesc(Op.VMREAD, (Ey, Gy), F64)),
    0x79: ByPrefix(InsDesc(Op.VMWRITE, (Gy, Ey), F64)),
    0x7C: ByPrefix(
        p66=InsDesc(Op.HADDPD, (Vpd, Wpd)), pF2=InsDesc(Op.HADDPS, (Vps, Wps))
    ),
    0x7D: ByPrefix(
        p66=InsDesc(Op.HSUBPD, (Vpd, Wpd)), pF2=InsDesc(Op.HSUBPS, (Vps, Wps))
    ),
    0x7E: ByPrefix(
        ByW(InsDesc(Op.MOVD, (Ed, Pq)), InsDesc(Op.MOVQ, (Eq, Pq))),
        ByW(InsDesc(Op.MOVD, (Ed, Vdq)), InsDesc(Op.MOVQ, (Eq, Vdq))),
        InsDesc(Op.MOVQ, (Vdq, Wq)),
    ),
    0x7F: ByPrefix(
        InsDesc(Op.MOVQ, (Qq, Pq)),
        InsDesc(Op.MOVDQA, (Wdq, Vdq)),
        InsDesc(Op.MOVDQU, (Wdq, Vdq)),
    ),
    0xA0: InsDesc(Op.PUSH, (FS,), D64),
    0xA1: InsDesc(Op.POP, (FS,), D64),
    0xA2: InsDesc(Op.CPUID),
    0xA3: InsDesc(Op.BT, (Ev, Gv)),
    0xA4: InsDesc(Op.SHLD, (Ev, Gv, Ib)),
    0xA5: InsDesc(Op.SHLD, (Ev, Gv, CL)),
    0xA8: InsDesc(Op.PUSH, (GS,), D64),
    0xA9: InsDesc(Op.POP, (GS,), D64),
    0xAA: InsDesc(Op.RSM),
    0xAB: InsDesc(Op.BTS, (Ev, Gv)),
    0xAC: InsDesc(Op.SHRD, (Ev, Gv, Ib)),
    0xAD: InsDesc(Op.SHRD, (Ev, Gv, CL)),
    0xAE: GroupDesc(OpGroup.G15),
    0xAF: InsDesc(Op.IMUL, (Gv, Ev)),
    0xB0: InsDesc(Op.CMPXCHG, (Eb, Gb)),
    0xB1: InsDesc(Op.CMPXCHG, (Ev, Gv)),
    0xB2: InsDesc(Op.LSS, (Gv, Mp)),
    0xB3: InsDesc(Op.BTR, (Ev, Gv)),
    0xB4: InsDesc(Op.LFS, (Gv, Mp)),
    0xB5: InsDesc(Op.LGS, (Gv, Mp)),
    0xB6: InsDesc(Op.MOVZX, (Gv, Eb)),
    0xB7: InsDesc(Op.MOVZX, (Gv, Ew)),
    0xB8: ByPrefix(pF3=InsDesc(Op.POPCNT, (Gv, Ev))),
    0xB9: GroupDesc(OpGroup.G10, (Gv, Ev)),
    0xBA: GroupDesc(OpGroup.G8, (Ev, Ib)),
    0xBB: InsDesc(Op.BTC, (Ev, Gv)),
    0xBC: ByPrefix(InsDesc(Op.BSF, (Gv, Ev)), pF3=InsDesc(Op.TZCNT, (Gv, Ev))),
    0xBD: ByPrefix(InsDesc(Op.BSR, (Gv, Ev)), pF3=InsDesc(Op.LZCNT, (Gv, Ev))),
    0xBE: InsDesc(Op.MOVSX, (Gv, Eb)),
    0xBF: InsDesc(Op.MOVSX, (Gv, Ew)),
    0xC0: InsDesc(Op.XADD, (Eb, Gb)),
    0xC1: InsDesc(Op.XADD, (Ev, Gv)),
    0xC2: ByPrefix(
        InsDesc(Op.CMPPS, (Vps, Wps, Ib)),
        InsDesc(Op.CMPPD, (Vpd, Wpd, Ib)),
        InsDesc(Op.CMPSS, (Vss, Wss, Ib)),
        InsDesc(Op.CMPSD, (Vsd, Wsd, Ib)),
    ),
    0xC3: ByPrefix(InsDesc(Op.MOVNTI, (My, Gy))),
    0xC4: ByPrefix(InsDesc(Op.PINSRW, (Pq, Edw, Ib)), InsDesc(Op.PINSRW, (Vdq, Edw, Ib))),
    0xC5: ByPrefix(InsDesc(Op.PEXTRW, (Gd, Nq, Ib)), InsDesc(Op.PEXTRW, (Gd, Udq, Ib))),
    0xC6: ByPrefix(InsDesc(Op.SHUFPS, (Vps, Wps, Ib)), InsDesc(Op.SHUFPD, (Vpd, Wpd, Ib))),
    0xC7: GroupDesc(OpGroup.G9),
    0xD0: ByPrefix(
        p66=InsDesc(Op.ADDSUBPD, (Vpd, Wpd)), pF2=InsDesc(Op.ADDSUBPS, (Vps, Wps))
    ),
    0xD1: _mmx_sse(Op.PSRLW),
    0xD2: _mmx_sse(Op.PSRLD),
    0xD3: _mmx_sse(Op.PSRLQ),
    0xD4: _mmx_sse(Op.PADDQ),
    0xD5: _mmx_sse(Op.PMULLW),
    0xD6: ByPrefix(
        None,
        InsDesc(Op.MOVQ, (Wq, Vq)),
        InsDesc(Op.MOVQ2DQ, (Vdq, Nq)),
        InsDesc(Op.MOVDQ2Q, (Pq, Uq)),
    ),
    0xD7: ByPrefix(InsDesc(Op.PMOVMSKB, (Gd, Nq)), InsDesc(Op.PMOVMSKB, (Gd, Udq))),
    0xD8: _mmx_sse(Op.PSUBUSB),
    0xD9: _mmx_sse(Op.PSUBUSW),
    0xDA: _mmx_sse(Op.PMINUB),
    0xDB: _mmx_sse(Op.PAND),
    0xDC: _mmx_sse(Op.PADDUSB),
    0xDD: _mmx_sse(Op.PADDUSW),
    0xDE: _mmx_sse(Op.PMAXUB),
    0xDF: _mmx_sse(Op.PANDN),
    0xE0: _mmx_sse(Op.PAVGB),
    0xE1: _mmx_sse(Op.PSRAW),
    0xE2: _mmx_sse(Op.PSRAD),
    0xE3: _mmx_sse(Op.PAVGW),
    0xE4: _mmx_sse(Op.PMULHUW),
    0xE5: _mmx_sse(Op.PMULHW),
    0xE6: ByPrefix(
        None,
        InsDesc(Op.CVTTPD2DQ, (Vdq, Wpd)),
        InsDesc(Op.CVTDQ2PD, (Vpd, Wdqq)),
        InsDesc(Op.CVTPD2DQ, (Vdq, Wpd)),
    ),
    0xE7: ByPrefix(InsDesc(Op.MOVNTQ, (Mq, Pq)), InsDesc(Op.MOVNTDQ, (Mdq, Vdq))),
    0xE8: _mmx_sse(Op.PSUBSB),
    0xE9: _mmx_sse(Op.PSUBSW),
    0xEA: _mmx_sse(Op.PMINSW),
    0xEB: _mmx_sse(Op.POR),
    0xEC: _mmx_sse(Op.PADDSB),
    0xED: _mmx_sse(Op.PADDSW),
    0xEE: _mmx_sse(Op.PMAXSW),
    0xEF: _mmx_sse(Op.PXOR),
    0xF0: ByPrefix(pF2=InsDesc(Op.LDDQU, (Vdq, Mdq))),
    0xF1: _mmx_sse(Op.PSLLW),
    0xF2: _mmx_sse(Op.PSLLD),
    0xF3: _mmx_sse(Op.PSLLQ),
    0xF4: _mmx_sse(Op.PMULUDQ),
    0xF5: _mmx_sse(Op.PMADDWD),
    0xF6: _mmx_sse(Op.PSADBW),
    0xF7: ByPrefix(InsDesc(Op.MASKMOVQ, (Pq, Nq)), InsDesc(Op.MASKMOVDQU, (Vdq, Udq))),
    0xF8: _mmx_sse(Op.PSUBB),
    0xF9: _mmx_sse(Op.PSUBW),
    0xFA: _mmx_sse(Op.PSUBD),
    0xFB: _mmx_sse(Op.PSUBQ),
    0xFC: _mmx_sse(Op.PADDB),
    0xFD: _mmx_sse(Op.PADDW),
    0xFE: _mmx_sse(Op.PADDD),
}
for _i in range(16):
    TWO_BYTE[0x40 + _i] = InsDesc(_CMOVCC[_i], (Gv, Ev))
    TWO_BYTE[0x80 + _i] = InsDesc(_JCC[_i], (Jz,), F64)
    TWO_BYTE[0x90 + _i] = InsDesc(_SETCC[_i], (Eb,))
for _i in range(8):
    TWO_BYTE[0xC8 + _i] = InsDesc(Op.BSWAP, (_RY[_i],))

THREE_BYTE_38 = {
    0x00: _mmx_sse(Op.PSHUFB),
    0x01: _mmx_sse(Op.PHADDW),
    0x02: _mmx_sse(Op.PHADDD),
    0x03: _mmx_sse(Op.PHADDSW),
    0x04: _mmx_sse(Op.PMADDUBSW),
    0x05: _mmx_sse(Op.PHSUBW),
    0x06: _mmx_sse(Op.PHSUBD),
    0x07: _mmx_sse(Op.PHSUBSW),
    0x08: _mmx_sse(Op.PSIGNB),
    0x09: _mmx_sse(Op.PSIGNW),
    0x0A: _mmx_sse(Op.PSIGND),
    0x0B: _mmx_sse(Op.PMULHRSW),
    0x10: _sse(Op.PBLENDVB),
    0x14: _sse(Op.BLENDVPS),
    0x15: _sse(Op.BLENDVPD),
    0x17: _sse(Op.PTEST),
    0x1C: _mmx_sse(Op.PABSB),
    0x1D: _mmx_sse(Op.PABSW),
    0x1E: _mmx_sse(Op.PABSD),
    0x20: _sse(Op.PMOVSXBW, Vdq, Wdqq),
    0x21: _sse(Op.PMOVSXBD, Vdq, Wdqd),
    0x22: _sse(Op.PMOVSXBQ, Vdq, Wdqw),
    0x23: _sse(Op.PMOVSXWD, Vdq, Wdqq),
    0x24: _sse(Op.PMOVSXWQ, Vdq, Wdqd),
    0x25: _sse(Op.PMOVSXDQ, Vdq, Wdqq),
    0x28: _sse(Op.PMULDQ),
    0x29: _sse(Op.PCMPEQQ),
    0x2A: _sse(Op.MOVNTDQA, Vdq, Mdq),
    0x2B: _sse(Op.PACKUSDW),
    0x30: _sse(Op.PMOVZXBW, Vdq, Wdqq),
    0x31: _sse(Op.PMOVZXBD, Vdq, Wdqd),
    0x32: _sse(Op.PMOVZXBQ, Vdq, Wdqw),
    0x33: _sse(Op.PMOVZXWD, Vdq, Wdqq),
    0x34: _sse(Op.PMOVZXWQ, Vdq, Wdqd),
    0x35: _sse(Op.PMOVZXDQ, Vdq, Wdqq),
    0x37: _sse(Op.PCMPGTQ),
    0x38: _sse(Op.PMINSB),
    0x39: _sse(Op.PMINSD),
    0x3A: _sse(Op.PMINUW),
    0x3B: _sse(Op.PMINUD),
    0x3C: _sse(Op.PMAXSB),
    0x3D: _sse(Op.PMAXSD),
    0x3E: _sse(Op.PMAXUW),
    0x3F: _sse(Op.PMAXUD),
    0x40: _sse(Op.PMULLD),
    0x41: _sse(Op.PHMINPOSUW),
    0x80: ByPrefix(p66=InsDesc(Op.INVEPT, (Gy, Mdq), F64)),
    0x81: ByPrefix(p66=InsDesc(Op.INVVPID, (Gy, Mdq), F64)),
    0x82: ByPrefix(p66=InsDesc(Op.INVPCID, (Gy, Mdq), F64)),
    0xC8: ByPrefix(InsDesc(Op.SHA1NEXTE, (Vdq, Wdq))),
    0xC9: ByPrefix(InsDesc(Op.SHA1MSG1, (Vdq, Wdq))),
    0xCA: ByPrefix(InsDesc(Op.SHA1MSG2, (Vdq, Wdq))),
    0xCB: ByPrefix(InsDesc(Op.SHA256RNDS2, (Vdq, Wdq))),
    0xCC: ByPrefix(InsDesc(Op.SHA256MSG1, (Vdq, Wdq))),
    0xCD: ByPrefix(InsDesc(Op.SHA256MSG2, (Vdq, Wdq))),
    0xCF: _sse(Op.GF2P8MULB),
    0xDB: _sse(Op.AESIMC),
    0xDC: _sse(Op.AESENC),
    0xDD: _sse(Op.AESENCLAST),
    0xDE: _sse(Op.AESDEC),
    0xDF: _sse(Op.AESDECLAST),
    0xF0: ByPrefix(
        InsDesc(Op.MOVBE, (Gv, Mv)), pF2=InsDesc(Op.CRC32, (Gy, Eb))
    ),
    0xF1: ByPrefix(
        InsDesc(Op.MOVBE, (Mv, Gv)), pF2=InsDesc(Op.CRC32, (Gy, Ev))
    ),
    0xF5: ByPrefix(p66=InsDesc(Op.WRUSS, (My, Gy))),
    0xF6: ByPrefix(
        InsDesc(Op.WRSS, (My, Gy)),
        InsDesc(Op.ADCX, (Gy, Ey)),
        InsDesc(Op.ADOX, (Gy, Ey)),
    ),
}

THREE_BYTE_3A = {
    0x08: _sse(Op.ROUNDPS, Vps, Wps, Ib),
    0x09: _sse(Op.ROUNDPD, Vpd, Wpd, Ib),
    0x0A: _sse(Op.ROUNDSS, Vss, Wss, Ib),
    0x0B: _sse(Op.ROUNDSD, Vsd, Wsd, Ib),
    0x0C: _sse(Op.BLENDPS, Vps, Wps, Ib),
    0x0D: _sse(Op.BLENDPD, Vpd, Wpd, Ib),
    0x0E: _sse(Op.PBLENDW, Vdq, Wdq, Ib),
    0x0F: ByPrefix(
        InsDesc(Op.PALIGNR, (Pq, Qq, Ib)), InsDesc(Op.PALIGNR, (Vdq, Wdq, Ib))
    ),
    0x14: _sse(Op.PEXTRB, Edb, Vdq, Ib),
    0x15: _sse(Op.PEXTRW, Edw, Vdq, Ib),
    0x16: ByPrefix(
        p66=ByW(InsDesc(Op.PEXTRD, (Ed, Vdq, Ib)), InsDesc(Op.PEXTRQ, (Eq, Vdq, Ib)))
    ),
    0x17: _sse(Op.EXTRACTPS, Ed, Vdq, Ib),
    0x20: _sse(Op.PINSRB, Vdq, Edb, Ib),
    0x21: _sse(Op.INSERTPS, Vdq, Wss, Ib),
    0x22: ByPrefix(
        p66=ByW(InsDesc(Op.PINSRD, (Vdq, Ed, Ib)), InsDesc(Op.PINSRQ, (Vdq, Eq, Ib)))
    ),
    0x40: _sse(Op.DPPS, Vps, Wps, Ib),
    0x41: _sse(Op.DPPD, Vpd, Wpd, Ib),
    0x42: _sse(Op.MPSADBW, Vdq, Wdq, Ib),
    0x44: _sse(Op.PCLMULQDQ, Vdq, Wdq, Ib),
    0x60: _sse(Op.PCMPESTRM, Vdq, Wdq, Ib),
    0x61: _sse(Op.PCMPESTRI, Vdq, Wdq, Ib),
    0x62: _sse(Op.PCMPISTRM, Vdq, Wdq, Ib),
    0x63: _sse(Op.PCMPISTRI, Vdq, Wdq, Ib),
    0xCC: ByPrefix(InsDesc(Op.SHA1RNDS4, (Vdq, Wdq, Ib))),
    0xCE: _sse(Op.GF2P8AFFINEQB, Vdq, Wdq, Ib),
    0xCF: _sse(Op.GF2P8AFFINEINVQB, Vdq, Wdq, Ib),
    0xDF: _sse(Op.AESKEYGENASSIST, Vdq, Wdq, Ib),
}


def _v66(op, *operands):
    return ByPrefix(p66=InsDesc(op, operands or (Vx, Hx, Wx)))


def _v66w(w0, w1, *operands):
    """66-prefixed entry whose mnemonic follows VEX/EVEX.W."""
    operands = operands or (Vx, Hx, Wx)
    return ByPrefix(p66=ByW(InsDesc(w0, operands), InsDesc(w1, operands)))


def _vfp(ps=None, pd=None, ss=None, sd=None):
    return _packed_scalar((ps, pd, ss, sd), _VFP_FORMS)


def _kop(ops, operands):
    """Opmask instruction: NP.W0/W1 and 66.W0/W1 give the W, Q, B and D forms."""
    w, q, b, d = (InsDesc(op, operands) for op in ops)
    return ByPrefix(none=ByW(w, q), p66=ByW(b, d))


def _kmov_gpr(operands):
    return ByPrefix(
        none=ByW(InsDesc(Op.KMOVW, operands), None),
        p66=ByW(InsDesc(Op.KMOVB, operands), None),
        pF2=ByW(InsDesc(Op.KMOVD, operands), InsDesc(Op.KMOVQ, operands)),
    )


_KMOV = (Op.KMOVW, Op.KMOVQ, Op.KMOVB, Op.KMOVD)


def _kmov(forms):
    w, q, b, d = (InsDesc(op, operands) for op, operands in zip(_KMOV, forms))
    return ByPrefix(none=ByW(w, q), p66=ByW(b, d))


_KBINARY = (KGq, KHq, KRq)

VEX_0F = {
    0x10: ByPrefix(
        InsDesc(Op.VMOVUPS, (Vps, Wps)),
        InsDesc(Op.VMOVUPD, (Vpd, Wpd)),
        ByMod(InsDesc(Op.VMOVSS, (Vss, Wss)), InsDesc(Op.VMOVSS, (Vss, Hss, Wss))),
        ByMod(InsDesc(Op.VMOVSD, (Vsd, Wsd)), InsDesc(Op.VMOVSD, (Vsd, Hsd, Wsd))),
    ),
    0x11: ByPrefix(
        InsDesc(Op.VMOVUPS, (Wps, Vps)),
        InsDesc(Op.VMOVUPD, (Wpd, Vpd)),
        ByMod(InsDesc(Op.VMOVSS, (Wss, Vss)), InsDesc(Op.VMOVSS, (Wss, Hss, Vss))),
        ByMod(InsDesc(Op.VMOVSD, (Wsd, Vsd)), InsDesc(Op.VMOVSD, (Wsd, Hsd, Vsd))),
    ),
    0x12: ByPrefix(
        ByMod(InsDesc(Op.VMOVLPS, (Vq, Hq, Mq)), InsDesc(Op.VMOVHLPS, (Vq, Hq, Uq))),
        InsDesc(Op.VMOVLPD, (Vq, Hq, Mq)),
        InsDesc(Op.VMOVSLDUP, (Vx, Wx)),
        InsDesc(Op.VMOVDDUP, (Vx, Wx)),
    ),
    0x13: ByPrefix(InsDesc(Op.VMOVLPS, (Mq, Vq)), InsDesc(Op.VMOVLPD, (Mq, Vq))),
    0x14: _vfp(Op.VUNPCKLPS, Op.VUNPCKLPD),
    0x15: _vfp(Op.VUNPCKHPS, Op.VUNPCKHPD),
    0x16: ByPrefix(
        ByMod(InsDesc(Op.VMOVHPS, (Vdq, Hq, Mq)), InsDesc(Op.VMOVLHPS, (Vdq, Hq, Uq))),
        InsDesc(Op.VMOVHPD, (Vdq, Hq, Mq)),
        InsDesc(Op.VMOVSHDUP, (Vx, Wx)),
    ),
    0x17: ByPrefix(InsDesc(Op.VMOVHPS, (Mq, Vdq)), InsDesc(Op.VMOVHPD, (Mq, Vdq))),
    0x28: ByPrefix(InsDesc(Op.VMOVAPS, (Vps, Wps)), InsDesc(Op.VMOVAPD, (Vpd, Wpd))),
    0x29: ByPrefix(InsDesc(Op.VMOVAPS, (Wps, Vps)), InsDesc(Op.VMOVAPD, (Wpd, Vpd))),
    0x2A: ByPrefix(
        pF3=InsDesc(Op.VCVTSI2SS, (Vss, Hss, Ey)),
        pF2=InsDesc(Op.VCVTSI2SD, (Vsd, Hsd, Ey)),
    ),
    0x2B: ByPrefix(InsDesc(Op.VMOVNTPS, (Mps, Vps)), InsDesc(Op.VMOVNTPD, (Mpd, Vpd))),
    0x2C: ByPrefix(
        pF3=InsDesc(Op.VCVTTSS2SI, (Gy, Wss)), pF2=InsDesc(Op.VCVTTSD2SI, (Gy, Wsd))
    ),
    0x2D: ByPrefix(
        pF3=InsDesc(Op.VCVTSS2SI, (Gy, Wss)), pF2=InsDesc(Op.VCVTSD2SI, (Gy, Wsd))
    ),
    0x2E: ByPrefix(InsDesc(Op.VUCOMISS, (Vss, Wss)), InsDesc(Op.VUCOMISD, (Vsd, Wsd))),
    0x2F: ByPrefix(InsDesc(Op.VCOMISS, (Vss, Wss)), InsDesc(Op.VCOMISD, (Vsd, Wsd))),
    0x41: ByL(None, _kop((Op.KANDW, Op.KANDQ, Op.KANDB, Op.KANDD), _KBINARY)),
    0x42: ByL(None, _kop((Op.KANDNW, Op.KANDNQ, Op.KANDNB, Op.KANDND), _KBINARY)),
    0x44: ByL(_kop((Op.KNOTW, Op.KNOTQ, Op.KNOTB, Op.KNOTD), (KGq, KRq)), None),
    0x45: ByL(None, _kop((Op.KORW, Op.KORQ, Op.KORB, Op.KORD), _KBINARY)),
    0x46: ByL(None, _kop((Op.KXNORW, Op.KXNORQ, Op.KXNORB, Op.KXNORD), _KBINARY)),
    0x47: ByL(None, _kop((Op.KXORW, Op.KXORQ, Op.KXORB, Op.KXORD), _KBINARY)),
    0x4A: ByL(None, _kop((Op.KADDW, Op.KADDQ, Op.KADDB, Op.KADDD), _KBINARY)),
    0x4B: ByL(
        None,
        ByPrefix(
            none=ByW(InsDesc(Op.KUNPCKWD, _KBINARY), InsDesc(Op.KUNPCKDQ, _KBINARY)),
            p66=ByW(InsDesc(Op.KUNPCKBW, _KBINARY), None),
        ),
    ),
    0x50: ByPrefix(InsDesc(Op.VMOVMSKPS, (Gy, Ups)), InsDesc(Op.VMOVMSKPD, (Gy, Upd))),
    0x51: ByPrefix(
        InsDesc(Op.VSQRTPS, (Vps, Wps)),
        InsDesc(Op.VSQRTPD, (Vpd, Wpd)),
        InsDesc(Op.VSQRTSS, (Vss, Hss, Wss)),
        InsDesc(Op.VSQRTSD, (Vsd, Hsd, Wsd)),
    ),
    0x52: ByPrefix(InsDesc(Op.VRSQRTPS, (Vps, Wps)), pF3=InsDesc(Op.VRSQRTSS, (Vss, Hss, Wss))),
    0x53: ByPrefix(InsDesc(Op.VRCPPS, (Vps, Wps)), pF3=InsDesc(Op.VRCPSS, (Vss, Hss, Wss))),
    0x54: _vfp(Op.VANDPS, Op.VANDPD),
    0x55: _vfp(Op.VANDNPS, Op.VANDNPD),
    0x56: _vfp(Op.VORPS, Op.VORPD),
    0x57: _vfp(Op.VXORPS, Op.VXORPD),
    0x58: _vfp(Op.VADDPS, Op.VADDPD, Op.VADDSS, Op.VADDSD),
    0x59: _vfp(Op.VMULPS, Op.VMULPD, Op.VMULSS, Op.VMULSD),
    0x5A: ByPrefix(
        InsDesc(Op.VCVTPS2PD, (Vpd, Wdqqdq)),
        InsDesc(Op.VCVTPD2PS, (Vdq, Wpd)),
        InsDesc(Op.VCVTSS2SD, (Vsd, Hsd, Wss)),
        InsDesc(Op.VCVTSD2SS, (Vss, Hss, Wsd)),
    ),
    0x5B: ByPrefix(
        InsDesc(Op.VCVTDQ2PS, (Vps, Wx)),
        InsDesc(Op.VCVTPS2DQ, (Vx, Wps)),
        InsDesc(Op.VCVTTPS2DQ, (Vx, Wps)),
    ),
    0x5C: _vfp(Op.VSUBPS, Op.VSUBPD, Op.VSUBSS, Op.VSUBSD),
    0x5D: _vfp(Op.VMINPS, Op.VMINPD, Op.VMINSS, Op.VMINSD),
    0x5E: _vfp(Op.VDIVPS, Op.VDIVPD, Op.VDIVSS, Op.VDIVSD),
    0x5F: _vfp(Op.VMAXPS, Op.VMAXPD, Op.VMAXSS, Op.VMAXSD),
    0x60: _v66(Op.VPUNPCKLBW),
    0x61: _v66(Op.VPUNPCKLWD),
    0x62: _v66(Op.VPUNPCKLDQ),
    0x63: _v66(Op.VPACKSSWB),
    0x64: _v66(Op.VPCMPGTB),
    0x65: _v66(Op.VPCMPGTW),
    0x66: _v66(Op.VPCMPGTD),
    0x67: _v66(Op.VPACKUSWB),
    0x68: _v66(Op.VPUNPCKHBW),
    0x69: _v66(Op.VPUNPCKHWD),
    0x6A: _v66(Op.VPUNPCKHDQ),
    0x6B: _v66(Op.VPACKSSDW),
    0x6C: _v66(Op.VPUNPCKLQDQ),
    0x6D: _v66(Op.VPUNPCKHQDQ),
    0x6E: ByPrefix(
        p66=ByW(InsDesc(Op.VMOVD, (Vdq, Ed)), InsDesc(Op.VMOVQ, (Vdq, Eq)))
    ),
    0x6F: ByPrefix(
        p66=InsDesc(Op.VMOVDQA, (Vx, Wx)), pF3=InsDesc(Op.VMOVDQU, (Vx, Wx))
    ),
    0x70: ByPrefix(
        p66=InsDesc(Op.VPSHUFD, (Vx, Wx, Ib)),
        pF3=InsDesc(Op.VPSHUFHW, (Vx, Wx, Ib)),
        pF2=InsDesc(Op.VPSHUFLW, (Vx, Wx, Ib)),
    ),
    0x71: GroupDesc(OpGroup.G12),
    0x72: GroupDesc(OpGroup.G13),
    0x73: GroupDesc(OpGroup.G14),
    0x74: _v66(Op.VPCMPEQB),
    0x75: _v66(Op.VPCMPEQW),
    0x76: _v66(Op.VPCMPEQD),
    0x77: ByPrefix(ByL(InsDesc(Op.VZEROUPPER), InsDesc(Op.VZEROALL))),
    0x7C: ByPrefix(
        p66=InsDesc(Op.VHADDPD, (Vpd, Hpd, Wpd)), pF2=InsDesc(Op.VHADDPS, (Vps, Hps, Wps))
    ),
    0x7D: ByPrefix(
        p66=InsDesc(Op.VHSUBPD, (Vpd, Hpd, Wpd)), pF2=InsDesc(Op.VHSUBPS, (Vps, Hps, Wps))
    ),
    0x7E: ByPrefix(
        p66=ByW(InsDesc(Op.VMOVD, (Ed, Vdq)), InsDesc(Op.VMOVQ, (Eq, Vdq))),
        pF3=InsDesc(Op.VMOVQ, (Vdq, Wq)),
    ),
    0x7F: ByPrefix(
        p66=InsDesc(Op.VMOVDQA, (Wx, Vx)), pF3=InsDesc(Op.VMOVDQU, (Wx, Vx))
    ),
    0x90: ByL(_kmov(((KGq, KEw), (KGq, KEq), (KGq, KEb), (KGq, KEd))), None),
    0x91: ByL(ByMod(_kmov(((Mw, KGq), (Mq, KGq), (Mb, KGq), (Md, KGq))), None), None),
    0x92: ByL(_kmov_gpr((KGq, Ry)), None),
    0x93: ByL(_kmov_gpr((Gy, KRq)), None),
    0x98: ByL(_kop((Op.KORTESTW, Op.KORTESTQ, Op.KORTESTB, Op.KORTESTD), (KGq, KRq)), None),
    0x99: ByL(_kop((Op.KTESTW, Op.KTESTQ, Op.KTESTB, Op.KTESTD), (KGq, KRq)), None),
    0xAE: ByPrefix(
        ByMod(ByReg(None, None, InsDesc(Op.VLDMXCSR, (Md,)), InsDesc(Op.VSTMXCSR, (Md,))), None)
    ),
    0xC2: ByPrefix(
        InsDesc(Op.VCMPPS, (Vps, Hps, Wps, Ib)),
        InsDesc(Op.VCMPPD, (Vpd, Hpd, Wpd, Ib)),
        InsDesc(Op.VCMPSS, (Vss, Hss, Wss, Ib)),
        InsDesc(Op.VCMPSD, (Vsd, Hsd, Wsd, Ib)),
    ),
    0xC4: _v66(Op.VPINSRW, Vdq, Hdq, Edw, Ib),
    0xC5: _v66(Op.VPEXTRW, Gd, Udq, Ib),
    0xC6: ByPrefix(
        InsDesc(Op.VSHUFPS, (Vps, Hps, Wps, Ib)), InsDesc(Op.VSHUFPD, (Vpd, Hpd, Wpd, Ib))
    ),
    0xD0: ByPrefix(
        p66=InsDesc(Op.VADDSUBPD, (Vpd, Hpd, Wpd)),
        pF2=InsDesc(Op.VADDSUBPS, (Vps, Hps, Wps)),
    ),
    0xD1: _v66(Op.VPSRLW, Vx, Hx, Wdq),
    0xD2: _v66(Op.VPSRLD, Vx, Hx, Wdq),
    0xD3: _v66(Op.VPSRLQ, Vx, Hx, Wdq),
    0xD4: _v66(Op.VPADDQ),
    0xD5: _v66(Op.VPMULLW),
    0xD6: _v66(Op.VMOVQ, Wq, Vq),
    0xD7: _v66(Op.VPMOVMSKB, Gd, Ux),
    0xD8: _v66(Op.VPSUBUSB),
    0xD9: _v66(Op.VPSUBUSW),
    0xDA: _v66(Op.VPMINUB),
    0xDB: _v66(Op.VPAND),
    0xDC: _v66(Op.VPADDUSB),
    0xDD: _v66(Op.VPADDUSW),
    0xDE: _v66(Op.VPMAXUB),
    0xDF: _v66(Op.VPANDN),
    0xE0: _v66(Op.VPAVGB),
    0xE1: _v66(Op.VPSRAW, Vx, Hx, Wdq),
    0xE2: _v66(Op.VPSRAD, Vx, Hx, Wdq),
    0xE3: _v66(Op.VPAVGW),
    0xE4: _v66(Op.VPMULHUW),
    0xE5: _v66(Op.VPMULHW),
    0xE6: ByPrefix(
        None,
        InsDesc(Op.VCVTTPD2DQ, (Vdq, Wpd)),
        InsDesc(Op.VCVTDQ2PD, (Vx, Wdqqdq)),
        InsDesc(Op.VCVTPD2DQ, (Vdq, Wpd)),
    ),
    0xE7: _v66(Op.VMOVNTDQ, Mx, Vx),
    0xE8: _v66(Op.VPSUBSB),
    0xE9: _v66(Op.VPSUBSW),
    0xEA: _v66(Op.VPMINSW),
    0xEB: _v66(Op.VPOR),
    0xEC: _v66(Op.VPADDSB),
    0xED: _v66(Op.VPADDSW),
    0xEE: _v66(Op.VPMAXSW),
    0xEF: _v66(Op.VPXOR),
    0xF0: ByPrefix(pF2=InsDesc(Op.VLDDQU, (Vx, Mx))),
    0xF1: _v66(Op.VPSLLW, Vx, Hx, Wdq),
    0xF2: _v66(Op.VPSLLD, Vx, Hx, Wdq),
    0xF3: _v66(Op.VPSLLQ, Vx, Hx, Wdq),
    0xF4: _v66(Op.VPMULUDQ),
    0xF5: _v66(Op.VPMADDWD),
    0xF6: _v66(Op.VPSADBW),
    0xF7: _v66(Op.VMASKMOVDQU, Vdq, Udq),
    0xF8: _v66(Op.VPSUBB),
    0xF9: _v66(Op.VPSUBW),
    0xFA: _v66(Op.VPSUBD),
    0xFB: _v66(Op.VPSUBQ),
    0xFC: _v66(Op.VPADDB),
    0xFD: _v66(Op.VPADDW),
    0xFE: _v66(Op.VPADDD),
}

VEX_0F38 = {
    0x00: _v66(Op.VPSHUFB),
    0x01: _v66(Op.VPHADDW),
    0x02: _v66(Op.VPHADDD),
    0x03: _v66(Op.VPHADDSW),
    0x04: _v66(Op.VPMADDUBSW),
    0x05: _v66(Op.VPHSUBW),
    0x06: _v66(Op.VPHSUBD),
    0x07: _v66(Op.VPHSUBSW),
    0x08: _v66(Op.VPSIGNB),
    0x09: _v66(Op.VPSIGNW),
    0x0A: _v66(Op.VPSIGND),
    0x0B: _v66(Op.VPMULHRSW),
    0x0C: _v66(Op.VPERMILPS),
    0x0D: _v66(Op.VPERMILPD),
    0x0E: _v66(Op.VTESTPS, Vx, Wx),
    0x0F: _v66(Op.VTESTPD, Vx, Wx),
    0x13: _v66(Op.VCVTPH2PS, Vx, Wdqqdq),
    0x16: _v66(Op.VPERMPS),
    0x17: _v66(Op.VPTEST, Vx, Wx),
    0x18: _v66(Op.VBROADCASTSS, Vx, Wd),
    0x19: _v66(Op.VBROADCASTSD, Vqq, Wq),
    0x1A: ByPrefix(p66=ByMod(InsDesc(Op.VBROADCASTF128, (Vqq, Mdq)), None)),
    0x1C: _v66(Op.VPABSB, Vx, Wx),
    0x1D: _v66(Op.VPABSW, Vx, Wx),
    0x1E: _v66(Op.VPABSD, Vx, Wx),
    0x20: _v66(Op.VPMOVSXBW, Vx, Wdqqdq),
    0x21: _v66(Op.VPMOVSXBD, Vx, Wdqdq),
    0x22: _v66(Op.VPMOVSXBQ, Vx, Wdqwd),
    0x23: _v66(Op.VPMOVSXWD, Vx, Wdqqdq),
    0x24: _v66(Op.VPMOVSXWQ, Vx, Wdqdq),
    0x25: _v66(Op.VPMOVSXDQ, Vx, Wdqqdq),
    0x28: _v66(Op.VPMULDQ),
    0x29: _v66(Op.VPCMPEQQ),
    0x2A: _v66(Op.VMOVNTDQA, Vx, Mx),
    0x2B: _v66(Op.VPACKUSDW),
    0x2C: _v66(Op.VMASKMOVPS, Vx, Hx, Mx),
    0x2D: _v66(Op.VMASKMOVPD, Vx, Hx, Mx),
    0x2E: _v66(Op.VMASKMOVPS, Mx, Hx, Vx),
    0x2F: _v66(Op.VMASKMOVPD, Mx, Hx, Vx),
    0x30: _v66(Op.VPMOVZXBW, Vx, Wdqqdq),
    0x31: _v66(Op.VPMOVZXBD, Vx, Wdqdq),
    0x32: _v66(Op.VPMOVZXBQ, Vx, Wdqwd),
    0x33: _v66(Op.VPMOVZXWD, Vx, Wdqqdq),
    0x34: _v66(Op.VPMOVZXWQ, Vx, Wdqdq),
    0x35: _v66(Op.VPMOVZXDQ, Vx, Wdqqdq),
    0x36: _v66(Op.VPERMD),
    0x37: _v66(Op.VPCMPGTQ),
    0x38: _v66(Op.VPMINSB),
    0x39: _v66(Op.VPMINSD),
    0x3A: _v66(Op.VPMINUW),
    0x3B: _v66(Op.VPMINUD),
    0x3C: _v66(Op.VPMAXSB),
    0x3D: _v66(Op.VPMAXSD),
    0x3E: _v66(Op.VPMAXUW),
    0x3F: _v66(Op.VPMAXUD),
    0x40: _v66(Op.VPMULLD),
    0x41: _v66(Op.VPHMINPOSUW, Vdq, Wdq),
    0x45: _v66w(Op.VPSRLVD, Op.VPSRLVQ),
    0x46: _v66(Op.VPSRAVD),
    0x47: _v66w(Op.VPSLLVD, Op.VPSLLVQ),
    0x58: _v66(Op.VPBROADCASTD, Vx, Wdqd),
    0x59: _v66(Op.VPBROADCASTQ, Vx, Wdqq),
    0x5A: ByPrefix(p66=ByMod(InsDesc(Op.VBROADCASTI128, (Vqq, Mdq)), None)),
    0x78: _v66(Op.VPBROADCASTB, Vx, Wb),
    0x79: _v66(Op.VPBROADCASTW, Vx, Ww),
    0x8C: _v66w(Op.VPMASKMOVD, Op.VPMASKMOVQ, Vx, Hx, Mx),
    0x8E: _v66w(Op.VPMASKMOVD, Op.VPMASKMOVQ, Mx, Hx, Vx),
    0x90: ByPrefix(
        p66=ByW(
            InsDesc(Op.VPGATHERDD, (Vx, MVd, Hx)), InsDesc(Op.VPGATHERDQ, (Vx, MVHq, Hx))
        )
    ),
    0x91: ByPrefix(
        p66=ByW(
            InsDesc(Op.VPGATHERQD, (Vdq, MVd, Hdq)), InsDesc(Op.VPGATHERQQ, (Vx, MVq, Hx))
        )
    ),
    0x92: ByPrefix(
        p66=ByW(
            InsDesc(Op.VGATHERDPS, (Vx, MVd, Hx)), InsDesc(Op.VGATHERDPD, (Vx, MVHq, Hx))
        )
    ),
    0x93: ByPrefix(
        p66=ByW(
            InsDesc(Op.VGATHERQPS, (Vdq, MVd, Hdq)), InsDesc(Op.VGATHERQPD, (Vx, MVq, Hx))
        )
    ),
    0xDB: _v66(Op.VAESIMC, Vdq, Wdq),
    0xDC: _v66(Op.VAESENC),
    0xDD: _v66(Op.VAESENCLAST),
    0xDE: _v66(Op.VAESDEC),
    0xDF: _v66(Op.VAESDECLAST),
    0xF2: ByPrefix(InsDesc(Op.ANDN, (Gy, By, Ey))),
    0xF3: ByPrefix(GroupDesc(OpGroup.G17, (By, Ey))),
    0xF5: ByPrefix(
        InsDesc(Op.BZHI, (Gy, Ey, By)),
        pF3=InsDesc(Op.PEXT, (Gy, By, Ey)),
        pF2=InsDesc(Op.PDEP, (Gy, By, Ey)),
    ),
    0xF6: ByPrefix(pF2=InsDesc(Op.MULX, (Gy, By, Ey))),
    0xF7: ByPrefix(
        InsDesc(Op.BEXTR, (Gy, Ey, By)),
        InsDesc(Op.SHLX, (Gy, Ey, By)),
        InsDesc(Op.SARX, (Gy, Ey, By)),
        InsDesc(Op.SHRX, (Gy, Ey, By)),
    ),
}

# low nibble -> FMA mnemonic stem; the scalar form sits one byte above a packed one
_FMA_KINDS = (
    (0x6, "FMADDSUB"), (0x7, "FMSUBADD"), (0x8, "FMADD"),
    (0xA, "FMSUB"), (0xC, "FNMADD"), (0xE, "FNMSUB"),
)


def _fma_table(packed):
    """FMA3 opcodes 96-9F, A6-AF and B6-BF; W picks the single or double form."""
    table = {}
    for base, order in ((0x90, "132"), (0xA0, "213"), (0xB0, "231")):
        for low, kind in _FMA_KINDS:
            table[base + low] = _v66w(Op[f"V{kind}{order}PS"], Op[f"V{kind}{order}PD"], *packed)
            if low >= 0x8:
                table[base + low + 1] = ByPrefix(
                    p66=ByW(
                        InsDesc(Op[f"V{kind}{order}SS"], (Vss, Hss, Wss)),
                        InsDesc(Op[f"V{kind}{order}SD"], (Vsd, Hsd, Wsd)),
                    )
                )
    return table


VEX_0F38.update(_fma_table((Vx, Hx, Wx)))

VEX_0F3A = {
    0x00: ByPrefix(p66=ByW(None, InsDesc(Op.VPERMQ, (Vqq, Wqq, Ib)))),
    0x01: ByPrefix(p66=ByW(None, InsDesc(Op.VPERMPD, (Vqq, Wqq, Ib)))),
    0x02: _v66(Op.VPBLENDD, Vx, Hx, Wx, Ib),
    0x04: _v66(Op.VPERMILPS, Vx, Wx, Ib),
    0x05: _v66(Op.VPERMILPD, Vx, Wx, Ib),
    0x06: _v66(Op.VPERM2F128, Vqq, Hqq, Wqq, Ib),
    0x08: _v66(Op.VROUNDPS, Vx, Wx, Ib),
    0x09: _v66(Op.VROUNDPD, Vx, Wx, Ib),
    0x0A: _v66(Op.VROUNDSS, Vss, Hss, Wss, Ib),
    0x0B: _v66(Op.VROUNDSD, Vsd, Hsd, Wsd, Ib),
    0x0C: _v66(Op.VBLENDPS, Vx, Hx, Wx, Ib),
    0x0D: _v66(Op.VBLENDPD, Vx, Hx, Wx, Ib),
    0x0E: _v66(Op.VPBLENDW, Vx, Hx, Wx, Ib),
    0x0F: _v66(Op.VPALIGNR, Vx, Hx, Wx, Ib),
    0x14: _v66(Op.VPEXTRB, Edb, Vdq, Ib),
    0x15: _v66(Op.VPEXTRW, Edw, Vdq, Ib),
    0x16: _v66w(Op.VPEXTRD, Op.VPEXTRQ, Ey, Vdq, Ib),
    0x17: _v66(Op.VEXTRACTPS, Ed, Vdq, Ib),
    0x18: _v66(Op.VINSERTF128, Vqq, Hqq, Wdq, Ib),
    0x19: _v66(Op.VEXTRACTF128, Wdq, Vqq, Ib),
    0x1D: _v66(Op.VCVTPS2PH, Wdqqdq, Vx, Ib),
    0x20: _v66(Op.VPINSRB, Vdq, Hdq, Edb, Ib),
    0x21: _v66(Op.VINSERTPS, Vdq, Hdq, Wss, Ib),
    0x22: _v66w(Op.VPINSRD, Op.VPINSRQ, Vdq, Hdq, Ey, Ib),
    0x30: ByL(_v66w(Op.KSHIFTRB, Op.KSHIFTRW, KGq, KRq, Ib), None),
    0x31: ByL(_v66w(Op.KSHIFTRD, Op.KSHIFTRQ, KGq, KRq, Ib), None),
    0x32: ByL(_v66w(Op.KSHIFTLB, Op.KSHIFTLW, KGq, KRq, Ib), None),
    0x33: ByL(_v66w(Op.KSHIFTLD, Op.KSHIFTLQ, KGq, KRq, Ib), None),
    0x38: _v66(Op.VINSERTI128, Vqq, Hqq, Wdq, Ib),
    0x39: _v66(Op.VEXTRACTI128, Wdq, Vqq, Ib),
    0x40: _v66(Op.VDPPS, Vx, Hx, Wx, Ib),
    0x41: _v66(Op.VDPPD, Vdq, Hdq, Wdq, Ib),
    0x42: _v66(Op.VMPSADBW, Vx, Hx, Wx, Ib),
    0x44: _v66(Op.VPCLMULQDQ, Vx, Hx, Wx, Ib),
    0x46: _v66(Op.VPERM2I128, Vqq, Hqq, Wqq, Ib),
    0x4A: _v66(Op.VBLENDVPS, Vx, Hx, Wx, Lx),
    0x4B: _v66(Op.VBLENDVPD, Vx, Hx, Wx, Lx),
    0x4C: _v66(Op.VPBLENDVB, Vx, Hx, Wx, Lx),
    0x60: _v66(Op.VPCMPESTRM, Vdq, Wdq, Ib),
    0x61: _v66(Op.VPCMPESTRI, Vdq, Wdq, Ib),
    0x62: _v66(Op.VPCMPISTRM, Vdq, Wdq, Ib),
    0x63: _v66(Op.VPCMPISTRI, Vdq, Wdq, Ib),
    0xDF: _v66(Op.VAESKEYGENASSIST, Vdq, Wdq, Ib),
    0xF0: ByPrefix(pF2=InsDesc(Op.RORX, (Gy, Ey, Ib))),
}


def _evex(op, *operands):
    return InsDesc(op, operands or (VZx, HZx, WZx))


def _e66(op, *operands):
    return ByPrefix(p66=_evex(op, *operands))


def _e66w(w0, w1, *operands):
    return ByPrefix(p66=ByW(_evex(w0, *operands), _evex(w1, *operands)))


def _efp(ps, pd, ss=None, sd=None):
    return ByPrefix(
        _evex(ps),
        _evex(pd),
        None if ss is None else _evex(ss, Vss, Hss, Wss),
        None if sd is None else _evex(sd, Vsd, Hsd, Wsd),
    )


def _escalar(ss, sd, *extra):
    """Scalar pair picked by EVEX.W: W0 single, W1 double."""
    return ByPrefix(
        p66=ByW(_evex(ss, Vss, Hss, Wss, *extra), _evex(sd, Vsd, Hsd, Wsd, *extra))
    )


def _evex_shift_imm(op):
    return ByPrefix(p66=_evex(op, HZx, WZx, Ib))


_EVEX_CMP = (KGq, HZx, WZx)

EVEX_0F = {
    0x10: ByPrefix(
        _evex(Op.VMOVUPS, VZx, WZx),
        _evex(Op.VMOVUPD, VZx, WZx),
        ByMod(_evex(Op.VMOVSS, Vss, Wss), _evex(Op.VMOVSS, Vss, Hss, Wss)),
        ByMod(_evex(Op.VMOVSD, Vsd, Wsd), _evex(Op.VMOVSD, Vsd, Hsd, Wsd)),
    ),
    0x11: ByPrefix(
        _evex(Op.VMOVUPS, WZx, VZx),
        _evex(Op.VMOVUPD, WZx, VZx),
        ByMod(_evex(Op.VMOVSS, Wss, Vss), _evex(Op.VMOVSS, Wss, Hss, Vss)),
        ByMod(_evex(Op.VMOVSD, Wsd, Vsd), _evex(Op.VMOVSD, Wsd, Hsd, Vsd)),
    ),
    0x14: _efp(Op.VUNPCKLPS, Op.VUNPCKLPD),
    0x15: _efp(Op.VUNPCKHPS, Op.VUNPCKHPD),
    0x28: ByPrefix(_evex(Op.VMOVAPS, VZx, WZx), _evex(Op.VMOVAPD, VZx, WZx)),
    0x29: ByPrefix(_evex(Op.VMOVAPS, WZx, VZx), _evex(Op.VMOVAPD, WZx, VZx)),
    0x2A: ByPrefix(
        pF3=_evex(Op.VCVTSI2SS, Vss, Hss, Ey), pF2=_evex(Op.VCVTSI2SD, Vsd, Hsd, Ey)
    ),
    0x2C: ByPrefix(pF3=_evex(Op.VCVTTSS2SI, Gy, Wss), pF2=_evex(Op.VCVTTSD2SI, Gy, Wsd)),
    0x2D: ByPrefix(pF3=_evex(Op.VCVTSS2SI, Gy, Wss), pF2=_evex(Op.VCVTSD2SI, Gy, Wsd)),
    0x2E: ByPrefix(_evex(Op.VUCOMISS, Vss, Wss), _evex(Op.VUCOMISD, Vsd, Wsd)),
    0x2F: ByPrefix(_evex(Op.VCOMISS, Vss, Wss), _evex(Op.VCOMISD, Vsd, Wsd)),
    0x51: ByPrefix(
        _evex(Op.VSQRTPS, VZx, WZx),
        _evex(Op.VSQRTPD, VZx, WZx),
        _evex(Op.VSQRTSS, Vss, Hss, Wss),
        _evex(Op.VSQRTSD, Vsd, Hsd, Wsd),
    ),
    0x54: _efp(Op.VANDPS, Op.VANDPD),
    0x55: _efp(Op.VANDNPS, Op.VANDNPD),
    0x56: _efp(Op.VORPS, Op.VORPD),
    0x57: _efp(Op.VXORPS, Op.VXORPD),
    0x58: _efp(Op.VADDPS, Op.VADDPD, Op.VADDSS, Op.VADDSD),
    0x59: _efp(Op.VMULPS, Op.VMULPD, Op.VMULSS, Op.VMULSD),
    0x5A: ByPrefix(
        _evex(Op.VCVTPS2PD, VZx, WZdqq),
        _evex(Op.VCVTPD2PS, VZdqq, WZx),
        _evex(Op.VCVTSS2SD, Vsd, Hsd, Wss),
        _evex(Op.VCVTSD2SS, Vss, Hss, Wsd),
    ),
    0x5B: ByPrefix(
        ByW(_evex(Op.VCVTDQ2PS, VZx, WZx), _evex(Op.VCVTQQ2PS, VZdqq, WZx)),
        _evex(Op.VCVTPS2DQ, VZx, WZx),
        _evex(Op.VCVTTPS2DQ, VZx, WZx),
    ),
    0x5C: _efp(Op.VSUBPS, Op.VSUBPD, Op.VSUBSS, Op.VSUBSD),
    0x5D: _efp(Op.VMINPS, Op.VMINPD, Op.VMINSS, Op.VMINSD),
    0x5E: _efp(Op.VDIVPS, Op.VDIVPD, Op.VDIVSS, Op.VDIVSD),
    0x5F: _efp(Op.VMAXPS, Op.VMAXPD, Op.VMAXSS, Op.VMAXSD),
    0x60: _e66(Op.VPUNPCKLBW),
    0x61: _e66(Op.VPUNPCKLWD),
    0x62: _e66(Op.VPUNPCKLDQ),
    0x63: _e66(Op.VPACKSSWB),
    0x64: _e66(Op.VPCMPGTB, *_EVEX_CMP),
    0x65: _e66(Op.VPCMPGTW, *_EVEX_CMP),
    0x66: _e66(Op.VPCMPGTD, *_EVEX_CMP),
    0x67: _e66(Op.VPACKUSWB),
    0x68: _e66(Op.VPUNPCKHBW),
    0x69: _e66(Op.VPUNPCKHWD),
    0x6A: _e66(Op.VPUNPCKHDQ),
    0x6B: _e66(Op.VPACKSSDW),
    0x6C: _e66(Op.VPUNPCKLQDQ),
    0x6D: _e66(Op.VPUNPCKHQDQ),
    0x6E: ByPrefix(p66=ByW(_evex(Op.VMOVD, Vdq, Ed), _evex(Op.VMOVQ, Vdq, Eq))),
    0x6F: ByPrefix(
        p66=ByW(_evex(Op.VMOVDQA32, VZx, WZx), _evex(Op.VMOVDQA64, VZx, WZx)),
        pF3=ByW(_evex(Op.VMOVDQU32, VZx, WZx), _evex(Op.VMOVDQU64, VZx, WZx)),
        pF2=ByW(_evex(Op.VMOVDQU8, VZx, WZx), _evex(Op.VMOVDQU16, VZx, WZx)),
    ),
    0x70: ByPrefix(
        p66=_evex(Op.VPSHUFD, VZx, WZx, Ib),
        pF3=_evex(Op.VPSHUFHW, VZx, WZx, Ib),
        pF2=_evex(Op.VPSHUFLW, VZx, WZx, Ib),
    ),
    0x71: ByReg(
        None, None,
        _evex_shift_imm(Op.VPSRLW),
        None,
        _evex_shift_imm(Op.VPSRAW),
        None,
        _evex_shift_imm(Op.VPSLLW),
    ),
    0x72: ByReg(
        _e66w(Op.VPRORD, Op.VPRORQ, HZx, WZx, Ib),
        _e66w(Op.VPROLD, Op.VPROLQ, HZx, WZx, Ib),
        _evex_shift_imm(Op.VPSRLD),
        None,
        _e66w(Op.VPSRAD, Op.VPSRAQ, HZx, WZx, Ib),
        None,
        _evex_shift_imm(Op.VPSLLD),
    ),
    0x73: ByReg(
        None, None,
        _evex_shift_imm(Op.VPSRLQ),
        _evex_shift_imm(Op.VPSRLDQ),
        None, None,
        _evex_shift_imm(Op.VPSLLQ),
        _evex_shift_imm(Op.VPSLLDQ),
    ),
    0x74: _e66(Op.VPCMPEQB, *_EVEX_CMP),
    0x75: _e66(Op.VPCMPEQW, *_EVEX_CMP),
    0x76: _e66(Op.VPCMPEQD, *_EVEX_CMP),
    0x78: ByPrefix(
        ByW(_evex(Op.VCVTTPS2UDQ, VZx, WZx), _evex(Op.VCVTTPD2UDQ, VZdqq, WZx)),
        ByW(_evex(Op.VCVTTPS2UQQ, VZx, WZdqq), _evex(Op.VCVTTPD2UQQ, VZx, WZx)),
        _evex(Op.VCVTTSS2USI, Gy, Wss),
        _evex(Op.VCVTTSD2USI, Gy, Wsd),
    ),
    0x79: ByPrefix(
        ByW(_evex(Op.VCVTPS2UDQ, VZx, WZx), _evex(Op.VCVTPD2UDQ, VZdqq, WZx)),
        ByW(_evex(Op.VCVTPS2UQQ, VZx, WZdqq), _evex(Op.VCVTPD2UQQ, VZx, WZx)),
        _evex(Op.VCVTSS2USI, Gy, Wss),
        _evex(Op.VCVTSD2USI, Gy, Wsd),
    ),
    0x7A: ByPrefix(
        None,
        ByW(_evex(Op.VCVTTPS2QQ, VZx, WZdqq), _evex(Op.VCVTTPD2QQ, VZx, WZx)),
        ByW(_evex(Op.VCVTUDQ2PD, VZx, WZdqq), _evex(Op.VCVTUQQ2PD, VZx, WZx)),
        ByW(_evex(Op.VCVTUDQ2PS, VZx, WZx), _evex(Op.VCVTUQQ2PS, VZdqq, WZx)),
    ),
    0x7B: ByPrefix(
        None,
        ByW(_evex(Op.VCVTPS2QQ, VZx, WZdqq), _evex(Op.VCVTPD2QQ, VZx, WZx)),
        _evex(Op.VCVTUSI2USS, Vss, Hss, Ey),
        _evex(Op.VCVTUSI2USD, Vsd, Hsd, Ey),
    ),
    0x7E: ByPrefix(
        p66=ByW(_evex(Op.VMOVD, Ed, Vdq), _evex(Op.VMOVQ, Eq, Vdq)),
        pF3=_evex(Op.VMOVQ, Vdq, Wq),
    ),
    0x7F: ByPrefix(
        p66=ByW(_evex(Op.VMOVDQA32, WZx, VZx), _evex(Op.VMOVDQA64, WZx, VZx)),
        pF3=ByW(_evex(Op.VMOVDQU32, WZx, VZx), _evex(Op.VMOVDQU64, WZx, VZx)),
        pF2=ByW(_evex(Op.VMOVDQU8, WZx, VZx), _evex(Op.VMOVDQU16, WZx, VZx)),
    ),
    0xC2: ByPrefix(
        _evex(Op.VCMPPS, KGq, HZx, WZx, Ib),
        _evex(Op.VCMPPD, KGq, HZx, WZx, Ib),
        _evex(Op.VCMPSS, KGq, Hss, Wss, Ib),
        _evex(Op.VCMPSD, KGq, Hsd, Wsd, Ib),
    ),
    0xC6: ByPrefix(
        _evex(Op.VSHUFPS, VZx, HZx, WZx, Ib), _evex(Op.VSHUFPD, VZx, HZx, WZx, Ib)
    ),
    0xD1: _e66(Op.VPSRLW, VZx, HZx, Wdq),
    0xD2: _e66(Op.VPSRLD, VZx, HZx, Wdq),
    0xD3: _e66(Op.VPSRLQ, VZx, HZx, Wdq),
    0xD4: _e66(Op.VPADDQ),
    0xD5: _e66(Op.VPMULLW),
    0xD8: _e66(Op.VPSUBUSB),
    0xD9: _e66(Op.VPSUBUSW),
    0xDA: _e66(Op.VPMINUB),
    0xDB: _e66w(Op.VPANDD, Op.VPANDQ),
    0xDC: _e66(Op.VPADDUSB),
    0xDD: _e66(Op.VPADDUSW),
    0xDE: _e66(Op.VPMAXUB),
    0xDF: _e66w(Op.VPANDND, Op.VPANDNQ),
    0xE0: _e66(Op.VPAVGB),
    0xE1: _e66(Op.VPSRAW, VZx, HZx, Wdq),
    0xE2: _e66w(Op.VPSRAD, Op.VPSRAQ, VZx, HZx, Wdq),
    0xE3: _e66(Op.VPAVGW),
    0xE4: _e66(Op.VPMULHUW),
    0xE5: _e66(Op.VPMULHW),
    0xE6: ByPrefix(
        None,
        _evex(Op.VCVTTPD2DQ, VZdqq, WZx),
        ByW(_evex(Op.VCVTDQ2PD, VZx, WZdqq), _evex(Op.VCVTQQ2PD, VZx, WZx)),
        _evex(Op.VCVTPD2DQ, VZdqq, WZx),
    ),
    0xE7: _e66(Op.VMOVNTDQ, Mx, VZx),
    0xE8: _e66(Op.VPSUBSB),
    0xE9: _e66(Op.VPSUBSW),
    0xEA: _e66(Op.VPMINSW),
    0xEB: _e66w(Op.VPORD, Op.VPORQ),
    0xEC: _e66(Op.VPADDSB),
    0xED: _e66(Op.VPADDSW),
    0xEE: _e66(Op.VPMAXSW),
    0xEF: _e66w(Op.VPXORD, Op.VPXORQ),
    0xF1: _e66(Op.VPSLLW, VZx, HZx, Wdq),
    0xF2: _e66(Op.VPSLLD, VZx, HZx, Wdq),
    0xF3: _e66(Op.VPSLLQ, VZx, HZx, Wdq),
    0xF4: _e66(Op.VPMULUDQ),
    0xF5: _e66(Op.VPMADDWD),
    0xF6: _e66(Op.VPSADBW),
    0xF8: _e66(Op.VPSUBB),
    0xF9: _e66(Op.VPSUBW),
    0xFA: _e66(Op.VPSUBD),
    0xFB: _e66(Op.VPSUBQ),
    0xFC: _e66(Op.VPADDB),
    0xFD: _e66(Op.VPADDW),
    0xFE: _e66(Op.VPADDD),
}


def _down_convert(p66, pF3):
    """EVEX.F3 0F38 10-35: VPMOV truncating stores beside their 66-prefixed namesakes."""
    return ByPrefix(p66=p66, pF3=pF3)


EVEX_0F38 = {
    0x00: _e66(Op.VPSHUFB),
    0x04: _e66(Op.VPMADDUBSW),
    0x0B: _e66(Op.VPMULHRSW),
    0x0C: _e66(Op.VPERMILPS),
    0x0D: _e66(Op.VPERMILPD),
    0x10: _down_convert(ByW(None, _evex(Op.VPSRLVW)), _evex(Op.VPMOVUSWB, WZdqq, VZx)),
    0x11: _down_convert(ByW(None, _evex(Op.VPSRAVW)), _evex(Op.VPMOVUSDB, WZdqdq, VZx)),
    0x12: _down_convert(ByW(None, _evex(Op.VPSLLVW)), _evex(Op.VPMOVUSQB, WZdqwd, VZx)),
    0x13: _down_convert(_evex(Op.VCVTPH2PS, VZx, WZdqq), _evex(Op.VPMOVUSDW, WZdqq, VZx)),
    0x14: _down_convert(
        ByW(_evex(Op.VPRORRD), _evex(Op.VPRORRQ)), _evex(Op.VPMOVUSQW, WZdqdq, VZx)
    ),
    0x15: _down_convert(
        ByW(_evex(Op.VPROLVD), _evex(Op.VPROLVQ)), _evex(Op.VPMOVUSQD, WZdqq, VZx)
    ),
    0x16: _e66w(Op.VPERMPS, Op.VPERMPD),
    0x18: _e66(Op.VBROADCASTSS, VZx, Wd),
    0x19: ByPrefix(p66=ByW(None, _evex(Op.VBROADCASTSD, VZx, Wq))),
    0x1C: _e66(Op.VPABSB, VZx, WZx),
    0x1D: _e66(Op.VPABSW, VZx, WZx),
    0x1E: _e66(Op.VPABSD, VZx, WZx),
    0x1F: ByPrefix(p66=ByW(None, _evex(Op.VPABSQ, VZx, WZx))),
    0x20: _down_convert(_evex(Op.VPMOVSXBW, VZx, WZdqq), _evex(Op.VPMOVSWB, WZdqq, VZx)),
    0x21: _down_convert(_evex(Op.VPMOVSXBD, VZx, WZdqdq), _evex(Op.VPMOVSDB, WZdqdq, VZx)),
    0x22: _down_convert(_evex(Op.VPMOVSXBQ, VZx, WZdqwd), _evex(Op.VPMOVSQB, WZdqwd, VZx)),
    0x23: _down_convert(_evex(Op.VPMOVSXWD, VZx, WZdqq), _evex(Op.VPMOVSDW, WZdqq, VZx)),
    0x24: _down_convert(_evex(Op.VPMOVSXWQ, VZx, WZdqdq), _evex(Op.VPMOVSQW, WZdqdq, VZx)),
    0x25: _down_convert(_evex(Op.VPMOVSXDQ, VZx, WZdqq), _evex(Op.VPMOVSQD, WZdqq, VZx)),
    0x26: ByPrefix(
        p66=ByW(_evex(Op.VPTESTMB, *_EVEX_CMP), _evex(Op.VPTESTMW, *_EVEX_CMP)),
        pF3=ByW(_evex(Op.VPTESTNMB, *_EVEX_CMP), _evex(Op.VPTESTNMW, *_EVEX_CMP)),
    ),
    0x27: ByPrefix(
        p66=ByW(_evex(Op.VPTESTMD, *_EVEX_CMP), _evex(Op.VPTESTMQ, *_EVEX_CMP)),
        pF3=ByW(_evex(Op.VPTESTNMD, *_EVEX_CMP), _evex(Op.VPTESTNMQ, *_EVEX_CMP)),
    ),
    0x28: ByPrefix(
        p66=_evex(Op.VPMULDQ),
        pF3=ByW(_evex(Op.VPMOVM2B, VZx, KRq), _evex(Op.VPMOVM2W, VZx, KRq)),
    ),
    0x29: ByPrefix(
        p66=_evex(Op.VPCMPEQQ, *_EVEX_CMP),
        pF3=ByW(_evex(Op.VPMOVB2M, KGq, Ux), _evex(Op.VPMOVW2M, KGq, Ux)),
    ),
    0x2A: ByPrefix(
        p66=_evex(Op.VMOVNTDQA, VZx, Mx),
        pF3=ByW(None, _evex(Op.VPBROADCASTM, VZx, KRq)),
    ),
    0x2B: _e66(Op.VPACKUSDW),
    0x2C: _e66w(Op.VSCALEPS, Op.VSCALEPD),
    0x2D: _escalar(Op.VSCALESS, Op.VSCALESD),
    0x30: _down_convert(_evex(Op.VPMOVZXBW, VZx, WZdqq), _evex(Op.VPMOVWB, WZdqq, VZx)),
    0x31: _down_convert(_evex(Op.VPMOVZXBD, VZx, WZdqdq), _evex(Op.VPMOVDB, WZdqdq, VZx)),
    0x32: _down_convert(_evex(Op.VPMOVZXBQ, VZx, WZdqwd), _evex(Op.VPMOVQB, WZdqwd, VZx)),
    0x33: _down_convert(_evex(Op.VPMOVZXWD, VZx, WZdqq), _evex(Op.VPMOVDW, WZdqq, VZx)),
    0x34: _down_convert(_evex(Op.VPMOVZXWQ, VZx, WZdqdq), _evex(Op.VPMOVQW, WZdqdq, VZx)),
    0x35: _down_convert(_evex(Op.VPMOVZXDQ, VZx, WZdqq), _evex(Op.VPMOVQD, WZdqq, VZx)),
    0x36: _e66w(Op.VPERMD, Op.VPERMQ),
    0x37: _e66(Op.VPCMPGTQ, *_EVEX_CMP),
    0x38: ByPrefix(
        p66=_evex(Op.VPMINSB),
        pF3=ByW(_evex(Op.VPMOVM2D, VZx, KRq), _evex(Op.VPMOVM2Q, VZx, KRq)),
    ),
    0x39: ByPrefix(
        p66=ByW(_evex(Op.VPMINSD), _evex(Op.VPMINSQ)),
        pF3=ByW(_evex(Op.VPMOVD2M, KGq, Ux), _evex(Op.VPMOVQ2M, KGq, Ux)),
    ),
    0x3A: ByPrefix(
        p66=_evex(Op.VPMINUW),
        pF3=ByW(_evex(Op.VPBROADCASTM, VZx, KRq), None),
    ),
    0x3B: _e66w(Op.VPMINUD, Op.VPMINUQ),
    0x3C: _e66(Op.VPMAXSB),
    0x3D: _e66w(Op.VPMAXSD, Op.VPMAXSQ),
    0x3E: _e66(Op.VPMAXUW),
    0x3F: _e66w(Op.VPMAXUD, Op.VPMAXUQ),
    0x40: _e66w(Op.VPMULLD, Op.VPMULLQ),
    0x42: _e66w(Op.VGETEXPPS, Op.VGETEXPPD, VZx, WZx),
    0x43: _escalar(Op.VGETEXPSS, Op.VGETEXPSD),
    0x44: _e66w(Op.VPLZCNTD, Op.VPLZCNTQ, VZx, WZx),
    0x45: _e66w(Op.VPSRLVD, Op.VPSRLVQ),
    0x46: _e66w(Op.VPSRAVD, Op.VPSRAVQ),
    0x47: _e66w(Op.VPSLLVD, Op.VPSLLVQ),
    0x4C: _e66w(Op.VRCP14PS, Op.VRCP14PD, VZx, WZx),
    0x4D: _escalar(Op.VRCP14SS, Op.VRCP14SD),
    0x4E: _e66w(Op.VRSQRT14PS, Op.VRSQRT14PD, VZx, WZx),
    0x4F: _escalar(Op.VRSQRT14SS, Op.VRSQRT14SD),
    0x58: _e66(Op.VPBROADCASTD, VZx, Wdqd),
    0x59: _e66(Op.VPBROADCASTQ, VZx, Wdqq),
    0x64: _e66w(Op.VPBLENDMD, Op.VPBLENDMQ),
    0x65: _e66w(Op.VBLENDMPS, Op.VBLENDMPD),
    0x66: _e66w(Op.VPBLENDMB, Op.VPBLENDMW),
    0x75: _e66w(Op.VPERMI2B, Op.VPERMI2W),
    0x76: _e66w(Op.VPERMI2D, Op.VPERMI2Q),
    0x77: _e66w(Op.VPERMI2PS, Op.VPERMI2PD),
    0x78: _e66(Op.VPBROADCASTB, VZx, Wb),
    0x79: _e66(Op.VPBROADCASTW, VZx, Ww),
    0x7E: _e66w(Op.VPERMT2D, Op.VPERMT2Q),
    0x7F: _e66w(Op.VPERMT2PS, Op.VPERMT2PD),
    0x88: _e66w(Op.VEXPANDPS, Op.VEXPANDPD, VZx, WZx),
    0x89: _e66w(Op.VPEXPANDD, Op.VPEXPANDQ, VZx, WZx),
    0x8A: _e66w(Op.VCOMPRESSPS, Op.VCOMPRESSPD, WZx, VZx),
    0x8B: _e66w(Op.VPCOMPRESSD, Op.VPCOMPRESSQ, WZx, VZx),
    0x8D: ByPrefix(p66=ByW(None, _evex(Op.VPERMW))),
    0x90: ByPrefix(
        p66=ByW(_evex(Op.VPGATHERDD, VZx, MVd), _evex(Op.VPGATHERDQ, VZx, MVHq))
    ),
    0x91: ByPrefix(
        p66=ByW(_evex(Op.VPGATHERQD, VZdqq, MVd), _evex(Op.VPGATHERQQ, VZx, MVq))
    ),
    0x92: ByPrefix(
        p66=ByW(_evex(Op.VGATHERDPS, VZx, MVd), _evex(Op.VGATHERDPD, VZx, MVHq))
    ),
    0x93: ByPrefix(
        p66=ByW(_evex(Op.VGATHERQPS, VZdqq, MVd), _evex(Op.VGATHERQPD, VZx, MVq))
    ),
    0xA0: ByPrefix(
        p66=ByW(_evex(Op.VPSCATTERDD, MVd, VZx), _evex(Op.VPSCATTERDQ, MVHq, VZx))
    ),
    0xA1: ByPrefix(
        p66=ByW(_evex(Op.VPSCATTERQD, MVd, VZdqq), _evex(Op.VPSCATTERQQ, MVq, VZx))
    ),
    0xA2: ByPrefix(
        p66=ByW(_evex(Op.VSCATTERDD, MVd, VZx), _evex(Op.VSCATTERDQ, MVHq, VZx))
    ),
    0xA3: ByPrefix(
        p66=ByW(_evex(Op.VSCATTERQD, MVd, VZdqq), _evex(Op.VSCATTERQQ, MVq, VZx))
    ),
    0xC4: _e66w(Op.VPCONFLICTD, Op.VPCONFLICTQ, VZx, WZx),
    0xC8: _e66w(Op.VEXP2PS, Op.VEXP2PD, VZx, WZx),
    0xCA: _e66w(Op.VRCP28PS, Op.VRCP28PD, VZx, WZx),
    0xCB: _escalar(Op.VRCP28SS, Op.VRCP28SD),
    0xCC: _e66w(Op.VRSQRT28PS, Op.VRSQRT28PD, VZx, WZx),
    0xCD: _escalar(Op.VRSQRT28SS, Op.VRSQRT28SD),
    0xDC: _e66(Op.VAESENC),
    0xDD: _e66(Op.VAESENCLAST),
    0xDE: _e66(Op.VAESDEC),
    0xDF: _e66(Op.VAESDECLAST),
}
EVEX_0F38.update(_fma_table((VZx, HZx, WZx)))

EVEX_0F3A = {
    0x00: ByPrefix(p66=ByW(None, _evex(Op.VPERMQ, VZx, WZx, Ib))),
    0x01: ByPrefix(p66=ByW(None, _evex(Op.VPERMPD, VZx, WZx, Ib))),
    0x03: _e66w(Op.VALIGND, Op.VALIGNQ, VZx, HZx, WZx, Ib),
    0x04: _e66(Op.VPERMILPS, VZx, WZx, Ib),
    0x05: _e66(Op.VPERMILPD, VZx, WZx, Ib),
    0x08: _e66(Op.VRNDSCALEPS, VZx, WZx, Ib),
    0x09: _e66(Op.VRNDSCALEPD, VZx, WZx, Ib),
    0x0A: _e66(Op.VRNDSCALESS, Vss, Hss, Wss, Ib),
    0x0B: _e66(Op.VRNDSCALESD, Vsd, Hsd, Wsd, Ib),
    0x0F: _e66(Op.VPALIGNR, VZx, HZx, WZx, Ib),
    0x14: _e66(Op.VPEXTRB, Edb, Vdq, Ib),
    0x15: _e66(Op.VPEXTRW, Edw, Vdq, Ib),
    0x16: _e66w(Op.VPEXTRD, Op.VPEXTRQ, Ey, Vdq, Ib),
    0x17: _e66(Op.VEXTRACTPS, Ed, Vdq, Ib),
    0x18: _e66w(Op.VINSERTF32X4, Op.VINSERTF64X2, VZx, HZx, Wdq, Ib),
    0x19: _e66w(Op.VEXTRACTF32X4, Op.VEXTRACTF64X2, Wdq, VZx, Ib),
    0x1A: _e66w(Op.VINSERTF32X8, Op.VINSERTF64X4, VZx, HZx, Wqq, Ib),
    0x1B: _e66w(Op.VEXTRACTF32X8, Op.VEXTRACTF64X4, Wqq, VZx, Ib),
    0x1D: _e66(Op.VCVTPS2PH, WZdqq, VZx, Ib),
    0x1E: _e66w(Op.VPCMUD, Op.VPCMUQ, KGq, HZx, WZx, Ib),
    0x1F: _e66w(Op.VPCMPD, Op.VPCMPQ, KGq, HZx, WZx, Ib),
    0x20: _e66(Op.VPINSRB, Vdq, Hdq, Edb, Ib),
    0x21: _e66(Op.VINSERTPS, Vdq, Hdq, Wss, Ib),
    0x22: _e66w(Op.VPINSRD, Op.VPINSRQ, Vdq, Hdq, Ey, Ib),
    0x23: _e66w(Op.VSHUFF32X4, Op.VSHUFF64X2, VZx, HZx, WZx, Ib),
    0x25: _e66w(Op.VPTERLOGD, Op.VPTERLOGQ, VZx, HZx, WZx, Ib),
    0x26: _e66w(Op.VGETMANTPS, Op.VGETMANTPD, VZx, WZx, Ib),
    0x27: _escalar(Op.VGETMANTSS, Op.VGETMANTSD, Ib),
    0x38: _e66w(Op.VINSERTI32X4, Op.VINSERTI64X2, VZx, HZx, Wdq, Ib),
    0x39: _e66w(Op.VEXTRACTI32X4, Op.VEXTRACTI64X2, Wdq, VZx, Ib),
    0x3A: _e66w(Op.VINSERTI32X8, Op.VINSERTI64X4, VZx, HZx, Wqq, Ib),
    0x3B: _e66w(Op.VEXTRACTI32X8, Op.VEXTRACTI64X4, Wqq, VZx, Ib),
    0x3E: _e66w(Op.VPCMUB, Op.VPCMUW, KGq, HZx, WZx, Ib),
    0x3F: _e66w(Op.VPCMPB, Op.VPCMPW, KGq, HZx, WZx, Ib),
    0x42: _e66(Op.VDBPSADBW, VZx, HZx, WZx, Ib),
    0x43: _e66w(Op.VSHUFI32X4, Op.VSHUFI64X2, VZx, HZx, WZx, Ib),
    0x44: _e66(Op.VPCLMULQDQ, VZx, HZx, WZx, Ib),
    0x50: _e66w(Op.VRANGEPS, Op.VRANGEPD, VZx, HZx, WZx, Ib),
    0x51: _escalar(Op.VRANGESS, Op.VRANGESD, Ib),
    0x54: _e66w(Op.VFIXUPIMMPS, Op.VFIXUPIMMPD, VZx, HZx, WZx, Ib),
    0x55: _escalar(Op.VFIXUPIMMSS, Op.VFIXUPIMMSD, Ib),
    0x56: _e66w(Op.VREDUCEPS, Op.VREDUCEPD, VZx, WZx, Ib),
    0x57: _escalar(Op.VREDUCESS, Op.VREDUCESD, Ib),
    0x66: ByPrefix(
        p66=ByW(_evex(Op.VFPCLASSPS, KGq, WZx, Ib), _evex(Op.VFPCLASSPD, KGq, WZx, Ib))
    ),
    0x67: ByPrefix(
        p66=ByW(_evex(Op.VFPCLASSSS, KGq, Wss, Ib), _evex(Op.VFPCLASSSD, KGq, Wsd, Ib))
    ),
}

# (escape, vex map) -> table, where escape is "legacy", "vex" or "evex"
OPCODE_MAPS = {
    ("legacy", 1): TWO_BYTE,
    ("legacy", 2): THREE_BYTE_38,
    ("legacy", 3): THREE_BYTE_3A,
    ("vex", 1): VEX_0F,
    ("vex", 2): VEX_0F38,
    ("vex", 3): VEX_0F3A,
    ("evex", 1): EVEX_0F,
    ("evex", 2): EVEX_0F38,
    ("evex", 3): EVEX_0F3A,
}


def _shift_imm(op):
    """Shift-by-immediate of groups 12-14: MMX, SSE and VEX forms."""
    return ByVex(
        ByPrefix(InsDesc(op[0], (Nq, Ib)), InsDesc(op[0], (Udq, Ib))),
        ByPrefix(p66=InsDesc(op[1], (Hx, Ux, Ib))),
    )


def _shift_dq(op):
    return ByVex(
        ByPrefix(p66=InsDesc(op[0], (Udq, Ib))), ByPrefix(p66=InsDesc(op[1], (Hx, Ux, Ib)))
    )


def _reg_only(entry):
    return ByMod(None, entry)


def _mem_only(entry):
    return ByMod(entry, None)


# Entries: an Opcode takes the operands and size policy of the referencing
# GroupDesc, an InsDesc or selector overrides them.
GROUPS = {
    OpGroup.G1: _ALU,
    OpGroup.G1Inv64: _ALU,
    OpGroup.G1A: (Op.POP, None, None, None, None, None, None, None),
    OpGroup.G2: (Op.ROL, Op.ROR, Op.RCL, Op.RCR, Op.SHL, Op.SHR, Op.SHL, Op.SAR),
    OpGroup.G3A: (
        InsDesc(Op.TEST, (Eb, Ib)),
        InsDesc(Op.TEST, (Eb, Ib)),
        Op.NOT, Op.NEG, Op.MUL, Op.IMUL, Op.DIV, Op.IDIV,
    ),
    OpGroup.G3B: (
        InsDesc(Op.TEST, (Ev, Iz)),
        InsDesc(Op.TEST, (Ev, Iz)),
        Op.NOT, Op.NEG, Op.MUL, Op.IMUL, Op.DIV, Op.IDIV,
    ),
    OpGroup.G4: (Op.INC, Op.DEC, None, None, None, None, None, None),
    OpGroup.G5: (
        Op.INC,
        Op.DEC,
        InsDesc(Op.CALLNear, (Ev,), F64),
        _mem_only(InsDesc(Op.CALLFar, (Mp,))),
        InsDesc(Op.JMPNear, (Ev,), F64),
        _mem_only(InsDesc(Op.JMPFar, (Mp,))),
        InsDesc(Op.PUSH, (Ev,), D64),
        None,
    ),
    OpGroup.G6: (
        InsDesc(Op.SLDT, (Ew,)),
        InsDesc(Op.STR, (Ew,)),
        InsDesc(Op.LLDT, (Ew,)),
        InsDesc(Op.LTR, (Ew,)),
        InsDesc(Op.VERR, (Ew,)),
        InsDesc(Op.VERW, (Ew,)),
        None,
        None,
    ),
    OpGroup.G7: (
        ByMod(
            InsDesc(Op.SGDT, (Ms,)),
            ByRM(
                None, InsDesc(Op.VMCALL), InsDesc(Op.VMLAUNCH), InsDesc(Op.VMRESUME),
                InsDesc(Op.VMXOFF),
            ),
        ),
        ByMod(
            InsDesc(Op.SIDT, (Ms,)),
            ByRM(
                InsDesc(Op.MONITOR), InsDesc(Op.MWAIT), InsDesc(Op.CLAC), InsDesc(Op.STAC),
                None, None, None, InsDesc(Op.ENCLS),
            ),
        ),
        ByMod(
            InsDesc(Op.LGDT, (Ms,)),
            ByRM(
                InsDesc(Op.XGETBV), InsDesc(Op.XSETBV), None, None,
                InsDesc(Op.VMFUNC), InsDesc(Op.XEND), InsDesc(Op.XTEST), InsDesc(Op.ENCLU),
            ),
        ),
        _mem_only(InsDesc(Op.LIDT, (Ms,))),
        InsDesc(Op.SMSW, (Ew,)),
        ByMod(
            ByPrefix(pF3=InsDesc(Op.RSTORSSP, (Mq,))),
            ByRM(
                ByPrefix(pF3=InsDesc(Op.SETSSBSY)),
                None,
                ByPrefix(pF3=InsDesc(Op.SAVEPREVSSP)),
                None,
                None,
                None,
                InsDesc(Op.RDPKRU),
                InsDesc(Op.WRPKRU),
            ),
        ),
        InsDesc(Op.LMSW, (Ew,)),
        ByMod(
            InsDesc(Op.INVLPG, (Mb,)),
            ByRM(InsDesc(Op.SWAPGS, (), O64), InsDesc(Op.RDTSCP)),
        ),
    ),
    OpGroup.G8: (None, None, None, None, Op.BT, Op.BTS, Op.BTR, Op.BTC),
    OpGroup.G9: (
        None,
        _mem_only(ByW(InsDesc(Op.CMPXCHG8B, (Mq,)), InsDesc(Op.CMPXCHG16B, (Mdq,)))),
        None,
        _mem_only(ByW(InsDesc(Op.XRSTORS, (Mn,)), InsDesc(Op.XRSTORS64, (Mn,)))),
        _mem_only(ByW(InsDesc(Op.XSAVEC, (Mn,)), InsDesc(Op.XSAVEC64, (Mn,)))),
        _mem_only(ByW(InsDesc(Op.XSAVES, (Mn,)), InsDesc(Op.XSAVES64, (Mn,)))),
        ByMod(
            ByPrefix(
                InsDesc(Op.VMPTRLD, (Mq,)), InsDesc(Op.VMCLEAR, (Mq,)), InsDesc(Op.VMXON, (Mq,))
            ),
            InsDesc(Op.RDRAND, (Rv,)),
        ),
        ByMod(
            InsDesc(Op.VMPTRST, (Mq,)),
            InsDesc(Op.RDSEED, (Rv,)),
        ),
    ),
    OpGroup.G10: (Op.UD,) * 8,
    OpGroup.G11A: (
        Op.MOV, None, None, None, None, None, None,
        ByModRM({0xF8: InsDesc(Op.XABORT, (Ib,))}),
    ),
    OpGroup.G11B: (
        Op.MOV, None, None, None, None, None, None,
        ByModRM({0xF8: InsDesc(Op.XBEGIN, (Jz,), F64)}),
    ),
    OpGroup.G12: (
        None, None,
        _reg_only(_shift_imm((Op.PSRLW, Op.VPSRLW))),
        None,
        _reg_only(_shift_imm((Op.PSRAW, Op.VPSRAW))),
        None,
        _reg_only(_shift_imm((Op.PSLLW, Op.VPSLLW))),
        None,
    ),
    OpGroup.G13: (
        None, None,
        _reg_only(_shift_imm((Op.PSRLD, Op.VPSRLD))),
        None,
        _reg_only(_shift_imm((Op.PSRAD, Op.VPSRAD))),
        None,
        _reg_only(_shift_imm((Op.PSLLD, Op.VPSLLD))),
        None,
    ),
    OpGroup.G14: (
        None, None,
        _reg_only(_shift_imm((Op.PSRLQ, Op.VPSRLQ))),
        _reg_only(_shift_dq((Op.PSRLDQ, Op.VPSRLDQ))),
        None,
        None,
        _reg_only(_shift_imm((Op.PSLLQ, Op.VPSLLQ))),
        _reg_only(_shift_dq((Op.PSLLDQ, Op.VPSLLDQ))),
    ),
    OpGroup.G15: (
        ByMod(
            ByPrefix(ByW(InsDesc(Op.FXSAVE, (Mn,)), InsDesc(Op.FXSAVE64, (Mn,)))),
            ByPrefix(pF3=InsDesc(Op.RDFSBASE, (Ry,), O64)),
        ),
        ByMod(
            ByPrefix(ByW(InsDesc(Op.FXRSTOR, (Mn,)), InsDesc(Op.FXRSTOR64, (Mn,)))),
            ByPrefix(pF3=InsDesc(Op.RDGSBASE, (Ry,), O64)),
        ),
        ByMod(
            ByPrefix(InsDesc(Op.LDMXCSR, (Md,))),
            ByPrefix(pF3=InsDesc(Op.WRFSBASE, (Ry,), O64)),
        ),
        ByMod(
            ByPrefix(InsDesc(Op.STMXCSR, (Md,))),
            ByPrefix(pF3=InsDesc(Op.WRGSBASE, (Ry,), O64)),
        ),
        _mem_only(ByPrefix(InsDesc(Op.XSAVE, (Mn,)))),
        ByMod(
            ByPrefix(InsDesc(Op.XRSTOR, (Mn,))),
            ByPrefix(InsDesc(Op.LFENCE), pF3=InsDesc(Op.INCSSP, (Ry,))),
        ),
        ByMod(
            ByPrefix(InsDesc(Op.XSAVEOPT, (Mn,)), pF3=InsDesc(Op.CLRSSBSY, (Mq,))),
            ByPrefix(InsDesc(Op.MFENCE)),
        ),
        ByMod(
            ByPrefix(InsDesc(Op.CLFLUSH, (Mb,)), InsDesc(Op.CLFLUSHOPT, (Mb,))),
            ByPrefix(InsDesc(Op.SFENCE)),
        ),
    ),
    OpGroup.G16: (
        _mem_only(InsDesc(Op.PREFETCHNTA, (Mb,))),
        _mem_only(InsDesc(Op.PREFETCHT0, (Mb,))),
        _mem_only(InsDesc(Op.PREFETCHT1, (Mb,))),
        _mem_only(InsDesc(Op.PREFETCHT2, (Mb,))),
        _HINT_NOP, _HINT_NOP, _HINT_NOP, _HINT_NOP,
    ),
    OpGroup.G17: (None, Op.BLSR, Op.BLSMSK, Op.BLSI, None, None, None, None),
}

# x87 memory forms: (escape byte, ModR/M reg) -> (opcode, memory operand size)
_X87_ARITH = (Op.FADD, Op.FMUL, Op.FCOM, Op.FCOMP, Op.FSUB, Op.FSUBR, Op.FDIV, Op.FDIVR)
_X87_IARITH = (Op.FIADD, Op.FIMUL, Op.FICOM, Op.FICOMP, Op.FISUB, Op.FISUBR, Op.FIDIV, Op.FIDIVR)

X87_MEM = {
    (0xD9, 0): (Op.FLD, _S.D),
    (0xD9, 2): (Op.FST, _S.D),
    (0xD9, 3): (Op.FSTP, _S.D),
    (0xD9, 4): (Op.FLDENV, _S.NONE),
    (0xD9, 5): (Op.FLDCW, _S.W),
    (0xD9, 6): (Op.FNSTENV, _S.NONE),
    (0xD9, 7): (Op.FNSTCW, _S.W),
    (0xDB, 0): (Op.FILD, _S.D),
    (0xDB, 1): (Op.FISTTP, _S.D),
    (0xDB, 2): (Op.FIST, _S.D),
    (0xDB, 3): (Op.FISTP, _S.D),
    (0xDB, 5): (Op.FLD, _S.T),
    (0xDB, 7): (Op.FSTP, _S.T),
    (0xDD, 0): (Op.FLD, _S.Q),
    (0xDD, 1): (Op.FISTTP, _S.Q),
    (0xDD, 2): (Op.FST, _S.Q),
    (0xDD, 3): (Op.FSTP, _S.Q),
    (0xDD, 4): (Op.FRSTOR, _S.NONE),
    (0xDD, 6): (Op.FNSAVE, _S.NONE),
    (0xDD, 7): (Op.FNSTSW, _S.W),
    (0xDF, 0): (Op.FILD, _S.W),
    (0xDF, 1): (Op.FISTTP, _S.W),
    (0xDF, 2): (Op.FIST, _S.W),
    (0xDF, 3): (Op.FISTP, _S.W),
    (0xDF, 4): (Op.FBLD, _S.T),
    (0xDF, 5): (Op.FILD, _S.Q),
    (0xDF, 6): (Op.FBSTP, _S.T),
    (0xDF, 7): (Op.FISTP, _S.Q),
}
for _i in range(8):
    X87_MEM[(0xD8, _i)] = (_X87_ARITH[_i], _S.D)
    X87_MEM[(0xDC, _i)] = (_X87_ARITH[_i], _S.Q)
    X87_MEM[(0xDA, _i)] = (_X87_IARITH[_i], _S.D)
    X87_MEM[(0xDE, _i)] = (_X87_IARITH[_i], _S.W)

# x87 register forms selected by ModR/M reg: (escape byte, reg) -> (opcode, form)
X87_REG = {
    (0xD9, 0): (Op.FLD, X87Form.STI),
    (0xD9, 1): (Op.FXCH, X87Form.STI),
    (0xDA, 0): (Op.FCMOVB, X87Form.ST0_STI),
    (0xDA, 1): (Op.FCMOVE, X87Form.ST0_STI),
    (0xDA, 2): (Op.FCMOVBE, X87Form.ST0_STI),
    (0xDA, 3): (Op.FCMOVU, X87Form.ST0_STI),
    (0xDB, 0): (Op.FCMOVNB, X87Form.ST0_STI),
    (0xDB, 1): (Op.FCMOVNE, X87Form.ST0_STI),
    (0xDB, 2): (Op.FCMOVNBE, X87Form.ST0_STI),
    (0xDB, 3): (Op.FCMOVNU, X87Form.ST0_STI),
    (0xDB, 5): (Op.FUCOMI, X87Form.ST0_STI),
    (0xDB, 6): (Op.FCOMI, X87Form.ST0_STI),
    (0xDC, 0): (Op.FADD, X87Form.STI_ST0),
    (0xDC, 1): (Op.FMUL, X87Form.STI_ST0),
    (0xDC, 2): (Op.FCOM, X87Form.ST0_STI),
    (0xDC, 3): (Op.FCOMP, X87Form.ST0_STI),
    (0xDC, 4): (Op.FSUBR, X87Form.STI_ST0),
    (0xDC, 5): (Op.FSUB, X87Form.STI_ST0),
    (0xDC, 6): (Op.FDIVR, X87Form.STI_ST0),
    (0xDC, 7): (Op.FDIV, X87Form.STI_ST0),
    (0xDD, 0): (Op.FFREE, X87Form.STI),
    (0xDD, 2): (Op.FST, X87Form.STI),
    (0xDD, 3): (Op.FSTP, X87Form.STI),
    (0xDD, 4): (Op.FUCOM, X87Form.STI),
    (0xDD, 5): (Op.FUCOMP, X87Form.STI),
    (0xDE, 0): (Op.FADDP, X87Form.STI_ST0),
    (0xDE, 1): (Op.FMULP, X87Form.STI_ST0),
    (0xDE, 4): (Op.FSUBRP, X87Form.STI_ST0),
    (0xDE, 5): (Op.FSUBP, X87Form.STI_ST0),
    (0xDE, 6): (Op.FDIVRP, X87Form.STI_ST0),
    (0xDE, 7): (Op.FDIVP, X87Form.STI_ST0),
    (0xDF, 5): (Op.FUCOMIP, X87Form.ST0_STI),
    (0xDF, 6): (Op.FCOMIP, X87Form.ST0_STI),
}
for _i in range(8):
    X87_REG[(0xD8, _i)] = (_X87_ARITH[_i], X87Form.ST0_STI)

# x87 register forms selected by the whole ModR/M byte, checked first
X87_REG_EXACT = {
    (0xD9, 0xD0): (Op.FNOP, X87Form.NONE),
    (0xD9, 0xE0): (Op.FCHS, X87Form.NONE),
    (0xD9, 0xE1): (Op.FABS, X87Form.NONE),
    (0xD9, 0xE4): (Op.FTST, X87Form.NONE),
    (0xD9, 0xE5): (Op.FXAM, X87Form.NONE),
    (0xD9, 0xE8): (Op.FLD1, X87Form.NONE),
    (0xD9, 0xE9): (Op.FLDL2T, X87Form.NONE),
    (0xD9, 0xEA): (Op.FLDL2E, X87Form.NONE),
    (0xD9, 0xEB): (Op.FLDPI, X87Form.NONE),
    (0xD9, 0xEC): (Op.FLDLG2, X87Form.NONE),
    (0xD9, 0xED): (Op.FLDLN2, X87Form.NONE),
    (0xD9, 0xEE): (Op.FLDZ, X87Form.NONE),
    (0xD9, 0xF0): (Op.F2XM1, X87Form.NONE),
    (0xD9, 0xF1): (Op.FYL2X, X87Form.NONE),
    (0xD9, 0xF2): (Op.FPTAN, X87Form.NONE),
    (0xD9, 0xF3): (Op.FPATAN, X87Form.NONE),
    (0xD9, 0xF4): (Op.FXTRACT, X87Form.NONE),
    (0xD9, 0xF5): (Op.FPREM1, X87Form.NONE),
    (0xD9, 0xF6): (Op.FDECSTP, X87Form.NONE),
    (0xD9, 0xF7): (Op.FINCSTP, X87Form.NONE),
    (0xD9, 0xF8): (Op.FPREM, X87Form.NONE),
    (0xD9, 0xF9): (Op.FYL2XP1, X87Form.NONE),
    (0xD9, 0xFA): (Op.FSQRT, X87Form.NONE),
    (0xD9, 0xFB): (Op.FSINCOS, X87Form.NONE),
    (0xD9, 0xFC): (Op.FRNDINT, X87Form.NONE),
    (0xD9, 0xFD): (Op.FSCALE, X87Form.NONE),
    (0xD9, 0xFE): (Op.FSIN, X87Form.NONE),
    (0xD9, 0xFF): (Op.FCOS, X87Form.NONE),
    (0xDA, 0xE9): (Op.FUCOMPP, X87Form.NONE),
    (0xDB, 0xE2): (Op.FNCLEX, X87Form.NONE),
    (0xDB, 0xE3): (Op.FNINIT, X87Form.NONE),
    (0xDE, 0xD9): (Op.FCOMPP, X87Form.NONE),
    (0xDF, 0xE0): (Op.FNSTSW, X87Form.AX),
}
