"""x86/x86-64 instruction parser.

``parse`` decodes one instruction from a byte window. The work is split in
stages that run in a fixed order, each reading the bytes it owns through a
``ByteReader`` that charges every byte it hands out:

    prefix scan -> REX/VEX/EVEX -> opcode -> ModR/M, SIB, displacement
    -> size resolution -> operands -> InsInfo

``disassemble`` is a linear sweep built on top of ``parse``.
"""
from bintel.config import MAX_INSN_LENGTH, SUPPORTED_MODES
from bintel.lib.intel import registers
from bintel.lib.intel.errors import (
    DecodeError,
    InvalidPrefixError,
    ModeError,
    TruncatedInstructionError,
    UnknownOpcodeError,
)
from bintel.lib.intel.opcodes import Opcode
from bintel.lib.intel.registers import Register, RegGrp, RGrpAttr
from bintel.lib.intel.tables import (
    GROUPS,
    ONE_BYTE,
    OPCODE_MAPS,
    X87_ESCAPE,
    X87_MEM,
    X87_REG,
    X87_REG_EXACT,
    GroupDesc,
    InsDesc,
    Selector,
    X87Form,
)
from bintel.lib.intel.types import (
    LEGACY_PREFIXES,
    MODRM_MODES,
    NOREX,
    Absolute,
    EVEXPrefix,
    InsInfo,
    InsSize,
    Instruction,
    MemorySize,
    ODImmOne,
    ODModeSize,
    ODReg,
    ODRegGrp,
    OprDirAddr,
    OprImm,
    OprMem,
    OprMode,
    OprReg,
    OprSize,
    Prefix,
    Relative,
    REXPrefix,
    Scale,
    ScaledIndex,
    SizeCond,
    VEXInfo,
    VEXType,
    ZeroingOrMerging,
)
from bintel.logger import LOG


class ByteReader:
    """Forward-only cursor over a byte window."""

    def __init__(self, data, address=0):
        self.data = data
        self.address = address
        self.pos = 0

    def read_byte(self):
        if self.pos >= len(self.data):
            raise TruncatedInstructionError(self.address, self.pos + 1, len(self.data))
        byte = self.data[self.pos]
        self.pos += 1
        return byte

    def read_int(self, size, signed=False):
        """Reads a little-endian integer of ``size`` bytes."""
        end = self.pos + size
        if end > len(self.data):
            raise TruncatedInstructionError(self.address, end, len(self.data))
        value = int.from_bytes(bytes(self.data[self.pos:end]), "little", signed=signed)
        self.pos = end
        return value


_VEX_ESCAPES = (0xC4, 0xC5, 0x62)
_VEX_FORBIDDEN = Prefix.LOCK | Prefix.REPNZ | Prefix.REPZ | Prefix.OPSIZE
_PP_PREFIX = (Prefix.NONE, Prefix.OPSIZE, Prefix.REPZ, Prefix.REPNZ)
_PP_MANDATORY = (0, 0x66, 0xF3, 0xF2)
_MAP_VEX_TYPE = {
    1: VEXType.VEXTwoByteOp,
    2: VEXType.VEXThreeByteOpOne,
    3: VEXType.VEXThreeByteOpTwo,
}
_ESCAPE_MAPS = {0x38: 2, 0x3A: 3}

# 16-bit ModR/M rm -> (base, index)
_MODRM16 = (
    (Register.BX, Register.SI),
    (Register.BX, Register.DI),
    (Register.BP, Register.SI),
    (Register.BP, Register.DI),
    (Register.SI, None),
    (Register.DI, None),
    (Register.BP, None),
    (Register.BX, None),
)

_FIXED_SIZES = {
    OprSize.NONE: (0, 0),
    OprSize.B: (8, 8),
    OprSize.W: (16, 16),
    OprSize.D: (32, 32),
    OprSize.Q: (64, 64),
    OprSize.DQ: (128, 128),
    OprSize.QQ: (256, 256),
    OprSize.T: (80, 80),
    OprSize.PI: (64, 64),
    OprSize.SD: (128, 64),
    OprSize.SS: (128, 32),
    OprSize.SDQ: (128, 64),
    OprSize.SSD: (128, 32),
    OprSize.SSQ: (128, 64),
    OprSize.DB: (32, 8),
    OprSize.DW: (32, 16),
    OprSize.DQD: (128, 32),
    OprSize.DQQ: (128, 64),
    OprSize.DQW: (128, 16),
}
_FAR_POINTER = {16: 32, 32: 48, 64: 80}

_RM_REGISTER_MODES = frozenset({OprMode.R, OprMode.U, OprMode.N, OprMode.KR})
_RM_MEMORY_MODES = frozenset({OprMode.M, OprMode.MZ, OprMode.MV, OprMode.MVH})
_VSIB_MODES = frozenset({OprMode.MV, OprMode.MVH})
_OPMASK_RM_MODES = frozenset({OprMode.KE, OprMode.KR})
_VECTOR_RM_MODES = frozenset({OprMode.W, OprMode.WZ, OprMode.U})
_MMX_RM_MODES = frozenset({OprMode.Q, OprMode.N})
_REG_FIELD_MODES = frozenset(
    {
        OprMode.G, OprMode.P, OprMode.V, OprMode.VZ, OprMode.S, OprMode.C, OprMode.D,
        OprMode.BndR, OprMode.KG,
    }
)
_MODRM_ATTRS = RGrpAttr.AMod11 | RGrpAttr.ARegBits | RGrpAttr.ABaseRM


class DecodeContext:
    """Mutable state of one ``parse`` call, read by table selectors."""

    def __init__(self, reader, mode):
        self.reader = reader
        self.mode = mode
        self.prefixes = Prefix.NONE
        self.rex = NOREX
        self.vex = None
        self.escape = "legacy"
        self.opcode_map = 0
        self.opcode_bytes = bytearray()
        self.opcode_end = 0
        self.mandatory = 0
        self.opsize_consumed = False
        self.memory = None
        self._modrm = None

    @property
    def address(self):
        return self.reader.address

    @property
    def rex_like(self):
        """REX bits in force: the REX byte or its VEX/EVEX equivalent."""
        return self.vex.vrex if self.vex is not None else self.rex

    @property
    def rex_w(self):
        return self.rex_like.w

    @property
    def vector_length(self):
        return self.vex.vector_length if self.vex is not None else 128

    def modrm(self):
        if self._modrm is None:
            self._modrm = self.reader.read_byte()
        return self._modrm

    def preload_modrm(self, byte):
        self._modrm = byte

    def has_modrm(self):
        return self._modrm is not None

    def select_mandatory(self, entries):
        if self.vex is not None or self.mandatory in (0xF3, 0xF2):
            return entries[self.mandatory]
        if self.mandatory == 0x66 and entries[0x66] is not None:
            self.opsize_consumed = True
            return entries[0x66]
        return entries[0]

    def operand_size(self, size_cond):
        override = bool(self.prefixes & Prefix.OPSIZE) and not self.opsize_consumed
        if self.mode == 64:
            if size_cond is SizeCond.Sz64 or self.rex_w:
                return 64
            if size_cond is SizeCond.SzDef64:
                return 16 if override else 64
            return 16 if override else 32
        if self.mode == 32:
            return 16 if override else 32
        return 32 if override else 16

    def address_size(self):
        override = bool(self.prefixes & Prefix.ADDRSIZE)
        if self.mode == 64:
            return 32 if override else 64
        if self.mode == 32:
            return 16 if override else 32
        return 32 if override else 16


def _scan_prefixes(ctx):
    """Consumes legacy prefixes and returns the first byte after them."""
    reader = ctx.reader
    byte = reader.read_byte()
    while byte in LEGACY_PREFIXES:
        flag, group = LEGACY_PREFIXES[byte]
        ctx.prefixes = (ctx.prefixes & ~group) | flag
        byte = reader.read_byte()
    return byte


def _is_rex(ctx, byte):
    return ctx.mode == 64 and byte & 0xF0 == 0x40


def _scan_escape(ctx, byte):
    """Handles REX, VEX and EVEX. Returns the first opcode byte."""
    reader = ctx.reader
    if _is_rex(ctx, byte):
        ctx.rex = REXPrefix.from_byte(byte)
        byte = reader.read_byte()
        if byte in LEGACY_PREFIXES or _is_rex(ctx, byte):
            raise InvalidPrefixError(ctx.address, "REX prefix must immediately precede the opcode")
    if byte not in _VEX_ESCAPES:
        return byte
    payload = reader.read_byte()
    if ctx.mode != 64 and payload >> 6 != 0x3:
        # LES/LDS/BOUND: the byte just read is their ModR/M
        ctx.preload_modrm(payload)
        return byte
    if ctx.rex.present:
        raise InvalidPrefixError(ctx.address, "REX prefix before a VEX/EVEX escape")
    if ctx.prefixes & _VEX_FORBIDDEN:
        raise InvalidPrefixError(ctx.address, "legacy prefix before a VEX/EVEX escape")
    if byte == 0xC5:
        _vex_two_byte(ctx, payload)
    elif byte == 0xC4:
        _vex_three_byte(ctx, payload, reader.read_byte())
    else:
        _evex(ctx, payload, reader.read_byte(), reader.read_byte())
    return reader.read_byte()


def _set_vex(ctx, opcode_map, r, x, b, w, vvvv, vector_length, pp, evex=None):
    if ctx.mode != 64:
        r = x = b = False
        vvvv &= 0x7
    vex_type = _MAP_VEX_TYPE[opcode_map]
    if evex is not None:
        vex_type |= VEXType.EVEX
    ctx.vex = VEXInfo(
        vvvv=vvvv,
        vector_length=vector_length,
        vex_type=vex_type,
        vprefixes=_PP_PREFIX[pp],
        vrex=REXPrefix(present=False, w=w, r=r, x=x, b=b),
        evex=evex,
    )
    ctx.escape = "vex" if evex is None else "evex"
    ctx.opcode_map = opcode_map
    ctx.mandatory = _PP_MANDATORY[pp]


def _vex_two_byte(ctx, p0):
    _set_vex(
        ctx,
        1,
        r=not p0 & 0x80,
        x=False,
        b=False,
        w=False,
        vvvv=(~p0 >> 3) & 0xF,
        vector_length=256 if p0 & 0x4 else 128,
        pp=p0 & 0x3,
    )


def _vex_three_byte(ctx, p0, p1):
    opcode_map = p0 & 0x1F
    if opcode_map not in _MAP_VEX_TYPE:
        raise UnknownOpcodeError(ctx.address, ctx.reader.pos, bytes([0xC4, p0, p1]))
    _set_vex(
        ctx,
        opcode_map,
        r=not p0 & 0x80,
        x=not p0 & 0x40,
        b=not p0 & 0x20,
        w=bool(p1 & 0x80),
        vvvv=(~p1 >> 3) & 0xF,
        vector_length=256 if p1 & 0x4 else 128,
        pp=p1 & 0x3,
    )


def _evex(ctx, p0, p1, p2):
    if p0 & 0x8 or not p1 & 0x4:
        raise InvalidPrefixError(ctx.address, "malformed EVEX prefix")
    opcode_map = p0 & 0x3
    if opcode_map not in _MAP_VEX_TYPE:
        raise UnknownOpcodeError(ctx.address, ctx.reader.pos, bytes([0x62, p0, p1, p2]))
    rounding = bool(p2 & 0x10)
    length_bits = (p2 >> 5) & 0x3
    if length_bits == 3 and not rounding:
        raise InvalidPrefixError(ctx.address, "reserved EVEX vector length")
    r_prime = ctx.mode == 64 and not p0 & 0x10
    v_prime = 0 if ctx.mode != 64 or p2 & 0x8 else 0x10
    evex = EVEXPrefix(
        z=ZeroingOrMerging.Zeroing if p2 & 0x80 else ZeroingOrMerging.Merging,
        aaa=p2 & 0x7,
        r_prime=r_prime,
        b=rounding,
    )
    _set_vex(
        ctx,
        opcode_map,
        r=not p0 & 0x80,
        x=not p0 & 0x40,
        b=not p0 & 0x20,
        w=bool(p1 & 0x80),
        vvvv=((~p1 >> 3) & 0xF) | v_prime,
        vector_length=(128, 256, 512, 512)[length_bits],
        pp=p1 & 0x3,
        evex=evex,
    )


def _legacy_mandatory(prefixes):
    if prefixes & Prefix.REPZ:
        return 0xF3
    if prefixes & Prefix.REPNZ:
        return 0xF2
    if prefixes & Prefix.OPSIZE:
        return 0x66
    return 0


def _resolve_entry(ctx, entry):
    """Walks selectors and groups down to an ``InsDesc`` (or None)."""
    while entry is not None:
        if isinstance(entry, Selector):
            entry = entry.select(ctx)
        elif isinstance(entry, GroupDesc):
            member = GROUPS[entry.group][(ctx.modrm() >> 3) & 0x7]
            if isinstance(member, Opcode):
                return InsDesc(member, entry.operands, entry.size_cond)
            entry = member
        else:
            return entry
    return None


def _resolve_x87(ctx, escape):
    modrm = ctx.modrm()
    reg = (modrm >> 3) & 0x7
    if modrm < 0xC0:
        found = X87_MEM.get((escape, reg))
        if found is None:
            return None
        opcode, size = found
        return InsDesc(opcode, (ODModeSize(OprMode.M, size),))
    found = X87_REG_EXACT.get((escape, modrm)) or X87_REG.get((escape, reg))
    if found is None:
        return None
    opcode, form = found
    st0 = ODReg(Register.ST0)
    sti = ODReg(registers.x87(modrm & 0x7))
    operands = {
        X87Form.NONE: (),
        X87Form.ST0_STI: (st0, sti),
        X87Form.STI_ST0: (sti, st0),
        X87Form.STI: (sti,),
        X87Form.AX: (ODReg(Register.AX),),
    }[form]
    return InsDesc(opcode, operands)


def _unknown(ctx):
    return UnknownOpcodeError(ctx.address, ctx.opcode_end, bytes(ctx.opcode_bytes))


def _resolve_opcode(ctx, byte):
    reader = ctx.reader
    ctx.opcode_bytes.append(byte)
    if ctx.vex is not None:
        ctx.opcode_end = reader.pos
        entry = OPCODE_MAPS[(ctx.escape, ctx.opcode_map)].get(byte)
    elif byte == 0x0F:
        byte = reader.read_byte()
        ctx.opcode_bytes.append(byte)
        ctx.opcode_map = _ESCAPE_MAPS.get(byte, 1)
        if ctx.opcode_map > 1:
            byte = reader.read_byte()
            ctx.opcode_bytes.append(byte)
        ctx.opcode_end = reader.pos
        ctx.mandatory = _legacy_mandatory(ctx.prefixes)
        entry = OPCODE_MAPS[("legacy", ctx.opcode_map)].get(byte)
    else:
        ctx.opcode_end = reader.pos
        entry = ONE_BYTE.get(byte)
    if entry is X87_ESCAPE:
        desc = _resolve_x87(ctx, byte)
    else:
        desc = _resolve_entry(ctx, entry)
    if desc is None:
        raise _unknown(ctx)
    return desc


def _check_mode(ctx, desc):
    if desc.size_cond is SizeCond.SzInv64 and ctx.mode == 64:
        raise ModeError(ctx.address, ctx.mode)
    if desc.size_cond is SizeCond.SzOnly64 and ctx.mode != 64:
        raise ModeError(ctx.address, ctx.mode, only_64=True)


def _needs_modrm(desc):
    for od in desc.operands:
        if isinstance(od, ODModeSize) and od.mode in MODRM_MODES:
            return True
        if isinstance(od, ODRegGrp) and od.attr & _MODRM_ATTRS:
            return True
    return False


def _read_disp(reader, mod, wide):
    if mod == 1:
        return reader.read_int(1, signed=True)
    if mod == 2:
        return reader.read_int(wide, signed=True)
    return None


def _decode_memory16(reader, modrm):
    mod, rm = modrm >> 6, modrm & 0x7
    if mod == 0 and rm == 6:
        return None, None, reader.read_int(2, signed=True)
    base, index = _MODRM16[rm]
    return base, ScaledIndex(index) if index is not None else None, _read_disp(reader, mod, 2)


def _vsib_index(ctx, index_code, vsib_bits):
    rex = ctx.rex_like
    evex_v = ctx.vex.evex is not None and ctx.vex.vvvv & 0x10
    return registers.vector(vsib_bits, _vector_index(index_code, rex.x, evex_v))


def _decode_memory(ctx, modrm, vsib_bits=0):
    """Reads SIB and displacement of a memory ModR/M. Returns (base, index, disp).

    With ``vsib_bits`` the SIB index names a vector register of that width.
    """
    reader = ctx.reader
    addr_size = ctx.address_size()
    mod, rm = modrm >> 6, modrm & 0x7
    if vsib_bits and (addr_size == 16 or rm != 4):
        raise _unknown(ctx)
    if addr_size == 16:
        return _decode_memory16(reader, modrm)
    rex = ctx.rex_like
    if rm == 4:
        sib = reader.read_byte()
        scale = Scale(1 << (sib >> 6))
        index_code = (sib >> 3) & 0x7
        base_code = sib & 0x7
        index = None
        if vsib_bits:
            index = ScaledIndex(_vsib_index(ctx, index_code, vsib_bits), scale)
        elif index_code != 4 or rex.x:
            index = ScaledIndex(
                registers.resolve_grp(RegGrp(index_code), addr_size, RGrpAttr.ASIBIdx, rex), scale
            )
        if base_code == 5 and mod == 0:
            return None, index, reader.read_int(4, signed=True)
        base = registers.resolve_grp(RegGrp(base_code), addr_size, RGrpAttr.ASIBBase, rex)
        return base, index, _read_disp(reader, mod, 4)
    if rm == 5 and mod == 0:
        base = registers.instruction_pointer(addr_size) if ctx.mode == 64 else None
        return base, None, reader.read_int(4, signed=True)
    base = registers.resolve_grp(RegGrp(rm), addr_size, RGrpAttr.ABaseRM, rex)
    return base, None, _read_disp(reader, mod, 4)


def _vsib_width(ctx, desc):
    for od in desc.operands:
        if isinstance(od, ODModeSize) and od.mode in _VSIB_MODES:
            vl = ctx.vector_length
            return vl if od.mode is OprMode.MV else max(128, vl // 2)
    return 0


def _decode_modrm(ctx, desc):
    if not ctx.has_modrm() and not _needs_modrm(desc):
        return
    modrm = ctx.modrm()
    if modrm >> 6 != 0x3:
        ctx.memory = _decode_memory(ctx, modrm, _vsib_width(ctx, desc))


class _Sizes:
    __slots__ = ("operand", "address", "vector", "mode")

    def __init__(self, operand, address, vector, mode):
        self.operand = operand
        self.address = address
        self.vector = vector
        self.mode = mode

    def pair(self, size):
        """(register width, memory width) in bits for an operand size code."""
        fixed = _FIXED_SIZES.get(size)
        if fixed is not None:
            return fixed
        opsize, vl = self.operand, self.vector
        if size is OprSize.V:
            return opsize, opsize
        if size is OprSize.Z:
            bits = 16 if opsize == 16 else 32
            return bits, bits
        if size is OprSize.Y:
            bits = 64 if opsize == 64 else 32
            return bits, bits
        if size is OprSize.A:
            return opsize, opsize * 2
        if size is OprSize.P:
            return opsize, _FAR_POINTER[opsize]
        if size is OprSize.S:
            bits = 80 if self.mode == 64 else 48
            return bits, bits
        if size is OprSize.Bnd:
            return 128, 128 if self.mode == 64 else 64
        if size in (OprSize.X, OprSize.XZ, OprSize.PD, OprSize.PS):
            return vl, vl
        if size is OprSize.PSQ:
            return vl, vl // 2
        if size is OprSize.DQDQ:
            return 128, vl // 4
        if size is OprSize.DQQDQ:
            return max(128, vl // 2), vl // 2
        if size is OprSize.DQWD:
            return 128, vl // 8
        raise ValueError(f"Unhandled operand size {size!r}")


def _resolve_sizes(ctx, desc):
    return _Sizes(
        ctx.operand_size(desc.size_cond), ctx.address_size(), ctx.vector_length, ctx.mode
    )


def _vector_index(base, high, top):
    index = base | (0x8 if high else 0)
    if top:
        index |= 0x10
    return index


def _register_from_rm(ctx, mode, reg_bits, rm):
    rex = ctx.rex_like
    if mode in (OprMode.E, OprMode.E0, OprMode.R):
        return registers.resolve_grp(RegGrp(rm), reg_bits, RGrpAttr.AMod11, rex)
    if mode in _MMX_RM_MODES:
        return registers.mmx(rm)
    if mode in _VECTOR_RM_MODES:
        evex_x = ctx.vex is not None and ctx.vex.evex is not None and rex.x
        return registers.vector(max(128, reg_bits), _vector_index(rm, rex.b, evex_x))
    if mode in _OPMASK_RM_MODES:
        return registers.opmask(rm)
    if mode is OprMode.BndM:
        return registers.bound(rm)
    raise _unknown(ctx)


def _register_from_reg(ctx, mode, reg_bits, reg):
    rex = ctx.rex_like
    if mode is OprMode.G:
        return registers.resolve_grp(RegGrp(reg), reg_bits, RGrpAttr.ARegBits, rex)
    if mode is OprMode.P:
        return registers.mmx(reg)
    if mode in (OprMode.V, OprMode.VZ):
        r_prime = ctx.vex is not None and ctx.vex.evex is not None and ctx.vex.evex.r_prime
        return registers.vector(max(128, reg_bits), _vector_index(reg, rex.r, r_prime))
    if mode is OprMode.S:
        return registers.segment(reg)
    if mode is OprMode.C:
        return registers.control(reg | (0x8 if rex.r else 0))
    if mode is OprMode.D:
        return registers.debug(reg | (0x8 if rex.r else 0))
    if mode is OprMode.KG:
        return registers.opmask(reg)
    return registers.bound(reg | (0x8 if rex.r else 0))


def _immediate(ctx, od, sizes):
    opsize = sizes.operand
    if od.size is OprSize.Z:
        width = 2 if opsize == 16 else 4
    elif od.size is OprSize.V:
        width = opsize // 8
    else:
        width = sizes.pair(od.size)[1] // 8
    signed = od.mode is OprMode.SI or (od.size is OprSize.Z and opsize == 64)
    return OprImm(ctx.reader.read_int(width, signed=signed), width * 8)


def _relative(ctx, od, sizes):
    width = 1 if od.size is OprSize.B else (2 if sizes.operand == 16 else 4)
    return OprDirAddr(Relative(ctx.reader.read_int(width, signed=True)))


def _far_pointer(ctx, sizes):
    width = 2 if sizes.operand == 16 else 4
    offset = ctx.reader.read_int(width)
    selector = ctx.reader.read_int(2)
    return OprDirAddr(Absolute(selector, offset, width * 8))


def _mode_size_operand(ctx, od, sizes):
    mode = od.mode
    if mode in (OprMode.I, OprMode.SI):
        return _immediate(ctx, od, sizes)
    if mode is OprMode.J:
        return _relative(ctx, od, sizes)
    if mode is OprMode.A:
        return _far_pointer(ctx, sizes)
    reg_bits, mem_bits = sizes.pair(od.size)
    if mode is OprMode.O:
        offset = ctx.reader.read_int(sizes.address // 8)
        return OprMem(None, None, offset, mem_bits)
    if mode in (OprMode.X, OprMode.Y):
        index = 6 if mode is OprMode.X else 7
        return OprMem(registers.gpr(sizes.address, index), None, None, mem_bits)
    if mode is OprMode.B:
        return OprReg(registers.gpr(reg_bits, ctx.vex.vvvv & 0xF))
    if mode is OprMode.H:
        return OprReg(registers.vector(max(128, reg_bits), ctx.vex.vvvv))
    if mode is OprMode.KH:
        return OprReg(registers.opmask(ctx.vex.vvvv & 0x7))
    if mode is OprMode.L:
        index = ctx.reader.read_byte() >> 4
        if ctx.mode != 64:
            index &= 0x7
        return OprReg(registers.vector(max(128, reg_bits), index))
    modrm = ctx.modrm()
    if mode not in _REG_FIELD_MODES:
        if modrm >> 6 == 0x3:
            if mode in _RM_MEMORY_MODES:
                raise _unknown(ctx)
            reg = _register_from_rm(ctx, mode, reg_bits, modrm & 0x7)
        else:
            if mode in _RM_REGISTER_MODES:
                raise _unknown(ctx)
            base, index, disp = ctx.memory
            return OprMem(base, index, disp, mem_bits)
    else:
        reg = _register_from_reg(ctx, mode, reg_bits, (modrm >> 3) & 0x7)
    if reg is None:
        raise _unknown(ctx)
    return OprReg(reg)


def _materialize(ctx, desc, sizes):
    operands = []
    for od in desc.operands:
        if isinstance(od, ODModeSize):
            operands.append(_mode_size_operand(ctx, od, sizes))
        elif isinstance(od, ODReg):
            operands.append(OprReg(od.reg))
        elif isinstance(od, ODRegGrp):
            reg_bits = sizes.pair(od.size)[0]
            operands.append(OprReg(registers.resolve_grp(od.grp, reg_bits, od.attr, ctx.rex_like)))
        elif isinstance(od, ODImmOne):
            operands.append(OprImm(1, 8))
    return tuple(operands)


def _operand_width(operand, sizes):
    if isinstance(operand, OprReg):
        return registers.register_size(operand.reg)
    if isinstance(operand, (OprMem, OprImm)):
        return operand.size
    return sizes.operand


def _ins_size(desc, operands, sizes):
    mem_width = next((o.size for o in operands if isinstance(o, OprMem)), sizes.operand)
    return InsSize(
        mem_size=MemorySize(
            eff_opr_size=mem_width, eff_addr_size=sizes.address, eff_reg_size=sizes.operand
        ),
        reg_size=sizes.operand,
        operation_size=_operand_width(operands[0], sizes) if operands else sizes.operand,
        size_cond=desc.size_cond,
    )


def parse(data, address=0, mode=64):
    """Decodes the instruction at the start of ``data``.

    Args:
        data: bytes-like window starting at the instruction.
        address: virtual address of ``data[0]``.
        mode: decode mode, one of 16, 32 or 64.

    Returns:
        Instruction: the decoded record with its address and length.

    Raises:
        DecodeError: a subclass describing why the bytes do not decode.
    """
    if mode not in SUPPORTED_MODES:
        raise ValueError(f"Unsupported decode mode {mode}")
    reader = ByteReader(data, address)
    ctx = DecodeContext(reader, mode)
    byte = _scan_prefixes(ctx)
    byte = _scan_escape(ctx, byte)
    desc = _resolve_opcode(ctx, byte)
    _check_mode(ctx, desc)
    _decode_modrm(ctx, desc)
    sizes = _resolve_sizes(ctx, desc)
    operands = _materialize(ctx, desc, sizes)
    info = InsInfo(
        prefixes=ctx.prefixes,
        rex=ctx.rex,
        vex_info=ctx.vex,
        opcode=desc.opcode,
        operands=operands,
        ins_size=_ins_size(desc, operands, sizes),
    )
    return Instruction(info, address, reader.pos)


def disassemble(data, address=0, mode=64, skip_invalid=True):
    """Linear sweep over ``data`` yielding ``Instruction`` objects.

    With ``skip_invalid`` a failed decode is logged and the sweep resumes one
    byte later, or after the opcode bytes of an unknown opcode. Without it
    the ``DecodeError`` propagates.
    """
    view = memoryview(data)
    offset = 0
    while offset < len(view):
        window = view[offset:offset + MAX_INSN_LENGTH]
        try:
            insn = parse(window, address + offset, mode)
        except UnknownOpcodeError as e:
            if not skip_invalid:
                raise
            LOG.debug(f"Skipping {e.length} byte(s) of unknown opcode at 0x{address + offset:x}")
            offset += max(e.length, 1)
            continue
        except DecodeError as e:
            if not skip_invalid:
                raise
            LOG.debug(f"Skipping one byte after decode failure: {e}")
            offset += 1
            continue
        yield insn
        offset += insn.length
