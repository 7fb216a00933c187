import pytest

from bintel.lib.intel.errors import (
    DecodeError,
    InvalidPrefixError,
    ModeError,
    TruncatedInstructionError,
    UnknownOpcodeError,
)
from bintel.lib.intel.opcodes import Opcode
from bintel.lib.intel.parser import parse
from bintel.lib.intel.registers import Register
from bintel.lib.intel.types import (
    NOREX,
    Absolute,
    AddressingForm,
    OprDirAddr,
    OprImm,
    OprMem,
    OprReg,
    Prefix,
    Relative,
    Scale,
    ScaledIndex,
    SizeCond,
    VEXType,
    ZeroingOrMerging,
)


def test_nop():
    insn = parse(b"\x90")
    assert insn.opcode == Opcode.NOP
    assert insn.operands == ()
    assert insn.length == 1
    assert insn.info.prefixes == Prefix.NONE
    assert insn.info.rex == NOREX
    assert insn.info.vex_info is None


def test_ret_near():
    insn = parse(b"\xc3")
    assert insn.opcode == Opcode.RETNear
    assert insn.operands == ()
    assert insn.length == 1
    assert insn.info.ins_size.size_cond is SizeCond.Sz64


def test_syscall():
    insn = parse(b"\x0f\x05")
    assert insn.opcode == Opcode.SYSCALL
    assert insn.operands == ()
    assert insn.length == 2


def test_mov_rax_imm_group():
    insn = parse(b"\x48\xc7\xc0\x05\x00\x00\x00")
    assert insn.info.rex.present
    assert insn.info.rex.w
    assert insn.opcode == Opcode.MOV
    assert insn.operands == (OprReg(Register.RAX), OprImm(5, 32))
    assert insn.length == 7
    assert insn.info.ins_size.reg_size == 64


def test_mov_rax_negative_imm_sign_extended():
    insn = parse(b"\x48\xc7\xc0\xff\xff\xff\xff")
    assert insn.operands[1] == OprImm(-1, 32)


def test_rep_nop():
    insn = parse(b"\xf3\x90")
    assert insn.info.prefixes & Prefix.REPZ
    assert insn.opcode == Opcode.NOP
    assert insn.length == 2


def test_mov_eax_imm_32bit_mode():
    insn = parse(b"\xb8\x01\x00\x00\x00", mode=32)
    assert insn.opcode == Opcode.MOV
    assert insn.operands == (OprReg(Register.EAX), OprImm(1, 32))
    assert insn.length == 5


def test_mov_ax_imm_16bit_mode():
    insn = parse(b"\xb8\x01\x00", mode=16)
    assert insn.operands == (OprReg(Register.AX), OprImm(1, 16))
    assert insn.length == 3


def test_mov_rax_imm64():
    insn = parse(b"\x48\xb8\x88\x77\x66\x55\x44\x33\x22\x11")
    assert insn.operands == (OprReg(Register.RAX), OprImm(0x1122334455667788, 64))
    assert insn.length == 10


def test_xchg_r8_with_rex_b():
    insn = parse(b"\x41\x90")
    assert insn.opcode == Opcode.XCHG
    assert insn.operands == (OprReg(Register.R8), OprReg(Register.RAX))


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x50", Register.RAX),
        (b"\x41\x50", Register.R8),
        (b"\x66\x50", Register.AX),
    ],
)
def test_push_default_64(data, expected):
    insn = parse(data)
    assert insn.opcode == Opcode.PUSH
    assert insn.operands == (OprReg(expected),)


def test_opsize_override_64bit_mode():
    insn = parse(b"\x66\xb8\x01\x00")
    assert insn.info.prefixes & Prefix.OPSIZE
    assert insn.operands == (OprReg(Register.AX), OprImm(1, 16))
    assert insn.length == 4


def test_last_segment_prefix_wins():
    insn = parse(b"\x2e\x64\x8b\x00")
    assert insn.info.prefixes & Prefix.FS
    assert not insn.info.prefixes & Prefix.CS


def test_lock_and_repeat_coexist():
    insn = parse(b"\xf0\xf3\xa4")
    assert insn.info.prefixes & Prefix.LOCK
    assert insn.info.prefixes & Prefix.REPZ


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x88\xe0", (Register.AL, Register.AH)),
        (b"\x40\x88\xe0", (Register.AL, Register.SPL)),
        (b"\x45\x88\xc0", (Register.R8B, Register.R8B)),
    ],
)
def test_byte_registers(data, expected):
    insn = parse(data)
    assert tuple(o.reg for o in insn.operands) == expected


def test_rip_relative():
    insn = parse(b"\x8b\x05\x10\x00\x00\x00", address=0x1000)
    mem = insn.operands[1]
    assert mem == OprMem(Register.RIP, None, 0x10, 32)
    assert mem.form is AddressingForm.DISPLACEMENT


def test_disp32_without_base_in_32bit_mode():
    insn = parse(b"\x8b\x05\x10\x00\x00\x00", mode=32)
    assert insn.operands[1] == OprMem(None, None, 0x10, 32)


def test_sib_base_index_scale():
    insn = parse(b"\x8b\x04\x88")
    assert insn.operands == (
        OprReg(Register.EAX),
        OprMem(Register.RAX, ScaledIndex(Register.RCX, Scale.X4), None, 32),
    )
    assert insn.length == 3


def test_sib_rex_x_extends_index():
    insn = parse(b"\x4a\x8b\x04\x88")
    assert insn.operands[1].index == ScaledIndex(Register.R9, Scale.X4)


def test_sib_without_base():
    insn = parse(b"\x64\x48\x8b\x04\x25\x28\x00\x00\x00")
    assert insn.operands[1] == OprMem(None, None, 0x28, 64)
    assert insn.length == 9


def test_negative_disp8():
    insn = parse(b"\x48\x8b\x45\xf8")
    assert insn.operands == (OprReg(Register.RAX), OprMem(Register.RBP, None, -8, 64))


def test_addrsize_override_64bit_mode():
    insn = parse(b"\x67\x8b\x00")
    assert insn.operands[1] == OprMem(Register.EAX, None, None, 32)
    assert insn.info.ins_size.mem_size.eff_addr_size == 32


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x8b\x00", OprMem(Register.BX, ScaledIndex(Register.SI), None, 16)),
        (b"\x8b\x07", OprMem(Register.BX, None, None, 16)),
        (b"\x8b\x06\x34\x12", OprMem(None, None, 0x1234, 16)),
        (b"\x8b\x46\xfe", OprMem(Register.BP, None, -2, 16)),
    ],
)
def test_16bit_addressing(data, expected):
    insn = parse(data, mode=16)
    assert insn.operands[1] == expected


def _expected_form(addr_size, mod, rm):
    if mod == 3:
        return AddressingForm.REGISTER
    if addr_size == 16:
        if mod == 0 and rm == 6:
            return AddressingForm.DISPLACEMENT
        return AddressingForm.BASE_INDEX if rm < 4 else AddressingForm.BASE
    if mod == 0 and rm == 5:
        return AddressingForm.DISPLACEMENT
    return AddressingForm.BASE


@pytest.mark.parametrize("mode", [16, 32, 64])
def test_addressing_form_exhaustive(mode):
    for mod in range(4):
        for rm in range(8):
            modrm = (mod << 6) | rm
            sib = b"\x24" if mode != 16 and rm == 4 and mod != 3 else b""
            data = bytes([0x8B, modrm]) + sib + b"\x00" * 4
            operand = parse(data, mode=mode).operands[1]
            assert operand.form is _expected_form(mode, mod, rm), (mode, mod, rm)
            if operand.form is AddressingForm.BASE:
                assert operand.base is not None and operand.index is None
            elif operand.form is AddressingForm.BASE_INDEX:
                assert operand.base is not None and operand.index is not None
            elif operand.form is AddressingForm.DISPLACEMENT:
                assert operand.disp is not None and operand.index is None


def test_relative_call_target():
    insn = parse(b"\xe8\x00\x01\x00\x00", address=0x1000)
    assert insn.opcode == Opcode.CALLNear
    assert insn.operands == (OprDirAddr(Relative(0x100)),)
    assert insn.branch_target() == 0x1105
    assert insn.is_direct_call()


def test_short_jump_backwards():
    insn = parse(b"\xeb\xfe", address=0x2000)
    assert insn.opcode == Opcode.JMPNear
    assert insn.branch_target() == 0x2000
    assert not insn.is_direct_call()


def test_branch_target_wraps_to_operand_size():
    insn = parse(b"\xeb\x80", address=0, mode=32)
    assert insn.branch_target() == 0xFFFFFF82


@pytest.mark.parametrize(
    "code, address, mode, expected",
    [
        (b"\x67\xeb\x00", 0x140001000, 64, 0x140001003),
        (b"\x67\xe8\x00\x00\x00\x00", 0x7FFFFFFFFFF0, 64, 0x7FFFFFFFFFF6),
        (b"\x66\xeb\x10", 0x12345, 32, 0x2358),
        (b"\x66\xe8\x00\x10", 0xFFF0, 32, 0x0FF4),
    ],
)
def test_branch_target_ignores_address_size(code, address, mode, expected):
    assert parse(code, address=address, mode=mode).branch_target() == expected


def test_indirect_call_has_no_target():
    insn = parse(b"\xff\xd0")
    assert insn.opcode == Opcode.CALLNear
    assert insn.operands == (OprReg(Register.RAX),)
    assert insn.branch_target() is None
    assert not insn.is_direct_call()


def test_far_jump_32bit_mode():
    insn = parse(b"\xea\x78\x56\x34\x12\x00\x10", mode=32)
    assert insn.opcode == Opcode.JMPFar
    assert insn.operands == (OprDirAddr(Absolute(0x1000, 0x12345678, 32)),)
    assert insn.length == 7


def test_jcc_near():
    insn = parse(b"\x0f\x84\x10\x00\x00\x00", address=0x400000)
    assert insn.opcode == Opcode.JZ
    assert insn.branch_target() == 0x400016


def test_group_sub_signed_imm8():
    insn = parse(b"\x48\x83\xec\x08")
    assert insn.opcode == Opcode.SUB
    assert insn.operands == (OprReg(Register.RSP), OprImm(8, 8))


def test_shift_by_one():
    insn = parse(b"\xd1\xe0")
    assert insn.opcode == Opcode.SHL
    assert insn.operands == (OprReg(Register.EAX), OprImm(1, 8))


@pytest.mark.parametrize(
    "data, opcode",
    [
        (b"\x0f\x58\xc1", Opcode.ADDPS),
        (b"\x66\x0f\x58\xc1", Opcode.ADDPD),
        (b"\xf3\x0f\x58\xc1", Opcode.ADDSS),
        (b"\xf2\x0f\x58\xc1", Opcode.ADDSD),
    ],
)
def test_mandatory_prefix_selection(data, opcode):
    insn = parse(data)
    assert insn.opcode == opcode
    assert insn.operands == (OprReg(Register.XMM0), OprReg(Register.XMM1))


def test_mandatory_66_keeps_operand_size():
    insn = parse(b"\x66\x0f\x6f\xc1")
    assert insn.opcode == Opcode.MOVDQA
    assert insn.info.prefixes & Prefix.OPSIZE
    assert insn.info.ins_size.reg_size == 32


def test_66_without_mandatory_entry_is_opsize():
    insn = parse(b"\x66\x0f\xbc\xc1")
    assert insn.opcode == Opcode.BSF
    assert insn.operands == (OprReg(Register.AX), OprReg(Register.CX))


def test_mandatory_repeat_prefix_without_entry():
    with pytest.raises(UnknownOpcodeError):
        parse(b"\xf3\x0f\x6e\xc0")


def test_endbr64():
    insn = parse(b"\xf3\x0f\x1e\xfa")
    assert insn.opcode == Opcode.ENDBR64
    assert insn.length == 4


def test_three_byte_map():
    insn = parse(b"\x66\x0f\x38\x00\xc1")
    assert insn.opcode == Opcode.PSHUFB
    assert insn.operands == (OprReg(Register.XMM0), OprReg(Register.XMM1))
    assert insn.length == 5


def test_mmx_form():
    insn = parse(b"\x0f\xef\xc1")
    assert insn.opcode == Opcode.PXOR
    assert insn.operands == (OprReg(Register.MM0), OprReg(Register.MM1))


@pytest.mark.parametrize(
    "data, opcode, operands",
    [
        (b"\xd9\xe8", Opcode.FLD1, ()),
        (b"\xd8\xc1", Opcode.FADD, (OprReg(Register.ST0), OprReg(Register.ST1))),
        (b"\xdc\xc1", Opcode.FADD, (OprReg(Register.ST1), OprReg(Register.ST0))),
        (b"\xdd\x00", Opcode.FLD, (OprMem(Register.RAX, None, None, 64),)),
        (b"\xdb\x28", Opcode.FLD, (OprMem(Register.RAX, None, None, 80),)),
        (b"\xdf\xe0", Opcode.FNSTSW, (OprReg(Register.AX),)),
    ],
)
def test_x87(data, opcode, operands):
    insn = parse(data)
    assert insn.opcode == opcode
    assert insn.operands == operands
    assert insn.length == len(data)


def test_vex_two_byte():
    insn = parse(b"\xc5\xf8\x77")
    assert insn.opcode == Opcode.VZEROUPPER
    assert insn.length == 3
    assert insn.info.vex_info.vex_type == VEXType.VEXTwoByteOp
    assert insn.info.vex_info.vex_type.is_original


def test_vex_128_and_256():
    insn = parse(b"\xc5\xf9\xef\xc0")
    assert insn.opcode == Opcode.VPXOR
    assert insn.operands == (OprReg(Register.XMM0),) * 3
    insn = parse(b"\xc5\xfd\xef\xc0")
    assert insn.operands == (OprReg(Register.YMM0),) * 3
    assert insn.info.vex_info.vector_length == 256


def test_vex_vvvv_selects_register():
    # vpxor xmm1, xmm2, xmm3
    insn = parse(b"\xc5\xe9\xef\xcb")
    assert insn.operands == (
        OprReg(Register.XMM1),
        OprReg(Register.XMM2),
        OprReg(Register.XMM3),
    )


def test_vex_three_byte():
    insn = parse(b"\xc4\xe2\x79\x00\xc1")
    assert insn.opcode == Opcode.VPSHUFB
    assert insn.operands == (
        OprReg(Register.XMM0),
        OprReg(Register.XMM0),
        OprReg(Register.XMM1),
    )
    assert insn.info.vex_info.vex_type.is_three_byte_op_one
    assert insn.length == 5


def test_vex_unknown_map():
    with pytest.raises(UnknownOpcodeError):
        parse(b"\xc4\xe4\x79\x00\xc1")


def test_evex_512():
    insn = parse(b"\x62\xf1\x7c\x48\x58\xc2")
    assert insn.opcode == Opcode.VADDPS
    assert insn.operands == (
        OprReg(Register.ZMM0),
        OprReg(Register.ZMM0),
        OprReg(Register.ZMM2),
    )
    assert insn.length == 6
    vex = insn.info.vex_info
    assert vex.vex_type.is_enhanced
    assert vex.vector_length == 512
    assert vex.evex.aaa == 0
    assert vex.evex.z is ZeroingOrMerging.Merging


def test_evex_opmask_and_zeroing():
    insn = parse(b"\x62\xf1\x7c\xc9\x58\xc2")
    assert insn.info.vex_info.evex.aaa == 1
    assert insn.info.vex_info.evex.z is ZeroingOrMerging.Zeroing


def test_evex_malformed_payload():
    with pytest.raises(InvalidPrefixError):
        parse(b"\x62\xf9\x7c\x48\x58\xc2")


def test_evex_reserved_length():
    with pytest.raises(InvalidPrefixError):
        parse(b"\x62\xf1\x7c\x68\x58\xc2")


def test_evex_r_prime_extends_reg_field():
    insn = parse(b"\x62\x61\x7c\x48\x58\xc2")
    assert insn.operands == (
        OprReg(Register.ZMM24),
        OprReg(Register.ZMM0),
        OprReg(Register.ZMM2),
    )


def test_evex_v_prime_and_x_extend_vvvv_and_rm():
    insn = parse(b"\x62\x91\x7c\x40\x58\xc2")
    assert insn.operands == (
        OprReg(Register.ZMM0),
        OprReg(Register.ZMM16),
        OprReg(Register.ZMM26),
    )


def test_evex_rounding_allows_top_length():
    insn = parse(b"\x62\xf1\x7c\x78\x58\xc2")
    assert insn.opcode == Opcode.VADDPS
    assert insn.info.vex_info.vector_length == 512
    assert insn.info.vex_info.evex.b
    assert insn.length == 6


@pytest.mark.parametrize(
    "mode, expected",
    [
        (64, (Register.XMM0, Register.XMM15, Register.XMM10)),
        (32, (Register.XMM0, Register.XMM7, Register.XMM2)),
    ],
)
def test_vex_outside_64bit_mode_drops_high_registers(mode, expected):
    insn = parse(b"\xc4\xc1\x00\x58\xc2", mode=mode)
    assert insn.opcode == Opcode.VADDPS
    assert insn.operands == tuple(OprReg(r) for r in expected)


def test_vsib_index_is_a_vector_register():
    insn = parse(b"\xc4\xe2\x69\x90\x04\x88")
    assert insn.opcode == Opcode.VPGATHERDD
    assert insn.operands == (
        OprReg(Register.XMM0),
        OprMem(Register.RAX, ScaledIndex(Register.XMM1, Scale.X4), None, 32),
        OprReg(Register.XMM2),
    )


@pytest.mark.parametrize(
    "data",
    [
        b"\xc4\xe2\x69\x90\xc1",  # register operand
        b"\xc4\xe2\x69\x90\x00",  # memory operand without SIB
    ],
)
def test_vsib_requires_sib_memory(data):
    with pytest.raises(UnknownOpcodeError):
        parse(data)


@pytest.mark.parametrize(
    "data, opcode, operands",
    [
        (b"\xc5\xf8\x92\xc8", Opcode.KMOVW, (Register.K1, Register.EAX)),
        (b"\xc4\xe1\xfb\x92\xc8", Opcode.KMOVQ, (Register.K1, Register.RAX)),
        (b"\xc5\xf9\x93\xc1", Opcode.KMOVB, (Register.EAX, Register.K1)),
        (b"\xc5\xf8\x44\xca", Opcode.KNOTW, (Register.K1, Register.K2)),
        (b"\xc5\xf4\x4b\xc2", Opcode.KUNPCKWD, (Register.K0, Register.K1, Register.K2)),
    ],
)
def test_opmask_registers(data, opcode, operands):
    insn = parse(data)
    assert insn.opcode == opcode
    assert insn.operands == tuple(OprReg(r) for r in operands)


@pytest.mark.parametrize(
    "data",
    [
        b"\xc5\xfc\x44\xca",  # knot has no 256-bit form
        b"\xc5\xf8\x41\xc2",  # kand has no 128-bit form
        b"\xc5\xf8\x91\xc1",  # kmov store needs memory
    ],
)
def test_opmask_length_and_form(data):
    with pytest.raises(UnknownOpcodeError):
        parse(data)


@pytest.mark.parametrize(
    "data, opcode",
    [
        (b"\x48\x0f\xc7\x28", Opcode.XSAVES64),
        (b"\x0f\xc7\x28", Opcode.XSAVES),
        (b"\x48\x0f\xc7\x20", Opcode.XSAVEC64),
        (b"\x48\x0f\xc7\x18", Opcode.XRSTORS64),
        (b"\xf3\x0f\x01\x28", Opcode.RSTORSSP),
        (b"\xf3\x0f\xae\x30", Opcode.CLRSSBSY),
        (b"\x0f\xae\x30", Opcode.XSAVEOPT),
        (b"\x66\x0f\x38\xf5\x08", Opcode.WRUSS),
        (b"\x66\x0f\x38\x82\x08", Opcode.INVPCID),
        (b"\x0f\x01\xef", Opcode.WRPKRU),
    ],
)
def test_system_group_members(data, opcode):
    assert parse(data).opcode == opcode


def test_les_in_32bit_mode():
    insn = parse(b"\xc4\x00", mode=32)
    assert insn.opcode == Opcode.LES
    assert insn.operands == (OprReg(Register.EAX), OprMem(Register.EAX, None, None, 48))
    assert insn.length == 2


@pytest.mark.parametrize(
    "data",
    [
        b"\x48\xc5\xf8\x77",
        b"\x41\xc4\xe2\x79\x00\xc1",
        b"\x66\xc5\xf8\x77",
        b"\xf3\xc5\xf8\x77",
        b"\xf0\x62\xf1\x7c\x48\x58\xc2",
    ],
)
def test_prefix_before_vex(data):
    with pytest.raises(InvalidPrefixError):
        parse(data)


@pytest.mark.parametrize("data", [b"\x48\x66\x90", b"\x48\x41\x90", b"\x48\xf3\x90"])
def test_rex_must_precede_opcode(data):
    with pytest.raises(InvalidPrefixError):
        parse(data)


@pytest.mark.parametrize("data", [b"\x06", b"\x27", b"\x9a\x00\x00\x00\x00\x00\x00"])
def test_invalid_in_64bit_mode(data):
    with pytest.raises(ModeError) as e:
        parse(data)
    assert not e.value.only_64


@pytest.mark.parametrize("mode", [16, 32])
def test_only_valid_in_64bit_mode(mode):
    with pytest.raises(ModeError) as e:
        parse(b"\x0f\x05", mode=mode)
    assert e.value.only_64


def test_unknown_opcode_reports_opcode_length():
    with pytest.raises(UnknownOpcodeError) as e:
        parse(b"\x0f\x04\x00\x00", address=0x10)
    assert e.value.length == 2
    assert e.value.opcode_bytes == b"\x0f\x04"
    assert e.value.address == 0x10


def test_unknown_group_member():
    with pytest.raises(UnknownOpcodeError) as e:
        parse(b"\xff\xf8")
    assert e.value.length == 1


@pytest.mark.parametrize(
    "data",
    [
        b"\x8d\xc0",  # lea with a register operand
        b"\x8e\xf8",  # segment register 7
        b"\x0f\x01\x28",  # group 7 /5 memory form needs F3
    ],
)
def test_forbidden_addressing_form(data):
    with pytest.raises(UnknownOpcodeError):
        parse(data)


@pytest.mark.parametrize(
    "data",
    [b"", b"\x66", b"\x48", b"\x0f", b"\xb8\x01\x00", b"\x8b", b"\x8b\x04", b"\xc5\xf8"],
)
def test_truncated(data):
    with pytest.raises(TruncatedInstructionError):
        parse(data)


def test_truncated_reports_sizes():
    with pytest.raises(TruncatedInstructionError) as e:
        parse(b"\xe8\x00\x00")
    assert e.value.available == 3
    assert e.value.needed == 5


def test_unsupported_mode():
    with pytest.raises(ValueError):
        parse(b"\x90", mode=8)


SAMPLES = [
    (b"\x90", 64),
    (b"\xc3", 64),
    (b"\x0f\x05", 64),
    (b"\x48\xc7\xc0\x05\x00\x00\x00", 64),
    (b"\xf3\x90", 64),
    (b"\xb8\x01\x00\x00\x00", 32),
    (b"\x64\x48\x8b\x04\x25\x28\x00\x00\x00", 64),
    (b"\x48\x8d\x04\x88", 64),
    (b"\xe8\x00\x01\x00\x00", 64),
    (b"\xc5\xf9\xef\xc0", 64),
    (b"\x62\xf1\x7c\x48\x58\xc2", 64),
    (b"\x8b\x46\xfe", 16),
]


@pytest.mark.parametrize("data, mode", SAMPLES)
def test_deterministic(data, mode):
    assert parse(data, 0x1000, mode) == parse(data, 0x1000, mode)


@pytest.mark.parametrize("data, mode", SAMPLES)
def test_length_soundness(data, mode):
    window = data + b"\xcc" * 8
    insn = parse(window, 0x1000, mode)
    assert insn.length == len(data)
    assert parse(window[: insn.length], 0x1000, mode) == insn
    for end in range(insn.length):
        with pytest.raises(DecodeError):
            parse(window[:end], 0x1000, mode)


def test_memoryview_input():
    data = bytearray(b"\x00\x00\x48\xc7\xc0\x05\x00\x00\x00")
    insn = parse(memoryview(data)[2:])
    assert insn.opcode == Opcode.MOV
    assert insn.length == 7


def test_ins_info_is_immutable():
    insn = parse(b"\x90")
    with pytest.raises(AttributeError):
        insn.info.opcode = Opcode.RETNear
