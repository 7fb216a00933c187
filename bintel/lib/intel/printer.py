"""Intel-syntax rendering of decoded instructions."""
from bintel.lib.intel.opcodes import Opcode
from bintel.lib.intel.registers import register_size
from bintel.lib.intel.types import (
    Absolute,
    OprDirAddr,
    OprImm,
    OprMem,
    OprReg,
    Prefix,
    ZeroingOrMerging,
)

_SIZE_NAMES = {
    8: "byte",
    16: "word",
    32: "dword",
    48: "fword",
    64: "qword",
    80: "tword",
    128: "xmmword",
    256: "ymmword",
    512: "zmmword",
}

_MNEMONICS = {
    Opcode.RETNear: "ret",
    Opcode.RETNearImm: "ret",
    Opcode.RETFar: "retf",
    Opcode.RETFarImm: "retf",
    Opcode.CALLNear: "call",
    Opcode.CALLFar: "call far",
    Opcode.JMPNear: "jmp",
    Opcode.JMPFar: "jmp far",
}

STRING_OPCODES = frozenset(
    {
        Opcode.MOVSB, Opcode.MOVSW, Opcode.MOVSD, Opcode.MOVSQ,
        Opcode.CMPSB, Opcode.CMPSW, Opcode.CMPSD, Opcode.CMPSQ,
        Opcode.STOSB, Opcode.STOSW, Opcode.STOSD, Opcode.STOSQ,
        Opcode.LODSB, Opcode.LODSW, Opcode.LODSD, Opcode.LODSQ,
        Opcode.SCASB, Opcode.SCASW, Opcode.SCASD, Opcode.SCASQ,
        Opcode.INSB, Opcode.INSW, Opcode.INSD,
        Opcode.OUTSB, Opcode.OUTSW, Opcode.OUTSD,
    }
)
_COMPARE_STRINGS = frozenset(
    {
        Opcode.CMPSB, Opcode.CMPSW, Opcode.CMPSD, Opcode.CMPSQ,
        Opcode.SCASB, Opcode.SCASW, Opcode.SCASD, Opcode.SCASQ,
    }
)
_SEGMENT_NAMES = (
    (Prefix.CS, "cs"),
    (Prefix.SS, "ss"),
    (Prefix.DS, "ds"),
    (Prefix.ES, "es"),
    (Prefix.FS, "fs"),
    (Prefix.GS, "gs"),
)


def mnemonic(opcode):
    return _MNEMONICS.get(opcode, opcode.name.lower())


def _hex(value):
    return f"-{-value:#x}" if value < 0 else f"{value:#x}"


def is_string_form(info):
    """True for the legacy string instructions, not their SSE namesakes (MOVSD, CMPSD)."""
    if info.opcode not in STRING_OPCODES or info.vex_info is not None:
        return False
    return not any(
        isinstance(o, OprReg) and register_size(o.reg) >= 128 for o in info.operands
    )


def _prefix_names(info):
    names = []
    if info.prefixes & Prefix.LOCK:
        names.append("lock")
    if is_string_form(info):
        if info.prefixes & Prefix.REPNZ:
            names.append("repne")
        elif info.prefixes & Prefix.REPZ:
            names.append("repe" if info.opcode in _COMPARE_STRINGS else "rep")
    return names


def _segment_name(prefixes):
    for flag, name in _SEGMENT_NAMES:
        if prefixes & flag:
            return name
    return None


def _render_memory(insn, operand):
    info = insn.info
    terms = []
    if operand.base is not None:
        terms.append(operand.base.name.lower())
    if operand.index is not None:
        index = operand.index.reg.name.lower()
        scale = int(operand.index.scale)
        terms.append(f"{index}*{scale}" if scale > 1 else index)
    expr = " + ".join(terms)
    disp = operand.disp
    if not terms:
        mask = (1 << info.ins_size.mem_size.eff_addr_size) - 1
        expr = f"{(disp or 0) & mask:#x}"
    elif disp:
        expr += f" - {-disp:#x}" if disp < 0 else f" + {disp:#x}"
    segment = _segment_name(info.prefixes)
    text = f"{segment}:[{expr}]" if segment else f"[{expr}]"
    size_name = _SIZE_NAMES.get(operand.size)
    if size_name and info.opcode is not Opcode.LEA:
        return f"{size_name} ptr {text}"
    return text


def render_operand(insn, operand):
    if isinstance(operand, OprReg):
        return operand.reg.name.lower()
    if isinstance(operand, OprMem):
        return _render_memory(insn, operand)
    if isinstance(operand, OprImm):
        return _hex(operand.value)
    if isinstance(operand, OprDirAddr):
        if isinstance(operand.target, Absolute):
            return f"{operand.target.selector:#x}:{operand.target.offset:#x}"
        return f"{insn.branch_target():#x}"
    raise TypeError(f"Unexpected operand {operand!r}")


def _evex_decorations(info):
    evex = info.vex_info.evex if info.vex_info else None
    if evex is None:
        return ""
    text = f" {{k{evex.aaa}}}" if evex.aaa else ""
    if evex.z is ZeroingOrMerging.Zeroing:
        text += "{z}"
    return text


def _stack_size_hint(info):
    """Width keyword for a push of an immediate whose size an OPSIZE prefix changed."""
    if info.opcode is not Opcode.PUSH or not info.prefixes & Prefix.OPSIZE:
        return ""
    if len(info.operands) != 1 or not isinstance(info.operands[0], OprImm):
        return ""
    return f"{_SIZE_NAMES[info.ins_size.reg_size]} "


def render(insn):
    """Returns the Intel-syntax text of a decoded instruction, e.g. ``mov rax, 0x5``."""
    info = insn.info
    operands = [render_operand(insn, o) for o in info.operands]
    if operands:
        operands[0] = _stack_size_hint(info) + operands[0] + _evex_decorations(info)
    text = " ".join(_prefix_names(info) + [mnemonic(info.opcode)])
    if operands:
        text = f"{text} {', '.join(operands)}"
    return text
