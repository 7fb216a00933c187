from bintel.lib.intel.opcodes import Opcode
from bintel.lib.intel.tables import (
    GROUPS,
    ONE_BYTE,
    OPCODE_MAPS,
    X87_MEM,
    X87_REG,
    X87_REG_EXACT,
    InsDesc,
    Selector,
)

# Mnemonic aliases, prefix names and x87 waiting forms the decoder never emits
NOT_DECODED = {
    Opcode.CMOVC, Opcode.CMOVNC, Opcode.JC, Opcode.JNC,
    Opcode.INS, Opcode.OUTS, Opcode.IRET, Opcode.XLAT,
    Opcode.FWAIT, Opcode.FCLEX, Opcode.FINIT, Opcode.FSAVE,
    Opcode.FSTCW, Opcode.FSTENV, Opcode.FSTSW,
    Opcode.LOCK, Opcode.REP, Opcode.REPE, Opcode.REPNE, Opcode.REPNZ, Opcode.REPZ,
    Opcode.XACQUIRE, Opcode.XRELEASE,
    Opcode.PAUSE,
    Opcode.VEXP2SS, Opcode.VEXP2SD, Opcode.VPMOVB2D,
    Opcode.InvalOP,
}


def _reachable_opcodes():
    found = set()
    pending = [ONE_BYTE, GROUPS, X87_MEM, X87_REG, X87_REG_EXACT, *OPCODE_MAPS.values()]
    while pending:
        item = pending.pop()
        if isinstance(item, Opcode):
            found.add(item)
        elif isinstance(item, InsDesc):
            found.add(item.opcode)
        elif isinstance(item, dict):
            pending.extend(item.values())
        elif isinstance(item, tuple):
            pending.extend(item)
        elif isinstance(item, Selector):
            pending.extend(getattr(item, slot) for slot in item.__slots__)
    return found


def test_every_opcode_is_decodable():
    assert set(Opcode) - _reachable_opcodes() == NOT_DECODED


def test_not_decoded_members_stay_unreachable():
    assert not NOT_DECODED & _reachable_opcodes()
