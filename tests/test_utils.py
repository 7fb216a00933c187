from unittest.mock import patch

import orjson

from bintel.lib.intel.opcodes import Opcode
from bintel.lib.intel.parser import parse
from bintel.lib.utils import (
    control_flow_kind,
    export_metadata,
    format_address,
    instruction_to_dict,
)


def test_control_flow_kind():
    assert control_flow_kind(Opcode.CALLNear) == "call"
    assert control_flow_kind(Opcode.JZ) == "branch"
    assert control_flow_kind(Opcode.RETNear) == "return"
    assert control_flow_kind(Opcode.MOV) is None


def test_instruction_to_dict():
    raw = b"\x74\x02"
    entry = instruction_to_dict(parse(raw, address=0x401000), raw)
    assert entry == {
        "address": "0x401000",
        "size": 2,
        "bytes": raw,
        "mnemonic": "jz",
        "text": "jz 0x401004",
        "flow": "branch",
        "target": "0x401004",
    }


def test_export_metadata(tmp_path):
    outfile = export_metadata(str(tmp_path / "out"), {"bytes": b"\x90\xc3"}, "Listing")
    assert outfile.endswith("listing.json")
    with open(outfile, "rb") as fp:
        assert orjson.loads(fp.read()) == {"bytes": "90c3"}


def test_export_metadata_writes_through_file_write(tmp_path):
    with patch("bintel.lib.utils.file_write") as writer:
        outfile = export_metadata(str(tmp_path), {"mode": 64}, "Listing")
    writer.assert_called_once()
    assert writer.call_args.args[0] == outfile
    assert orjson.loads(writer.call_args.args[1]) == {"mode": 64}


def test_format_address():
    assert format_address(0x10) == "0x10"
