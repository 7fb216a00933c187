import os
from pathlib import Path
from typing import Dict

import orjson
from custom_json_diff.lib.utils import file_write

from bintel.config import ADDRESS_FMT
from bintel.lib.intel.opcodes import BRANCH_OPCODES, CALL_OPCODES, RETURN_OPCODES
from bintel.lib.intel.printer import mnemonic, render
from bintel.logger import LOG


def json_serializer(obj):
    """JSON serializer to help serialize problematic types such as bytes"""
    if isinstance(obj, (bytes, memoryview)):
        return bytes(obj).hex()
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def export_metadata(directory: str, metadata: Dict, mtype: str):
    """
    Exports metadata to file.
    """
    if not os.path.exists(directory):
        os.makedirs(directory)
    outfile = str(Path(directory) / f"{mtype.lower()}.json")
    output = orjson.dumps(metadata, default=json_serializer, option=orjson.OPT_INDENT_2).decode(
        "utf-8", "ignore"
    )
    file_write(outfile, output, success_msg=f"Listing written to {outfile}", log=LOG)
    return outfile


def format_address(address):
    return ADDRESS_FMT.format(address).strip()


def control_flow_kind(opcode):
    """Returns call, branch or return for control transfer opcodes, else None."""
    if opcode in CALL_OPCODES:
        return "call"
    if opcode in BRANCH_OPCODES:
        return "branch"
    if opcode in RETURN_OPCODES:
        return "return"
    return None


def instruction_to_dict(insn, raw=b""):
    """
    Converts a decoded instruction into a JSON friendly dict.

    Args:
        insn (Instruction): Decoded instruction.
        raw (bytes): The instruction bytes.

    Returns:
        dict: address, size, bytes, mnemonic and Intel syntax text. Control
        transfers carry their kind and direct branches their resolved target.
    """
    entry = {
        "address": format_address(insn.address),
        "size": insn.length,
        "bytes": bytes(raw),
        "mnemonic": mnemonic(insn.opcode),
        "text": render(insn),
    }
    if kind := control_flow_kind(insn.opcode):
        entry["flow"] = kind
    if (target := insn.branch_target()) is not None:
        entry["target"] = format_address(target)
    return entry
