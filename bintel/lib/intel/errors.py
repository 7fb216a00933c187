"""Failure kinds raised by the x86 decoder.

Two categories exist. ``DecodeError`` and its subclasses describe malformed or
unsupported input and are meant to be handled by callers (a sweep may skip a
byte and continue). ``InvalidRegAccessError`` signals that the tables asked
for a register that does not exist, which is a defect in this package and is
deliberately kept outside the ``DecodeError`` hierarchy.
"""


class InvalidRegAccessError(RuntimeError):
    """A register-resolution case the tables should never produce."""

    def __init__(self, size, index, attr=None):
        self.size = size
        self.index = index
        self.attr = attr
        super().__init__(
            f"No register for index {index} with size {size} (attr={attr})"
        )


class DecodeError(Exception):
    """Base class for recoverable decode failures."""

    def __init__(self, address=0, message=""):
        self.address = address
        super().__init__(f"{message} at 0x{address:x}" if message else f"0x{address:x}")


class InvalidPrefixError(DecodeError):
    """Prefix bytes appear in an order or combination the ISA forbids."""

    def __init__(self, address=0, reason="invalid prefix combination"):
        self.reason = reason
        super().__init__(address, reason)


class ModeError(DecodeError):
    """The encoding is not valid in the current decode mode."""

    def __init__(self, address=0, mode=64, only_64=False):
        self.mode = mode
        self.only_64 = only_64
        if only_64:
            message = f"encoding is only valid in 64-bit mode (mode={mode})"
        else:
            message = "encoding is invalid in 64-bit mode"
        super().__init__(address, message)


class UnknownOpcodeError(DecodeError):
    """No table entry matches the opcode bytes.

    ``length`` is the number of bytes consumed up to and including the opcode
    bytes, which callers may use to skip an opaque instruction.
    """

    def __init__(self, address=0, length=1, opcode_bytes=b""):
        self.length = length
        self.opcode_bytes = bytes(opcode_bytes)
        super().__init__(address, f"unknown opcode {self.opcode_bytes.hex()}")


class TruncatedInstructionError(DecodeError):
    """The byte window ended before the instruction was complete."""

    def __init__(self, address=0, needed=1, available=0):
        self.needed = needed
        self.available = available
        super().__init__(
            address, f"instruction truncated after {available} bytes"
        )
