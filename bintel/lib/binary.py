"""Loading executable code out of ELF, PE and Mach-O images."""
import contextlib
from dataclasses import dataclass, field

import lief

from bintel.config import ADDRESS_FMT
from bintel.lib.demangle import demangle_symbolic_name
from bintel.logger import DEBUG, LOG

# Enable lief logging in debug mode
if LOG.level != DEBUG:
    lief.logging.disable()

# Machine names as printed by lief, upper-cased. Value is the decode mode.
MACHINE_MODES = {
    "X86_64": 64,
    "AMD64": 64,
    "I386": 32,
    "X86": 32,
}

ELF_SHF_EXECINSTR = 0x4
PE_SCN_CNT_CODE = 0x20
PE_SCN_MEM_EXECUTE = 0x20000000
MACHO_S_ATTR_SOME_INSTRUCTIONS = 0x400
MACHO_S_ATTR_PURE_INSTRUCTIONS = 0x80000000


class UnsupportedBinaryError(Exception):
    """The file cannot be parsed or targets a non-x86 machine."""


@dataclass(frozen=True)
class CodeSection:
    name: str
    address: int
    content: bytes

    def __len__(self):
        return len(self.content)


@dataclass
class LoadedBinary:
    """
    Executable code of a binary together with the function symbols.

    Attributes:
        path (str): File the binary was loaded from.
        mode (int): Decode mode derived from the machine type.
        sections (list[CodeSection]): Executable sections in file order.
        functions (dict): Function address -> demangled name.
    """
    path: str
    mode: int
    sections: list = field(default_factory=list)
    functions: dict = field(default_factory=dict)


def _enum_name(value):
    return str(value).rsplit(".", maxsplit=1)[-1].upper()


def machine_mode(parsed_obj):
    """
    Returns the decode mode for the machine type of a parsed binary.

    Args:
        parsed_obj: lief binary object.

    Returns:
        int: 32 or 64, or None for a machine the decoder does not handle.
    """
    header = parsed_obj.header
    fmt = parsed_obj.format
    if fmt == lief.Binary.FORMATS.ELF:
        machine = header.machine_type
    elif fmt == lief.Binary.FORMATS.PE:
        machine = header.machine
    elif fmt == lief.Binary.FORMATS.MACHO:
        machine = header.cpu_type
    else:
        return None
    return MACHINE_MODES.get(_enum_name(machine))


def _image_base(parsed_obj):
    if parsed_obj.format == lief.Binary.FORMATS.PE:
        return parsed_obj.optional_header.imagebase
    return 0


def _is_executable(parsed_obj, section):
    fmt = parsed_obj.format
    if fmt == lief.Binary.FORMATS.ELF:
        return bool(int(section.flags) & ELF_SHF_EXECINSTR)
    if fmt == lief.Binary.FORMATS.PE:
        return bool(section.characteristics & (PE_SCN_CNT_CODE | PE_SCN_MEM_EXECUTE))
    if fmt == lief.Binary.FORMATS.MACHO:
        return bool(
            int(section.flags)
            & (MACHO_S_ATTR_PURE_INSTRUCTIONS | MACHO_S_ATTR_SOME_INSTRUCTIONS)
        )
    return False


def code_sections(parsed_obj):
    """
    Collects the executable sections of a parsed binary.

    Args:
        parsed_obj: lief binary object.

    Returns:
        list[CodeSection]: Sections with their virtual address and raw bytes.
    """
    base = _image_base(parsed_obj)
    sections = []
    for section in parsed_obj.sections:
        if not _is_executable(parsed_obj, section):
            continue
        content = bytes(section.content)
        if not content:
            LOG.debug(f"Skipping empty code section {section.name}")
            continue
        sections.append(CodeSection(section.name, base + section.virtual_address, content))
    return sections


def function_symbols(parsed_obj):
    """
    Maps function addresses to demangled names.

    Args:
        parsed_obj: lief binary object.

    Returns:
        dict: address -> name for every named function lief knows about.
    """
    base = _image_base(parsed_obj)
    functions = {}
    with contextlib.suppress(AttributeError, TypeError):
        LOG.debug("Parsing functions")
        for f in parsed_obj.functions:
            if f.name and f.address:
                address = base + f.address
                functions.setdefault(address, demangle_symbolic_name(f.name))
    return functions


def load_binary(path):
    """
    Parse the executable using lief and capture its code.

    :param: path Binary file
    :return LoadedBinary
    """
    try:
        parsed_obj = lief.parse(path)
    except (AttributeError, TypeError, ValueError) as e:
        raise UnsupportedBinaryError(f"Caught {type(e)}: {e} while parsing {path}.") from e
    if parsed_obj is None:
        raise UnsupportedBinaryError(f"{path} is not an ELF, PE or Mach-O binary.")
    mode = machine_mode(parsed_obj)
    if mode is None:
        raise UnsupportedBinaryError(f"{path} does not target an x86 machine.")
    sections = code_sections(parsed_obj)
    for section in sections:
        LOG.debug(
            f"Code section {section.name} at {ADDRESS_FMT.format(section.address).strip()}"
            f" ({len(section)} bytes)"
        )
    return LoadedBinary(path, mode, sections, function_symbols(parsed_obj))


def load_raw(path, base_address=0, mode=64):
    """Wraps a flat code blob as a single code section."""
    with open(path, "rb") as fp:
        content = fp.read()
    return LoadedBinary(path, mode, [CodeSection("raw", base_address, content)], {})
