import os
from dataclasses import dataclass, field


def get_int_from_env(name, default):
    """
    Retrieves a value from an environment variable and converts it to an
    integer. If the value cannot be converted, the default is returned.
    """
    value = os.getenv(name, default)
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


# Architectural upper bound of a single x86 instruction. The sweep hands the
# decoder windows of this size.
MAX_INSN_LENGTH = get_int_from_env("BINTEL_MAX_INSN_LENGTH", 15)

# Decode mode used when the machine type cannot tell us.
DEFAULT_MODE = get_int_from_env("BINTEL_DEFAULT_MODE", 64)

SUPPORTED_MODES = (16, 32, 64)

# Maximum number of instructions decoded per code section. 0 = unlimited
SWEEP_LIMIT = get_int_from_env("BINTEL_SWEEP_LIMIT", 0)

BINTEL_REPORTS_DIR = os.getenv(
    "BINTEL_REPORTS_DIR", os.path.join(os.getcwd(), "reports")
)

ADDRESS_FMT = "0x{:<10x}"

# Prefix used for callees without a symbol
UNNAMED_FUNCTION_PREFIX = "func_"


@dataclass
class BintelOptions:
    """
    A class to hold the options for the bintel command line.

    Attributes:
        src_file (str): Binary or raw code blob to process.
        mode (int): Decode mode (16, 32 or 64). 0 lets the loader decide.
        raw_mode (bool): Treat the input as a flat code blob.
        base_address (int): Load address of a raw blob.
        count (int): Maximum number of instructions to list. 0 = unlimited.
        json_mode (bool): Export the listing as JSON.
        reports_dir (str): Directory for exported reports.
        show_mode (bool): Run the caller/callee report instead of a listing.
        show_component (str): ``caller``, ``callee`` or ``function``.
        show_args (list): Arguments for the component.
        quiet_mode (bool): Disable logging.
        no_banner (bool): Do not print the banner.
    """
    src_file: str = ""
    mode: int = 0
    raw_mode: bool = False
    base_address: int = 0
    count: int = 0
    json_mode: bool = False
    reports_dir: str = BINTEL_REPORTS_DIR
    show_mode: bool = False
    show_component: str = ""
    show_args: list = field(default_factory=list)
    quiet_mode: bool = False
    no_banner: bool = False

    def __post_init__(self):
        if self.mode and self.mode not in SUPPORTED_MODES:
            raise ValueError(f"Unsupported decode mode {self.mode}")
        if self.count < 0:
            self.count = 0
