"""Caller/callee index built from direct near calls.

The graph is collected by a linear sweep over code sections. Every
``call rel`` records an edge from the call site to the call target. The text
reports follow the ``show`` command of an interactive binary explorer:

    show caller <instruction addr in hex>
    show callee/function <callee name or addr in hex>
"""
from dataclasses import dataclass, field
from typing import Optional

from bintel.config import SWEEP_LIMIT, UNNAMED_FUNCTION_PREFIX
from bintel.lib.intel.parser import disassemble
from bintel.logger import LOG

NOT_FOUND = "[*] Not found."

SHOW_HELP = (
    "Usage: show <component> [option(s)]\n\n"
    "Show information about an abstract component.\n"
    "<component> is an abstract component in the binary, and subcommands are:\n"
    "  - caller <instruction addr in hex>\n"
    "  - callee/function <callee name or addr in hex>"
)


@dataclass
class Callee:
    name: str
    address: Optional[int] = None
    callers: list = field(default_factory=list)

    def summary(self, prefix=""):
        if self.address is None:
            return f"{prefix}{self.name}"
        return f"{prefix}{self.name} @ {self.address:X}"

    def describe(self):
        lines = [self.summary()]
        lines += [f"  - referenced by {caller:X}" for caller in self.callers]
        return "\n".join(lines)


def parse_hex(expr):
    """Parses a hex address with or without 0x. Returns None when invalid."""
    try:
        return int(expr, 16)
    except (TypeError, ValueError):
        return None


class CallGraph:
    """Call sites and callees of a binary."""

    def __init__(self, functions=None):
        self.functions = dict(functions or {})
        # call site -> set of callee addresses
        self.caller_map = {}
        # callee address -> Callee
        self.callee_map = {}
        self._by_name = {}

    def callee_name(self, address):
        return self.functions.get(address) or f"{UNNAMED_FUNCTION_PREFIX}{address:x}"

    def add_call(self, site, target):
        callee = self.callee_map.get(target)
        if callee is None:
            callee = Callee(self.callee_name(target), target)
            self.callee_map[target] = callee
            self._by_name.setdefault(callee.name, callee)
        if site not in callee.callers:
            callee.callers.append(site)
        self.caller_map.setdefault(site, set()).add(target)

    def add_section(self, section, mode, limit=SWEEP_LIMIT):
        """Sweeps one code section and records its direct calls."""
        count = 0
        for insn in disassemble(section.content, section.address, mode):
            if insn.is_direct_call():
                self.add_call(insn.address, insn.branch_target())
            count += 1
            if limit and count >= limit:
                LOG.debug(f"Stopped sweeping {section.name} after {count} instructions")
                break
        return count

    @classmethod
    def from_binary(cls, loaded, limit=SWEEP_LIMIT):
        graph = cls(loaded.functions)
        for section in loaded.sections:
            graph.add_section(section, loaded.mode, limit)
        LOG.debug(f"Found {len(graph.callee_map)} callees from {len(graph.caller_map)} call sites")
        return graph

    def find_by_address(self, address):
        return self.callee_map.get(address)

    def find_by_name(self, name):
        return self._by_name.get(name)

    def callees_of(self, site):
        """Callees of a call site sorted by address."""
        return [self.callee_map[t] for t in sorted(self.caller_map.get(site, ()))]

    def show_caller(self, expr):
        site = parse_hex(expr)
        if site is None or site not in self.caller_map:
            return NOT_FOUND
        lines = [f"{expr} calls:"]
        lines += [callee.summary("  - ") for callee in self.callees_of(site)]
        return "\n".join(lines)

    def show_callee(self, expr):
        if expr[:1].isdigit():
            callee = self.find_by_address(parse_hex(expr))
        else:
            callee = self.find_by_name(expr)
        if callee is None:
            return NOT_FOUND
        return callee.describe()

    def show(self, component, args):
        """Dispatches a ``show`` subcommand. Unknown input yields the usage text."""
        if not component or not args:
            return SHOW_HELP
        component = component.lower()
        if component == "caller":
            return self.show_caller(args[0])
        if component in ("callee", "function"):
            return self.show_callee(args[0])
        return SHOW_HELP
