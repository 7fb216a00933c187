import os

from rich.progress import Progress
from rich.text import Text

from bintel.config import DEFAULT_MODE, SWEEP_LIMIT, BintelOptions
from bintel.lib.binary import load_binary, load_raw
from bintel.lib.callgraph import CallGraph
from bintel.lib.intel.parser import disassemble
from bintel.lib.intel.printer import render
from bintel.lib.utils import export_metadata, format_address, instruction_to_dict
from bintel.logger import LOG, console


def load_target(bintel_options: BintelOptions):
    """
    Loads the code to work on, either from a binary or a raw blob.

    Raises:
        UnsupportedBinaryError: the file is not an x86 ELF, PE or Mach-O.
    """
    if bintel_options.raw_mode:
        return load_raw(
            bintel_options.src_file,
            bintel_options.base_address,
            bintel_options.mode or DEFAULT_MODE,
        )
    loaded = load_binary(bintel_options.src_file)
    if bintel_options.mode and bintel_options.mode != loaded.mode:
        LOG.debug(f"Overriding decode mode {loaded.mode} with {bintel_options.mode}")
        loaded.mode = bintel_options.mode
    return loaded


def listing_line(insn, raw):
    """One line of the console listing."""
    return Text.assemble(
        (format_address(insn.address), "addr"),
        "  ",
        (f"{bytes(raw).hex(' '):<30}", "info"),
        " ",
        render(insn),
    )


def run_disasm_mode(bintel_options: BintelOptions) -> list:
    """
    Disassembles the code sections of the target and prints or exports the listing.

    Returns:
        list[dict]: One entry per section with its decoded instructions.
    """
    loaded = load_target(bintel_options)
    runner = DisasmRunner(limit=bintel_options.count or SWEEP_LIMIT)
    listing = runner.start(loaded)
    if bintel_options.json_mode:
        export_metadata(
            bintel_options.reports_dir,
            {"file_path": loaded.path, "mode": loaded.mode, "sections": listing},
            f"{os.path.basename(loaded.path)}-listing",
        )
    else:
        for section in listing:
            console.print(Text(f"{section['name']}:", style="bold"))
            for line in runner.lines[section["name"]]:
                console.print(line)
    return listing


def run_show_mode(bintel_options: BintelOptions) -> str:
    """Builds the call graph of the target and returns the requested report."""
    loaded = load_target(bintel_options)
    graph = CallGraph.from_binary(loaded)
    output = graph.show(bintel_options.show_component, bintel_options.show_args)
    console.print(output, markup=False, highlight=False)
    return output


class DisasmRunner:
    """Class to sweep the code sections of a binary."""

    def __init__(self, limit=0):
        self.limit = limit
        self.lines = {}
        self.progress = Progress(
            transient=True,
            redirect_stderr=True,
            redirect_stdout=True,
            refresh_per_second=1,
        )
        self.task = None

    def start(self, loaded):
        """Sweeps every code section of ``loaded``.

        Returns:
            list[dict]: name, address and instructions of every section.
        """
        listing = []
        with self.progress:
            self.task = self.progress.add_task(
                f"[green] Disassembling {len(loaded.sections)} section(s)",
                total=len(loaded.sections),
                start=True,
            )
            remaining = self.limit
            for section in loaded.sections:
                self.progress.update(self.task, description=f"Sweeping [bold]{section.name}[/bold]")
                instructions = self._sweep(section, loaded.mode, remaining)
                listing.append(
                    {
                        "name": section.name,
                        "address": format_address(section.address),
                        "instructions": instructions,
                    }
                )
                self.progress.advance(self.task)
                if self.limit:
                    remaining -= len(instructions)
                    if remaining <= 0:
                        break
        return listing

    def _sweep(self, section, mode, limit):
        entries = []
        lines = self.lines.setdefault(section.name, [])
        for insn in disassemble(section.content, section.address, mode):
            start = insn.address - section.address
            raw = section.content[start:start + insn.length]
            entries.append(instruction_to_dict(insn, raw))
            lines.append(listing_line(insn, raw))
            if limit and len(entries) >= limit:
                break
        return entries
