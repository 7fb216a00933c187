#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import os
import sys

from bintel.config import BINTEL_REPORTS_DIR, SUPPORTED_MODES, BintelOptions
from bintel.lib.binary import UnsupportedBinaryError
from bintel.lib.runners import run_disasm_mode, run_show_mode
from bintel.logger import LOG

BINTEL_LOGO = """
██████╗ ██╗███╗   ██╗████████╗███████╗██╗
██╔══██╗██║████╗  ██║╚══██╔══╝██╔════╝██║
██████╔╝██║██╔██╗ ██║   ██║   █████╗  ██║
██╔══██╗██║██║╚██╗██║   ██║   ██╔══╝  ██║
██████╔╝██║██║ ╚████║   ██║   ███████╗███████╗
╚═════╝ ╚═╝╚═╝  ╚═══╝   ╚═╝   ╚══════╝╚══════╝
"""


def build_args(argv=None):
    """
    Constructs command line arguments for the bintel tool
    """
    parser = build_parser()
    return parser.parse_args(argv)


def _address(value):
    return int(value, 0)


def _add_common_arguments(parser):
    parser.add_argument(
        "-i",
        "--src",
        dest="src_file",
        required=True,
        help="Binary (ELF, PE or Mach-O) or raw code blob to process.",
    )
    parser.add_argument(
        "--mode",
        dest="mode",
        type=int,
        choices=SUPPORTED_MODES,
        default=0,
        help="Decode mode. Defaults to the machine type of the binary, or 64 with --raw.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        default=False,
        dest="raw_mode",
        help="Treat the input as a flat code blob.",
    )
    parser.add_argument(
        "--base",
        dest="base_address",
        type=_address,
        default=0,
        help="Load address of a raw code blob, e.g. 0x401000.",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bintel",
        description="x86 and x86-64 disassembler with a caller/callee index.",
    )
    parser.set_defaults(
        show_mode=False,
        count=0,
        json_mode=False,
        show_component="",
        show_args=[],
    )
    parser.add_argument(
        "-o",
        "--reports",
        dest="reports_dir",
        default=BINTEL_REPORTS_DIR,
        help="Reports directory. Defaults to reports.",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        default=False,
        dest="no_banner",
        help="Do not display banner.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        dest="quiet_mode",
        help="Disable logging and progress bars.",
    )
    subparsers = parser.add_subparsers(
        title="sub-commands",
        description="Additional sub-commands",
        dest="subcommand_name",
        required=True,
    )
    disasm_parser = subparsers.add_parser(
        "disasm", help="Linear sweep disassembly of the code sections."
    )
    _add_common_arguments(disasm_parser)
    disasm_parser.add_argument(
        "--count",
        dest="count",
        type=int,
        default=0,
        help="Maximum number of instructions to list. Defaults to all.",
    )
    disasm_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        dest="json_mode",
        help="Export the listing as JSON into the reports directory.",
    )
    show_parser = subparsers.add_parser(
        "show", help="Show information about callers and callees."
    )
    show_parser.set_defaults(show_mode=True)
    show_parser.add_argument(
        "show_component",
        choices=["caller", "callee", "function"],
        help="caller <instruction addr in hex> or callee/function <callee name or addr in hex>",
    )
    show_parser.add_argument(
        "show_args",
        nargs=1,
        metavar="NAME_OR_ADDR",
        help="Call site address, callee name or callee address.",
    )
    _add_common_arguments(show_parser)
    return parser


def handle_args(argv=None):
    """Handles the command-line arguments.

    This function parses the command-line arguments and returns a BintelOptions object

    Returns:
        BintelOptions: A class containing the parsed command-line arguments
    """
    args = build_args(argv)
    if not args.no_banner and not args.quiet_mode:
        print(BINTEL_LOGO)
    return BintelOptions(
        src_file=args.src_file,
        mode=args.mode,
        raw_mode=args.raw_mode,
        base_address=args.base_address,
        count=args.count,
        json_mode=args.json_mode,
        reports_dir=args.reports_dir,
        show_mode=args.show_mode,
        show_component=args.show_component,
        show_args=args.show_args,
        quiet_mode=args.quiet_mode,
        no_banner=args.no_banner,
    )


def main(argv=None):
    """Main function of the bintel tool"""
    bintel_options = handle_args(argv)
    if bintel_options.quiet_mode:
        LOG.disabled = True
    if not os.path.isfile(bintel_options.src_file):
        LOG.error(f"{bintel_options.src_file} is not a file.")
        sys.exit(1)
    try:
        if bintel_options.show_mode:
            run_show_mode(bintel_options)
        else:
            run_disasm_mode(bintel_options)
    except UnsupportedBinaryError as e:
        LOG.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
