import orjson
import pytest

from bintel.cli import build_args, handle_args, main
from bintel.config import BintelOptions
from bintel.lib.runners import run_show_mode


def test_build_args_disasm():
    args = build_args(["disasm", "-i", "a.out", "--mode", "32", "--count", "10", "--json"])
    assert args.subcommand_name == "disasm"
    assert args.src_file == "a.out"
    assert args.mode == 32
    assert args.count == 10
    assert args.json_mode
    assert not args.show_mode


def test_build_args_show():
    args = build_args(["show", "callee", "main", "-i", "a.out", "--raw", "--base", "0x1000"])
    assert args.show_mode
    assert args.show_component == "callee"
    assert args.show_args == ["main"]
    assert args.raw_mode
    assert args.base_address == 0x1000


def test_build_args_rejects_bad_mode():
    with pytest.raises(SystemExit):
        build_args(["disasm", "-i", "a.out", "--mode", "8"])


def test_handle_args_quiet(capsys):
    opts = handle_args(["-q", "disasm", "-i", "a.out"])
    assert isinstance(opts, BintelOptions)
    assert opts.quiet_mode
    assert capsys.readouterr().out == ""


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--no-banner", "disasm", "-i", str(tmp_path / "missing.bin")])
    assert exc.value.code == 1


def test_main_raw_json_listing(tmp_path):
    blob = tmp_path / "code.bin"
    blob.write_bytes(b"\x55\xe8\x00\x00\x00\x00\xc3")
    reports = tmp_path / "reports"
    main(
        [
            "--no-banner",
            "-q",
            "-o",
            str(reports),
            "disasm",
            "-i",
            str(blob),
            "--raw",
            "--base",
            "0x1000",
            "--json",
        ]
    )
    listing = orjson.loads((reports / "code.bin-listing.json").read_bytes())
    assert listing["mode"] == 64
    section = listing["sections"][0]
    assert section["name"] == "raw"
    assert section["address"] == "0x1000"
    assert [i["text"] for i in section["instructions"]] == ["push rbp", "call 0x1006", "ret"]
    assert section["instructions"][1]["bytes"] == "e800000000"
    assert section["instructions"][1]["target"] == "0x1006"


def test_show_mode_raw(tmp_path):
    blob = tmp_path / "code.bin"
    blob.write_bytes(b"\xe8\x00\x00\x00\x00\xc3")
    opts = BintelOptions(
        src_file=str(blob),
        raw_mode=True,
        base_address=0x1000,
        show_mode=True,
        show_component="caller",
        show_args=["1000"],
    )
    assert run_show_mode(opts) == "1000 calls:\n  - func_1005 @ 1005"
