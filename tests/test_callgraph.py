import pytest

from bintel.lib.binary import CodeSection, LoadedBinary
from bintel.lib.callgraph import NOT_FOUND, SHOW_HELP, CallGraph, Callee, parse_hex

CODE = (
    b"\xe8\x0b\x00\x00\x00"  # 1000: call 1010
    b"\xe8\x06\x00\x00\x00"  # 1005: call 1010
    b"\xe8\x11\x00\x00\x00"  # 100a: call 1020
    b"\xc3"  # 100f: ret
    b"\x31\xc0\xc3"  # 1010: xor eax, eax; ret
    + b"\x90" * 13
    + b"\xc3"  # 1020: ret
)


@pytest.fixture
def graph():
    loaded = LoadedBinary(
        path="test.bin",
        mode=64,
        sections=[CodeSection(".text", 0x1000, CODE)],
        functions={0x1010: "main"},
    )
    return CallGraph.from_binary(loaded)


def test_call_edges(graph):
    assert graph.caller_map == {0x1000: {0x1010}, 0x1005: {0x1010}, 0x100A: {0x1020}}
    assert sorted(graph.callee_map) == [0x1010, 0x1020]


def test_show_caller(graph):
    assert graph.show("caller", ["1000"]) == "1000 calls:\n  - main @ 1010"
    assert graph.show("caller", ["0x100a"]) == "0x100a calls:\n  - func_1020 @ 1020"


def test_show_callee_by_name(graph):
    assert graph.show("callee", ["main"]) == (
        "main @ 1010\n  - referenced by 1000\n  - referenced by 1005"
    )


def test_show_callee_by_address(graph):
    assert graph.show("function", ["1020"]) == "func_1020 @ 1020\n  - referenced by 100A"
    assert graph.show("callee", ["1010"]) == graph.show("callee", ["main"])


@pytest.mark.parametrize(
    "component, args",
    [
        ("caller", ["100f"]),
        ("caller", ["zz"]),
        ("callee", ["printf"]),
        ("callee", ["2000"]),
    ],
)
def test_show_not_found(graph, component, args):
    assert graph.show(component, args) == NOT_FOUND


@pytest.mark.parametrize(
    "component, args",
    [("", ["1000"]), ("caller", []), ("symbol", ["main"])],
)
def test_show_help(graph, component, args):
    assert graph.show(component, args) == SHOW_HELP


def test_multiple_targets_sorted():
    graph = CallGraph()
    graph.add_call(0x10, 0x300)
    graph.add_call(0x10, 0x200)
    graph.add_call(0x10, 0x200)
    assert [c.address for c in graph.callees_of(0x10)] == [0x200, 0x300]
    assert graph.find_by_address(0x200).callers == [0x10]


def test_sweep_limit():
    graph = CallGraph()
    count = graph.add_section(CodeSection(".text", 0x1000, CODE), 64, limit=1)
    assert count == 1
    assert graph.caller_map == {0x1000: {0x1010}}


def test_callee_without_address():
    assert Callee("puts").summary("  - ") == "  - puts"


def test_parse_hex():
    assert parse_hex("0x1F") == 0x1F
    assert parse_hex("401000") == 0x401000
    assert parse_hex("main") is None
