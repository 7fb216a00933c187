from unittest.mock import patch

import pytest

from bintel.lib import demangle
from bintel.lib.demangle import (
    SYMBOLIC_FOUND,
    _apply_heuristics,
    _trim_rust_hash,
    demangle_symbolic_name,
    itanium_builtin_type,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("v", "void"),
        ("b", "bool"),
        ("h", "unsigned char"),
        ("j", "unsigned int"),
        ("y", "unsigned long long"),
        ("n", "__int128"),
        ("e", "long double"),
        ("z", "ellipsis"),
        ("Q", ""),
    ],
)
def test_itanium_builtin_type(code, expected):
    assert itanium_builtin_type(code) == expected


@pytest.mark.parametrize(
    "symbol, expected",
    [
        ("anon.1234.0", "anonymous"),
        (".L__unnamed_12", "anonymous"),
        ("GCC_except_table42", "GCC_except_table"),
        ("@feat.00", "SAFESEH"),
        ("__imp_CreateFileW", "__declspec(dllimport) CreateFileW"),
        ("core..fmt..Write$LT$T$GT$", "core::fmt::Write<T>"),
        ("plain_symbol", "plain_symbol"),
    ],
)
def test_heuristics(symbol, expected):
    assert _apply_heuristics(symbol) == expected


def test_trim_rust_hash():
    assert (
        _trim_rust_hash("std::io::stdio::print_to::h1a2b3c4d5e6f7a8b")
        == "std::io::stdio::print_to"
    )
    assert _trim_rust_hash("a::b::h1a2b3c4d5e6f7a8b") == "a::b::h1a2b3c4d5e6f7a8b"
    assert _trim_rust_hash("a::b::c::d::short") == "a::b::c::d::short"


def test_demangle_without_symbolic():
    with patch.object(demangle, "SYMBOLIC_FOUND", False):
        assert demangle_symbolic_name("_Z3foov") == "_Z3foov"


def test_demangle_empty():
    assert demangle_symbolic_name("") == ""


@pytest.mark.skipif(not SYMBOLIC_FOUND, reason="symbolic is not available")
def test_demangle_itanium():
    assert demangle_symbolic_name("_Z3foov") == "foo()"
    assert demangle_symbolic_name("_Z3foov", no_args=True) == "foo"
