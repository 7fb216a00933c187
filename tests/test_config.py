import pytest

from bintel.config import BintelOptions, get_int_from_env


def test_get_int_from_env(monkeypatch):
    monkeypatch.setenv("BINTEL_TEST_INT", "42")
    assert get_int_from_env("BINTEL_TEST_INT", 7) == 42
    monkeypatch.setenv("BINTEL_TEST_INT", "forty-two")
    assert get_int_from_env("BINTEL_TEST_INT", 7) == 7
    monkeypatch.delenv("BINTEL_TEST_INT")
    assert get_int_from_env("BINTEL_TEST_INT", 7) == 7


def test_options_defaults():
    opts = BintelOptions(src_file="a.out")
    assert opts.mode == 0
    assert opts.show_args == []
    assert not opts.show_mode


def test_options_bad_mode():
    with pytest.raises(ValueError):
        BintelOptions(src_file="a.out", mode=8)


def test_options_negative_count():
    assert BintelOptions(src_file="a.out", count=-5).count == 0
