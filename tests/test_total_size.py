from types import SimpleNamespace

from lsd.app import build
from lsd.flags.total_size import TotalSize


def matches(*args):
    return build().get_matches_from(["lsd", *args])


def test_from_arg_matches_none():
    assert TotalSize.from_arg_matches(matches()) is None


def test_from_arg_matches_true():
    assert TotalSize.from_arg_matches(matches("--total-size")) == TotalSize(True)


def test_from_config_none():
    assert TotalSize.from_config(SimpleNamespace(total_size=None)) is None


def test_from_config_true():
    assert TotalSize.from_config(SimpleNamespace(total_size=True)) == TotalSize(True)


def test_from_config_false():
    assert TotalSize.from_config(SimpleNamespace(total_size=False)) == TotalSize(False)


def test_configure_from_args_override_config():
    result = TotalSize.configure_from(matches("--total-size"), SimpleNamespace(total_size=False))
    assert result == TotalSize(True)