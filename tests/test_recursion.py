import pytest

from lsd import app
from lsd.app import ArgumentError, ErrorKind
from lsd.config_file import Config
from lsd.config_file import Recursion as RecursionConfig
from lsd.flags.recursion import MAX_DEPTH, Recursion


def matches_of(*args):
    return app.build().get_matches_from(["lsd", *args])


def test_enabled_from_arg_matches_empty():
    assert Recursion.enabled_from_arg_matches(matches_of()) is None


def test_enabled_from_arg_matches_true():
    assert Recursion.enabled_from_arg_matches(matches_of("--recursive")) is True


def test_enabled_from_empty_matches_and_config():
    assert Recursion.enabled_from(matches_of(), Config.with_none()) is False


def test_enabled_from_matches_empty_and_config_true():
    c = Config.with_none()
    c.recursion = RecursionConfig(enabled=True, depth=None)
    assert Recursion.enabled_from(matches_of(), c) is True


def test_enabled_from_matches_empty_and_config_false():
    c = Config.with_none()
    c.recursion = RecursionConfig(enabled=False, depth=None)
    assert Recursion.enabled_from(matches_of(), c) is False


def test_enabled_args_override_config():
    c = Config.with_none()
    c.recursion = RecursionConfig(enabled=False, depth=None)
    assert Recursion.enabled_from(matches_of("-R"), c) is True


def test_depth_from_arg_matches_empty():
    assert Recursion.depth_from_arg_matches(matches_of()) is None


def test_depth_from_arg_matches_integer():
    assert Recursion.depth_from_arg_matches(matches_of("--depth", "42")) == 42


def test_depth_from_arg_matches_neg_int():
    with pytest.raises(ArgumentError) as info:
        Recursion.depth_from_arg_matches(matches_of("--depth", "\\-42"))
    assert info.value.kind is ErrorKind.VALUE_VALIDATION


def test_depth_from_arg_matches_non_int():
    with pytest.raises(ArgumentError) as info:
        Recursion.depth_from_arg_matches(matches_of("--depth", "foo"))
    assert info.value.kind is ErrorKind.VALUE_VALIDATION
    assert "valid positive number" in info.value.message


def test_depth_from_config_none_max():
    assert Recursion.depth_from(matches_of(), Config.with_none()) == MAX_DEPTH


def test_depth_from_config_pos_integer():
    c = Config.with_none()
    c.recursion = RecursionConfig(enabled=None, depth=42)
    assert Recursion.depth_from(matches_of(), c) == 42


def test_depth_args_override_config():
    c = Config.with_none()
    c.recursion = RecursionConfig(enabled=None, depth=42)
    assert Recursion.depth_from(matches_of("--depth", "3"), c) == 3


def test_configure_from_defaults():
    assert Recursion.configure_from(matches_of(), Config.with_none()) == Recursion(
        enabled=False, depth=MAX_DEPTH
    )


def test_configure_from_args():
    result = Recursion.configure_from(matches_of("-R", "--depth", "2"), Config.with_none())
    assert result == Recursion(enabled=True, depth=2)


def test_configure_from_bad_depth_raises():
    with pytest.raises(ArgumentError):
        Recursion.configure_from(matches_of("--depth", "x"), Config.with_none())