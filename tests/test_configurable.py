from dataclasses import dataclass
from enum import Enum
from types import SimpleNamespace

from lsd.app import build
from lsd.flags.configurable import Configurable


@dataclass(frozen=True)
class Verbose(Configurable):
    enabled: bool = False

    @classmethod
    def from_arg_matches(cls, matches):
        return cls(True) if matches.is_present("long") else None

    @classmethod
    def from_config(cls, config):
        return None if config.verbose is None else cls(config.verbose)


class Mode(Configurable, Enum):
    FAST = "fast"
    SLOW = "slow"

    @classmethod
    def from_arg_matches(cls, matches):
        return cls.FAST if matches.is_present("tree") else None

    @classmethod
    def from_config(cls, config):
        return None if config.mode is None else cls(config.mode)

    @classmethod
    def default(cls):
        return cls.SLOW


def matches(*args):
    return build().get_matches_from(["lsd", *args])


def test_default_used_when_nothing_set():
    result = Verbose.configure_from(matches(), SimpleNamespace(verbose=None))
    assert result == Verbose(False)


def test_config_overrides_default():
    result = Verbose.configure_from(matches(), SimpleNamespace(verbose=True))
    assert result == Verbose(True)


def test_arguments_override_config():
    result = Mode.configure_from(matches("--tree"), SimpleNamespace(mode="slow"))
    assert result is Mode.FAST


def test_arguments_override_false_config():
    result = Verbose.configure_from(matches("-l"), SimpleNamespace(verbose=False))
    assert result == Verbose(True)


def test_enum_config_and_default():
    assert Mode.configure_from(matches(), SimpleNamespace(mode="fast")) is Mode.FAST
    assert Mode.configure_from(matches(), SimpleNamespace(mode=None)) is Mode.SLOW


def test_base_hooks_return_nothing():
    class Plain(Configurable):
        pass

    assert Plain.from_arg_matches(matches("-l")) is None
    assert Plain.from_config(SimpleNamespace()) is None