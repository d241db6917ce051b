from types import SimpleNamespace

from lsd import app
from lsd.flags.color import Color, ColorOption


def _config(**fields):
    base = dict(classic=None, color=None)
    base.update(fields)
    return SimpleNamespace(**base)


def _matches(*args):
    return app.build().get_matches_from(["lsd", *args])


def test_from_arg_matches_none():
    assert ColorOption.from_arg_matches(_matches()) is None


def test_from_arg_matches_always():
    assert ColorOption.from_arg_matches(_matches("--color", "always")) is ColorOption.ALWAYS


def test_from_arg_matches_auto():
    assert ColorOption.from_arg_matches(_matches("--color", "auto")) is ColorOption.AUTO


def test_from_arg_matches_never():
    assert ColorOption.from_arg_matches(_matches("--color", "never")) is ColorOption.NEVER


def test_from_arg_matches_classic_mode():
    matches = _matches("--color", "always", "--classic")
    assert ColorOption.from_arg_matches(matches) is ColorOption.NEVER


def test_from_config_none():
    assert ColorOption.from_config(_config()) is None


def test_from_config_always():
    c = _config(color=SimpleNamespace(when=ColorOption.ALWAYS))
    assert ColorOption.from_config(c) is ColorOption.ALWAYS


def test_from_config_auto():
    c = _config(color=SimpleNamespace(when=ColorOption.AUTO))
    assert ColorOption.from_config(c) is ColorOption.AUTO


def test_from_config_never():
    c = _config(color=SimpleNamespace(when=ColorOption.NEVER))
    assert ColorOption.from_config(c) is ColorOption.NEVER


def test_from_config_classic_mode():
    c = _config(color=SimpleNamespace(when=ColorOption.ALWAYS), classic=True)
    assert ColorOption.from_config(c) is ColorOption.NEVER


def test_from_str_invalid_reports(capsys):
    assert ColorOption.from_str("sometimes") is None
    assert "got sometimes" in capsys.readouterr().err


def test_default_is_auto():
    assert ColorOption.configure_from(_matches(), _config()) is ColorOption.AUTO


def test_arguments_override_config():
    c = _config(color=SimpleNamespace(when=ColorOption.NEVER))
    result = Color.configure_from(_matches("--color", "always"), c)
    assert result == Color(when=ColorOption.ALWAYS)


def test_config_used_without_arguments():
    c = _config(color=SimpleNamespace(when=ColorOption.NEVER))
    assert Color.configure_from(_matches(), c).when is ColorOption.NEVER