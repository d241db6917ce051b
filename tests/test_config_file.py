import pytest

from lsd import config_file
from lsd.config_file import DEFAULT_CONFIG, Config, ConfigError
from lsd.flags.color import ColorOption
from lsd.flags.display import Display
from lsd.flags.icons import IconOption, IconTheme
from lsd.flags.layout import Layout
from lsd.flags.size import SizeFlag
from lsd.flags.sorting import DirGrouping, SortColumn


def expected_default():
    return Config(
        classic=False,
        blocks=["permission", "user", "group", "size", "date", "name"],
        color=config_file.Color(when=ColorOption.AUTO),
        date="date",
        dereference=False,
        display=None,
        icons=config_file.Icons(when=IconOption.AUTO, theme=IconTheme.FANCY),
        ignore_globs=None,
        indicators=False,
        layout=Layout.GRID,
        recursion=config_file.Recursion(enabled=False, depth=None),
        size=SizeFlag.DEFAULT,
        sorting=config_file.Sorting(
            column=SortColumn.NAME, reverse=False, dir_grouping=DirGrouping.NONE
        ),
        no_symlink=False,
        total_size=False,
        symlink_arrow="⇒",
    )


def test_read_default():
    assert Config.from_yaml(DEFAULT_CONFIG) == expected_default()


def test_read_config_ok():
    assert Config.from_yaml("classic: true").classic is True


def test_read_config_bad_bool():
    with pytest.raises(ConfigError):
        Config.from_yaml("classic: notbool")


def test_read_config_file_not_found():
    assert Config.from_file("not-existed") is None


def test_read_bad_display():
    with pytest.raises(ConfigError):
        Config.from_yaml("display: bad")


def test_read_unknown_field():
    with pytest.raises(ConfigError, match="unknown field `colour`"):
        Config.from_yaml("colour: auto")


def test_read_kebab_case_fields():
    c = Config.from_yaml("ignore-globs:\n  - .git\ndisplay: almost-all\nlayout: oneline\n")
    assert c.ignore_globs == [".git"]
    assert c.display is Display.ALMOST_ALL
    assert c.layout is Layout.ONE_LINE


def test_color_requires_when():
    with pytest.raises(ConfigError):
        Config.from_yaml("color:\n  other: 1\n")


def test_recursion_depth_negative_rejected():
    with pytest.raises(ConfigError):
        Config.from_yaml("recursion:\n  depth: -3\n")


def test_recursion_depth_read():
    assert Config.from_yaml("recursion:\n  depth: 3\n").recursion == config_file.Recursion(
        enabled=None, depth=3
    )


def test_with_none_is_all_unset():
    assert Config.with_none() == Config()
    assert Config.with_none().sorting is None


def test_from_file_reads_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("size: short\n", encoding="utf-8")
    assert Config.from_file(path) == Config(size=SizeFlag.SHORT)


def test_from_file_bad_format_reports(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("classic: notbool\n", encoding="utf-8")
    assert Config.from_file(path) is None
    assert "format error" in capsys.readouterr().err


def test_config_file_path_uses_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert Config.config_file_path() == tmp_path / "lsd" / "config.yaml"
    assert (tmp_path / "lsd").is_dir()


def test_default_without_file(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert Config.default() == expected_default()


def test_default_reads_user_file(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    (tmp_path / "lsd").mkdir()
    (tmp_path / "lsd" / "config.yaml").write_text("classic: true\n", encoding="utf-8")
    assert Config.default() == Config(classic=True)