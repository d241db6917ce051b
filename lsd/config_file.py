"""Reading the YAML configuration file."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from lsd.flags.color import ColorOption
from lsd.flags.display import Display
from lsd.flags.icons import IconOption, IconTheme
from lsd.flags.layout import Layout
from lsd.flags.size import SizeFlag
from lsd.flags.sorting import DirGrouping, SortColumn

CONF_DIR = "lsd"
CONF_FILE_NAME = "config"
YAML_LONG_EXT = "yaml"


class ConfigError(ValueError):
    """Raised when a configuration document is malformed."""


def _check_bool(value: Any, key: str) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"{key}: invalid type {value!r}, expected a boolean")


def _check_str(value: Any, key: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"{key}: invalid type {value!r}, expected a string")


def _check_str_list(value: Any, key: str) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key}: invalid type {value!r}, expected a sequence of strings")
    return list(value)


def _check_uint(value: Any, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    raise ConfigError(f"{key}: invalid value {value!r}, expected a non-negative integer")


def _check_enum(enum_cls: type[Enum], value: Any, key: str):
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    allowed = ", ".join(f"`{member.value}`" for member in enum_cls)
    raise ConfigError(f"{key}: unknown variant {value!r}, expected one of {allowed}")


def _check_mapping(value: Any, key: str) -> dict | None:
    if value is None or isinstance(value, dict):
        return value
    raise ConfigError(f"{key}: invalid type {value!r}, expected a mapping")


@dataclass
class Color:
    """The color section of the configuration."""

    when: ColorOption

    @classmethod
    def _parse(cls, data: dict) -> Color:
        if data.get("when") is None:
            raise ConfigError("color: missing field `when`")
        return cls(when=_check_enum(ColorOption, data["when"], "color.when"))


@dataclass
class Icons:
    """The icons section of the configuration."""

    when: IconOption | None = None
    theme: IconTheme | None = None

    @classmethod
    def _parse(cls, data: dict) -> Icons:
        return cls(
            when=_check_enum(IconOption, data.get("when"), "icons.when"),
            theme=_check_enum(IconTheme, data.get("theme"), "icons.theme"),
        )


@dataclass
class Recursion:
    """The recursion section of the configuration."""

    enabled: bool | None = None
    depth: int | None = None

    @classmethod
    def _parse(cls, data: dict) -> Recursion:
        return cls(
            enabled=_check_bool(data.get("enabled"), "recursion.enabled"),
            depth=_check_uint(data.get("depth"), "recursion.depth"),
        )


@dataclass
class Sorting:
    """The sorting section of the configuration."""

    column: SortColumn | None = None
    reverse: bool | None = None
    dir_grouping: DirGrouping | None = None

    @classmethod
    def _parse(cls, data: dict) -> Sorting:
        return cls(
            column=_check_enum(SortColumn, data.get("column"), "sorting.column"),
            reverse=_check_bool(data.get("reverse"), "sorting.reverse"),
            dir_grouping=_check_enum(
                DirGrouping, data.get("dir-grouping"), "sorting.dir-grouping"
            ),
        )


def _section(section_cls, value: Any, key: str):
    data = _check_mapping(value, key)
    return None if data is None else section_cls._parse(data)


def _enum_parser(enum_cls: type[Enum]):
    return lambda value, key: _check_enum(enum_cls, value, key)


def _section_parser(section_cls):
    return lambda value, key: _section(section_cls, value, key)


_PARSERS = {
    "classic": _check_bool,
    "blocks": _check_str_list,
    "color": _section_parser(Color),
    "date": _check_str,
    "dereference": _check_bool,
    "display": _enum_parser(Display),
    "icons": _section_parser(Icons),
    "ignore-globs": _check_str_list,
    "indicators": _check_bool,
    "layout": _enum_parser(Layout),
    "recursion": _section_parser(Recursion),
    "size": _enum_parser(SizeFlag),
    "sorting": _section_parser(Sorting),
    "no-symlink": _check_bool,
    "total-size": _check_bool,
    "symlink-arrow": _check_str,
}


@dataclass
class Config:
    """Optional settings read from a configuration file."""

    classic: bool | None = None
    blocks: list[str] | None = None
    color: Color | None = None
    date: str | None = None
    dereference: bool | None = None
    display: Display | None = None
    icons: Icons | None = None
    ignore_globs: list[str] | None = None
    indicators: bool | None = None
    layout: Layout | None = None
    recursion: Recursion | None = None
    size: SizeFlag | None = None
    sorting: Sorting | None = None
    no_symlink: bool | None = None
    total_size: bool | None = None
    symlink_arrow: str | None = None

    @classmethod
    def with_none(cls) -> Config:
        """A config with every setting unset."""
        return cls()

    @classmethod
    def from_file(cls, path) -> Config | None:
        """Read a config file; report problems and return None on failure.

        A missing file yields None without a report.
        """
        try:
            raw = Path(path).read_bytes()
        except FileNotFoundError:
            return None
        except OSError as err:
            print(f"Can not open config file {path}: {err}.", file=sys.stderr)
            return None
        try:
            return cls.from_yaml(raw.decode("utf-8", errors="replace"))
        except ConfigError as err:
            print(f"Configuration file {path} format error, {err}.", file=sys.stderr)
            return None

    @classmethod
    def from_yaml(cls, text: str) -> Config:
        """Parse a YAML document; raise ConfigError if it is malformed."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as err:
            raise ConfigError(str(err)) from err
        if data is None:
            raise ConfigError("EOF while parsing a value")
        if not isinstance(data, dict):
            raise ConfigError(f"invalid type {data!r}, expected a mapping")

        expected = ", ".join(f"`{key}`" for key in _PARSERS)
        values: dict[str, Any] = {}
        for key, value in data.items():
            parser = _PARSERS.get(key) if isinstance(key, str) else None
            if parser is None:
                raise ConfigError(f"unknown field `{key}`, expected one of {expected}")
            values[key.replace("-", "_")] = parser(value, key)
        return cls(**values)

    @classmethod
    def config_file_path(cls) -> Path | None:
        """Where the config file lives; None if that cannot be determined."""
        file_name = f"{CONF_FILE_NAME}.{YAML_LONG_EXT}"
        if sys.platform == "win32":
            appdata = os.environ.get("APPDATA")
            if not appdata:
                return None
            return Path(appdata) / CONF_DIR / file_name

        xdg_home = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_home and Path(xdg_home).is_absolute():
            base = Path(xdg_home)
        else:
            try:
                base = Path.home() / ".config"
            except RuntimeError as err:
                print(f"Can not open config file: {err}.", file=sys.stderr)
                return None
        directory = base / CONF_DIR
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            return None
        return directory / file_name

    @classmethod
    def default(cls) -> Config:
        """The user's config file if readable, else the built-in defaults."""
        path = cls.config_file_path()
        if path is not None:
            config = cls.from_file(path)
            if config is not None:
                return config
        return cls.from_yaml(DEFAULT_CONFIG)


# Built-in settings, used when no user configuration file can be read.
# Leaving out "display", "ignore-globs" and "recursion.depth" keeps their defaults.
DEFAULT_CONFIG = """---
classic: false
blocks:
  - permission
  - user
  - group
  - size
  - date
  - name
color:
  when: auto
date: date
dereference: false
icons:
  when: auto
  theme: fancy
indicators: false
layout: grid
recursion:
  enabled: false
size: default
sorting:
  column: name
  reverse: false
  dir-grouping: none
no-symlink: false
total-size: false
symlink-arrow: \u21d2
"""