# lsd

Option handling for an `ls`-like directory lister: a command-line
parser, a YAML configuration file, terminal colours driven by
`LS_COLORS`, and the display flags (blocks, colour, date, dereference,
display, icons, ignore globs, indicators, layout, recursion, size,
sorting, symlink arrow, symlinks and total size).

Each flag is resolved the same way: a value given on the command line
wins, then a value from the configuration, then the built-in default.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## Parsing a command line

`lsd.app.build()` returns an `App` describing every option; its
`get_matches_from(argv)` parses a list whose first item is the program
name and returns a `Matches` object.

```python
from lsd.app import build

matches = build().get_matches_from(["lsd", "--long", "--sort", "size", "-r"])
matches.is_present("long")       # True
matches.value_of("sort")         # "size"
matches.occurrences_of("color")  # 0: only the default "auto" applies
matches.values_of("FILE")        # ["."]
```

Anything that cannot be accepted raises `lsd.app.ArgumentError`, whose
`kind` is an `ErrorKind`: an unknown option, a value outside the allowed
ones, conflicting options such as `--recursive` with `--tree`, or a
`--date +FORMAT` with an unknown `%` specifier. `--help` and `--version`
also raise `ArgumentError`, with the kinds `HELP_DISPLAYED` and
`VERSION_DISPLAYED` and the text to show as the message.

`lsd.app.validate_time_format(fmt)` checks a strftime-like format on its
own and raises `TimeFormatError` when it is malformed.

## Reading the configuration

```python
from lsd.config_file import Config

config = Config.from_yaml("classic: true\nlayout: tree\n")
config.classic   # True
config.layout    # Layout.TREE
```

Keys are the kebab-case names (`ignore-globs`, `no-symlink`,
`total-size`, `symlink-arrow`, `sorting.dir-grouping`, ...). Unknown
keys and values of the wrong type raise `lsd.config_file.ConfigError`.

- `Config.with_none()` gives a configuration with every setting unset.
- `Config.from_file(path)` reads a file; it returns `None` for a missing
  file, and prints the problem to standard error and returns `None` for
  an unreadable or malformed one.
- `Config.config_file_path()` is `$XDG_CONFIG_HOME/lsd/config.yaml`
  (else `~/.config/lsd/config.yaml`), or `%APPDATA%\lsd\config.yaml` on
  Windows.
- `Config.default()` loads that file when it can and otherwise falls back
  to the built-in `DEFAULT_CONFIG`.

## Resolving all flags

```python
from lsd.app import build
from lsd.config_file import Config
from lsd.flags.flagset import Flags

matches = build().get_matches_from(["lsd", "--tree", "--depth", "2", "--classic"])
flags = Flags.configure_from(matches, Config.with_none())

flags.layout            # Layout.TREE
flags.recursion.depth   # 2
flags.color.when        # ColorOption.NEVER (classic mode)
flags.blocks.blocks     # [Block.NAME]
```

Single flags can be resolved on their own, for example
`Blocks.configure_from(matches, config)` from `lsd.flags.blocks`,
`SortColumn.from_arg_matches(matches)` from `lsd.flags.sorting` or
`DateFlag.from_config(config)` from `lsd.flags.date`. A bad `--blocks`
value, a malformed ignore glob or a `--depth` that is not a non-negative
number raise `ArgumentError`.

`IgnoreGlobs.is_match(name)` tells whether any of the configured globs
matches a whole file name:

```python
from lsd.flags.ignore_globs import IgnoreGlobs

IgnoreGlobs((".git", "*.{o,pyc}")).is_match("main.pyc")   # True
```

## Colours

`lsd.color.Colors` maps listing elements to terminal styles. With
`Theme.DEFAULT` it uses `LS_COLORS` from the environment (or a built-in
set), with `Theme.NO_LSCOLORS` only its own 256-colour palette, and with
`Theme.NO_COLOR` no colour at all.

```python
from lsd.color import Colors, Elem, ElemKind, Theme

colors = Colors(Theme.NO_LSCOLORS)
print(colors.colorize("notes.txt", Elem(ElemKind.FILE)))
```

`LsColors.from_string(spec)` parses an `LS_COLORS` string directly, and
`Style.paint(text)` wraps text in the escape sequences of a style.

## What this package does not do

It does not list directories. There is no command to run, nothing reads
file metadata for display, and nothing lays out, sorts or prints a
listing: the package stops at turning a command line and a configuration
file into resolved `Flags` and at colouring strings.