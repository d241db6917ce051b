"""Command-line definition and a small argument parser for lsd."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from importlib import metadata

_VALID_SPECIFIERS = frozenset("AaBbCcDdeFfGgHhIjklMmnPpRrSsTtUuVvWwXxYyZz+%")


class ErrorKind(Enum):
    """The kinds of failure the argument parser reports."""

    INVALID_VALUE = auto()
    UNKNOWN_ARGUMENT = auto()
    EMPTY_VALUE = auto()
    TOO_MANY_VALUES = auto()
    ARGUMENT_CONFLICT = auto()
    UNEXPECTED_MULTIPLE_USAGE = auto()
    VALUE_VALIDATION = auto()
    HELP_DISPLAYED = auto()
    VERSION_DISPLAYED = auto()


class ArgumentError(Exception):
    """Raised when the command line or a flag value cannot be accepted."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.VALUE_VALIDATION):
        super().__init__(message)
        self.message = message
        self.kind = kind


class TimeFormatError(ValueError):
    """Raised when a strftime-like date format is malformed."""


@dataclass(frozen=True)
class ArgSpec:
    """Description of one command-line argument."""

    name: str
    short: str | None = None
    long: str | None = None
    help: str = ""
    takes_value: bool = False
    multiple: bool = False
    possible_values: tuple[str, ...] = ()
    default: str | None = None
    overrides: tuple[str, ...] = ()
    conflicts: tuple[str, ...] = ()
    require_delimiter: bool = False
    validator: Callable[[str], None] | None = None
    value_name: str | None = None
    positional: bool = False

    @property
    def display(self) -> str:
        if self.positional:
            return f"<{self.name}>"
        if self.long:
            return f"--{self.long}"
        return f"-{self.short}"


class Matches:
    """The result of parsing a command line."""

    def __init__(self, occurrences: dict[str, list[list[str]]], defaults: dict[str, str]):
        self._occurrences = occurrences
        self._defaults = defaults

    def is_present(self, name: str) -> bool:
        """True if the argument was given or has a default value."""
        return name in self._occurrences or name in self._defaults

    def occurrences_of(self, name: str) -> int:
        """How many times the user gave the argument."""
        return len(self._occurrences.get(name, ()))

    def values_of(self, name: str) -> list[str] | None:
        """All values of the argument, falling back to its default."""
        values = [value for occurrence in self._occurrences.get(name, ()) for value in occurrence]
        if values:
            return values
        if name in self._defaults:
            return [self._defaults[name]]
        return None

    def value_of(self, name: str) -> str | None:
        """The first value of the argument, falling back to its default."""
        values = self.values_of(name)
        return values[0] if values else None


class App:
    """A command-line application made of argument specifications."""

    def __init__(self, name: str, version: str = "", about: str = ""):
        self.name = name
        self.version = version
        self.about = about
        self._specs: dict[str, ArgSpec] = {}

    def arg(self, spec: ArgSpec) -> App:
        """Add an argument and return the application for chaining."""
        self._specs[spec.name] = spec
        return self

    def get_matches_from(self, argv: Iterable[str]) -> Matches:
        """Parse argv, whose first item is the program name."""
        tokens = iter(list(argv)[1:])
        occurrences: dict[str, list[list[str]]] = {}
        only_positional = False

        for token in tokens:
            if only_positional or token == "-" or not token.startswith("-"):
                self._record(occurrences, self._positional(token), token)
            elif token == "--":
                only_positional = True
            elif token.startswith("--"):
                self._parse_long(token[2:], tokens, occurrences)
            else:
                self._parse_short_cluster(token[1:], tokens, occurrences)

        self._check_conflicts(occurrences)
        defaults = {s.name: s.default for s in self._specs.values() if s.default is not None}
        return Matches(occurrences, defaults)

    def _positional(self, token: str) -> ArgSpec:
        for spec in self._specs.values():
            if spec.positional:
                return spec
        raise ArgumentError(
            f"Found argument '{token}' which wasn't expected", ErrorKind.UNKNOWN_ARGUMENT
        )

    def _parse_long(self, body: str, tokens: Iterator[str], occurrences) -> None:
        name, eq, inline = body.partition("=")
        if name == "help":
            raise ArgumentError(self._help_text(), ErrorKind.HELP_DISPLAYED)
        if name == "version":
            raise ArgumentError(f"{self.name} {self.version}", ErrorKind.VERSION_DISPLAYED)
        spec = next((s for s in self._specs.values() if s.long == name), None)
        if spec is None:
            raise ArgumentError(
                f"Found argument '--{name}' which wasn't expected", ErrorKind.UNKNOWN_ARGUMENT
            )
        if spec.takes_value:
            value = inline if eq else self._next_value(tokens, spec)
        elif eq:
            raise ArgumentError(
                f"The argument '{spec.display}' takes no value", ErrorKind.TOO_MANY_VALUES
            )
        else:
            value = None
        self._record(occurrences, spec, value)

    def _parse_short_cluster(self, cluster: str, tokens: Iterator[str], occurrences) -> None:
        for pos, char in enumerate(cluster):
            if char == "V":
                raise ArgumentError(f"{self.name} {self.version}", ErrorKind.VERSION_DISPLAYED)
            spec = next((s for s in self._specs.values() if s.short == char), None)
            if spec is None:
                raise ArgumentError(
                    f"Found argument '-{char}' which wasn't expected", ErrorKind.UNKNOWN_ARGUMENT
                )
            if spec.takes_value:
                rest = cluster[pos + 1:].removeprefix("=")
                value = rest if rest else self._next_value(tokens, spec)
                self._record(occurrences, spec, value)
                return
            self._record(occurrences, spec, None)

    @staticmethod
    def _next_value(tokens: Iterator[str], spec: ArgSpec) -> str:
        value = next(tokens, None)
        if value is None or (value.startswith("-") and value != "-"):
            raise ArgumentError(
                f"The argument '{spec.display}' requires a value but none was supplied",
                ErrorKind.EMPTY_VALUE,
            )
        return value

    def _record(self, occurrences, spec: ArgSpec, raw: str | None) -> None:
        if not spec.multiple and spec.name in occurrences and not spec.positional:
            raise ArgumentError(
                f"The argument '{spec.display}' was provided more than once",
                ErrorKind.UNEXPECTED_MULTIPLE_USAGE,
            )
        if raw is None:
            values: list[str] = []
        elif spec.require_delimiter:
            values = raw.split(",")
        else:
            values = [raw]

        for value in values:
            if spec.possible_values and value not in spec.possible_values:
                allowed = ", ".join(spec.possible_values)
                raise ArgumentError(
                    f"'{value}' isn't a valid value for '{spec.display}'\n"
                    f"\t[possible values: {allowed}]",
                    ErrorKind.INVALID_VALUE,
                )
            if spec.validator is not None:
                try:
                    spec.validator(value)
                except ValueError as err:
                    raise ArgumentError(
                        f"Invalid value for '{spec.display}': {err}", ErrorKind.VALUE_VALIDATION
                    ) from err

        for other in self._specs.values():
            if other.name != spec.name and (
                other.name in spec.overrides or spec.name in other.overrides
            ):
                occurrences.pop(other.name, None)

        occurrences.setdefault(spec.name, []).append(values)

    def _check_conflicts(self, occurrences) -> None:
        for name in occurrences:
            spec = self._specs[name]
            for other in spec.conflicts:
                if other in occurrences:
                    raise ArgumentError(
                        f"The argument '{spec.display}' cannot be used with "
                        f"'{self._specs[other].display}'",
                        ErrorKind.ARGUMENT_CONFLICT,
                    )

    def _help_text(self) -> str:
        lines = [f"{self.name} {self.version}", self.about, "", "OPTIONS:"]
        for spec in self._specs.values():
            if spec.positional:
                continue
            names = ", ".join(
                part
                for part in (
                    f"-{spec.short}" if spec.short else "",
                    f"--{spec.long}" if spec.long else "",
                )
                if part
            )
            if spec.takes_value:
                names += f" <{spec.value_name or spec.name}>"
            lines.append(f"    {names}\n            {spec.help}")
        return "\n".join(lines)


def _version() -> str:
    try:
        return metadata.version("lsd")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def validate_time_format(formatter: str) -> None:
    """Check that every % in the format is followed by a known specifier."""
    chars = iter(formatter)
    for char in chars:
        if char != "%":
            continue
        specifier = next(chars, None)
        if specifier is None:
            raise TimeFormatError("missing format converter after `%`")
        if specifier not in _VALID_SPECIFIERS:
            raise TimeFormatError(f"invalid format specifier: %{specifier}")


def _validate_date_argument(arg: str) -> None:
    if arg.startswith("+"):
        validate_time_format(arg)
    elif arg not in ("date", "relative"):
        raise ValueError("possible values: date, relative, +date-time-format")


def build() -> App:
    """Build the lsd command-line application."""
    sort_flags = ("timesort", "sizesort", "extensionsort", "versionsort", "sort")

    def sort_overrides(name: str) -> tuple[str, ...]:
        return tuple(flag for flag in sort_flags if flag != name)

    when = ("always", "auto", "never")
    app = App("lsd", _version(), "An ls command with a lot of pretty colors and some other stuff.")
    specs = [
        ArgSpec("FILE", multiple=True, default=".", positional=True),
        ArgSpec("all", short="a", long="all", multiple=True, overrides=("almost-all",),
                help="Do not ignore entries starting with ."),
        ArgSpec("almost-all", short="A", long="almost-all", multiple=True, overrides=("all",),
                help="Do not list implied . and .."),
        ArgSpec("color", long="color", takes_value=True, multiple=True, possible_values=when,
                default="auto", help="When to use terminal colours"),
        ArgSpec("icon", long="icon", takes_value=True, multiple=True, possible_values=when,
                default="auto", help="When to print the icons"),
        ArgSpec("icon-theme", long="icon-theme", takes_value=True, multiple=True,
                possible_values=("fancy", "unicode"), default="fancy",
                help="Whether to use fancy or unicode icons"),
        ArgSpec("indicators", short="F", long="classify", multiple=True,
                help="Append indicator (one of */=>@|) at the end of the file names"),
        ArgSpec("long", short="l", long="long", multiple=True,
                help="Display extended file metadata as a table"),
        ArgSpec("ignore-config", long="ignore-config", help="Ignore the configuration file"),
        ArgSpec("oneline", short="1", long="oneline", multiple=True,
                help="Display one entry per line"),
        ArgSpec("recursive", short="R", long="recursive", multiple=True, conflicts=("tree",),
                help="Recurse into directories"),
        ArgSpec("human_readable", short="h", long="human-readable",
                help="For ls compatibility purposes ONLY, currently set by default"),
        ArgSpec("tree", long="tree", multiple=True, conflicts=("recursive",),
                help="Recurse into directories and present the result as a tree"),
        ArgSpec("depth", long="depth", takes_value=True, multiple=True, value_name="num",
                help="Stop recursing into directories after reaching specified depth"),
        ArgSpec("directory-only", short="d", long="directory-only",
                conflicts=("all", "almost-all", "depth", "recursive"),
                help="Display directories themselves, and not their contents "
                     "(recursively when used with --tree)"),
        ArgSpec("size", long="size", takes_value=True, multiple=True,
                possible_values=("default", "short", "bytes"), default="default",
                help="How to display size"),
        ArgSpec("total-size", long="total-size", multiple=True,
                help="Display the total size of directories"),
        ArgSpec("date", long="date", takes_value=True, multiple=True, default="date",
                validator=_validate_date_argument,
                help="How to display date [possible values: date, relative, +date-time-format]"),
        ArgSpec("timesort", short="t", long="timesort", multiple=True,
                overrides=sort_overrides("timesort"), help="Sort by time modified"),
        ArgSpec("sizesort", short="S", long="sizesort", multiple=True,
                overrides=sort_overrides("sizesort"), help="Sort by size"),
        ArgSpec("extensionsort", short="X", long="extensionsort", multiple=True,
                overrides=sort_overrides("extensionsort"), help="Sort by file extension"),
        ArgSpec("versionsort", short="v", long="versionsort", multiple=True,
                overrides=sort_overrides("versionsort"),
                help="Natural sort of (version) numbers within text"),
        ArgSpec("sort", long="sort", takes_value=True, multiple=True,
                possible_values=("size", "time", "version", "extension"), value_name="WORD",
                overrides=sort_overrides("sort"), help="sort by WORD instead of name"),
        ArgSpec("reverse", short="r", long="reverse", multiple=True,
                help="Reverse the order of the sort"),
        ArgSpec("group-dirs", long="group-dirs", takes_value=True, multiple=True,
                possible_values=("none", "first", "last"), default="none",
                help="Sort the directories then the files"),
        ArgSpec("blocks", long="blocks", takes_value=True, multiple=True,
                require_delimiter=True,
                possible_values=("permission", "user", "group", "size", "date", "name", "inode"),
                help="Specify the blocks that will be displayed and in what order"),
        ArgSpec("classic", long="classic", help="Enable classic mode (no colors or icons)"),
        ArgSpec("no-symlink", long="no-symlink", multiple=True,
                help="Do not display symlink target"),
        ArgSpec("ignore-glob", short="I", long="ignore-glob", takes_value=True, multiple=True,
                value_name="pattern", default="",
                help="Do not display files/directories with names matching the glob pattern(s). "
                     "More than one can be specified by repeating the argument"),
        ArgSpec("inode", short="i", long="inode", multiple=True,
                help="Display the index number of each file"),
        ArgSpec("dereference", short="L", long="dereference", multiple=True,
                help="When showing file information for a symbolic link, show information for "
                     "the file the link references rather than for the link itself"),
    ]
    for spec in specs:
        app.arg(spec)
    return app


__all__: Sequence[str] = (
    "ErrorKind",
    "ArgumentError",
    "ArgSpec",
    "Matches",
    "App",
    "build",
    "TimeFormatError",
    "validate_time_format",
)