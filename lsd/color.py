"""Terminal colouring of listing elements, honouring LS_COLORS."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

Colour = "int | tuple[int, int, int] | str"

_BASE_COLOURS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "purple": 5,
    "cyan": 6,
    "white": 7,
}
_BASE_NAMES = {code: name for name, code in _BASE_COLOURS.items()}

_INDICATORS = frozenset(
    "no fi rs di ln mh pi so do bd cd or mi su sg ca tw ow st ex lc rc ec".split()
)

_DEFAULT_LS_COLORS = (
    "rs=0:di=01;34:ln=01;36:mh=00:pi=40;33:so=01;35:do=01;35:bd=40;33;01:"
    "cd=40;33;01:or=40;31;01:mi=00:su=37;41:sg=30;43:ca=30;41:tw=30;42:"
    "ow=34;42:st=37;44:ex=01;32:*.tar=01;31:*.tgz=01;31:*.zip=01;31:"
    "*.gz=01;31:*.bz2=01;31:*.xz=01;31:*.zst=01;31:*.7z=01;31:*.rar=01;31:"
    "*.jpg=01;35:*.jpeg=01;35:*.png=01;35:*.gif=01;35:*.mp3=00;36:"
    "*.flac=00;36:*.wav=00;36"
)


class ElemKind(Enum):
    """The kinds of element that can be coloured."""

    FILE = auto()
    SYMLINK = auto()
    BROKEN_SYMLINK = auto()
    DIR = auto()
    PIPE = auto()
    BLOCK_DEVICE = auto()
    CHAR_DEVICE = auto()
    SOCKET = auto()
    SPECIAL = auto()
    READ = auto()
    WRITE = auto()
    EXEC = auto()
    EXEC_STICKY = auto()
    NO_ACCESS = auto()
    DAY_OLD = auto()
    HOUR_OLD = auto()
    OLDER = auto()
    USER = auto()
    GROUP = auto()
    NON_FILE = auto()
    FILE_LARGE = auto()
    FILE_MEDIUM = auto()
    FILE_SMALL = auto()
    INODE = auto()


@dataclass(frozen=True)
class Elem:
    """An element to colour; exec and uid apply to files, uid to dirs, valid to inodes."""

    kind: ElemKind
    exec: bool = False
    uid: bool = False
    valid: bool = False

    def has_suid(self) -> bool:
        """True for a file or directory with the set-uid bit."""
        return self.kind in (ElemKind.FILE, ElemKind.DIR) and self.uid


class Theme(Enum):
    """Which colour source to use."""

    NO_COLOR = auto()
    DEFAULT = auto()
    NO_LSCOLORS = auto()


def _colour_code(colour, background: bool) -> str:
    if isinstance(colour, str):
        return str((40 if background else 30) + _BASE_COLOURS[colour])
    prefix = "48" if background else "38"
    if isinstance(colour, tuple):
        red, green, blue = colour
        return f"{prefix};2;{red};{green};{blue}"
    return f"{prefix};5;{colour}"


@dataclass(frozen=True)
class Style:
    """Foreground, background and attributes of a piece of terminal text.

    A colour is a base colour name, a 256-colour index or an (r, g, b) tuple.
    """

    foreground: int | tuple[int, int, int] | str | None = None
    background: int | tuple[int, int, int] | str | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def paint(self, text: str) -> str:
        """Wrap text in the escape sequences of this style."""
        attributes = (
            (self.bold, "1"),
            (self.dimmed, "2"),
            (self.italic, "3"),
            (self.underline, "4"),
            (self.blink, "5"),
            (self.reverse, "7"),
            (self.hidden, "8"),
            (self.strikethrough, "9"),
        )
        codes = [code for enabled, code in attributes if enabled]
        if self.background is not None:
            codes.append(_colour_code(self.background, background=True))
        if self.foreground is not None:
            codes.append(_colour_code(self.foreground, background=False))
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


_ATTRIBUTE_CODES = {
    1: "bold",
    2: "dimmed",
    3: "italic",
    4: "underline",
    5: "blink",
    7: "reverse",
    8: "hidden",
    9: "strikethrough",
}


def _parse_extended(codes) -> int | tuple[int, int, int]:
    mode = next(codes)
    if mode == 5:
        return next(codes)
    if mode == 2:
        return (next(codes), next(codes), next(codes))
    raise ValueError(f"unsupported colour mode {mode}")


def _parse_style(spec: str) -> Style | None:
    """Parse a semicolon-separated SGR sequence; None if it is malformed."""
    try:
        numbers = iter([int(part) for part in spec.split(";") if part])
    except ValueError:
        return None
    fields: dict = {}
    try:
        for number in numbers:
            if number == 0:
                fields.clear()
            elif number in _ATTRIBUTE_CODES:
                fields[_ATTRIBUTE_CODES[number]] = True
            elif 30 <= number <= 37:
                fields["foreground"] = _BASE_NAMES[number - 30]
            elif number == 38:
                fields["foreground"] = _parse_extended(numbers)
            elif number == 39:
                fields.pop("foreground", None)
            elif 40 <= number <= 47:
                fields["background"] = _BASE_NAMES[number - 40]
            elif number == 48:
                fields["background"] = _parse_extended(numbers)
            elif number == 49:
                fields.pop("background", None)
            elif 90 <= number <= 97:
                fields["foreground"] = number - 90 + 8
            elif 100 <= number <= 107:
                fields["background"] = number - 100 + 8
    except (StopIteration, ValueError):
        return None
    return Style(**fields)


class LsColors:
    """Styles parsed from an LS_COLORS specification."""

    def __init__(self, indicators: dict[str, Style], patterns: list[tuple[str, Style]]):
        self._indicators = indicators
        self._patterns = patterns

    @classmethod
    def from_env(cls) -> LsColors | None:
        """Parse the LS_COLORS environment variable, or None if unset."""
        spec = os.environ.get("LS_COLORS")
        return None if spec is None else cls.from_string(spec)

    @classmethod
    def from_string(cls, spec: str) -> LsColors:
        """Parse a colon-separated LS_COLORS string, skipping bad entries."""
        indicators: dict[str, Style] = {}
        patterns: list[tuple[str, Style]] = []
        for entry in spec.split(":"):
            key, sep, codes = entry.partition("=")
            if not sep:
                continue
            style = _parse_style(codes)
            if style is None:
                continue
            if key.startswith("*"):
                patterns.append((key[1:].lower(), style))
            elif key in _INDICATORS:
                indicators[key] = style
        return cls(indicators, patterns)

    def style_for_indicator(self, indicator: str) -> Style | None:
        """The style for a two-letter indicator such as "di", if defined."""
        return self._indicators.get(indicator)

    def _style_for_name(self, name: str) -> Style | None:
        lowered = name.lower()
        for suffix, style in reversed(self._patterns):
            if lowered.endswith(suffix):
                return style
        return None

    def style_for_path(self, path) -> Style | None:
        """The style for a path, looked up from its file type and name."""
        path = Path(path)
        try:
            mode = path.lstat().st_mode
        except OSError:
            return self._style_for_name(path.name)

        if stat.S_ISLNK(mode):
            indicator = "ln" if path.exists() else "or"
        elif stat.S_ISDIR(mode):
            indicator = "di"
        elif stat.S_ISFIFO(mode):
            indicator = "pi"
        elif stat.S_ISSOCK(mode):
            indicator = "so"
        elif stat.S_ISBLK(mode):
            indicator = "bd"
        elif stat.S_ISCHR(mode):
            indicator = "cd"
        else:
            if mode & 0o111 and "ex" in self._indicators:
                return self._indicators["ex"]
            return self._style_for_name(path.name) or self._indicators.get("fi")
        return self._indicators.get(indicator)


def _light_theme() -> dict[Elem, int | str]:
    return {
        Elem(ElemKind.USER): 230,
        Elem(ElemKind.GROUP): 187,
        Elem(ElemKind.READ): "green",
        Elem(ElemKind.WRITE): "yellow",
        Elem(ElemKind.EXEC): "red",
        Elem(ElemKind.EXEC_STICKY): "purple",
        Elem(ElemKind.NO_ACCESS): 245,
        Elem(ElemKind.FILE, exec=False, uid=False): 184,
        Elem(ElemKind.FILE, exec=False, uid=True): 184,
        Elem(ElemKind.FILE, exec=True, uid=False): 40,
        Elem(ElemKind.FILE, exec=True, uid=True): 40,
        Elem(ElemKind.DIR, uid=True): 33,
        Elem(ElemKind.DIR, uid=False): 33,
        Elem(ElemKind.PIPE): 44,
        Elem(ElemKind.SYMLINK): 44,
        Elem(ElemKind.BROKEN_SYMLINK): 124,
        Elem(ElemKind.BLOCK_DEVICE): 44,
        Elem(ElemKind.CHAR_DEVICE): 172,
        Elem(ElemKind.SOCKET): 44,
        Elem(ElemKind.SPECIAL): 44,
        Elem(ElemKind.HOUR_OLD): 40,
        Elem(ElemKind.DAY_OLD): 42,
        Elem(ElemKind.OLDER): 36,
        Elem(ElemKind.NON_FILE): 245,
        Elem(ElemKind.FILE_SMALL): 229,
        Elem(ElemKind.FILE_MEDIUM): 216,
        Elem(ElemKind.FILE_LARGE): 172,
        Elem(ElemKind.INODE, valid=True): 13,
        Elem(ElemKind.INODE, valid=False): 245,
    }


_SIMPLE_INDICATORS = {
    ElemKind.SYMLINK: "ln",
    ElemKind.PIPE: "pi",
    ElemKind.SOCKET: "so",
    ElemKind.BLOCK_DEVICE: "bd",
    ElemKind.CHAR_DEVICE: "cd",
    ElemKind.BROKEN_SYMLINK: "or",
}


def _indicator_for(elem: Elem) -> str | None:
    if elem.kind is ElemKind.FILE:
        if elem.uid:
            return None
        return "ex" if elem.exec else "fi"
    if elem.kind is ElemKind.DIR:
        return None if elem.uid else "di"
    if elem.kind is ElemKind.INODE:
        return "so" if elem.valid else "no"
    return _SIMPLE_INDICATORS.get(elem.kind)


class Colors:
    """Colours listing elements according to a theme."""

    def __init__(self, theme: Theme):
        self._colors = None if theme is Theme.NO_COLOR else _light_theme()
        if theme is Theme.DEFAULT:
            self._lscolors = LsColors.from_env() or LsColors.from_string(_DEFAULT_LS_COLORS)
        else:
            self._lscolors = None

    def colorize(self, text: str, elem: Elem) -> str:
        """Paint text with the style of the element."""
        return self._style(elem).paint(text)

    def colorize_using_path(self, text: str, path, elem: Elem) -> str:
        """Paint text with the LS_COLORS style of the path, else of the element."""
        if self._lscolors is not None:
            style = self._lscolors.style_for_path(path)
            if style is not None:
                return style.paint(text)
        return self.colorize(text, elem)

    def _style(self, elem: Elem) -> Style:
        if self._lscolors is not None:
            indicator = _indicator_for(elem)
            if indicator is not None:
                return self._lscolors.style_for_indicator(indicator) or Style()
        return self._style_default(elem)

    def _style_default(self, elem: Elem) -> Style:
        if self._colors is None:
            return Style()
        foreground = self._colors[elem]
        if elem.has_suid():
            return Style(foreground=foreground, background=124)
        return Style(foreground=foreground)