"""Glob patterns of names to leave out of the listing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from lsd.app import ArgumentError, ErrorKind


def _glob_error(pattern: str, reason: str) -> ArgumentError:
    return ArgumentError(f"error parsing glob '{pattern}': {reason}", ErrorKind.VALUE_VALIDATION)


def _parse_class(pattern: str, pos: int) -> tuple[str, int]:
    """Translate a character class starting after '['; return regex and new position."""
    negated = pos < len(pattern) and pattern[pos] in "!^"
    if negated:
        pos += 1
    ranges: list[tuple[str, str]] = []
    first = True
    while True:
        if pos >= len(pattern):
            raise _glob_error(pattern, "unclosed character class; missing ']'")
        char = pattern[pos]
        pos += 1
        if char == "]" and not first:
            break
        first = False
        if pos + 1 < len(pattern) and pattern[pos] == "-" and pattern[pos + 1] != "]":
            end = pattern[pos + 1]
            pos += 2
            if char > end:
                raise _glob_error(pattern, f"invalid range; '{char}' > '{end}'")
            ranges.append((char, end))
        else:
            ranges.append((char, char))
    body = "".join(
        re.escape(start) if start == end else f"{re.escape(start)}-{re.escape(end)}"
        for start, end in ranges
    )
    return f"[{'^' if negated else ''}{body}]", pos


def _translate(pattern: str) -> str:
    """Translate a glob into a regular expression matching a whole name."""
    out: list[str] = []
    current = out
    alternates: list[list[str]] | None = None
    pos = 0
    while pos < len(pattern):
        char = pattern[pos]
        pos += 1
        if char == "\\":
            if pos >= len(pattern):
                raise _glob_error(pattern, "dangling '\\'")
            current.append(re.escape(pattern[pos]))
            pos += 1
        elif char == "?":
            current.append(".")
        elif char == "*":
            current.append(".*")
        elif char == "[":
            piece, pos = _parse_class(pattern, pos)
            current.append(piece)
        elif char == "{":
            if alternates is not None:
                raise _glob_error(pattern, "nested alternate groups are not allowed")
            alternates = [[]]
            current = alternates[-1]
        elif char == "}":
            if alternates is None:
                raise _glob_error(
                    pattern, "unopened alternate group; missing '{' (maybe escape '}' with '[}]'?)"
                )
            out.append("(?:" + "|".join("".join(alt) for alt in alternates) + ")")
            alternates = None
            current = out
        elif char == "," and alternates is not None:
            alternates.append([])
            current = alternates[-1]
        else:
            current.append(re.escape(char))
    if alternates is not None:
        raise _glob_error(pattern, "unclosed alternate group; missing '}' (maybe escape '{' with '[{]'?)")
    return "(?s:" + "".join(out) + r")\Z"


@dataclass(frozen=True)
class IgnoreGlobs:
    """A set of glob patterns; a name is ignored when any of them matches."""

    patterns: tuple[str, ...] = ()
    _regexes: tuple[re.Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        regexes = tuple(re.compile(_translate(pattern)) for pattern in self.patterns)
        object.__setattr__(self, "_regexes", regexes)

    def is_match(self, name) -> bool:
        """True if any pattern matches the whole name."""
        text = str(name)
        return any(regex.match(text) for regex in self._regexes)

    @classmethod
    def configure_from(cls, matches: Any, config: Any) -> IgnoreGlobs:
        """Globs from the arguments, else from the config, else none.

        A broken config glob is only reported when no globs were given as arguments.
        """
        result = cls()
        pending: ArgumentError | None = None
        if not matches.is_present("ignore-config"):
            try:
                from_config = cls.from_config(config)
            except ArgumentError as err:
                pending = err
            else:
                if from_config is not None:
                    result = from_config
        from_args = cls.from_arg_matches(matches)
        if from_args is not None:
            return from_args
        if pending is not None:
            raise pending
        return result

    @classmethod
    def from_arg_matches(cls, matches: Any) -> IgnoreGlobs | None:
        """Globs from --ignore-glob when given, else None; raise ArgumentError if bad."""
        if matches.occurrences_of("ignore-glob") > 0:
            values = matches.values_of("ignore-glob")
            if values is not None:
                return cls(tuple(values))
        return None

    @classmethod
    def from_config(cls, config: Any) -> IgnoreGlobs | None:
        """Globs from the config's ignore-globs if set; raise ArgumentError if bad."""
        if config.ignore_globs is not None:
            return cls(tuple(config.ignore_globs))
        return None