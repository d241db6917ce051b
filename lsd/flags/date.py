"""Which kind of time stamps to display."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from lsd.app import TimeFormatError, validate_time_format
from lsd.flags.configurable import Configurable


class DateKind(Enum):
    """The ways a date can be shown."""

    DATE = auto()
    RELATIVE = auto()
    FORMATTED = auto()


@dataclass(frozen=True)
class DateFlag(Configurable):
    """How to show dates; ``format`` holds the strftime pattern for FORMATTED."""

    kind: DateKind = DateKind.DATE
    format: str | None = None

    @classmethod
    def default(cls) -> DateFlag:
        """Plain dates by default."""
        return cls(DateKind.DATE)

    @classmethod
    def from_format_string(cls, value: str) -> DateFlag | None:
        """Parse a "+format" string; report and return None if it is invalid."""
        try:
            validate_time_format(value)
        except TimeFormatError:
            print(f"Not a valid date format: {value}.", file=sys.stderr)
            return None
        return cls(DateKind.FORMATTED, value[1:])

    @classmethod
    def from_str(cls, value: str) -> DateFlag | None:
        """Parse "date", "relative" or "+format"; report and return None otherwise."""
        if value == "date":
            return cls(DateKind.DATE)
        if value == "relative":
            return cls(DateKind.RELATIVE)
        if value.startswith("+"):
            return cls.from_format_string(value)
        print(f"Not a valid date value: {value}.", file=sys.stderr)
        return None

    @classmethod
    def from_arg_matches(cls, matches: Any) -> DateFlag | None:
        """DATE in classic mode, else the value of --date when given."""
        if matches.is_present("classic"):
            return cls(DateKind.DATE)
        if matches.occurrences_of("date") > 0:
            value = matches.value_of("date")
            if value == "date":
                return cls(DateKind.DATE)
            if value == "relative":
                return cls(DateKind.RELATIVE)
            if value is not None and value.startswith("+"):
                return cls(DateKind.FORMATTED, value[1:])
            raise ValueError("This should not be reachable!")
        return None

    @classmethod
    def from_config(cls, config: Any) -> DateFlag | None:
        """DATE in classic mode, else the parsed config date if set."""
        if config.classic is True:
            return cls(DateKind.DATE)
        if config.date is not None:
            return cls.from_str(config.date)
        return None