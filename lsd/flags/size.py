"""Which file size units to use."""

from __future__ import annotations

from enum import Enum
from typing import Any

from lsd.flags.configurable import Configurable


class SizeFlag(Configurable, Enum):
    """The flag showing which file size units to use."""

    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"

    @classmethod
    def default(cls) -> SizeFlag:
        """SI prefixes with a B by default."""
        return cls.DEFAULT

    @classmethod
    def from_str(cls, value: str) -> SizeFlag:
        """Parse a size flag; raise ValueError if it is unknown."""
        try:
            return cls(value)
        except ValueError as err:
            raise ValueError(
                f"Size can only be one of default, short or bytes, but got {value}."
            ) from err

    @classmethod
    def from_arg_matches(cls, matches: Any) -> SizeFlag | None:
        """The value of --size when given, else None."""
        if matches.occurrences_of("size") > 0:
            value = matches.value_of("size")
            if value is not None:
                return cls.from_str(value)
        return None

    @classmethod
    def from_config(cls, config: Any) -> SizeFlag | None:
        """The config's size value if set."""
        return config.size