"""Whether to print file type indicators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lsd.flags.configurable import Configurable


@dataclass(frozen=True)
class Indicators(Configurable):
    """The flag showing whether to print file type indicators."""

    value: bool = False

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def from_arg_matches(cls, matches: Any) -> Indicators | None:
        """True when --classify is given, else None."""
        if matches.is_present("indicators"):
            return cls(True)
        return None

    @classmethod
    def from_config(cls, config: Any) -> Indicators | None:
        """The config's indicators value if set."""
        if config.indicators is not None:
            return cls(config.indicators)
        return None