"""Whether to dereference symbolic links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lsd.flags.configurable import Configurable


@dataclass(frozen=True)
class Dereference(Configurable):
    """The flag showing whether to dereference symbolic links."""

    value: bool = False

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def from_arg_matches(cls, matches: Any) -> Dereference | None:
        """True when --dereference is given, else None."""
        if matches.is_present("dereference"):
            return cls(True)
        return None

    @classmethod
    def from_config(cls, config: Any) -> Dereference | None:
        """The config's dereference value if set."""
        if config.dereference is not None:
            return cls(config.dereference)
        return None