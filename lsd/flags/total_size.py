"""Whether to show the total size of directories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lsd.flags.configurable import Configurable


@dataclass(frozen=True)
class TotalSize(Configurable):
    """The flag showing whether to show the total size for directories."""

    value: bool = False

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def from_arg_matches(cls, matches: Any) -> TotalSize | None:
        """True when --total-size is given, else None."""
        if matches.is_present("total-size"):
            return cls(True)
        return None

    @classmethod
    def from_config(cls, config: Any) -> TotalSize | None:
        """The config's total-size value if set."""
        if config.total_size is not None:
            return cls(config.total_size)
        return None