"""How the arrow before a symbolic link target is shown."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lsd.flags.configurable import Configurable


@dataclass(frozen=True)
class SymlinkArrow(Configurable):
    """The text placed between a symbolic link and its target."""

    arrow: str = "\u21d2"

    def __str__(self) -> str:
        return self.arrow

    @classmethod
    def from_arg_matches(cls, matches: Any) -> SymlinkArrow | None:
        """The arrow cannot be set from the command line; always None."""
        return None

    @classmethod
    def from_config(cls, config: Any) -> SymlinkArrow | None:
        """The config's symlink-arrow if set."""
        if config.symlink_arrow is not None:
            return cls(config.symlink_arrow)
        return None