"""Whether to omit symbolic link targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lsd.flags.configurable import Configurable


@dataclass(frozen=True)
class NoSymlink(Configurable):
    """The flag showing whether to hide symbolic link targets."""

    value: bool = False

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def from_arg_matches(cls, matches: Any) -> NoSymlink | None:
        """True when --no-symlink is given, else None."""
        if matches.is_present("no-symlink"):
            return cls(True)
        return None

    @classmethod
    def from_config(cls, config: Any) -> NoSymlink | None:
        """The config's no-symlink value if set."""
        if config.no_symlink is not None:
            return cls(config.no_symlink)
        return None