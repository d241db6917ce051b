"""Which file system nodes to display."""

from __future__ import annotations

from enum import Enum
from typing import Any

from lsd.flags.configurable import Configurable


class Display(Configurable, Enum):
    """The flag showing which file system nodes to display."""

    ALL = "all"
    ALMOST_ALL = "almost-all"
    DIRECTORY_ONLY = "directory-only"
    VISIBLE_ONLY = "visible-only"

    @classmethod
    def default(cls) -> Display:
        """Only visible entries by default."""
        return cls.VISIBLE_ONLY

    @classmethod
    def from_arg_matches(cls, matches: Any) -> Display | None:
        """The variant for --all, --almost-all or --directory-only, else None."""
        if matches.is_present("all"):
            return cls.ALL
        if matches.is_present("almost-all"):
            return cls.ALMOST_ALL
        if matches.is_present("directory-only"):
            return cls.DIRECTORY_ONLY
        return None

    @classmethod
    def from_config(cls, config: Any) -> Display | None:
        """The config's display value if set."""
        return config.display