"""Which output layout to print."""

from __future__ import annotations

from enum import Enum
from typing import Any

from lsd.flags.configurable import Configurable


class Layout(Configurable, Enum):
    """The flag showing which output layout to print."""

    GRID = "grid"
    TREE = "tree"
    ONE_LINE = "oneline"

    @classmethod
    def default(cls) -> Layout:
        """The grid layout by default."""
        return cls.GRID

    @classmethod
    def from_arg_matches(cls, matches: Any) -> Layout | None:
        """TREE for --tree; ONE_LINE for --long, --oneline, --inode or several blocks."""
        if matches.is_present("tree"):
            return cls.TREE
        blocks = matches.values_of("blocks")
        if (
            matches.is_present("long")
            or matches.is_present("oneline")
            or matches.is_present("inode")
            or (blocks is not None and len(blocks) > 1)
        ):
            return cls.ONE_LINE
        return None

    @classmethod
    def from_config(cls, config: Any) -> Layout | None:
        """The config's layout value if set."""
        return config.layout