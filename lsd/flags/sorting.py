"""How to sort the output, set from arguments, a config or the default."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from lsd.flags.configurable import Configurable


class SortColumn(Configurable, Enum):
    """The column used for sorting."""

    EXTENSION = "extension"
    NAME = "name"
    TIME = "time"
    SIZE = "size"
    VERSION = "version"

    @classmethod
    def default(cls) -> SortColumn:
        """Sort by name by default."""
        return cls.NAME

    @classmethod
    def from_arg_matches(cls, matches: Any) -> SortColumn | None:
        """The column chosen by a sort shortcut or --sort, else None."""
        sort = matches.value_of("sort")
        if matches.is_present("timesort") or sort == "time":
            return cls.TIME
        if matches.is_present("sizesort") or sort == "size":
            return cls.SIZE
        if matches.is_present("extensionsort") or sort == "extension":
            return cls.EXTENSION
        if matches.is_present("versionsort") or sort == "version":
            return cls.VERSION
        return None

    @classmethod
    def from_config(cls, config: Any) -> SortColumn | None:
        """The config's sorting.column if set."""
        if config.sorting is not None:
            return config.sorting.column
        return None


class SortOrder(Configurable, Enum):
    """The sort order."""

    DEFAULT = "default"
    REVERSE = "reverse"

    @classmethod
    def default(cls) -> SortOrder:
        """The natural order by default."""
        return cls.DEFAULT

    @classmethod
    def from_arg_matches(cls, matches: Any) -> SortOrder | None:
        """REVERSE when --reverse is given, else None."""
        if matches.is_present("reverse"):
            return cls.REVERSE
        return None

    @classmethod
    def from_config(cls, config: Any) -> SortOrder | None:
        """REVERSE or DEFAULT from the config's sorting.reverse if set."""
        if config.sorting is None or config.sorting.reverse is None:
            return None
        return cls.REVERSE if config.sorting.reverse else cls.DEFAULT


class DirGrouping(Configurable, Enum):
    """Where to place directories."""

    NONE = "none"
    FIRST = "first"
    LAST = "last"

    @classmethod
    def default(cls) -> DirGrouping:
        """No grouping by default."""
        return cls.NONE

    @classmethod
    def from_str(cls, value: str) -> DirGrouping:
        """Parse a grouping; raise ValueError if it is unknown."""
        try:
            return cls(value)
        except ValueError as err:
            raise ValueError(
                f"Group Dir can only be one of first, last or none, but got {value}."
            ) from err

    @classmethod
    def from_arg_matches(cls, matches: Any) -> DirGrouping | None:
        """NONE in classic mode, else the value of --group-dirs when given."""
        if matches.is_present("classic"):
            return cls.NONE
        if matches.occurrences_of("group-dirs") > 0:
            value = matches.value_of("group-dirs")
            if value is not None:
                return cls.from_str(value)
        return None

    @classmethod
    def from_config(cls, config: Any) -> DirGrouping | None:
        """NONE in classic mode, else the config's sorting.dir-grouping if set."""
        if config.classic is True:
            return cls.NONE
        if config.sorting is not None:
            return config.sorting.dir_grouping
        return None


@dataclass(frozen=True)
class Sorting:
    """A collection of flags on how to sort the output."""

    column: SortColumn = SortColumn.NAME
    order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE

    @classmethod
    def configure_from(cls, matches: Any, config: Any) -> Sorting:
        """Build the sorting flags from arguments, a config or defaults."""
        return cls(
            column=SortColumn.configure_from(matches, config),
            order=SortOrder.configure_from(matches, config),
            dir_grouping=DirGrouping.configure_from(matches, config),
        )