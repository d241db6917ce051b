"""All configuration flags of the application, gathered in one place."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lsd.flags.blocks import Blocks
from lsd.flags.color import Color
from lsd.flags.date import DateFlag
from lsd.flags.dereference import Dereference
from lsd.flags.display import Display
from lsd.flags.icons import Icons
from lsd.flags.ignore_globs import IgnoreGlobs
from lsd.flags.indicators import Indicators
from lsd.flags.layout import Layout
from lsd.flags.recursion import Recursion
from lsd.flags.size import SizeFlag
from lsd.flags.sorting import Sorting
from lsd.flags.symlink_arrow import SymlinkArrow
from lsd.flags.symlinks import NoSymlink
from lsd.flags.total_size import TotalSize


@dataclass
class Flags:
    """Every configuration flag of the application."""

    blocks: Blocks = field(default_factory=Blocks)
    color: Color = field(default_factory=Color)
    date: DateFlag = field(default_factory=DateFlag.default)
    dereference: Dereference = field(default_factory=Dereference)
    display: Display = Display.VISIBLE_ONLY
    display_indicators: Indicators = field(default_factory=Indicators)
    icons: Icons = field(default_factory=Icons)
    ignore_globs: IgnoreGlobs = field(default_factory=IgnoreGlobs)
    layout: Layout = Layout.GRID
    no_symlink: NoSymlink = field(default_factory=NoSymlink)
    recursion: Recursion = field(default_factory=Recursion)
    size: SizeFlag = SizeFlag.DEFAULT
    sorting: Sorting = field(default_factory=Sorting)
    total_size: TotalSize = field(default_factory=TotalSize)
    symlink_arrow: SymlinkArrow = field(default_factory=SymlinkArrow)

    @classmethod
    def configure_from(cls, matches: Any, config: Any) -> Flags:
        """Build every flag from arguments, a config or defaults.

        Raises ArgumentError when the blocks, the ignore globs or the
        recursion depth cannot be accepted.
        """
        return cls(
            blocks=Blocks.configure_from(matches, config),
            color=Color.configure_from(matches, config),
            date=DateFlag.configure_from(matches, config),
            dereference=Dereference.configure_from(matches, config),
            display=Display.configure_from(matches, config),
            layout=Layout.configure_from(matches, config),
            size=SizeFlag.configure_from(matches, config),
            display_indicators=Indicators.configure_from(matches, config),
            icons=Icons.configure_from(matches, config),
            ignore_globs=IgnoreGlobs.configure_from(matches, config),
            no_symlink=NoSymlink.configure_from(matches, config),
            recursion=Recursion.configure_from(matches, config),
            sorting=Sorting.configure_from(matches, config),
            total_size=TotalSize.configure_from(matches, config),
            symlink_arrow=SymlinkArrow.configure_from(matches, config),
        )