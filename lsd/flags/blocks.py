"""Which blocks of data to show, and in what order."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from lsd.app import ArgumentError, ErrorKind


class Block(Enum):
    """A block of data to show."""

    PERMISSION = "permission"
    USER = "user"
    GROUP = "group"
    SIZE = "size"
    SIZE_VALUE = "size_value"
    DATE = "date"
    NAME = "name"
    INODE = "inode"

    @classmethod
    def try_from(cls, value: str) -> Block:
        """Parse a block name; raise ValueError if it is unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Not a valid block name: {value}") from None


def _default_blocks() -> list[Block]:
    return [Block.NAME]


@dataclass
class Blocks:
    """An ordered list of blocks to display."""

    blocks: list[Block] = field(default_factory=_default_blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __contains__(self, block: object) -> bool:
        return block in self.blocks

    @classmethod
    def configure_from(cls, matches: Any, config: Any) -> Blocks:
        """Blocks from the arguments, else the config (with --long), else a default.

        With --inode an INODE block is prepended unless already present.
        Raises ArgumentError when a --blocks value is not a block name.
        """
        is_long = matches.is_present("long")
        result = cls.long() if is_long else cls()

        if is_long and not matches.is_present("ignore-config"):
            from_config = cls.from_config(config)
            if from_config is not None:
                result = from_config

        from_args = cls.from_arg_matches(matches)
        if from_args is not None:
            result = from_args

        if matches.is_present("inode"):
            result.optional_prepend_inode()
        return result

    @classmethod
    def from_arg_matches(cls, matches: Any) -> Blocks | None:
        """Blocks from --blocks when given, else None; raise ArgumentError if one is bad."""
        if matches.occurrences_of("blocks") == 0:
            return None
        values = matches.values_of("blocks")
        if values is None:
            return None
        try:
            return cls([Block.try_from(value) for value in values])
        except ValueError as err:
            raise ArgumentError(str(err), ErrorKind.VALUE_VALIDATION) from err

    @classmethod
    def from_config(cls, config: Any) -> Blocks | None:
        """Blocks from the config, skipping and reporting unknown names; None if empty."""
        if config.blocks is None:
            return None
        blocks: list[Block] = []
        for name in config.blocks:
            try:
                blocks.append(Block.try_from(name))
            except ValueError as err:
                print(f"{err}.", file=sys.stderr)
        return cls(blocks) if blocks else None

    @classmethod
    def long(cls) -> Blocks:
        """The blocks of the long format."""
        return cls(
            [
                Block.PERMISSION,
                Block.USER,
                Block.GROUP,
                Block.SIZE,
                Block.DATE,
                Block.NAME,
            ]
        )

    def optional_prepend_inode(self) -> None:
        """Put an INODE block first unless one is already present."""
        if Block.INODE not in self.blocks:
            self.blocks.insert(0, Block.INODE)