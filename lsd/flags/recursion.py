"""Options controlling recursion into directories."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from lsd.app import ArgumentError, ErrorKind

MAX_DEPTH = 2**64 - 1
"""The depth used when none is given: recursion is virtually unlimited."""

_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Recursion:
    """Whether to recurse into directories, and how deep."""

    enabled: bool = False
    depth: int = MAX_DEPTH

    @classmethod
    def configure_from(cls, matches: Any, config: Any) -> Recursion:
        """Build the recursion options; raise ArgumentError for a bad --depth."""
        enabled = cls.enabled_from(matches, config)
        depth = cls.depth_from(matches, config)
        return cls(enabled=enabled, depth=depth)

    @classmethod
    def enabled_from(cls, matches: Any, config: Any) -> bool:
        """The arguments' choice, else the config's recursion.enabled, else False."""
        from_args = cls.enabled_from_arg_matches(matches)
        if from_args is not None:
            return from_args
        if config.recursion is not None and config.recursion.enabled is not None:
            return config.recursion.enabled
        return False

    @classmethod
    def enabled_from_arg_matches(cls, matches: Any) -> bool | None:
        """True when --recursive is given, else None."""
        if matches.is_present("recursive"):
            return True
        return None

    @classmethod
    def depth_from(cls, matches: Any, config: Any) -> int:
        """The --depth value, else the config's recursion.depth, else MAX_DEPTH."""
        from_args = cls.depth_from_arg_matches(matches)
        if from_args is not None:
            return from_args
        if config.recursion is not None and config.recursion.depth is not None:
            return config.recursion.depth
        return MAX_DEPTH

    @classmethod
    def depth_from_arg_matches(cls, matches: Any) -> int | None:
        """The parsed --depth value, or None; raise ArgumentError if it is not a count."""
        text = matches.value_of("depth")
        if text is None:
            return None
        if _UNSIGNED.fullmatch(text):
            value = int(text)
            if value <= MAX_DEPTH:
                return value
        raise ArgumentError(
            "The argument '--depth' requires a valid positive number.",
            ErrorKind.VALUE_VALIDATION,
        )