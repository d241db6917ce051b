"""When to colour the output, set from arguments, a config or the default."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lsd.flags.configurable import Configurable


class ColorOption(Configurable, Enum):
    """When to use colours in the output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def default(cls) -> ColorOption:
        """Colours are used automatically by default."""
        return cls.AUTO

    @classmethod
    def from_str(cls, value: str) -> ColorOption | None:
        """Parse a colour option; report and return None if it is unknown."""
        try:
            return cls(value)
        except ValueError:
            print(
                "Config color.when could only be one of auto, always and never, "
                f"got {value}.",
                file=sys.stderr,
            )
            return None

    @classmethod
    def from_arg_matches(cls, matches: Any) -> ColorOption | None:
        """NEVER in classic mode, else the value of --color when given."""
        if matches.is_present("classic"):
            return cls.NEVER
        if matches.occurrences_of("color") > 0:
            value = matches.value_of("color")
            if value is None:
                raise ValueError("Bad color args. This should not be reachable!")
            return cls.from_str(value)
        return None

    @classmethod
    def from_config(cls, config: Any) -> ColorOption | None:
        """NEVER in classic mode, else the config's color.when if set."""
        if config.classic is True:
            return cls.NEVER
        if config.color is not None:
            return config.color.when
        return None


@dataclass(frozen=True)
class Color:
    """A collection of flags on how to use colours."""

    when: ColorOption = ColorOption.AUTO

    @classmethod
    def configure_from(cls, matches: Any, config: Any) -> Color:
        """Build the colour flags from arguments, a config or defaults."""
        return cls(when=ColorOption.configure_from(matches, config))