"""When and how to print icons, set from arguments, a config or the default."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from lsd.flags.configurable import Configurable


class IconOption(Configurable, Enum):
    """When to use icons in the output."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"

    @classmethod
    def default(cls) -> IconOption:
        """Icons are used automatically by default."""
        return cls.AUTO

    @classmethod
    def from_arg_matches(cls, matches: Any) -> IconOption | None:
        """NEVER in classic mode, else the value of --icon when given."""
        if matches.is_present("classic"):
            return cls.NEVER
        if matches.occurrences_of("icon") > 0:
            value = matches.value_of("icon")
            try:
                return cls(value)
            except ValueError as err:
                raise ValueError("This should not be reachable!") from err
        return None

    @classmethod
    def from_config(cls, config: Any) -> IconOption | None:
        """NEVER in classic mode, else the config's icons.when if set."""
        if config.classic is True:
            return cls.NEVER
        if config.icons is not None:
            return config.icons.when
        return None


class IconTheme(Configurable, Enum):
    """Which icon theme to use."""

    UNICODE = "unicode"
    FANCY = "fancy"

    @classmethod
    def default(cls) -> IconTheme:
        """The fancy theme by default."""
        return cls.FANCY

    @classmethod
    def from_arg_matches(cls, matches: Any) -> IconTheme | None:
        """The value of --icon-theme when given, else None."""
        if matches.occurrences_of("icon-theme") > 0:
            value = matches.value_of("icon-theme")
            try:
                return cls(value)
            except ValueError as err:
                raise ValueError("This should not be reachable!") from err
        return None

    @classmethod
    def from_config(cls, config: Any) -> IconTheme | None:
        """The config's icons.theme if set."""
        if config.icons is not None and config.icons.theme is not None:
            return config.icons.theme
        return None


@dataclass(frozen=True)
class Icons:
    """A collection of flags on how to use icons."""

    when: IconOption = IconOption.AUTO
    theme: IconTheme = IconTheme.FANCY

    @classmethod
    def configure_from(cls, matches: Any, config: Any) -> Icons:
        """Build the icon flags from arguments, a config or defaults."""
        return cls(
            when=IconOption.configure_from(matches, config),
            theme=IconTheme.configure_from(matches, config),
        )