"""Shared precedence logic for flags set from arguments, config or defaults."""

from __future__ import annotations

from typing import Any


class Configurable:
    """Mixin for flags configured from command-line matches, a config or a default.

    Subclasses override ``from_arg_matches`` and ``from_config`` to return a value
    or None; ``default`` builds the fallback value.
    """

    @classmethod
    def configure_from(cls, matches: Any, config: Any):
        """Return the argument value, else the config value, else the default."""
        result = cls.default()
        from_config = cls.from_config(config)
        if from_config is not None:
            result = from_config
        from_args = cls.from_arg_matches(matches)
        if from_args is not None:
            result = from_args
        return result

    @classmethod
    def from_arg_matches(cls, matches: Any):
        """Value taken from command-line matches; None when not given."""
        return None

    @classmethod
    def from_config(cls, config: Any):
        """Value taken from a config; None when not set."""
        return None

    @classmethod
    def default(cls):
        """The value used when neither arguments nor config set one."""
        return cls()