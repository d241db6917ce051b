"""Command-line parsing, configuration, colours and display flags for an ls-like lister."""

__version__ = "0.1.0"