"""ghactivity — what did a GitHub user do on a given day."""

__version__ = "0.1.0"
