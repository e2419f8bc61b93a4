"""Connect-Four style streak game against a random-move AI."""

__version__ = "0.1.0"
