"""Prompt checks, tokenizing, variable expansion and pipeline sections for a small shell."""

__version__ = "0.1.0"