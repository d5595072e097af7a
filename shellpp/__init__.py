"""Wildcard matching, /proc statistics, command history and job tracking for a shell."""

__version__ = "0.1.0"