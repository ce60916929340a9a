"""Lint the lines of .env files for common mistakes."""

__version__ = "0.1.0"