"""CLI command implementations."""

from .initialize import init

__all__ = ["init"]
