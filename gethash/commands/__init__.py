"""Command implementations for GetHash."""

from .hash import HashCommand

__all__ = ['HashCommand']
