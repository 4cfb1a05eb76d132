"""Command line interface for magic-sorter."""

from .main import cli

__all__ = ["cli"]
