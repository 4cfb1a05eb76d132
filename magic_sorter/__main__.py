"""Allow running as ``python -m magic_sorter``."""

from .cli import cli

if __name__ == "__main__":
    cli()
