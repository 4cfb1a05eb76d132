"""Logging setup for the command line tools."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the -v/-q switches to a logging level; quiet wins over verbose."""
    if quiet:
        return logging.WARNING
    return logging.DEBUG if verbose else logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure root logging for a command line run.

    Sort and undo progress reaches the terminal through the event display,
    so the python log mostly carries debug detail and warnings about
    directories that could not be read or created.
    """
    logging.basicConfig(
        level=log_level(verbose, quiet), format=LOG_FORMAT, datefmt=DATE_FORMAT
    )
