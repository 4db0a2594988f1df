import logging
import sys


CLI_FORMAT = 'hilbertgrid: %(levelname)s: %(message)s'
# At DEBUG the rejection messages come from several modules, so name them.
DEBUG_FORMAT = 'hilbertgrid: %(levelname)-8s %(name)-24s %(message)s'


def parse_level(level: str) -> int:
    """Map a level name such as 'info' or 'DEBUG' to its logging constant."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')
    return numeric_level


def configure_logging(level: str = 'WARNING', stream=None) -> None:
    """
    Send log messages to stderr (or `stream`) for the command line.

    stdout is kept for the converted data so it can be piped.
    """
    numeric_level = parse_level(level)
    fmt = DEBUG_FORMAT if numeric_level <= logging.DEBUG else CLI_FORMAT
    logging.basicConfig(
        level=numeric_level,
        format=fmt,
        stream=stream if stream is not None else sys.stderr,
        force=True
    )
