import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "restricted_imports"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Route package logs to stderr through rich; repeated calls replace the handler."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
