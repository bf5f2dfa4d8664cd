"""
Logging setup for hosts embedding the wizard.

The library itself only emits records through module loggers; calling
``configure_logging`` is up to the host.
"""

import logging


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging based on verbose/quiet flags.

    Args:
        verbose: Show debug diagnostics with logger names
        quiet: Show errors only
    """
    if verbose:
        level = logging.DEBUG
        format_str = "%(levelname)s [%(name)s] %(message)s"
    elif quiet:
        level = logging.ERROR
        format_str = "%(levelname)s: %(message)s"
    else:
        level = logging.INFO
        format_str = "%(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        force=True,  # Reconfigure if already configured
    )
