"""
Logging helpers for cz-commit.

User-facing text goes through czcommit.output; the stdlib logger only
carries diagnostics (git invocations, channel lines) and stays quiet
unless --verbose is given.
"""

import logging


def configure_logging(verbose: bool = False) -> None:
    """
    Configure the root logger.

    verbose False -> WARNING
    verbose True  -> DEBUG
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
