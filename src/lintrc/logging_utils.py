from __future__ import annotations

import logging
import sys


def configure_logging(*, verbose: bool, quiet: bool) -> None:
    """
    Configure logging for the `lintrc` CLI.

    Resolution details (dropped presets, rules missing from the catalog) are
    logged at DEBUG, so they only show up with --verbose. Output goes to stderr
    to keep `--format json` on stdout parseable.
    """

    if verbose:
        level = logging.DEBUG
        fmt = "lintrc [%(levelname)s] %(name)s: %(message)s"
    else:
        level = logging.WARNING if quiet else logging.INFO
        fmt = "lintrc: %(message)s"

    logging.basicConfig(level=level, format=fmt, stream=sys.stderr, force=True)
