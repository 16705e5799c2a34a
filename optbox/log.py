"""Logging setup, via `splatlog`.

Nothing in `optbox` configures logging on import. Applications that want to
see what the package is up to (mostly config loading) call `setup`.
"""

import sys

from rich.console import Console
import splatlog

from optbox import cfg

#: Verbosity → level thresholds for the `optbox` logger.
VERBOSITY_LEVELS = (
    (0, splatlog.WARNING),
    (1, splatlog.INFO),
    (2, splatlog.DEBUG),
)


def setup(
    verbosity: int | None = None,
    console: Console | None = None,
) -> None:
    """Set up `splatlog` to print `optbox` logs to `console` (a `rich`
    console on `sys.stderr` by default).

    When `verbosity` isn't given it comes from the `optbox.cfg.VERBOSITY`
    setting (env var `OPTBOX_VERBOSITY`).
    """
    if verbosity is None:
        verbosity = cfg.get(cfg.VERBOSITY)

    if console is None:
        console = Console(file=sys.stderr)

    splatlog.setup(
        console=console,
        verbosity_levels={
            splatlog.root_name(__package__): VERBOSITY_LEVELS,
        },
        verbosity=verbosity,
    )
