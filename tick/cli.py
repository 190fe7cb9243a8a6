import logging
import sys
from pathlib import Path

import fncli

from . import config, db
from .core.errors import TickError
from .lib import ansi
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)

_VERBOSE_FLAGS = {"-v", "--verbose"}


def run(argv: list[str]) -> int:
    """Dispatch one command line (argv[0] is the program name) and return its exit code."""
    db.init()
    fncli.autodiscover(Path(__file__).parent, "tick")
    try:
        ansi.use(ansi.DEFAULT if config.get_color() else ansi.PLAIN)
        return fncli.dispatch(argv)
    except TickError as e:
        logger.debug("command failed: %s", e)
        sys.stderr.write(f"{e}\n")
        return 1


def main():
    user_args = sys.argv[1:]
    verbose = bool(user_args) and user_args[0] in _VERBOSE_FLAGS
    if verbose:
        user_args = user_args[1:]
    setup_logging(verbose=verbose)
    sys.exit(run(["tick", *user_args]))


if __name__ == "__main__":
    main()
