import logging
import sys
from pathlib import Path

from . import config


def setup_logging(*, verbose: bool = False, log_path: Path | None = None) -> None:
    """
    Configure logging with:
    - Console handler: warnings only, everything from tick with --verbose
    - File handler: full debug log under the tick directory

    Call this once, before the first command runs.
    """
    log_path = log_path if log_path else config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.DEBUG if verbose else logging.WARNING)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_path), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
