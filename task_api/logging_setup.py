"""Logging configuration."""

import logging
from pathlib import Path

from rich.logging import RichHandler


def setup_logging(level: str | int = logging.INFO, log_file: str | Path | None = None) -> None:
    """Configure the root logger.

    Console output goes through rich; if ``log_file`` is given, everything
    at ``level`` and above is also written there in plain text.
    Call this once, before the server starts.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = RichHandler(rich_tracebacks=True, show_path=False)
    console.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    logging.captureWarnings(True)
