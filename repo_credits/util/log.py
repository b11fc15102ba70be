# repo_credits/util/log.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.logging import RichHandler

from .console import err_console

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Route the package logger to stderr through Rich and, when asked,
    to a plain log file. The file is the only place records written
    during full-screen playback can be read back from.
    """
    root = logging.getLogger("repo_credits")
    root.setLevel(logging.DEBUG if verbose or log_file else logging.WARNING)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    stream = RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    stream.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(stream)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(fh)


@contextmanager
def console_logging_paused() -> Iterator[None]:
    """Keep stderr log records off the screen while the alternate screen is up."""
    handlers = [
        h for h in logging.getLogger("repo_credits").handlers if isinstance(h, RichHandler)
    ]
    levels = [h.level for h in handlers]
    for h in handlers:
        h.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for h, level in zip(handlers, levels):
            h.setLevel(level)
