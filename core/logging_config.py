"""Console logging for the CLI.

Library modules only call ``logging.getLogger(__name__)``; the CLI
installs the handler once at startup::

    from core.logging_config import configure_logging
    configure_logging(verbose=True)
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Install a RichHandler on the root logger, writing to stderr.

    Safe to call multiple times: existing handlers are removed first.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
