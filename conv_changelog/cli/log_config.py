import logging
from os import getenv

import typer
from rich.console import Console
from rich.logging import RichHandler

from conv_changelog.settings import ENV_PREFIX

LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"
# stdout is reserved for the generated markdown
_log_console = Console(stderr=True)


def configure_logging(
    app: typer.Typer,
    *,
    log_level: str | None = None,
    app_pretty_exceptions_enable: bool = False,
    app_pretty_exceptions_show_locals: bool = False,
) -> logging.Handler:
    log_level = (log_level or getenv(LOG_LEVEL_ENV, "INFO")).upper()
    handler = RichHandler(rich_tracebacks=False, level=log_level, console=_log_console)
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    app.pretty_exceptions_enable = app_pretty_exceptions_enable
    app.pretty_exceptions_show_locals = app_pretty_exceptions_show_locals
    return handler
