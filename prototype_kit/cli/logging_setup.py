"""
prototype_kit.cli.logging_setup

Purpose:
    Root logging for CLI runs. User output stays on stdout (oprint);
    diagnostics go to stderr.

Levels:
    --quiet  ERROR only
    --trace  DEBUG
    default  INFO

Notes:
    - Scaffolding commands log as "[LEVEL] name: message".
    - serve installs the web format instead (request_id=... | prefix=...),
      so log lines written while serving carry the request context.
      The app's configure_logging() finds this handler and reuses it.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
import sys

from prototype_kit.web.logging.logging_config import LOG_FORMAT
from prototype_kit.web.logging.request_context_filter import RequestContextFilter

CLI_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Chatty libraries that only matter under --trace
_QUIET_UNLESS_TRACE = ("httpx", "httpcore", "watchfiles")


def _level_for(*, trace: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if trace:
        return logging.DEBUG
    return logging.INFO


def setup_cli_logging(*, trace: bool = False, quiet: bool = False, request_context: bool = False) -> None:
    level = _level_for(trace=trace, quiet=quiet)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    if request_context:
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        handler.addFilter(RequestContextFilter())
    else:
        handler.setFormatter(logging.Formatter(CLI_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)

    if not trace:
        for name in _QUIET_UNLESS_TRACE:
            logging.getLogger(name).setLevel(logging.WARNING)
