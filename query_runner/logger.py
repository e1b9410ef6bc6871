"""
Shared logger for the query runner.

Every module does ``from query_runner.logger import logger`` so output from
the connection, runner and HTTP layers goes through one handler on stderr.
Results themselves are printed to stdout by the CLI.
"""

import logging
import sys

from query_runner.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _build_logger(name: str = "query_runner") -> logging.Logger:
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(LOG_LEVEL.upper())
    return log


logger = _build_logger()
