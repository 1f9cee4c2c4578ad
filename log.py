"""Logging for oddgamma.

Every module logs through ``get_logger(__name__)``; all loggers sit under the
single ``oddgamma`` logger, which writes to stderr so that matrix dumps on
stdout stay clean. ``ODDGAMMA_LOG_LEVEL`` (DEBUG / INFO / WARNING / ERROR)
sets its level, INFO by default.
"""

import logging
import os
import sys

ROOT_NAME = "oddgamma"
LEVEL_ENV = "ODDGAMMA_LOG_LEVEL"


def _root_logger() -> logging.Logger:
    """The ``oddgamma`` logger, given a stderr handler on first use."""
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
        level = os.environ.get(LEVEL_ENV, "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))
    return root


def get_logger(name: str) -> logging.Logger:
    """Return the child logger ``oddgamma.<name>``.

    Args:
        name: Usually the caller's ``__name__``.
    """
    return _root_logger().getChild(name)
