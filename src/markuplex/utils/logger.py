"""Logger access for markuplex modules.

All loggers live under the ``markuplex`` namespace. The package root
carries a NullHandler, so nothing is printed unless the application
configures logging.

Example:
    >>> from markuplex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing %s", "index.html")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "markuplex"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the ``markuplex.``-namespaced logger for ``name``.

    Example:
        >>> get_logger("mymodule").name
        'markuplex.mymodule'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
