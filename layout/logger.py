"""
Logging setup for scripts
"""

import logging
import sys

# Parent of every library logger (layout.furniture, layout.recorder, ...)
PACKAGE_LOGGER = "layout"

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str, level=logging.INFO) -> logging.Logger:
    """
    Give a logger one stdout handler at the given level.

    Calling it again for the same name updates the level instead of adding
    another handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if getattr(h, '_layout_handler', False)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler._layout_handler = True
        handler.setFormatter(logging.Formatter(FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(handler)
    elif handler.stream is not sys.stdout:
        # stdout may have been swapped since the first call
        handler.setStream(sys.stdout)
    handler.setLevel(level)

    return logger


def setup_logging(name: str, level=logging.INFO) -> logging.Logger:
    """Configure the library loggers and the calling script's logger"""
    setup_logger(PACKAGE_LOGGER, level)
    return setup_logger(name, level)
