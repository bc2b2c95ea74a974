"""Loguru sink setup."""

import os
import sys

from loguru import logger

fmt = """{level} @ {time:YYYY-MM-DD HH:mm:ss} ({name}:{line} in {function}):
>   {message}"""


def configure_logging(app):
    """Replace loguru's default sink with ones driven by the app config."""
    logger.remove()
    logger.add(
        sys.stderr, colorize=not app.testing,
        format=fmt, level=app.config['LOG_LEVEL']
    )

    log_dir = app.config.get('LOG_DIR')
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        date = "{time:YYYY-MM-DD}"
        logger.add(
            os.path.join(log_dir, f"contactdesk_{date}.log"), format=fmt,
            level=app.config['LOG_LEVEL'], colorize=False, rotation="1 day"
        )
        logger.add(
            os.path.join(log_dir, f"contactdesk_{date}.err"), format=fmt,
            level="ERROR", colorize=False, rotation="1 day"
        )
    return logger
