""" Logging configuration... """

# Python Packages
import logging
import os
from logging.handlers import TimedRotatingFileHandler

# Constants
from ..base import constants


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"





def setup_logging(level: str = None, log_dir: str = None):
    """
    Configure the root logger once per process.

    Console output always; a daily rotating file (7 days kept) when a log
    directory is configured.
    """

    level = (level or constants.LOG_LEVEL).upper()
    log_dir = constants.LOG_DIR if log_dir is None else log_dir

    handlers = [logging.StreamHandler()]

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        handlers.append(
            TimedRotatingFileHandler(
                os.path.join(log_dir, "storefront.log"),
                when = "midnight",
                interval = 1,
                backupCount = 7,
                encoding = "utf-8"
            )
        )

    logging.basicConfig(
        level = level,
        format = LOG_FORMAT,
        handlers = handlers
    )

    return logging.getLogger("storefront")
