import logging

from .config import config


def setup_logging(debug: bool = False):
    """
    Configure root logging for command line use.

    Args:
        debug: If True, set log level to DEBUG; otherwise DEVICEID_LOG_LEVEL
    """
    log_level = logging.DEBUG if debug else getattr(
        logging, config.DEVICEID_LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(level=log_level)
    logging.getLogger().setLevel(log_level)

    # Update existing handlers
    for handler in logging.getLogger().handlers:
        handler.setLevel(log_level)
