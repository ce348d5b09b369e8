import logging
from pathlib import Path

from .config import AliasMapSettings


def setup_logging(settings: AliasMapSettings) -> logging.Logger:
    """Configure package logging based on settings.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        settings: AliasMapSettings instance with logging settings
    """
    log_settings = settings.logging

    # Create logger
    logger = logging.getLogger('aliasmap')
    logger.setLevel(log_settings.level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Create formatter
    formatter = logging.Formatter(log_settings.format)

    # File handler
    if log_settings.file_path:
        log_dir = Path(log_settings.file_path).parent
        if not log_dir.exists():
            log_dir.mkdir(parents=True)
        file_handler = logging.FileHandler(log_settings.file_path, mode='a')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
