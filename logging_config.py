"""
Logging Configuration
Sets up the loggers of the editor; modules log through `logging.getLogger(__name__)`.
"""
import logging
import sys

# The top-level names under which our modules log
LOGGER_NAMES = ['dsn', 'widgets', 'editor']


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configures the loggers of the editor.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate output when called more than once
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)

        # kivy installs its own handler on the root logger
        logger.propagate = False

    logging.getLogger('editor').info("Logging initialized.")
