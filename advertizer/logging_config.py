import logging
import sys


def setup_logging(level=logging.INFO):
    """
    Configure the root logger to write to stdout with time, level, location and message.

    Args:
        level: The logging level (default: logging.INFO)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Drop handlers left by a previous call
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - [%(module)s: %(funcName)s] - %(message)s',
        datefmt='%H:%M:%S'
    ))

    root_logger.addHandler(console_handler)
