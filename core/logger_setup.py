import logging
import os
import time
import shutil

LOG_DIR = "logs"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(log_dir=LOG_DIR, filename="lens.log", level=logging.DEBUG, console=False):
    """
    Install the root handlers for a session.
    The previous log file is kept as a timestamped backup.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, filename)

    # Backup previous log
    if os.path.exists(log_file):
        stem, ext = os.path.splitext(filename)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        shutil.move(log_file, os.path.join(log_dir, f"{stem}_{timestamp}{ext}"))

    handlers = [logging.FileHandler(log_file, mode="w")]
    if console:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    return log_file


# Convenience function to get module-specific loggers
def get_logger(name):
    return logging.getLogger(name)
