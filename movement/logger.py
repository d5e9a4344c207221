import os
import logging
from datetime import datetime

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'movement.log')


def setup_logger(name, testing=False, log_file=None):
    """Return a named logger, sending everything to a shared file in testing mode"""
    logger = logging.getLogger(name)
    if not testing:
        return logger

    log_file = os.path.abspath(log_file or os.environ.get('MOVEMENT_LOG_FILE') or DEFAULT_LOG_FILE)

    # Every module shares one handler on the root logger
    if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
               for h in logging.root.handlers):
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.root.addHandler(handler)
        logging.root.setLevel(logging.DEBUG)

        logging.info('=' * 50)
        logging.info(f'movement logging started at {datetime.now()}')
        logging.info('=' * 50)

    return logger
