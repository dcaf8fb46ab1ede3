import logging
import os
from datetime import datetime

LOG_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Persist log path for lifespan of app
current_time = datetime.now().strftime("%d-%m-%Y-%H-%M-%S")
LOG_FILE = f"promptize-{current_time}.log"


def setup_logger(name, loglvl = logging.INFO):
    logging.basicConfig(level=loglvl, format=LOG_FMT)
    logger = logging.getLogger(name)
    logger.setLevel(loglvl)
    log_dir = os.environ.get("LOG_DIR")
    if log_dir and os.environ.get("ENVIRONMENT") != "production":
        _setup_logfile(logger, loglvl, log_dir)
    return logger


def _setup_logfile(logger, loglvl, log_dir):
    # Tee logs to a shared file. Not thread safe, so never in production.
    path = os.path.join(log_dir, LOG_FILE)
    if any(isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(path)
           for h in logger.handlers):
        return
    os.makedirs(log_dir, exist_ok=True)
    file_handler = logging.FileHandler(path)
    file_handler.setLevel(loglvl)
    file_handler.setFormatter(logging.Formatter(LOG_FMT))
    logger.addHandler(file_handler)
