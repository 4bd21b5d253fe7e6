import logging
import os

LOG_LEVEL = os.environ.get("RECOMMENDER_LOG_LEVEL", "INFO").upper()
ROOT_LOGGER_NAME = "recommender"

logger = logging.getLogger(ROOT_LOGGER_NAME)
if not logger.handlers:
    logger.setLevel(LOG_LEVEL)
    ch = logging.StreamHandler()
    fmt = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)

def get_logger(name: str) -> logging.Logger:
    """Child of the project logger, e.g. `recommender.core.recommendation`."""
    short = name.split("product_recommender.", 1)[-1]
    return logger.getChild(short)
