# logger.py
import sys
import logging

from config import LOG_LEVEL

# --------------------------------------------------------
# One logger shared by every HealthPredict module
# --------------------------------------------------------
LOGGER_NAME = "healthpredict"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

# If no handlers exist, add one (avoid duplicate logs on Streamlit reruns)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.propagate = False  # Streamlit attaches its own root handler


def debug(msg):
    logger.debug(msg)

def info(msg):
    logger.info(msg)

def warn(msg):
    logger.warning(msg)
