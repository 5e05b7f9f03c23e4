import logging
import os
import sys

def setup_logging(level=None):
    """
    Configure logging for the dashboard and CLI.
    VOXI_LOG_LEVEL (e.g. DEBUG) wins over the default INFO.
    """
    if level is None:
        level = os.environ.get("VOXI_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

def get_logger(name: str):
    return logging.getLogger(name)

def hour_display(hour: int) -> str:
    return f"{hour:02d}:00"

def hour_range(hour: int) -> str:
    return f"{hour:02d}:00-{hour:02d}:59"
