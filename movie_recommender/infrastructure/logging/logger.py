import logging
import os
from typing import Optional, Union


def setup_logging(level: Optional[Union[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    if level is None:
        level = os.getenv("LOG_LEVEL", logging.INFO)
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )
