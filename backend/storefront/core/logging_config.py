"""
Logging configuration for the storefront

Log records go to stderr so that stdout carries only receipts and the
demo transcript.
"""
import logging
import sys
from typing import Optional

from storefront.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
