import logging
from typing import Optional

from objtree.core.config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler at the configured level. Never called on import."""
    logging.basicConfig(level=(level or get_settings().log_level).upper())
