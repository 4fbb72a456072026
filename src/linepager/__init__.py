"""linepager - A scrollable text viewport for terminal pagers."""

import logging
import sys

from .config import ViewportConfig
from .file import load_file
from .scroll import ScrollDown, ScrollUp, SyncScrollArea, dispatch, sync, view_down, view_up
from .viewport import Viewport

__version__ = "0.1.0"
__all__ = [
    "Viewport",
    "ViewportConfig",
    "ScrollDown",
    "ScrollUp",
    "SyncScrollArea",
    "dispatch",
    "sync",
    "view_down",
    "view_up",
    "load_file",
    "configure_logging",
]


# Configure logging for linepager
def configure_logging(level=logging.INFO):
    """Configure logging for linepager."""
    # Create formatter
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Create console handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger("linepager")
    logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()
    logger.addHandler(handler)
