"""Read text files into a Viewport."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from ..viewport import Viewport

logger = logging.getLogger(__name__)


def read_text(path: Union[Path, str], encoding: str = "utf-8") -> str:
    """
    Read a file as text.

    Undecodable bytes are replaced rather than raised.

    Raises:
        OSError: If the file can't be read
    """
    path = Path(path)
    text = path.read_text(encoding=encoding, errors="replace")
    logger.info(f"Read {len(text):,} characters from {path}")
    return text


def load_file(
    path: Union[Path, str],
    viewport: Optional[Viewport] = None,
    encoding: str = "utf-8",
    tail: bool = False,
) -> Viewport:
    """
    Load a file into a viewport.

    Args:
        path: File to read
        viewport: Viewport to fill; a new one is created if None
        encoding: Text encoding of the file
        tail: Jump to the bottom after loading, like `tail`

    Returns:
        The viewport holding the file's lines

    Raises:
        OSError: If the file can't be read
    """
    if viewport is None:
        viewport = Viewport()

    viewport.set_content(read_text(path, encoding))
    if tail:
        viewport.goto_bottom()
    return viewport


async def aload_file(
    path: Union[Path, str],
    viewport: Optional[Viewport] = None,
    encoding: str = "utf-8",
    tail: bool = False,
) -> Viewport:
    """Async version of load_file that reads the file in a thread."""
    text = await asyncio.to_thread(read_text, path, encoding)

    if viewport is None:
        viewport = Viewport()

    viewport.set_content(text)
    if tail:
        viewport.goto_bottom()
    return viewport
