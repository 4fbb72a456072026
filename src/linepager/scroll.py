"""Scroll region commands for high performance rendering.

Instead of repainting the whole viewport, a host that supports it can scroll a
region of the terminal and draw only the lines that moved in. The functions
here turn a viewport and the diff returned by its navigation methods into
commands for such a host.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple, Union

from .viewport import Viewport, clamp

# Configure logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncScrollArea:
    """Establish the scroll region and draw its full contents."""

    lines: Tuple[str, ...]
    top_boundary: int
    bottom_boundary: int


@dataclass(frozen=True)
class ScrollUp:
    """Scroll the region down, inserting lines in from above."""

    lines: Tuple[str, ...]
    top_boundary: int
    bottom_boundary: int


@dataclass(frozen=True)
class ScrollDown:
    """Scroll the region up, inserting lines in from below."""

    lines: Tuple[str, ...]
    top_boundary: int
    bottom_boundary: int


ScrollCommand = Union[SyncScrollArea, ScrollUp, ScrollDown]


class ScrollRenderer(Protocol):
    """Host side of the high performance rendering channel."""

    def sync_scroll_area(self, lines: Tuple[str, ...], top_boundary: int, bottom_boundary: int) -> None: ...

    def scroll_up(self, lines: Tuple[str, ...], top_boundary: int, bottom_boundary: int) -> None: ...

    def scroll_down(self, lines: Tuple[str, ...], top_boundary: int, bottom_boundary: int) -> None: ...


def _boundaries(viewport: Viewport) -> Tuple[int, int]:
    return viewport.position, viewport.position + viewport.height


def sync(viewport: Viewport) -> Optional[SyncScrollArea]:
    """
    Tell the host where the viewport is and what it currently shows.

    Should be sent for the first render and after every resize or content
    change.

    Args:
        viewport: Viewport to sync

    Returns:
        A SyncScrollArea command, or None if the viewport has no content
    """
    if not viewport.lines:
        return None

    top = max(viewport.offset, 0)
    bottom = clamp(viewport.offset + viewport.height, 0, len(viewport.lines) - 1)
    top_boundary, bottom_boundary = _boundaries(viewport)
    logger.debug(f"Sync scroll area rows {top_boundary}-{bottom_boundary}")
    return SyncScrollArea(tuple(viewport.lines[top:bottom]), top_boundary, bottom_boundary)


def view_down(viewport: Viewport, lines: List[str]) -> Optional[ScrollDown]:
    """
    Build the command for lines that entered from below.

    Use with the result of a downward navigation call, for example::

        lines = viewport.line_down(1)
        command = view_down(viewport, lines)
    """
    if not lines:
        return None
    return ScrollDown(tuple(lines), *_boundaries(viewport))


def view_up(viewport: Viewport, lines: List[str]) -> Optional[ScrollUp]:
    """Build the command for lines that entered from above."""
    if not lines:
        return None
    return ScrollUp(tuple(lines), *_boundaries(viewport))


def dispatch(command: Optional[ScrollCommand], renderer: ScrollRenderer) -> bool:
    """
    Forward a command to a host renderer.

    Args:
        command: Command to forward; None is ignored
        renderer: Host implementing ScrollRenderer

    Returns:
        True if a command was forwarded

    Raises:
        TypeError: If command is not a scroll command
    """
    if command is None:
        return False

    if isinstance(command, SyncScrollArea):
        renderer.sync_scroll_area(command.lines, command.top_boundary, command.bottom_boundary)
    elif isinstance(command, ScrollUp):
        renderer.scroll_up(command.lines, command.top_boundary, command.bottom_boundary)
    elif isinstance(command, ScrollDown):
        renderer.scroll_down(command.lines, command.top_boundary, command.bottom_boundary)
    else:
        raise TypeError(f"Not a scroll command: {command!r}")

    return True
