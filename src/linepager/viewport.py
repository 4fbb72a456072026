"""Viewport class for scrolling through pre-wrapped lines of text."""

import logging
from typing import List

# Configure logger
logger = logging.getLogger(__name__)


def clamp(value: int, low: int, high: int) -> int:
    """Bound value to the range [low, high], preferring high if they cross."""
    return min(high, max(low, value))


def split_content(text: str) -> List[str]:
    """Split text into lines, normalizing Windows line endings."""
    return text.replace("\r\n", "\n").split("\n")


class Viewport:
    """
    A vertically scrollable window onto a list of lines.

    The viewport owns the content, the window size and the scroll offset.
    Navigation methods move the offset and return the lines that became
    visible, so a host can redraw incrementally; an empty list means nothing
    moved.
    """

    def __init__(self, width: int = 0, height: int = 0, position: int = 0, high_performance: bool = False):
        """
        Initialize a Viewport.

        Args:
            width: Window width in cells
            height: Window height in rows
            position: Screen row the viewport starts at (high performance rendering only)
            high_performance: Render placeholders and let the host scroll regions itself
        """
        self.width = width
        self.height = height
        self.position = position
        self.high_performance = high_performance
        self.offset = 0
        self.lines: List[str] = []

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return (
            f"Viewport(width={self.width}, height={self.height}, "
            f"offset={self.offset}, lines={len(self.lines)})"
        )

    @property
    def _rows(self) -> int:
        """Height clamped at zero; negative heights behave like an empty window."""
        return max(self.height, 0)

    @property
    def _max_offset(self) -> int:
        return len(self.lines) - 1 - self._rows

    def at_top(self) -> bool:
        """Whether the viewport is in the very top position."""
        return self.offset <= 0

    def at_bottom(self) -> bool:
        """Whether the viewport is at or past the very bottom position."""
        return self.offset >= self._max_offset

    def past_bottom(self) -> bool:
        """
        Whether the viewport is scrolled beyond the last line.

        This happens after the height grows or the content shrinks, and lasts
        until the next navigation call.
        """
        return self.offset > self._max_offset

    def scroll_percent(self) -> float:
        """Amount scrolled, as a float between 0 and 1."""
        if self._rows >= len(self.lines):
            return 1.0
        scrollable = self._max_offset
        if scrollable <= 0:
            # One line taller than the window: there is nowhere to scroll
            return 1.0
        value = self.offset / scrollable
        return max(0.0, min(1.0, value))

    def set_content(self, text: str):
        """
        Replace the content with the given text.

        The offset jumps to the bottom if the new content is shorter than it.
        In high performance mode the host should be synced again afterwards.

        Args:
            text: Text to display, already wrapped to the viewport width
        """
        self.lines = split_content(text)
        logger.debug(f"Content set: {len(self.lines)} lines")

        if self.offset > len(self.lines) - 1:
            logger.debug(f"Offset {self.offset} beyond content, jumping to bottom")
            self.goto_bottom()

    def visible_lines(self) -> List[str]:
        """Lines that should currently be visible in the viewport."""
        if not self.lines:
            return []
        top = max(0, self.offset)
        bottom = clamp(self.offset + self._rows, top, len(self.lines))
        return self.lines[top:bottom]

    def _reclamp(self):
        """Pull an offset left past the bottom by a resize back into range."""
        if self.past_bottom():
            logger.debug(f"Offset {self.offset} past bottom, clamping")
            self.offset = max(self._max_offset, 0)

    def _slice(self, top: int, bottom: int) -> List[str]:
        """Lines from top to bottom, bounded by the last line."""
        if not self.lines:
            return []
        top = max(top, 0)
        bottom = clamp(bottom, top, len(self.lines) - 1)
        return self.lines[top:bottom]

    def page_down(self) -> List[str]:
        """Move the view down by one height of the viewport."""
        self._reclamp()
        if self.at_bottom():
            return []

        self.offset = min(self.offset + self._rows, self._max_offset)
        logger.debug(f"Page down to offset {self.offset}")
        return self.visible_lines()

    def page_up(self) -> List[str]:
        """Move the view up by one height of the viewport."""
        self._reclamp()
        if self.at_top():
            return []

        self.offset = max(self.offset - self._rows, 0)
        logger.debug(f"Page up to offset {self.offset}")
        return self.visible_lines()

    def half_page_down(self) -> List[str]:
        """Move the view down by half the height of the viewport."""
        self._reclamp()
        if self.at_bottom():
            return []

        half = self._rows // 2
        self.offset = min(self.offset + half, self._max_offset)
        logger.debug(f"Half page down to offset {self.offset}")
        return self._slice(self.offset + half, self.offset + self._rows)

    def half_page_up(self) -> List[str]:
        """Move the view up by half the height of the viewport."""
        self._reclamp()
        if self.at_top():
            return []

        half = self._rows // 2
        self.offset = max(self.offset - half, 0)
        logger.debug(f"Half page up to offset {self.offset}")
        return self._slice(self.offset, self.offset + half)

    def line_down(self, n: int = 1) -> List[str]:
        """
        Move the view down by the given number of lines.

        Args:
            n: Number of lines to scroll

        Returns:
            The lines newly exposed at the bottom edge
        """
        self._reclamp()
        if self.at_bottom() or n <= 0:
            return []

        # Never scroll further than the lines left below the bottom edge
        n = min(n, (len(self.lines) - 1) - (self.offset + self._rows))

        self.offset = min(self.offset + n, self._max_offset)
        logger.debug(f"Line down {n} to offset {self.offset}")
        return self._slice(self.offset + self._rows - n, self.offset + self._rows)

    def line_up(self, n: int = 1) -> List[str]:
        """
        Move the view up by the given number of lines.

        Args:
            n: Number of lines to scroll

        Returns:
            The lines newly exposed at the top edge
        """
        self._reclamp()
        if self.at_top() or n <= 0:
            return []

        # Never scroll further than the lines left above the top edge
        n = min(n, self.offset)

        self.offset = max(self.offset - n, 0)
        logger.debug(f"Line up {n} to offset {self.offset}")
        return self._slice(self.offset, self.offset + n)

    def goto_top(self) -> List[str]:
        """Move the view to the top position."""
        self._reclamp()
        if self.at_top():
            return []

        self.offset = 0
        logger.debug("Goto top")
        return self._slice(0, self._rows)

    def goto_bottom(self) -> List[str]:
        """Move the view to the bottom position."""
        self.offset = max(self._max_offset, 0)
        logger.debug(f"Goto bottom at offset {self.offset}")
        return self._slice(self.offset, len(self.lines) - 1)

    def view(self) -> str:
        """
        Render the viewport into a string.

        Returns:
            The visible lines, padded with newlines up to the viewport height.
            In high performance mode only the padding is returned, since the
            host draws the content through scroll commands.
        """
        if self.high_performance:
            return "\n" * (self.height - 1)

        lines = self.visible_lines()

        # Fill empty space with newlines
        extra_lines = ""
        if len(lines) < self.height:
            extra_lines = "\n" * (self.height - len(lines))

        return "\n".join(lines) + extra_lines
