import logging
from pathlib import Path
from typing import Optional, Union

from rich.segment import Segment
from textual import events
from textual.message import Message
from textual.strip import Strip
from textual.widget import Widget

from ...config import ViewportConfig
from ...file import aload_file
from ...keymap import WHEEL_DOWN, WHEEL_UP, handle_key, handle_mouse_wheel, is_bound
from ...scroll import ScrollCommand, sync
from ...viewport import Viewport

# Configure logger
logger = logging.getLogger(__name__)


class ViewportWidget(Widget):
    """A pager-style widget that displays text through a Viewport."""

    class ViewportUpdated(Message):
        """Posted when the visible window changes (scroll, resize, new content)."""

        def __init__(self, offset: int, total_lines: int, scroll_percent: float) -> None:
            super().__init__()
            self.offset = offset
            self.total_lines = total_lines
            self.scroll_percent = scroll_percent

    class ScrollRequested(Message):
        """Posted in high performance mode for a host that scrolls regions itself."""

        def __init__(self, command: ScrollCommand) -> None:
            super().__init__()
            self.command = command

    DEFAULT_CSS = """
    ViewportWidget {
        padding: 0;
        margin: 0;
        border: none;
        width: 100%;
        height: 100%;
    }
    """

    can_focus = True

    def __init__(self, text: str = "", config: Optional[ViewportConfig] = None, **kwargs):
        super().__init__(**kwargs)
        self.config = config or ViewportConfig()
        self.viewport = Viewport(high_performance=self.config.high_performance)
        if text:
            self.viewport.set_content(text)

    def on_mount(self):
        """Called when widget is mounted."""
        logger.info(f"ViewportWidget mounted with {len(self.viewport)} lines")
        if self.size.height > 0:
            self.resize_viewport(self.size.width, self.size.height)

    def on_resize(self, event: events.Resize):
        """Called when widget is resized."""
        self.resize_viewport(event.size.width, event.size.height)

    def resize_viewport(self, width: int, height: int):
        """Resize the viewport, pulling it back if it ended up past the bottom."""
        logger.info(f"Viewport resized to {width}x{height}")
        self.viewport.width = width
        self.viewport.height = height
        self.viewport.position = self.region.y
        self._refresh_window()

    def set_content(self, text: str):
        """Replace the displayed text."""
        self.viewport.set_content(text)
        self._refresh_window()

    async def aload(self, path: Union[Path, str], tail: bool = False):
        """Load a file into the widget without blocking the UI."""
        await aload_file(path, self.viewport, tail=tail)
        logger.info(f"Loaded {len(self.viewport)} lines from {path}")
        self._refresh_window()

    def _refresh_window(self):
        """Settle the offset after a geometry or content change and redraw."""
        if self.viewport.past_bottom():
            self.viewport.goto_bottom()

        self._sync()
        self._post_viewport_updated()
        self.refresh()

    def _sync(self):
        """Send the full window to a high performance host."""
        if self.viewport.high_performance:
            command = sync(self.viewport)
            if command is not None:
                self.post_message(self.ScrollRequested(command))

    def _post_viewport_updated(self):
        self.post_message(
            self.ViewportUpdated(
                offset=self.viewport.offset,
                total_lines=len(self.viewport),
                scroll_percent=self.viewport.scroll_percent(),
            )
        )

    def _after_navigation(self, old_offset: int, command: Optional[ScrollCommand]):
        if command is not None:
            self.post_message(self.ScrollRequested(command))
        if self.viewport.offset != old_offset:
            if command is None:
                # Offset was pulled back into range without a diff
                self._sync()
            self._post_viewport_updated()
            self.refresh()

    def press_key(self, key: str) -> bool:
        """
        Apply the action bound to a key.

        Returns:
            True if the key is bound to a viewport action
        """
        if not is_bound(key, self.config):
            return False
        old_offset = self.viewport.offset
        self._after_navigation(old_offset, handle_key(self.viewport, key, self.config))
        return True

    def scroll_wheel(self, direction: str):
        """Scroll by one mouse wheel tick in the given direction."""
        old_offset = self.viewport.offset
        self._after_navigation(old_offset, handle_mouse_wheel(self.viewport, direction, self.config))

    def on_key(self, event: events.Key):
        if self.press_key(event.key):
            event.stop()
            event.prevent_default()

    def on_mouse_scroll_down(self, event: events.MouseScrollDown):
        event.stop()
        self.scroll_wheel(WHEEL_DOWN)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp):
        event.stop()
        self.scroll_wheel(WHEEL_UP)

    def render_line(self, y: int) -> Strip:
        """Render a single row of the viewport."""
        width = self.size.width
        if self.viewport.high_performance:
            # Content arrives through ScrollRequested messages
            return Strip.blank(width)

        lines = self.viewport.visible_lines()
        if y >= len(lines):
            return Strip.blank(width)

        return Strip([Segment(lines[y])]).adjust_cell_length(width)
