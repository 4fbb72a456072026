"""Default pager-style key and mouse wheel handling for a Viewport.

To define your own bindings, call the navigation methods on Viewport directly
or pass a ViewportConfig with a different key_bindings mapping.
"""

import logging
from typing import Optional

from .config import ViewportConfig
from .scroll import ScrollCommand, view_down, view_up
from .viewport import Viewport

# Configure logger
logger = logging.getLogger(__name__)

WHEEL_UP = "up"
WHEEL_DOWN = "down"

DOWNWARD_ACTIONS = {"page_down", "half_page_down", "line_down", "goto_bottom"}
UPWARD_ACTIONS = {"page_up", "half_page_up", "line_up", "goto_top"}


def apply_action(viewport: Viewport, action: str, high_performance: bool = False) -> Optional[ScrollCommand]:
    """
    Run a navigation action on the viewport.

    Args:
        viewport: Viewport to move
        action: Name of a navigation method, e.g. "page_down"
        high_performance: Build a scroll command from the diff

    Returns:
        The scroll command for the lines that moved in, when high_performance
        is set and something moved; otherwise None

    Raises:
        ValueError: If action is not a navigation action
    """
    if action in DOWNWARD_ACTIONS:
        lines = getattr(viewport, action)()
        command = view_down(viewport, lines)
    elif action in UPWARD_ACTIONS:
        lines = getattr(viewport, action)()
        command = view_up(viewport, lines)
    else:
        raise ValueError(f"Unknown viewport action: {action}")

    logger.debug(f"{action}: {len(lines)} new lines, offset {viewport.offset}")
    return command if high_performance else None


def is_bound(key: str, config: Optional[ViewportConfig] = None) -> bool:
    """Whether the key triggers a viewport action."""
    config = config or ViewportConfig()
    return key in config.key_bindings


def handle_key(viewport: Viewport, key: str, config: Optional[ViewportConfig] = None) -> Optional[ScrollCommand]:
    """
    Apply the action bound to a key.

    Unbound keys leave the viewport untouched.

    Args:
        viewport: Viewport to move
        key: Key name, as reported by Textual (e.g. "pagedown", "ctrl+d")
        config: Bindings and options; defaults to ViewportConfig()

    Returns:
        Scroll command when viewport.high_performance is set, or None
    """
    config = config or ViewportConfig()
    action = config.key_bindings.get(key)
    if action is None:
        return None
    return apply_action(viewport, action, viewport.high_performance)


def handle_mouse_wheel(
    viewport: Viewport, direction: str, config: Optional[ViewportConfig] = None
) -> Optional[ScrollCommand]:
    """
    Scroll by one mouse wheel tick.

    Args:
        viewport: Viewport to move
        direction: WHEEL_UP or WHEEL_DOWN
        config: Options; config.mouse_wheel_delta lines are scrolled per tick

    Returns:
        Scroll command when viewport.high_performance is set, or None

    Raises:
        ValueError: If direction is not WHEEL_UP or WHEEL_DOWN
    """
    config = config or ViewportConfig()

    if direction == WHEEL_DOWN:
        lines = viewport.line_down(config.mouse_wheel_delta)
        command = view_down(viewport, lines)
    elif direction == WHEEL_UP:
        lines = viewport.line_up(config.mouse_wheel_delta)
        command = view_up(viewport, lines)
    else:
        raise ValueError(f"Unknown mouse wheel direction: {direction}")

    return command if viewport.high_performance else None
