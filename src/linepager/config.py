"""Configuration for viewport input handling."""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

# Configure logger
logger = logging.getLogger(__name__)

MOUSE_WHEEL_DELTA = 3

ENV_MOUSE_WHEEL_DELTA = "LINEPAGER_MOUSE_WHEEL_DELTA"
ENV_HIGH_PERFORMANCE = "LINEPAGER_HIGH_PERFORMANCE"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}

# Key names follow Textual's conventions
DEFAULT_KEY_BINDINGS = {
    # Down one page
    "pagedown": "page_down",
    "space": "page_down",
    "f": "page_down",
    # Up one page
    "pageup": "page_up",
    "b": "page_up",
    # Down half page
    "d": "half_page_down",
    "ctrl+d": "half_page_down",
    # Up half page
    "u": "half_page_up",
    "ctrl+u": "half_page_up",
    # Down one line
    "down": "line_down",
    "j": "line_down",
    # Up one line
    "up": "line_up",
    "k": "line_up",
    # Ends
    "home": "goto_top",
    "g": "goto_top",
    "end": "goto_bottom",
    "G": "goto_bottom",
}


@dataclass
class ViewportConfig:
    """
    Tunables for how input events drive a viewport.

    high_performance only seeds the flag of viewports built from this config
    (e.g. by ViewportWidget). Key and wheel handling read the viewport's own
    high_performance flag, so toggling it later takes effect immediately.
    """

    mouse_wheel_delta: int = MOUSE_WHEEL_DELTA
    high_performance: bool = False
    key_bindings: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_KEY_BINDINGS))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ViewportConfig":
        """
        Build a config from LINEPAGER_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            ViewportConfig with defaults for unset or unparsable values
        """
        environ = os.environ if environ is None else environ
        config = cls()

        delta = environ.get(ENV_MOUSE_WHEEL_DELTA)
        if delta is not None:
            try:
                config.mouse_wheel_delta = int(delta)
            except ValueError:
                logger.warning(f"Ignoring {ENV_MOUSE_WHEEL_DELTA}={delta!r}: not an integer")

        high_performance = environ.get(ENV_HIGH_PERFORMANCE)
        if high_performance is not None:
            value = high_performance.strip().lower()
            if value in TRUE_VALUES:
                config.high_performance = True
            elif value in FALSE_VALUES:
                config.high_performance = False
            else:
                logger.warning(f"Ignoring {ENV_HIGH_PERFORMANCE}={high_performance!r}: not a boolean")

        return config
