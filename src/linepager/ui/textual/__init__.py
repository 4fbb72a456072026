"""Textual widgets for linepager."""

from .viewport_widget import ViewportWidget

__all__ = ["ViewportWidget"]
