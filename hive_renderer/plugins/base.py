"""
Plugin contract for the renderer.

Plugins hook the two text stages of the pipeline and, in a browser-like host,
the mount step. Every hook defaults to a no-op so a plugin only overrides what
it needs.
"""

from typing import Any, Callable, Optional


class RendererPlugin:
    """Base class for renderer plugins."""

    name: str = "plugin"

    def pre_process(self, text: str) -> str:
        return text

    def post_process(self, text: str) -> str:
        return text

    def on_mount(self, root_element: Any) -> Optional[Callable[[], None]]:
        """Attach client behavior to mounted markup; return a cleanup callback if any."""
        return None
