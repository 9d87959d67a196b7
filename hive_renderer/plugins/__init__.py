"""
Plugins package for the renderer.
Contains the plugin contract and the bundled text-stage plugins.
"""

from .base import RendererPlugin
from .table import TablePlugin
from .twitter import TwitterPlugin
from .instagram import InstagramPlugin

DEFAULT_PLUGINS = (TablePlugin(),)

__all__ = [
    "RendererPlugin",
    "TablePlugin",
    "TwitterPlugin",
    "InstagramPlugin",
    "DEFAULT_PLUGINS",
]
