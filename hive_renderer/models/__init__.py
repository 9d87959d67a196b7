"""
Models package for the renderer.
Contains configuration schemas and per-render data holders.
"""

from .options import RendererOptions, Localization, DEFAULT_LOCALIZATION
from .context import PostContext, ParserState, EmbedMetadata, EmbedSize, format_post_context

__all__ = [
    "RendererOptions",
    "Localization",
    "DEFAULT_LOCALIZATION",
    "PostContext",
    "ParserState",
    "EmbedMetadata",
    "EmbedSize",
    "format_post_context",
]
