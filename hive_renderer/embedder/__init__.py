"""
Embedder package for the renderer.
Contains the seven provider embedders and the aggregating AssetEmbedder.
"""

from .base import AbstractEmbedder, EMBED_MARKER_PREFIX, SAFE_EMBED_ID_PATTERN
from .youtube import YoutubeEmbedder, get_youtube_metadata_from_link
from .vimeo import VimeoEmbedder
from .twitch import TwitchEmbedder
from .spotify import SpotifyEmbedder
from .three_speak import ThreeSpeakEmbedder
from .instagram import InstagramEmbedder
from .twitter import TwitterEmbedder
from .asset_embedder import AssetEmbedder, AssetEmbedderOptions, EmbedResult

__all__ = [
    "AbstractEmbedder",
    "EMBED_MARKER_PREFIX",
    "SAFE_EMBED_ID_PATTERN",
    "YoutubeEmbedder",
    "get_youtube_metadata_from_link",
    "VimeoEmbedder",
    "TwitchEmbedder",
    "SpotifyEmbedder",
    "ThreeSpeakEmbedder",
    "InstagramEmbedder",
    "TwitterEmbedder",
    "AssetEmbedder",
    "AssetEmbedderOptions",
    "EmbedResult",
]
