"""
Aggregates the provider embedders.

Text nodes are run through every provider in a fixed order; each match is
swapped for an embed marker. After sanitization ``insert_assets`` turns the
markers back into provider markup at the configured size.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from ..models import EmbedSize
from .base import AbstractEmbedder
from .instagram import InstagramEmbedder
from .spotify import SpotifyEmbedder
from .three_speak import ThreeSpeakEmbedder
from .twitch import TwitchEmbedder
from .twitter import TwitterEmbedder
from .vimeo import VimeoEmbedder
from .youtube import YoutubeEmbedder


class AssetEmbedderOptions(BaseModel):
    """Validated subset of renderer options needed by the embedders."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    base_url: str = Field(min_length=1)


@dataclass
class EmbedResult:
    """Text with markers substituted, plus what the matches reported."""

    text: str
    links: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)


class AssetEmbedder:
    def __init__(self, width: int, height: int, base_url: str):
        self.options = self.validate(width=width, height=height, base_url=base_url)
        self.embedders: Tuple[AbstractEmbedder, ...] = (
            YoutubeEmbedder(),
            VimeoEmbedder(),
            TwitchEmbedder(self.options.base_url),
            SpotifyEmbedder(),
            ThreeSpeakEmbedder(),
            InstagramEmbedder(),
            TwitterEmbedder(),
        )

    @staticmethod
    def validate(**options) -> AssetEmbedderOptions:
        return AssetEmbedderOptions(**options)

    @property
    def size(self) -> EmbedSize:
        return EmbedSize(width=self.options.width, height=self.options.height)

    def insert_assets(self, text: str) -> str:
        return self.insert_marked_embeds_to_rendered_output(text, self.size)

    def insert_marked_embeds_to_rendered_output(self, text: str, size: EmbedSize) -> str:
        return AbstractEmbedder.insert_all_embeds(self.embedders, text, size)

    def process_text_node_and_insert_embeds(self, text: str) -> EmbedResult:
        result = EmbedResult(text=text)
        for embedder in self.embedders:
            metadata = embedder.get_embed_metadata(result.text)
            if metadata is None:
                continue
            logger.debug(f"Embed matched: {embedder.type} {metadata.id}")
            result.text = result.text.replace(
                metadata.url, AbstractEmbedder.get_embed_marker(metadata.id, embedder.type), 1
            )
            if metadata.image:
                result.images.append(metadata.image)
            if metadata.link:
                result.links.append(metadata.link)
        return result
