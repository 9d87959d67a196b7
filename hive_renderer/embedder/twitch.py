"""
Twitch embedder. The player requires the embedding site's host as ``parent``.
"""

from typing import Optional
from urllib.parse import urlsplit

from ..models import EmbedMetadata, EmbedSize
from ..utils import links
from .base import AbstractEmbedder


class TwitchEmbedder(AbstractEmbedder):
    type = "twitch"

    def __init__(self, base_url: str):
        self.domain = urlsplit(base_url).hostname or ""

    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        m = links.TWITCH.search(text)
        if not m:
            return None
        if m.group(1) == "videos":
            embed_id = f"?video={m.group(2)}"
        else:
            embed_id = f"?channel={m.group(2)}"
        return EmbedMetadata(id=embed_id, url=m.group(0))

    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        url = f"https://player.twitch.tv/{embed_id}&parent={self.domain}"
        return (
            f'<div class="videoWrapper"><iframe src="{url}" width="{size.width}" '
            f'height="{size.height}" frameborder="0" allowfullscreen></iframe></div>'
        )
