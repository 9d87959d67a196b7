import re
from typing import Optional

from ..models import EmbedMetadata, EmbedSize
from .base import AbstractEmbedder

MAIN_REGEX = re.compile(
    r"https?://open\.spotify\.com/(playlist|show|episode|album|track|artist)/([A-Za-z0-9]+)",
    re.IGNORECASE,
)
PODCAST_KINDS = ("show", "episode")


class SpotifyEmbedder(AbstractEmbedder):
    type = "spotify"

    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        m = MAIN_REGEX.search(text)
        if not m:
            return None
        kind, item_id = m.group(1), m.group(2)
        embed = "embed-podcast" if kind in PODCAST_KINDS else "embed"
        return EmbedMetadata(
            id=f"{embed}/{kind}/{item_id}",
            url=m.group(0),
            image=f"https://open.spotify.com/{kind}/{item_id}",
        )

    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        url = f"https://open.spotify.com/{embed_id}"
        return (
            f'<div class="videoWrapper"><iframe src="{url}" width="{size.width}" '
            f'height="{size.height}" frameborder="0" webkitallowfullscreen '
            "mozallowfullscreen allowfullscreen></iframe></div>"
        )
