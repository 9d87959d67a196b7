import re
from typing import Optional

from ..models import EmbedMetadata, EmbedSize
from .base import AbstractEmbedder

LINK_REGEX = re.compile(
    r"(?:https?://)?(?:3[sS]peak\.(?:tv|online|co)/(?:watch|embed)\?v=)"
    r"([a-z0-9][a-z0-9.-]{1,15}/[a-z0-9][a-z0-9-]*)"
)


class ThreeSpeakEmbedder(AbstractEmbedder):
    type = "3speak"

    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        m = LINK_REGEX.search(text.strip())
        if not m:
            return None
        return EmbedMetadata(id=m.group(1), url=m.group(0))

    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        embed_url = f"https://3speak.tv/embed?v={embed_id}"
        return (
            f'<div class="threeSpeakWrapper"><iframe width="{size.width}" '
            f'height="{size.height}" src="{embed_url}" frameborder="0" '
            "allowfullscreen></iframe></div>"
        )
