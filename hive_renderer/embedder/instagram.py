import re
from typing import Optional

from ..models import EmbedMetadata, EmbedSize
from .base import AbstractEmbedder

LINK_REGEX = re.compile(
    r"https?://(?:www\.)?instagram\.com/(?:[\w.]+/)?(p|reel)/([a-zA-Z0-9_-]{10,14})/?(?:\?\S*)?",
    re.IGNORECASE,
)


class InstagramEmbedder(AbstractEmbedder):
    type = "instagram"

    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        m = LINK_REGEX.search(text)
        if not m:
            return None
        return EmbedMetadata(id=f"{m.group(1)}/{m.group(2)}", url=m.group(0))

    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        embed_url = f"https://www.instagram.com/{embed_id}/embed/"
        return (
            f'<div class="instagramWrapper"><iframe width="{size.width}" '
            f'height="{size.height}" src="{embed_url}" frameborder="0" '
            'allowtransparency="true"></iframe></div>'
        )
