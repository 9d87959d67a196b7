import re
from typing import Optional

from ..models import EmbedMetadata, EmbedSize
from .base import AbstractEmbedder

REGEX = re.compile(r"https?://(?:vimeo\.com/|player\.vimeo\.com/video/)([0-9]+)/*")


def generate_canonical_url(video_id: str) -> str:
    return f"https://player.vimeo.com/video/{video_id}"


class VimeoEmbedder(AbstractEmbedder):
    type = "vimeo"

    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        m = REGEX.search(text)
        if not m:
            return None
        return EmbedMetadata(id=m.group(1), url=m.group(0))

    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        url = generate_canonical_url(embed_id)
        return (
            f'<div class="videoWrapper"><iframe src="{url}" width="{size.width}" '
            f'height="{size.height}" frameborder="0" webkitallowfullscreen '
            "mozallowfullscreen allowfullscreen></iframe></div>"
        )
