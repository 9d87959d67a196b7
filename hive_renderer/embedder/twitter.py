import re
from typing import Optional

from ..models import EmbedMetadata, EmbedSize
from .base import AbstractEmbedder

LINK_REGEX = re.compile(
    r"https?://(?:www\.)?(twitter|x)\.com/(?:\w+)/status/(\d{1,20})\S*", re.IGNORECASE
)


class TwitterEmbedder(AbstractEmbedder):
    type = "twitter"

    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        m = LINK_REGEX.search(text)
        if not m:
            return None
        return EmbedMetadata(id=m.group(2), url=m.group(0))

    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        embed_url = f"https://platform.twitter.com/embed/Tweet.html?id={embed_id}"
        return (
            f'<div class="twitterWrapper"><iframe src="{embed_url}" frameborder="0" '
            'allowtransparency="true"></iframe></div>'
        )
