"""
YouTube embedder: renders a click-to-load facade instead of a live iframe.
"""

import re
from typing import Optional

from ..models import EmbedMetadata, EmbedSize
from .base import AbstractEmbedder

LINK_REGEX = re.compile(
    r"https?://(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/(embed|shorts)/)"
    r"([A-Za-z0-9_-]+)\S*",
    re.IGNORECASE,
)
ID_REGEX = re.compile(
    r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/(embed|shorts)/)([A-Za-z0-9_-]+)",
    re.IGNORECASE,
)

PLAY_BUTTON_SVG = (
    '<svg viewBox="0 0 68 48" width="68" height="48">'
    '<path class="youtube-play-bg" d="M66.52 7.74c-.78-2.93-2.49-5.41-5.42-6.19C55.79.13 34 0 34 0'
    "S12.21.13 6.9 1.55c-2.93.78-4.63 3.26-5.42 6.19C.06 13.05 0 24 0 24s.06 10.95 1.48 16.26"
    "c.78 2.93 2.49 5.41 5.42 6.19C12.21 47.87 34 48 34 48s21.79-.13 27.1-1.55c2.93-.78 4.64-3.26 "
    "5.42-6.19C67.94 34.95 68 24 68 24s-.06-10.95-1.48-16.26z\" fill=\"#f00\"/>"
    '<path d="M45 24 27 14v20" fill="#fff"/></svg>'
)


def get_youtube_metadata_from_link(data: str) -> Optional[EmbedMetadata]:
    """Return id, full link and a 0.jpg thumbnail for the first YouTube URL in data."""
    if not data:
        return None
    m1 = LINK_REGEX.search(data)
    if not m1:
        return None
    url = m1.group(0)
    m2 = ID_REGEX.search(url)
    if not m2:
        return None
    video_id = m2.group(2)
    return EmbedMetadata(
        id=video_id, url=url, image=f"https://img.youtube.com/vi/{video_id}/0.jpg"
    )


class YoutubeEmbedder(AbstractEmbedder):
    type = "youtube"

    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        return get_youtube_metadata_from_link(text)

    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        thumbnail = f"https://img.youtube.com/vi/{embed_id}/hqdefault.jpg"
        return (
            '<div class="videoWrapper">'
            f'<div class="youtube-facade" data-youtube-id="{embed_id}" '
            f'data-width="{size.width}" data-height="{size.height}">'
            f'<img src="{thumbnail}" alt="YouTube video thumbnail" loading="eager" />'
            f'<button class="youtube-play-btn" aria-label="Play video">{PLAY_BUTTON_SVG}</button>'
            "</div></div>"
        )
