"""
Instagram plugin.

Works like the Twitter plugin: post and reel URLs become placeholders before
rendering and hydration containers afterwards.
"""

import re
from typing import Dict, Optional, Tuple

from .base import RendererPlugin

_VALID_ID = re.compile(r"^[a-zA-Z0-9_-]{10,14}$")
_INSTAGRAM_LINK_RE = re.compile(r"(?<!\()(https?://(www\.)?instagram\.com/[^\s)]+)")
_INSTAGRAM_POST_RE = re.compile(
    r"^https://(?:www\.)?instagram\.com/(?:[\w.]+/)?(?P<type>p|reels?)/(?P<id>[^/?#]+)",
    re.IGNORECASE,
)
_INSTAGRAM_TOKEN_RE = re.compile(
    r"<div>instagram-embed-(?P<type>p|reel)-(?P<id>[a-zA-Z0-9_-]{10,14})-count-(?P<count>\d*)</div>"
)


def parse_instagram_url(url: str) -> Optional[Tuple[str, str]]:
    """Return ``(type, id)`` for an Instagram post/reel URL, else None."""
    if not url:
        return None
    match = _INSTAGRAM_POST_RE.match(url)
    if not match:
        return None
    post_id = match.group("id")
    if not _VALID_ID.match(post_id):
        return None
    post_type = "reel" if "reel" in match.group("type").lower() else "p"
    return post_type, post_id


def build_instagram_url(post_type: str, post_id: str) -> str:
    return f"https://www.instagram.com/{post_type}/{post_id}/"


class InstagramPlugin(RendererPlugin):
    """Replace Instagram links with hydration containers."""

    name = "instagram"

    def __init__(self):
        self._link_counts: Dict[str, int] = {}

    def pre_process(self, text: str) -> str:
        self._link_counts.clear()

        def _replace(m: re.Match) -> str:
            url = m.group(1)
            post = parse_instagram_url(url)
            if post is None:
                return url
            count = self._link_counts.get(url, 0) + 1
            self._link_counts[url] = count
            suffix = str(count) if count > 1 else ""
            return f"&nbsp;<div>instagram-embed-{post[0]}-{post[1]}-count-{suffix}</div>&nbsp;"

        return _INSTAGRAM_LINK_RE.sub(_replace, text)

    def post_process(self, text: str) -> str:
        def _replace(m: re.Match) -> str:
            post_type, post_id, count = m.group("type"), m.group("id"), m.group("count")
            url = build_instagram_url(post_type, post_id)
            container_id = f"instagram-{post_type}-{post_id}-{count}"
            return (
                f'<div id="{container_id}" class="instagram-embed">'
                f'<a href="{url}" target="_blank" rel="noopener noreferrer">{url}</a></div>'
            )

        return _INSTAGRAM_TOKEN_RE.sub(_replace, text)
