"""
Twitter/X plugin.

Pre-process swaps tweet URLs for an opaque placeholder that survives Markdown
rendering and sanitization; post-process turns the placeholder into a
container ``<div id>`` that a client-side widget can later populate.
"""

import re
from typing import Dict

from .base import RendererPlugin

_TWEET_URL_RE = re.compile(
    r"(?<![(/\w.])(https?://)?(?:www\.)?\b(twitter|x)\.com/(?:#!/)?(\w+)/status(es)?/(\d+)[^)\s]*"
)
_TWEET_TOKEN_RE = re.compile(r"<div>twitter-id-(\d+)-author-(\w+)-count-([^<]*)</div>")


class TwitterPlugin(RendererPlugin):
    """Replace tweet links with hydration containers."""

    name = "twitter"

    def __init__(self):
        self._tweet_counts: Dict[str, int] = {}

    def pre_process(self, text: str) -> str:
        # Counts are per document.
        self._tweet_counts.clear()

        def _replace(m: re.Match) -> str:
            author = m.group(3)
            tweet_id = m.group(5)
            count = self._tweet_counts.get(tweet_id, 0) + 1
            self._tweet_counts[tweet_id] = count
            suffix = str(count) if count > 1 else ""
            return f"&nbsp;<div>twitter-id-{tweet_id}-author-{author}-count-{suffix}</div>&nbsp;"

        return _TWEET_URL_RE.sub(_replace, text)

    def post_process(self, text: str) -> str:
        def _replace(m: re.Match) -> str:
            tweet_id, author, suffix = m.group(1), m.group(2), m.group(3)
            container_id = f"tweet-{tweet_id}-{suffix}"
            url = f"https://x.com/{author}/status/{tweet_id}"
            return (
                f'<div id="{container_id}" class="twitter-tweet">'
                f'<a href="{url}" target="_blank">{url}</a></div>'
            )

        return _TWEET_TOKEN_RE.sub(_replace, text)
