"""
Linkification of raw text: bare URLs, #hashtags and @mentions.

Input is HTML-escaped text from a single text node; output is an HTML fragment.
"""

import html as _html
import re
from typing import Callable, Optional

from ..models import Localization, ParserState
from ..security import LinkSanitizer
from ..utils import links
from ..utils.validation import AccountNameValidator

_HASHTAG_RE = re.compile(r"(^|\s)(#[-a-z\d]+)", re.IGNORECASE)
_NUMERIC_HASHTAG_RE = re.compile(r"#\d+$")
_USERTAG_RE = re.compile(
    r"(^|[^a-zA-Z0-9_!#$%&*@＠/]|(^|[^a-zA-Z0-9_+~.\-/#]))"
    r"[@＠]([a-z][-.a-z\d]+[a-z\d])",
    re.IGNORECASE,
)
# Anchors built by an earlier linkify step and any other markup.
_MARKUP_RE = re.compile(r"(<a\b[^>]*>.*?</a>|<[^>]+>)", re.IGNORECASE | re.DOTALL)


class TextProcessor:
    def __init__(
        self,
        link_sanitizer: LinkSanitizer,
        localization: Localization,
        hashtag_url_fn: Callable[[str], str],
        usertag_url_fn: Callable[[str], str],
        ipfs_prefix: Optional[str] = None,
        account_validator: Optional[AccountNameValidator] = None,
    ):
        self.link_sanitizer = link_sanitizer
        self.localization = localization
        self.hashtag_url_fn = hashtag_url_fn
        self.usertag_url_fn = usertag_url_fn
        self.ipfs_prefix = ipfs_prefix
        self.account_validator = account_validator or AccountNameValidator(
            localization=localization
        )

    def linkify(self, content: str, state: ParserState, mutate: bool) -> str:
        content = self.linkify_urls(content, state, mutate)
        content = self.linkify_hashtags(content, state, mutate)
        content = self.linkify_usertags(content, state, mutate)
        return content

    def linkify_urls(self, content: str, state: ParserState, mutate: bool) -> str:
        def _replace(m: re.Match) -> str:
            ln = m.group(0)
            if links.IMAGE.search(ln):
                state.images.add(ln)
                if not mutate:
                    return ln
                return f'<img src="{self.normalize_url(ln)}" alt="Embedded Image" />'

            if links.EXECUTABLE_FILE.search(ln):
                return ln

            sanitized_link = self.link_sanitizer.sanitize_link(ln, ln)
            if sanitized_link is False:
                if not mutate:
                    return ln
                warning = _html.escape(self.localization.phishing_warning)
                return f'<div title="{warning}" class="phishy">{ln}</div>'

            state.links.add(sanitized_link)
            if not mutate:
                return ln
            return f'<a href="{self.normalize_url(ln)}">{sanitized_link}</a>'

        return links.ANY.sub(_replace, content)

    def linkify_hashtags(self, content: str, state: ParserState, mutate: bool) -> str:
        def _replace(m: re.Match) -> str:
            tag = m.group(0)
            # "#123" is a reference, not a topic.
            if _NUMERIC_HASHTAG_RE.search(tag):
                return tag
            space = m.group(1)
            tag_lower = m.group(2)[1:].lower()
            state.hashtags.add(tag_lower)
            if not mutate:
                return tag
            tag_url = _html.escape(self.hashtag_url_fn(tag_lower))
            return f'{space}<a href="{tag_url}">{m.group(2)}</a>'

        return _HASHTAG_RE.sub(_replace, content)

    def linkify_usertags(self, content: str, state: ParserState, mutate: bool) -> str:
        def _replace(m: re.Match) -> str:
            preceding = m.group(1) or ""
            user = m.group(3)
            user_lower = user.lower()
            valid = self.account_validator.is_valid(user_lower)
            if valid:
                state.usertags.add(user_lower)
            if not mutate:
                return m.group(0)
            if not valid:
                return f"{preceding}@{user}"
            user_url = _html.escape(self.usertag_url_fn(user_lower))
            return f'{preceding}<a href="{user_url}">@{user}</a>'

        # Mentions are only linked in plain text, never inside markup.
        parts = _MARKUP_RE.split(content)
        for i in range(0, len(parts), 2):
            parts[i] = _USERTAG_RE.sub(_replace, parts[i])
        return "".join(parts)

    def normalize_url(self, url: str) -> str:
        """Rewrite ipfs:// and /ipfs/ URLs onto the configured gateway."""
        if self.ipfs_prefix:
            m = links.IPFS_PROTOCOL.match(url)
            if m:
                cid = url[m.end():]
                return f"{self.ipfs_prefix.rstrip('/')}/{cid}"
        return url
