"""
Iframe allow-list used by the tag-transforming sanitizer.

Each entry pairs a source pattern with a function that returns the canonical
src for a matching iframe, or None when the src cannot be rebuilt.
"""

import re
from typing import Callable, NamedTuple, Optional, Tuple

_TWEET_ID_RE = re.compile(r"(?:twitter|x)\.com/(?:\w+/status|status)/(\d{1,20})", re.IGNORECASE)
_VIMEO_ID_RE = re.compile(r"https://player\.vimeo\.com/video/([0-9]+)")
_SOUNDCLOUD_URL_RE = re.compile(r"url=(.+?)&")
_THREE_SPEAK_EMBED_RE = re.compile(r"3speak\.(?:tv|online|co)/embed\?v=([^&\s]+)", re.IGNORECASE)
_THREE_SPEAK_WATCH_RE = re.compile(r"3speak\.(?:tv|online|co)/watch\?v=([^&\s]+)", re.IGNORECASE)
_TWEET_EMBED_ID_RE = re.compile(r"Tweet\.html\?id=(\d{1,20})$")

SOUNDCLOUD_PLAYER_QUERY = (
    "&auto_play=false&hide_related=false&show_comments=true"
    "&show_user=true&show_reposts=false&visual=true"
)


class IframeRule(NamedTuple):
    pattern: re.Pattern
    canonicalize: Callable[[str], Optional[str]]


def _tweet_embed(src: str) -> Optional[str]:
    if not src:
        return None
    clean_src = re.sub(r"^(@|https?://)", "", src)
    m = _TWEET_ID_RE.search(clean_src)
    if not m:
        return None
    return f"https://platform.twitter.com/embed/Tweet.html?id={m.group(1)}"


def _tweet_embed_canonical(src: str) -> Optional[str]:
    m = _TWEET_EMBED_ID_RE.search(src or "")
    if not m:
        return None
    return f"https://platform.twitter.com/embed/Tweet.html?id={m.group(1)}"


def _vimeo(src: str) -> Optional[str]:
    m = _VIMEO_ID_RE.search(src or "")
    if not m:
        return None
    return f"https://player.vimeo.com/video/{m.group(1)}"


def _youtube(src: str) -> Optional[str]:
    return re.sub(r"\?.+$", "", src)


def _soundcloud(src: str) -> Optional[str]:
    m = _SOUNDCLOUD_URL_RE.search(src or "")
    if not m:
        return None
    return f"https://w.soundcloud.com/player/?url={m.group(1)}{SOUNDCLOUD_PLAYER_QUERY}"


def _passthrough(src: str) -> Optional[str]:
    return src


def _three_speak(pattern: re.Pattern) -> Callable[[str], Optional[str]]:
    def canonicalize(src: str) -> Optional[str]:
        m = pattern.search(src or "")
        if not m:
            return None
        return f"https://3speak.tv/embed?v={m.group(1)}"

    return canonicalize


IFRAME_WHITELIST: Tuple[IframeRule, ...] = (
    IframeRule(
        re.compile(
            r"^(?:@?(?:https?:)?//)?(?:www\.)?(twitter|x)\.com/(?:\w+/status|status)/(\d{1,20})",
            re.IGNORECASE,
        ),
        _tweet_embed,
    ),
    IframeRule(re.compile(r"^(https?:)?//player.vimeo.com/video/.*", re.IGNORECASE), _vimeo),
    IframeRule(re.compile(r"^(https?:)?//www.youtube.com/embed/.*", re.IGNORECASE), _youtube),
    IframeRule(re.compile(r"^https://w.soundcloud.com/player/.*", re.IGNORECASE), _soundcloud),
    IframeRule(re.compile(r"^(https?:)?//player.twitch.tv/.*", re.IGNORECASE), _passthrough),
    IframeRule(
        re.compile(
            r"^https://open\.spotify\.com/(embed|embed-podcast)/"
            r"(playlist|show|episode|album|track|artist)/(.*)",
            re.IGNORECASE,
        ),
        _passthrough,
    ),
    IframeRule(
        re.compile(r"^(?:https?:)?//(?:3speak\.(?:tv|online|co))/embed\?v=([^&\s]+)", re.IGNORECASE),
        _three_speak(_THREE_SPEAK_EMBED_RE),
    ),
    IframeRule(
        re.compile(r"^(?:https?:)?//(?:3speak\.(?:tv|online|co))/watch\?v=([^&\s]+)", re.IGNORECASE),
        _three_speak(_THREE_SPEAK_WATCH_RE),
    ),
    IframeRule(
        re.compile(
            r"^(?:https:)//(?:www\.)?(twitter|x)\.com/(?:\w+/status|status)/(\d{1,20})",
            re.IGNORECASE,
        ),
        _tweet_embed,
    ),
    # Canonical tweet embeds, so a second sanitize pass keeps what the first produced.
    IframeRule(
        re.compile(r"^https://platform\.twitter\.com/embed/Tweet\.html\?id=\d{1,20}$"),
        _tweet_embed_canonical,
    ),
)


def canonical_iframe_src(src: Optional[str]) -> Optional[str]:
    """Return the rebuilt src for an allowed iframe, or None when it must be dropped."""
    if not src:
        return None
    for rule in IFRAME_WHITELIST:
        if rule.pattern.search(src):
            # First matching rule decides, even when it cannot rebuild the src.
            return rule.canonicalize(src) or None
    return None
