"""
Light HTML sanitizer for markup produced after the main allow-list pass.
Uses Bleach to confine embed and plugin output to the tags and attributes
they are known to emit, and only lets iframes point at known players.
"""

from typing import Iterable
from urllib.parse import urlparse

import bleach
from bleach.css_sanitizer import CSSSanitizer

from ..sanitization.tag_transforming import ALLOWED_TAGS as BASE_ALLOWED_TAGS


ALLOWED_TAGS: Iterable[str] = BASE_ALLOWED_TAGS | {"button", "svg", "path"}

ALLOWED_IFRAME_HOSTNAMES = frozenset(
    {
        "www.youtube.com",
        "player.vimeo.com",
        "player.twitch.tv",
        "w.soundcloud.com",
        "open.spotify.com",
        "3speak.tv",
        "platform.twitter.com",
        "www.instagram.com",
    }
)

IFRAME_ATTRIBUTES = (
    "width",
    "height",
    "frameborder",
    "allowfullscreen",
    "webkitallowfullscreen",
    "mozallowfullscreen",
    "allowtransparency",
)


def is_allowed_iframe_src(src: str) -> bool:
    try:
        hostname = urlparse(src).hostname
    except ValueError:
        return False
    return bool(hostname) and hostname.lower() in ALLOWED_IFRAME_HOSTNAMES


def _iframe_attribute(tag: str, name: str, value: str) -> bool:
    if name == "src":
        return is_allowed_iframe_src(value)
    return name in IFRAME_ATTRIBUTES


ALLOWED_ATTRIBUTES = {
    "iframe": _iframe_attribute,
    "img": ["src", "alt", "loading"],
    "div": [
        "class",
        "id",
        "style",
        "title",
        "data-youtube-id",
        "data-width",
        "data-height",
        "data-instgrm-permalink",
        "data-instgrm-version",
        "data-instgrm-theme",
    ],
    "a": ["href", "target", "rel", "class", "id"],
    "button": ["class", "aria-label"],
    # the tokenizer lowercases attribute names inside inline svg
    "svg": ["viewBox", "viewbox", "width", "height"],
    "path": ["d", "fill", "class"],
    "td": ["style"],
    "th": ["style"],
    "ol": ["start"],
}

ALLOWED_PROTOCOLS = ["http", "https"]

ALLOWED_CSS_PROPERTIES = ["text-align", "overflow-x", "width", "display", "height"]


def sanitize_embeds(html: str) -> str:
    """Sanitize embed and plugin markup against the light allow-list."""
    return bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        css_sanitizer=CSSSanitizer(allowed_css_properties=ALLOWED_CSS_PROPERTIES),
        strip=True,
    )
