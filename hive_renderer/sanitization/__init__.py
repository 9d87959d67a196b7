"""
Sanitization package for the renderer.
Contains the comment stripper, the iframe allow-list and the tag-transforming sanitizer.
"""

from .preliminary import PreliminarySanitizer
from .iframes import IFRAME_WHITELIST, IframeRule, canonical_iframe_src
from .tag_transforming import TagTransformingSanitizer, ALLOWED_TAGS, ALLOWED_ATTRIBUTES

__all__ = [
    "PreliminarySanitizer",
    "IFRAME_WHITELIST",
    "IframeRule",
    "canonical_iframe_src",
    "TagTransformingSanitizer",
    "ALLOWED_TAGS",
    "ALLOWED_ATTRIBUTES",
]
