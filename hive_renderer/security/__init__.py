"""
Security package for the renderer.
Contains link-safety heuristics and the post-sanitization script gate.
"""

from .phishing import Phishing, PHISHING_DOMAINS
from .link_sanitizer import LinkSanitizer, PRIVATE_IPV4_PATTERNS, PRIVATE_HOSTNAMES
from .checker import SecurityChecker

__all__ = [
    "Phishing",
    "PHISHING_DOMAINS",
    "LinkSanitizer",
    "PRIVATE_IPV4_PATTERNS",
    "PRIVATE_HOSTNAMES",
    "SecurityChecker",
]
