"""
Link safety checks applied to every anchor and linkified URL.

``sanitize_link`` returns the (possibly normalized) URL, or ``False`` when the
link must be rendered as a phishing warning instead of a clickable anchor.
"""

import re
from typing import Union
from urllib.parse import urlsplit

from loguru import logger

from ..exceptions import LinkSanitizerError
from .phishing import Phishing

PRIVATE_IPV4_PATTERNS = (
    re.compile(r"^127\."),
    re.compile(r"^10\."),
    re.compile(r"^192\.168\."),
    re.compile(r"^172\.(1[6-9]|2[0-9]|3[0-1])\."),
    re.compile(r"^169\.254\."),
    re.compile(r"^0\."),
)

PRIVATE_HOSTNAMES = ("localhost", "localhost.localdomain")

PRIVATE_IPV6_PATTERNS = (
    re.compile(r"^::1$"),
    re.compile(r"^fe80:", re.IGNORECASE),
    re.compile(r"^f[cd][0-9a-f]{2}:", re.IGNORECASE),
)

_KNOWN_PREFIX = re.compile(r"^((#)|(/(?!/))|(((hive|https?):)?//))")
_TOP_LEVEL_DOMAIN = re.compile(r"([^\s/$.?#]+\.[^\s/$.?#]+)$")


class LinkSanitizer:
    """Reject phishing, disguised and private-network links."""

    def __init__(self, base_url: str):
        if not base_url:
            raise LinkSanitizerError("LinkSanitizer: baseUrl is required")
        self.base_url = base_url
        self.top_level_base_domain = self.get_top_level_base_domain(base_url)

    def sanitize_link(self, url: str, url_title: str) -> Union[str, bool]:
        url = self.prepend_unknown_protocol_link(url)

        if Phishing.looks_phishy(url):
            logger.warning(f"LinkSanitizer: phishing link detected: {url}")
            return False

        if self.is_pseudo_local_url(url, url_title):
            logger.warning(f"LinkSanitizer: pseudo local url detected: {url}")
            return False

        if self.is_private_network_url(url):
            logger.warning(f"LinkSanitizer: private network URL blocked: {url}")
            return False

        return url

    @staticmethod
    def is_private_network_url(url: str) -> bool:
        try:
            hostname = (urlsplit(url).hostname or "").lower()
        except ValueError:
            return False
        if not hostname:
            return False

        if hostname in PRIVATE_HOSTNAMES:
            return True
        if any(pattern.search(hostname) for pattern in PRIVATE_IPV4_PATTERNS):
            return True

        ipv6_hostname = hostname.strip("[]")
        return any(pattern.search(ipv6_hostname) for pattern in PRIVATE_IPV6_PATTERNS)

    @staticmethod
    def get_top_level_base_domain(base_url: str) -> str:
        try:
            hostname = urlsplit(base_url).hostname or ""
        except ValueError as exc:
            raise LinkSanitizerError(f"LinkSanitizer: invalid baseUrl: {base_url}") from exc
        if not hostname:
            raise LinkSanitizerError(f"LinkSanitizer: baseUrl has no hostname: {base_url}")
        if "." not in hostname:
            return hostname

        m = _TOP_LEVEL_DOMAIN.search(hostname)
        if m:
            return m.group(0)
        raise LinkSanitizerError(
            "LinkSanitizer: could not determine top level base domain "
            f"from baseUrl hostname: {hostname}"
        )

    @staticmethod
    def prepend_unknown_protocol_link(url: str) -> str:
        if not _KNOWN_PREFIX.match(url):
            url = "https://" + url
        return url

    def is_pseudo_local_url(self, url: str, url_title: str) -> bool:
        """Anchor text names our domain while the href points elsewhere."""
        if url.startswith("#"):
            return False
        title_has_domain = self.top_level_base_domain in (url_title or "").lower()
        url_has_domain = self.top_level_base_domain in url.lower()
        return title_has_domain and not url_has_domain
