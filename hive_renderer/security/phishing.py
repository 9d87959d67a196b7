"""
Phishing heuristics for links found in post bodies.
"""

from typing import Iterable
from urllib.parse import urlsplit

# Known look-alike domains of Hive frontends and wallets.
PHISHING_DOMAINS = frozenset(
    {
        "hive-blog.com",
        "hiveblog.net",
        "hive.blog.com",
        "hlve.blog",
        "hive-wallet.com",
        "hivewallet.io",
        "peakd.co",
        "peakd-com.com",
        "peekd.com",
        "ecency.co",
        "ecencey.com",
        "steemit.co",
        "steemitt.com",
        "wallet-hive.blog",
    }
)


class Phishing:
    """Lexical phishing checks; no network lookups."""

    domains = PHISHING_DOMAINS

    @classmethod
    def use_domains(cls, domains: Iterable[str]) -> None:
        """Swap the known phishing-domain table."""
        cls.domains = frozenset(d.lower() for d in domains)

    @classmethod
    def looks_phishy(cls, url: str) -> bool:
        try:
            parts = urlsplit(url)
            hostname = (parts.hostname or "").lower()
            has_userinfo = "@" in parts.netloc
        except ValueError:
            return False

        if not hostname:
            return False
        if has_userinfo:
            return True
        if not hostname.isascii():
            return True
        if any(label.startswith("xn--") for label in hostname.split(".")):
            return True

        bare = hostname[4:] if hostname.startswith("www.") else hostname
        return bare in cls.domains
