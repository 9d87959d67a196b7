"""
URL patterns shared by the text processor, image processor and embedders.
"""

import re

URL_CHAR = r"[^\s\"<>\]\[\(\)]"
URL_CHAR_END = r"[^\s\"<>\]\[\(\).,']"
IMAGE_PATH = r"(?:(?:\.(?:tiff?|jpe?g|gif|png|svg|ico|webp)|ipfs/[a-z\d]{40,}))"
DOMAIN_PATH = r"(?:[-a-zA-Z0-9\._]*[-a-zA-Z0-9])"
URL_CHARS = f"(?:{URL_CHAR}*{URL_CHAR_END})?"
LOCAL_DOMAIN = r"(?:localhost|(?:.*\.)?hive\.blog)"


def url_pattern(domain: str = DOMAIN_PATH, path: str = "") -> str:
    """Build the URL regex source for a domain and an optional required path suffix."""
    return (
        f"https?://{domain}(?::\\d{{2,5}})?"
        f"(?:[/\\?#]{URL_CHARS}{path}){'' if path else '?'}"
    )


ANY = re.compile(url_pattern(), re.IGNORECASE)
LOCAL = re.compile(url_pattern(domain=LOCAL_DOMAIN), re.IGNORECASE)
REMOTE = re.compile(url_pattern(domain=f"(?!{LOCAL_DOMAIN}){DOMAIN_PATH}"), re.IGNORECASE)
IMAGE = re.compile(url_pattern(path=IMAGE_PATH), re.IGNORECASE)
IMAGE_FILE = re.compile(IMAGE_PATH, re.IGNORECASE)
VIMEO = re.compile(
    r"https?://(?:vimeo\.com/|player\.vimeo\.com/video/)([0-9]+)/?(#t=((\d+)s?))?/?"
)
VIMEO_ID = re.compile(r"(?:vimeo\.com/|player\.vimeo\.com/video/)([0-9]+)")
TWITCH = re.compile(
    r"https?://(?:www\.)?twitch\.tv/(?:(videos)/)?([a-zA-Z0-9][\w]{3,24})", re.IGNORECASE
)
IPFS_PROTOCOL = re.compile(r"^((//?ipfs/)|(ipfs://))")
EXECUTABLE_FILE = re.compile(r"\.(zip|exe)$", re.IGNORECASE)
