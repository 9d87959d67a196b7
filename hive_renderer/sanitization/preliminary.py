"""
Cheap text-level cleanup run before format detection.
"""

import re

_HTML_COMMENT_RE = re.compile(r"<!--([\s\S]+?)(-->|$)")


class PreliminarySanitizer:
    @staticmethod
    def preliminary_sanitize(text: str) -> str:
        """Strip HTML comments; an unterminated comment runs to the end of the text."""
        return PreliminarySanitizer.strip_html_comments(text)

    @staticmethod
    def strip_html_comments(text: str) -> str:
        return _HTML_COMMENT_RE.sub("", text)
