"""
Last-line check that no script tag survived sanitization.
"""

import re

from ..exceptions import SecurityError

_SCRIPT_TAG = re.compile(r"<\s*script", re.IGNORECASE)


class SecurityChecker:
    @staticmethod
    def check_security(text: str, allow_script_tag: bool = False) -> None:
        if not allow_script_tag and SecurityChecker.contains_script_tag(text):
            raise SecurityError(
                "Renderer rejected the input because of insecure content: "
                "text contains script tag"
            )

    @staticmethod
    def contains_script_tag(text: str) -> bool:
        return bool(_SCRIPT_TAG.search(text))
