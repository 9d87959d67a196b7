"""
Table plugin: wraps rendered tables so wide ones scroll horizontally.
"""

import re

from .base import RendererPlugin

_TABLE_RE = re.compile(r"(<table[\s\S]*?</table>)")

TABLE_WRAPPER_STYLE = "overflow-x: auto; width: 100%; display: block;"


class TablePlugin(RendererPlugin):
    """Wrap every table in a horizontally scrolling container."""

    name = "table-plugin"

    def post_process(self, text: str) -> str:
        return _TABLE_RE.sub(
            lambda m: f'<div style="{TABLE_WRAPPER_STYLE}">{m.group(1)}</div>', text
        )
