"""
Utils package for the renderer.
Contains link patterns, account-name validation, Markdown extensions and the embed sanitizer.
"""

from .validation import AccountNameValidator, BAD_ACTOR_LIST
from .markdown_extensions import SpoilerExtension, render_markdown
from .sanitizer import sanitize_embeds, ALLOWED_IFRAME_HOSTNAMES

__all__ = [
    'AccountNameValidator',
    'BAD_ACTOR_LIST',
    'SpoilerExtension',
    'render_markdown',
    'sanitize_embeds',
    'ALLOWED_IFRAME_HOSTNAMES',
]
