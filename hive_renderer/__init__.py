"""
Hive content renderer.
Turns untrusted post Markdown or HTML into HTML that is safe to inject into a page.
"""

from .renderer import DefaultRenderer
from .exceptions import RendererError, SecurityError, HtmlDOMParserError, LinkSanitizerError
from .models import RendererOptions, Localization, DEFAULT_LOCALIZATION, PostContext, format_post_context
from .plugins import RendererPlugin, TablePlugin, TwitterPlugin, InstagramPlugin, DEFAULT_PLUGINS
from .logging_setup import configure_logging

__version__ = "0.1.0"

__all__ = [
    'DefaultRenderer',
    'RendererError',
    'SecurityError',
    'HtmlDOMParserError',
    'LinkSanitizerError',
    'RendererOptions',
    'Localization',
    'DEFAULT_LOCALIZATION',
    'PostContext',
    'format_post_context',
    'RendererPlugin',
    'TablePlugin',
    'TwitterPlugin',
    'InstagramPlugin',
    'DEFAULT_PLUGINS',
    'configure_logging',
]
