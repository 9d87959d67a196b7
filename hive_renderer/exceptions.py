"""
Exception types raised by the renderer.

Only construction problems and security violations escape ``render()``;
everything else is recovered locally and logged.
"""


class RendererError(Exception):
    """Base class for renderer failures."""


class SecurityError(RendererError):
    """Raised when insecure content survives sanitization."""


class HtmlDOMParserError(RendererError):
    """Raised when the DOM parser cannot produce a document."""


class LinkSanitizerError(RendererError):
    """Raised when the link sanitizer cannot be configured from the base URL."""
