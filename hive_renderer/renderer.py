"""
DefaultRenderer: turns untrusted post Markdown or HTML into safe HTML.

Stages run in a fixed order: plugin pre-process, comment stripping, Markdown
rendering, DOM walk, allow-list sanitization, the script gate, embed
materialization, light embed sanitization and plugin post-process.
"""

import re
from typing import Any, Callable, List, Optional, Tuple

from loguru import logger

from .models import DEFAULT_LOCALIZATION, Localization, PostContext, RendererOptions, format_post_context
from .parser import HtmlDOMParser
from .plugins import RendererPlugin
from .sanitization import PreliminarySanitizer, TagTransformingSanitizer
from .security import SecurityChecker
from .utils import render_markdown, sanitize_embeds

_HTML_DOCUMENT_RE = re.compile(r"^<html>([\S\s]*)</html>$")
_HTML_PARAGRAPH_RE = re.compile(r"^<p>[\S\s]*</p>")


class DefaultRenderer:
    """
    Renders one post body at a time.

    An instance keeps per-call state (sanitization errors, post context and
    parser state), so share it across threads only behind a lock.
    """

    def __init__(
        self,
        options: Optional[RendererOptions] = None,
        localization: Optional[Localization] = None,
    ):
        self.options = self._validate_options(options)
        self.localization = self._validate_localization(localization)

        self.tag_transforming_sanitizer = TagTransformingSanitizer(self.options, self.localization)
        self.dom_parser = HtmlDOMParser(self.options, self.localization)
        self.plugins: List[RendererPlugin] = list(self.options.plugins)

    @staticmethod
    def _validate_options(options: Optional[RendererOptions]) -> RendererOptions:
        if options is None:
            return RendererOptions()
        if isinstance(options, RendererOptions):
            return options
        return RendererOptions.model_validate(options)

    @staticmethod
    def _validate_localization(localization: Optional[Localization]) -> Localization:
        if localization is None:
            return DEFAULT_LOCALIZATION
        if isinstance(localization, Localization):
            return localization
        return Localization.model_validate(localization)

    def get_plugins(self) -> Tuple[RendererPlugin, ...]:
        return tuple(self.plugins)

    def get_sanitization_errors(self) -> List[str]:
        return list(self.tag_transforming_sanitizer.get_errors())

    def render(self, text: str, post_context: Optional[PostContext] = None) -> str:
        if not text or not isinstance(text, str):
            raise ValueError("Input must be a non-empty string")
        return self._do_render(text, post_context)

    def _do_render(self, text: str, post_context: Optional[PostContext]) -> str:
        logger.debug(f"Rendering post{format_post_context(post_context)}")
        text = self._run_plugin_phase("pre_process", text)
        text = PreliminarySanitizer.preliminary_sanitize(text)
        if not self.is_html(text):
            text = render_markdown(text, breaks=self.options.breaks)
        text = self.wrap_rendered_text_with_html_if_needed(text)
        text = self.dom_parser.parse(text).get_parsed_document_as_string()
        text = self._sanitize(text, post_context)
        SecurityChecker.check_security(text, allow_script_tag=self.options.allow_insecure_script_tags)
        text = self.dom_parser.embedder.insert_assets(text)
        text = sanitize_embeds(text)
        text = self._run_plugin_phase("post_process", text)
        return sanitize_embeds(text)

    def _run_plugin_phase(self, phase: str, text: str) -> str:
        for plugin in self.plugins:
            text = getattr(plugin, phase)(text)
        return text

    def _sanitize(self, text: str, post_context: Optional[PostContext]) -> str:
        if self.options.skip_sanitization:
            logger.warning(
                f"skip_sanitization is enabled, XSS protection disabled{format_post_context(post_context)}"
            )
            return text
        return self.tag_transforming_sanitizer.sanitize(text, post_context)

    @staticmethod
    def is_html(text: str) -> bool:
        if _HTML_DOCUMENT_RE.match(text):
            return True
        return bool(_HTML_PARAGRAPH_RE.match(text))

    @staticmethod
    def wrap_rendered_text_with_html_if_needed(rendered_text: str) -> str:
        if not rendered_text.startswith("<html>"):
            rendered_text = f"<html>{rendered_text}</html>"
        return rendered_text

    def mount(self, root_element: Any) -> Callable[[], None]:
        """Run every plugin's on_mount hook and return one cleanup for all of them."""
        cleanups = []
        for plugin in self.plugins:
            cleanup = plugin.on_mount(root_element)
            if cleanup is not None:
                cleanups.append(cleanup)

        done = False

        def cleanup_all() -> None:
            nonlocal done
            if done:
                return
            done = True
            for cleanup in cleanups:
                cleanup()

        return cleanup_all
