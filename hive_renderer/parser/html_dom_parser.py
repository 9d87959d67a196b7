"""
DOM stage of the pipeline.

Parses rendered HTML with BeautifulSoup, walks it with the node processor
(link safety, iframe wrapping, linkification, embed markers) and collects a
summary of what the document contains.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup
from loguru import logger

from ..embedder import AssetEmbedder
from ..exceptions import HtmlDOMParserError
from ..models import DEFAULT_LOCALIZATION, Localization, ParserState, RendererOptions
from ..security import LinkSanitizer
from ..utils.validation import AccountNameValidator
from .image_processor import ImageProcessor
from .node_processor import NodeProcessor
from .text_processor import TextProcessor

_PARAGRAPH_WRAPPED = {
    tag: re.compile(rf"<p>\s*(<{tag}>[\s\S]*?</{tag}>)\s*</p>") for tag in ("details", "center")
}
_TEXT_AFTER_PRE = {
    tag: re.compile(rf"(<{tag}>[\s\S]*?</pre>)([\s\S]*?)(</{tag}>)") for tag in ("details", "center")
}


def preprocess_html(html: str) -> str:
    """Lift details/center blocks out of paragraphs Markdown wrapped them in."""
    try:
        for tag in ("details", "center"):
            html = _PARAGRAPH_WRAPPED[tag].sub(r"\1", html)
            html = _TEXT_AFTER_PRE[tag].sub(r"\1\3\2", html)
    except re.error as e:
        logger.warning(f"HTML preprocessing skipped: {str(e)}")
    return html


class HtmlDOMParser:
    def __init__(
        self,
        options: RendererOptions,
        localization: Localization = DEFAULT_LOCALIZATION,
        account_validator: Optional[AccountNameValidator] = None,
    ):
        self.options = options
        self.localization = localization
        self.embedder = AssetEmbedder(
            width=options.assets_width,
            height=options.assets_height,
            base_url=options.base_url,
        )
        self.link_sanitizer = LinkSanitizer(options.base_url)

        text_processor = TextProcessor(
            self.link_sanitizer,
            localization,
            hashtag_url_fn=options.hashtag_url_fn,
            usertag_url_fn=options.usertag_url_fn,
            ipfs_prefix=options.ipfs_prefix,
            account_validator=account_validator,
        )
        self.node_processor = NodeProcessor(
            self.link_sanitizer, self.embedder, text_processor, localization
        )
        self.image_processor = ImageProcessor(options.do_not_show_images, options.image_proxy_fn)

        self.state = ParserState()
        self.mutate = True
        self.parsed_document: Optional[BeautifulSoup] = None

    def set_mutate_enabled(self, mutate: bool) -> "HtmlDOMParser":
        self.mutate = mutate
        return self

    def parse(self, html: str) -> "HtmlDOMParser":
        self.state = ParserState()
        try:
            doc = BeautifulSoup(preprocess_html(html), "html.parser")
            self.node_processor.traverse_dom_node(doc, self.state, self.mutate)
            if self.mutate:
                self.postprocess_dom(doc)
            self.parsed_document = doc
        except Exception as exc:
            raise HtmlDOMParserError("Parsing error") from exc
        return self

    def get_state(self) -> ParserState:
        if self.parsed_document is None:
            raise HtmlDOMParserError("Html has not been parsed yet")
        return self.state

    def get_parsed_document(self) -> BeautifulSoup:
        if self.parsed_document is None:
            raise HtmlDOMParserError("Html has not been parsed yet")
        return self.parsed_document

    def get_parsed_document_as_string(self) -> str:
        return self.get_parsed_document().decode()

    def postprocess_dom(self, doc: BeautifulSoup) -> None:
        self.image_processor.hide_images_if_needed(doc, self.mutate)
        self.image_processor.proxify_images_if_needed(doc, self.mutate)
