"""
Per-node transforms applied while walking the parsed document.

Each element iterates over a snapshot of its children, so a transform may
replace the child it is looking at without disturbing the walk.
"""

import html as _html

from bs4 import BeautifulSoup, NavigableString, Tag
from loguru import logger

from ..embedder import AssetEmbedder, get_youtube_metadata_from_link
from ..models import Localization, ParserState
from ..security import LinkSanitizer
from .text_processor import TextProcessor

SKIP_TEXT_PARENTS = ("code", "a")
VIDEO_WRAPPER_CLASS = "videoWrapper"


def _new_tag(name: str, **attrs) -> Tag:
    return BeautifulSoup("", "html.parser").new_tag(name, attrs=attrs)


class NodeProcessor:
    def __init__(
        self,
        link_sanitizer: LinkSanitizer,
        embedder: AssetEmbedder,
        text_processor: TextProcessor,
        localization: Localization,
    ):
        self.link_sanitizer = link_sanitizer
        self.embedder = embedder
        self.text_processor = text_processor
        self.localization = localization

    def traverse_dom_node(self, node, state: ParserState, mutate: bool, depth: int = 0) -> None:
        if not isinstance(node, Tag):
            return

        for child in list(node.children):
            if isinstance(child, Tag):
                tag = child.name.lower()
                state.htmltags.add(tag)
                if tag == "img":
                    self.process_img_tag(child, state, mutate)
                elif tag == "iframe":
                    self.process_iframe_tag(child, state, mutate)
                elif tag == "a":
                    self.process_link_tag(child, state, mutate)
            elif type(child) is NavigableString:
                self.process_text_node(child, state, mutate)

            self.traverse_dom_node(child, state, mutate, depth + 1)

    def process_link_tag(self, child: Tag, state: ParserState, mutate: bool) -> None:
        if child.parent is None:
            return
        url = child.get("href")
        if not url:
            return

        state.links.add(url)
        if not mutate:
            return

        url_title = child.get_text()
        sanitized_link = self.link_sanitizer.sanitize_link(url, url_title)
        if sanitized_link is False:
            phishy = _new_tag(
                "div", **{"class": "phishy", "title": self.localization.phishing_warning}
            )
            phishy.string = f"{url_title} / {url}"
            child.replace_with(phishy)
        else:
            child["href"] = sanitized_link

    def process_iframe_tag(self, child: Tag, state: ParserState, mutate: bool) -> None:
        url = child.get("src")
        if url:
            self.report_iframe_link(url, state)
        if not mutate:
            return

        parent = child.parent
        if parent is None:
            return
        if parent.name == "div" and parent.get("class") == [VIDEO_WRAPPER_CLASS]:
            return
        child.wrap(_new_tag("div", **{"class": VIDEO_WRAPPER_CLASS}))

    @staticmethod
    def report_iframe_link(url: str, state: ParserState) -> None:
        yt = get_youtube_metadata_from_link(url)
        if yt:
            state.links.add(yt.url)
            state.images.add(yt.image)

    def process_img_tag(self, child: Tag, state: ParserState, mutate: bool) -> None:
        url = child.get("src")
        if not url:
            return
        state.images.add(url)
        if not mutate:
            return
        normalized = self.text_processor.normalize_url(url)
        if normalized.startswith("//"):
            normalized = "https:" + normalized
        if normalized != url:
            child["src"] = normalized

    def process_text_node(self, child: NavigableString, state: ParserState, mutate: bool) -> None:
        try:
            # Anywhere under an anchor or code span, not just the direct parent.
            if child.find_parent(list(SKIP_TEXT_PARENTS)) is not None:
                return

            data = str(child)
            if not data:
                return

            if mutate:
                embed = self.embedder.process_text_node_and_insert_embeds(data)
                state.images.update(embed.images)
                state.links.update(embed.links)
                text = embed.text
            else:
                text = data

            escaped = _html.escape(text, quote=False)
            content = self.text_processor.linkify(escaped, state, mutate)
            if mutate and (content != escaped or text != data):
                fragment = BeautifulSoup(content, "html.parser")
                replacements = [node.extract() for node in list(fragment.contents)]
                if replacements:
                    child.replace_with(*replacements)
                else:
                    child.extract()
        except Exception as e:
            logger.error(f"Error processing text node: {str(e)}")
