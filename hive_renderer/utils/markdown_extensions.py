"""
Custom Markdown extensions for the renderer.
Adds spoiler blockquotes (> ![Reveal text] hidden content) rendered as <details>,
strict ATX headings (so a leading #hashtag is not a heading) and ~~strikethrough~~.
"""

import re
from xml.etree.ElementTree import Element

import markdown
from markdown.blockprocessors import HashHeaderProcessor
from markdown.extensions import Extension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.nl2br import Nl2BrExtension
from markdown.extensions.tables import TableExtension
from markdown.inlinepatterns import SimpleTagInlineProcessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import AtomicString

SPOILER_TAG = "details"
SPOILER_SUMMARY_TAG = "summary"
STRIKETHROUGH_RE = r"(~{2})(.+?)\1"


class SpoilerTreeprocessor(Treeprocessor):
    """Turn blockquotes whose first paragraph starts with the prefix into <details>."""

    def __init__(self, md, prefix, default_reveal_text, reveal_text_max_length):
        super().__init__(md)
        self.prefix = prefix
        self.default_reveal_text = default_reveal_text
        escaped_prefix = re.escape(prefix)
        self.reveal_pattern = re.compile(
            rf"^{escaped_prefix} ?\[([A-Za-z0-9 ?!]{{1,{reveal_text_max_length}}}?)\] ?"
        )
        self.prefix_pattern = re.compile(rf"^{escaped_prefix}")

    def run(self, root):
        for blockquote in list(root.iter("blockquote")):
            if len(blockquote) == 0:
                continue
            first = blockquote[0]
            if first.tag != "p" or not (first.text or "").startswith(self.prefix):
                continue

            m = self.reveal_pattern.match(first.text)
            if m:
                reveal_text = m.group(1)
                first.text = first.text[m.end():]
            else:
                reveal_text = self.default_reveal_text
                first.text = self.prefix_pattern.sub("", first.text, count=1)

            blockquote.tag = SPOILER_TAG
            summary = Element(SPOILER_SUMMARY_TAG)
            summary.text = AtomicString(reveal_text)
            blockquote.insert(0, summary)


class SpoilerUnwrapTreeprocessor(Treeprocessor):
    """Pull the first paragraph of each spoiler up next to its summary."""

    def run(self, root):
        for details in list(root.iter(SPOILER_TAG)):
            if len(details) < 2:
                continue
            summary, first = details[0], details[1]
            if summary.tag != SPOILER_SUMMARY_TAG or first.tag != "p":
                continue

            is_last = len(details) == 2
            details.text = None
            summary.tail = first.text

            children = list(first)
            details.remove(first)
            for offset, child in enumerate(children, start=1):
                details.insert(offset, child)

            tail = None if is_last else first.tail
            if children:
                last = children[-1]
                last.tail = (last.tail or "") + (tail or "") or None
            else:
                summary.tail = (summary.tail or "") + (tail or "") or None
        return root


class SpoilerExtension(Extension):
    """Markdown extension to render spoiler blockquotes."""

    def __init__(self, **kwargs):
        self.config = {
            "prefix": ["!", "Character that opens a spoiler blockquote"],
            "default_reveal_text": ["Reveal spoiler", "Summary text when none is given"],
            "reveal_text_max_length": [50, "Longest accepted [Reveal text]"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        # Before the inline pass (20) so the marker never reaches link/image parsing
        md.treeprocessors.register(
            SpoilerTreeprocessor(
                md,
                self.getConfig("prefix"),
                self.getConfig("default_reveal_text"),
                self.getConfig("reveal_text_max_length"),
            ),
            "spoiler",
            25,
        )
        # After prettify (10), which would re-add block whitespace
        md.treeprocessors.register(SpoilerUnwrapTreeprocessor(md), "spoiler_unwrap", 5)


class StrictHashHeaderProcessor(HashHeaderProcessor):
    """ATX headings that need whitespace after the hashes, so "#tag" stays text."""

    RE = re.compile(r"(?:^|\n)(?P<level>#{1,6})[ \t]+(?P<header>(?:\\.|[^\\])*?)#*(?:\n|$)")


class StrictHeadingExtension(Extension):
    """Replace the stock hash header processor with the strict one."""

    def extendMarkdown(self, md):
        # Same name and priority as the built-in, so it is replaced in place
        md.parser.blockprocessors.register(
            StrictHashHeaderProcessor(md.parser), "hashheader", 70
        )


class StrikethroughExtension(Extension):
    """~~text~~ renders as <del>text</del>."""

    def extendMarkdown(self, md):
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "strikethrough", 55
        )


def render_markdown(text: str, breaks: bool = True) -> str:
    """Render post Markdown with raw HTML passed through and optional hard line breaks."""
    extensions = [
        StrictHeadingExtension(),
        FencedCodeExtension(),
        TableExtension(),
        StrikethroughExtension(),
        SpoilerExtension(),
    ]
    if breaks:
        extensions.append(Nl2BrExtension())
    md = markdown.Markdown(extensions=extensions)
    return md.convert(text)
