"""
Allow-list sanitizer for rendered post HTML.

Bleach removes everything outside the allow-list; a BeautifulSoup pass then
rewrites the surviving iframe, img, div, td/th and a tags into their only
permitted shapes. The configuration is rebuilt from the options on every call.
"""

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup, Tag
from loguru import logger

from ..config import BROKEN_IMAGE_SRC
from ..models import DEFAULT_LOCALIZATION, Localization, PostContext, RendererOptions, format_post_context
from .iframes import canonical_iframe_src

ALLOWED_TAGS: FrozenSet[str] = frozenset(
    {
        "div", "iframe", "del",
        "a", "p", "b", "i", "q", "br", "ul", "li", "ol", "img",
        "h1", "h2", "h3", "h4", "h5", "h6", "hr",
        "blockquote", "pre", "code", "em", "strong", "center",
        "table", "thead", "tbody", "tr", "th", "td",
        "strike", "sup", "sub", "details", "summary",
    }
)

ALLOWED_ATTRIBUTES: Dict[str, List[str]] = {
    "iframe": [
        "src",
        "width",
        "height",
        "frameborder",
        "allowfullscreen",
        "webkitallowfullscreen",
        "mozallowfullscreen",
    ],
    "div": ["class", "title"],
    "td": ["style"],
    "th": ["style"],
    "img": ["src", "alt"],
    "a": ["href", "rel", "title", "class", "target", "id"],
    "ol": ["start"],
}

ALLOWED_PROTOCOLS = ["http", "https", "hive"]

# Tags whose content is dropped together with the tag.
DROP_CONTENT_TAGS = ("script", "style", "textarea", "option", "noscript")

CLASS_WHITELIST = (
    "pull-right",
    "pull-left",
    "text-justify",
    "text-rtl",
    "text-center",
    "text-right",
    "videoWrapper",
    "phishy",
)

ALLOWED_CELL_STYLES = ("text-align:right", "text-align:center")

_SAFE_IMAGE_SRC = re.compile(r"^(https?:)?//", re.IGNORECASE)
_HTTP_PREFIX = re.compile(r"^http://", re.IGNORECASE)

INVALID_IMAGE_ERROR = "An image in this post did not save properly."


@dataclass(frozen=True)
class SanitizeConfig:
    tags: FrozenSet[str]
    attributes: Dict[str, List[str]]
    protocols: List[str]
    iframe_width: int
    iframe_height: int
    css_sanitizer: CSSSanitizer


def _normalize_style(style: str) -> str:
    return style.strip().rstrip(";").strip()


class TagTransformingSanitizer:
    def __init__(
        self,
        options: RendererOptions,
        localization: Localization = DEFAULT_LOCALIZATION,
    ):
        self.options = options
        self.localization = localization
        self.sanitization_errors: List[str] = []
        self.current_post_context: Optional[PostContext] = None

    def sanitize(self, text: str, post_context: Optional[PostContext] = None) -> str:
        self.sanitization_errors = []
        self.current_post_context = post_context
        config = self.generate_sanitize_config()

        cleaned = bleach.clean(
            self._drop_content_tags(text),
            tags=config.tags,
            attributes=config.attributes,
            protocols=config.protocols,
            css_sanitizer=config.css_sanitizer,
            strip=True,
            strip_comments=True,
        )

        doc = BeautifulSoup(cleaned, "html.parser")
        for node in doc.find_all(["iframe", "img", "div", "td", "th", "a"]):
            transform = getattr(self, f"transform_{node.name}")
            transform(node, config)
        return doc.decode()

    def get_errors(self) -> List[str]:
        return self.sanitization_errors

    def generate_sanitize_config(self) -> SanitizeConfig:
        return SanitizeConfig(
            tags=ALLOWED_TAGS,
            attributes={tag: list(attrs) for tag, attrs in ALLOWED_ATTRIBUTES.items()},
            protocols=list(ALLOWED_PROTOCOLS),
            iframe_width=self.options.assets_width,
            iframe_height=self.options.assets_height,
            css_sanitizer=CSSSanitizer(allowed_css_properties=["text-align"]),
        )

    @staticmethod
    def _drop_content_tags(text: str) -> str:
        doc = BeautifulSoup(text, "html.parser")
        found = doc.find_all(list(DROP_CONTENT_TAGS))
        if not found:
            return text
        for node in found:
            node.decompose()
        return doc.decode()

    def _replace_with_div(self, node: Tag, text: str) -> None:
        div = BeautifulSoup("", "html.parser").new_tag("div")
        div.string = text
        node.replace_with(div)

    def transform_iframe(self, node: Tag, config: SanitizeConfig) -> None:
        src_attr = node.get("src")
        src = canonical_iframe_src(src_attr)
        if src:
            node.attrs = {
                "src": src,
                "width": str(config.iframe_width),
                "height": str(config.iframe_height),
                "frameborder": "0",
                "allowfullscreen": "allowfullscreen",
                "webkitallowfullscreen": "webkitallowfullscreen",
                "mozallowfullscreen": "mozallowfullscreen",
            }
            node.clear()
            return

        logger.warning(
            f"Blocked iframe (not whitelisted){format_post_context(self.current_post_context)}: "
            f'src="{src_attr or "(empty)"}"'
        )
        self.sanitization_errors.append(f"Invalid iframe URL: {src_attr or ''}")
        self._replace_with_div(node, f"(Unsupported {src_attr or ''})")

    def transform_img(self, node: Tag, config: SanitizeConfig) -> None:
        if self.options.do_not_show_images:
            self._replace_with_div(node, self.localization.no_image)
            return

        src = node.get("src") or ""
        alt = node.get("alt")
        if not _SAFE_IMAGE_SRC.search(src):
            logger.warning(
                f"Blocked image (invalid src){format_post_context(self.current_post_context)}: "
                f'src="{src or "(empty)"}"'
            )
            self.sanitization_errors.append(INVALID_IMAGE_ERROR)
            node.attrs = {"src": BROKEN_IMAGE_SRC}
            return

        attrs = {"src": _HTTP_PREFIX.sub("//", src)}
        if alt:
            attrs["alt"] = alt
        node.attrs = attrs

    def transform_div(self, node: Tag, config: SanitizeConfig) -> None:
        classes = node.get("class") or []
        class_value = " ".join(classes) if isinstance(classes, list) else classes
        title = node.get("title")

        attrs = {}
        if class_value in CLASS_WHITELIST:
            attrs["class"] = class_value
            if class_value == "phishy" and title == self.localization.phishing_warning:
                attrs["title"] = title
        node.attrs = attrs

    def _transform_cell(self, node: Tag) -> None:
        style = _normalize_style(node.get("style") or "")
        node.attrs = {"style": style} if style in ALLOWED_CELL_STYLES else {}

    def transform_td(self, node: Tag, config: SanitizeConfig) -> None:
        self._transform_cell(node)

    def transform_th(self, node: Tag, config: SanitizeConfig) -> None:
        self._transform_cell(node)

    def transform_a(self, node: Tag, config: SanitizeConfig) -> None:
        href = node.get("href")
        if href:
            href = href.strip()
            node["href"] = href

        if href and not self.options.is_link_safe_fn(href):
            node["rel"] = "nofollow noopener" if self.options.add_nofollow_to_links else "noopener"
            node["target"] = "_blank" if self.options.add_target_blank_to_links else "_self"

        if href and self.options.add_external_css_class_to_matching_links_fn(href):
            css_class = self.options.css_class_for_external_links
        else:
            css_class = self.options.css_class_for_internal_links

        if css_class:
            node["class"] = css_class
        elif "class" in node.attrs:
            del node["class"]
