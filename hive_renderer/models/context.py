"""
Per-call data carried through one render.
"""

from dataclasses import dataclass, field
from typing import Optional, Set

from pydantic import BaseModel


class PostContext(BaseModel):
    """Identifies the post being rendered; used only to enrich log messages."""

    author: Optional[str] = None
    permlink: Optional[str] = None

    def describe(self) -> str:
        if self.author and self.permlink:
            return f" in @{self.author}/{self.permlink}"
        if self.author:
            return f" by @{self.author}"
        return ""


def format_post_context(post_context: Optional[PostContext]) -> str:
    return post_context.describe() if post_context else ""


@dataclass
class ParserState:
    """Summary collected while walking one parsed document."""

    hashtags: Set[str] = field(default_factory=set)
    usertags: Set[str] = field(default_factory=set)
    htmltags: Set[str] = field(default_factory=set)
    images: Set[str] = field(default_factory=set)
    links: Set[str] = field(default_factory=set)


@dataclass(frozen=True)
class EmbedMetadata:
    """A provider match found in a text node."""

    id: str
    url: str
    image: Optional[str] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class EmbedSize:
    width: int
    height: int
