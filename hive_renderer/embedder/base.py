"""
Embedder contract and the marker protocol.

During DOM processing a recognized provider URL is replaced by an opaque marker
``~~~ embed:<id> <type> ~~~``. After sanitization the markers are materialized
into provider markup. A marker that does not parse is left as literal text.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from loguru import logger

from ..models import EmbedMetadata, EmbedSize

EMBED_MARKER_PREFIX = "~~~ embed:"
SAFE_EMBED_ID_PATTERN = re.compile(r"^([\w/?=.-]+) ([^ ]*) ~~~", re.ASCII)


class AbstractEmbedder(ABC):
    """A stateless provider matcher and markup builder."""

    type: str = ""

    def get_embed_metadata(self, text: str) -> Optional[EmbedMetadata]:
        if not text:
            return None
        try:
            return self.extract_metadata(text)
        except Exception as e:
            logger.error(f"{self.type} embedder failed to read metadata: {str(e)}")
            return None

    @abstractmethod
    def extract_metadata(self, text: str) -> Optional[EmbedMetadata]:
        """Match the provider URL in raw text."""

    @abstractmethod
    def process_embed(self, embed_id: str, size: EmbedSize) -> str:
        """Build the markup for a materialized marker."""

    @staticmethod
    def get_embed_marker(embed_id: str, embed_type: str) -> str:
        return f"{EMBED_MARKER_PREFIX}{embed_id} {embed_type} ~~~"

    @staticmethod
    def insert_all_embeds(
        embedders: Sequence["AbstractEmbedder"], text: str, size: EmbedSize
    ) -> str:
        by_type = {embedder.type: embedder for embedder in embedders}
        sections = text.split(EMBED_MARKER_PREFIX)
        output = [sections[0]]

        for section in sections[1:]:
            match = SAFE_EMBED_ID_PATTERN.match(section)
            embedder = by_type.get(match.group(2)) if match else None
            if embedder is None:
                output.append(EMBED_MARKER_PREFIX + section)
                continue
            output.append(embedder.process_embed(match.group(1), size))
            output.append(section[match.end():])

        return "".join(output)
