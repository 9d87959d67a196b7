"""
Parser package for the renderer.
Contains the DOM parser and the node, text and image processors it drives.
"""

from .html_dom_parser import HtmlDOMParser, preprocess_html
from .node_processor import NodeProcessor
from .text_processor import TextProcessor
from .image_processor import ImageProcessor

__all__ = ["HtmlDOMParser", "preprocess_html", "NodeProcessor", "TextProcessor", "ImageProcessor"]
