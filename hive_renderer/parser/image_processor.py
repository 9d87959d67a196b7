"""
Document-level image pass run after the tree walk.
"""

from typing import Callable

from bs4 import BeautifulSoup

from ..utils import links


class ImageProcessor:
    def __init__(self, hide_images: bool, image_proxy_fn: Callable[[str], str]):
        self.hide_images = hide_images
        self.image_proxy_fn = image_proxy_fn

    def hide_images_if_needed(self, doc: BeautifulSoup, mutate: bool) -> None:
        if not (mutate and self.hide_images):
            return
        for image in doc.find_all("img"):
            pre = doc.new_tag("pre", attrs={"class": "image-url-only"})
            pre.string = image.get("src") or ""
            image.replace_with(pre)

    def proxify_images_if_needed(self, doc: BeautifulSoup, mutate: bool) -> None:
        if mutate and not self.hide_images:
            self.proxify_images(doc)

    def proxify_images(self, doc: BeautifulSoup) -> None:
        for node in doc.find_all("img"):
            url = node.get("src") or ""
            if not links.LOCAL.search(url):
                node["src"] = self.image_proxy_fn(url)
