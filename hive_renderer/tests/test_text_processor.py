"""
Unit tests for linkification of URLs, hashtags and mentions in text nodes.
"""

import pytest

from hive_renderer.models import DEFAULT_LOCALIZATION, ParserState
from hive_renderer.parser import TextProcessor
from hive_renderer.security import LinkSanitizer


def make_processor(**kwargs):
    return TextProcessor(
        LinkSanitizer("https://hive.blog/"),
        DEFAULT_LOCALIZATION,
        hashtag_url_fn=lambda tag: f"/trending/{tag}",
        usertag_url_fn=lambda account: f"/@{account}",
        **kwargs,
    )


@pytest.fixture
def processor():
    return make_processor()


def test_hashtags_are_linked_and_recorded_lowercase(processor):
    state = ParserState()
    out = processor.linkify_hashtags("I love #Hive and #123", state, True)
    assert out == 'I love <a href="/trending/hive">#Hive</a> and #123'
    assert state.hashtags == {"hive"}


def test_mentions_are_validated(processor):
    state = ParserState()
    out = processor.linkify_usertags("hello @Alice and @bittrexx", state, True)
    assert out == 'hello <a href="/@alice">@Alice</a> and @bittrexx'
    assert state.usertags == {"alice"}


def test_email_addresses_are_not_mentions(processor):
    state = ParserState()
    assert processor.linkify_usertags("mail me@example.com", state, True) == "mail me@example.com"
    assert state.usertags == set()


def test_urls_become_anchors(processor):
    state = ParserState()
    out = processor.linkify_urls("see https://example.com/page now", state, True)
    assert out == 'see <a href="https://example.com/page">https://example.com/page</a> now'
    assert state.links == {"https://example.com/page"}


def test_image_urls_become_images(processor):
    state = ParserState()
    out = processor.linkify_urls("https://example.com/cat.png", state, True)
    assert out == '<img src="https://example.com/cat.png" alt="Embedded Image" />'
    assert state.images == {"https://example.com/cat.png"}


def test_executable_downloads_stay_text(processor):
    state = ParserState()
    assert processor.linkify_urls("https://example.com/setup.exe", state, True) == (
        "https://example.com/setup.exe"
    )
    assert state.links == set()


def test_phishy_urls_become_warnings(processor):
    state = ParserState()
    out = processor.linkify_urls("https://peakd.co/x", state, True)
    assert out.startswith('<div title="')
    assert 'class="phishy">https://peakd.co/x</div>' in out
    assert state.links == set()


def test_linkify_without_mutation_only_collects_state(processor):
    state = ParserState()
    text = "#hive by @alice at https://example.com/page"
    assert processor.linkify(text, state, False) == text
    assert state.hashtags == {"hive"}
    assert state.usertags == {"alice"}
    assert state.links == {"https://example.com/page"}


def test_normalize_url_rewrites_ipfs_links():
    processor = make_processor(ipfs_prefix="https://ipfs.io/ipfs/")
    assert processor.normalize_url("ipfs://QmHash") == "https://ipfs.io/ipfs/QmHash"
    assert processor.normalize_url("/ipfs/QmHash") == "https://ipfs.io/ipfs/QmHash"
    assert processor.normalize_url("https://example.com/a.png") == "https://example.com/a.png"


def test_normalize_url_without_prefix_is_identity(processor):
    assert processor.normalize_url("ipfs://QmHash") == "ipfs://QmHash"


def test_mentions_inside_linked_urls_are_left_alone(processor):
    state = ParserState()
    out = processor.linkify("see https://x.com/?ref=@alice and @carol", state, True)
    assert out == (
        'see <a href="https://x.com/?ref=@alice">https://x.com/?ref=@alice</a>'
        ' and <a href="/@carol">@carol</a>'
    )
    assert state.usertags == {"carol"}


def test_mentions_in_attributes_are_left_alone(processor):
    state = ParserState()
    out = processor.linkify_usertags('<img src="https://example.com/@alice.png" /> @alice', state, True)
    assert out == '<img src="https://example.com/@alice.png" /> <a href="/@alice">@alice</a>'
