"""
Unit tests for the allow-list sanitizer and its tag transforms.
"""

import pytest

from hive_renderer.models import PostContext, RendererOptions
from hive_renderer.sanitization import TagTransformingSanitizer, canonical_iframe_src
from hive_renderer.sanitization.tag_transforming import INVALID_IMAGE_ERROR


@pytest.fixture
def sanitizer(options, localization):
    return TagTransformingSanitizer(options, localization)


def make_sanitizer(localization, **kwargs):
    return TagTransformingSanitizer(RendererOptions(**kwargs), localization)


def test_script_and_style_are_dropped_with_content(sanitizer):
    out = sanitizer.sanitize("<p>hi</p><script>alert(1)</script><style>p{}</style>")
    assert out == "<p>hi</p>"


def test_unknown_tags_are_stripped_keeping_text(sanitizer):
    assert sanitizer.sanitize("<span>text</span>") == "text"


def test_whitelisted_iframes_are_rebuilt(sanitizer):
    out = sanitizer.sanitize('<iframe src="https://www.youtube.com/embed/abc?autoplay=1" onload="x()"></iframe>')
    assert 'src="https://www.youtube.com/embed/abc"' in out
    assert 'width="640"' in out and 'height="480"' in out
    assert 'frameborder="0"' in out
    assert 'allowfullscreen="allowfullscreen"' in out
    assert "onload" not in out
    assert sanitizer.get_errors() == []


def test_unlisted_iframes_become_notices(sanitizer, log_messages):
    out = sanitizer.sanitize(
        '<iframe src="https://evil.com/x"></iframe>',
        PostContext(author="alice", permlink="post"),
    )
    assert out == "<div>(Unsupported https://evil.com/x)</div>"
    assert sanitizer.get_errors() == ["Invalid iframe URL: https://evil.com/x"]
    assert any(" in @alice/post" in message for message in log_messages)


def test_errors_reset_on_each_call(sanitizer):
    sanitizer.sanitize('<iframe src="https://evil.com/x"></iframe>')
    sanitizer.sanitize("<p>fine</p>")
    assert sanitizer.get_errors() == []


def test_iframe_canonicalizers():
    assert canonical_iframe_src("https://3speak.tv/watch?v=alice/abc") == "https://3speak.tv/embed?v=alice/abc"
    assert canonical_iframe_src("https://twitter.com/jack/status/20") == (
        "https://platform.twitter.com/embed/Tweet.html?id=20"
    )
    assert canonical_iframe_src("https://player.vimeo.com/video/42?h=1") == "https://player.vimeo.com/video/42"
    assert canonical_iframe_src("//player.vimeo.com/video/42") is None
    assert canonical_iframe_src(
        "https://w.soundcloud.com/player/?url=https%3A//api.soundcloud.com/tracks/1&color=ff"
    ).startswith("https://w.soundcloud.com/player/?url=https%3A//api.soundcloud.com/tracks/1&auto_play=false")
    assert canonical_iframe_src("https://open.spotify.com/embed/track/abc") == "https://open.spotify.com/embed/track/abc"
    assert canonical_iframe_src("https://example.com/embed") is None
    assert canonical_iframe_src(None) is None


def test_images_keep_only_safe_sources(sanitizer):
    out = sanitizer.sanitize('<img src="http://example.com/a.png" alt="cat" title="t">')
    assert 'src="//example.com/a.png"' in out
    assert 'alt="cat"' in out
    assert "title" not in out


def test_images_with_unsafe_sources_are_replaced(sanitizer):
    assert sanitizer.sanitize('<img src="/local.png">') == '<img src="brokenimg.jpg"/>'
    assert sanitizer.get_errors() == [INVALID_IMAGE_ERROR]
    assert "javascript" not in sanitizer.sanitize('<img src="javascript:alert(1)">')


def test_images_can_be_disabled(localization):
    sanitizer = make_sanitizer(localization, do_not_show_images=True)
    assert sanitizer.sanitize('<img src="https://example.com/a.png">') == (
        f"<div>{localization.no_image}</div>"
    )


def test_div_classes_are_whitelisted(sanitizer, localization):
    assert sanitizer.sanitize('<div class="text-center">x</div>') == '<div class="text-center">x</div>'
    assert sanitizer.sanitize('<div class="pull-right evil">x</div>') == "<div>x</div>"
    assert sanitizer.sanitize('<div class="text-center" title="hi">x</div>') == '<div class="text-center">x</div>'

    warning = localization.phishing_warning
    out = sanitizer.sanitize(f'<div class="phishy" title="{warning}">x</div>')
    assert f'title="{warning}"' in out
    assert 'title="other"' not in sanitizer.sanitize('<div class="phishy" title="other">x</div>')


def test_table_cell_alignment_is_the_only_style(sanitizer):
    out = sanitizer.sanitize(
        '<table><tr><td style="text-align:right">1</td><td style="color:red">2</td>'
        '<th style="text-align:center">h</th></tr></table>'
    )
    assert '<td style="text-align:right">1</td>' in out
    assert "<td>2</td>" in out
    assert '<th style="text-align:center">h</th>' in out


def test_links_get_rel_and_target(sanitizer):
    out = sanitizer.sanitize('<a href=" https://example.com " class="evil">x</a>')
    assert 'href="https://example.com"' in out
    assert 'rel="nofollow noopener"' in out
    assert 'target="_blank"' in out
    assert "class=" not in out


def test_link_options_are_applied(localization):
    sanitizer = make_sanitizer(
        localization,
        add_nofollow_to_links=False,
        add_target_blank_to_links=False,
        css_class_for_external_links="ext",
    )
    out = sanitizer.sanitize('<a href="https://example.com">x</a>')
    assert 'rel="noopener"' in out
    assert 'target="_self"' in out
    assert 'class="ext"' in out


def test_safe_and_internal_links(localization):
    sanitizer = make_sanitizer(
        localization,
        is_link_safe_fn=lambda url: True,
        add_external_css_class_to_matching_links_fn=lambda url: False,
        css_class_for_internal_links="int",
    )
    out = sanitizer.sanitize('<a href="/trending/hive">x</a>')
    assert "rel=" not in out
    assert "target=" not in out
    assert 'class="int"' in out


def test_unsafe_protocols_are_removed(sanitizer):
    out = sanitizer.sanitize('<a href="javascript:alert(1)">x</a>')
    assert "javascript" not in out
    assert ">x</a>" in out


def test_sanitize_is_idempotent(sanitizer, localization):
    sample = (
        "<h2>Title</h2><p>Some <b>bold</b> &amp; <em>text</em><br>next line</p>"
        '<p><a href="https://example.com/a?b=1&amp;c=2">link</a></p>'
        '<img src="http://example.com/a.png" alt="cat"><img src="relative.png">'
        '<div class="videoWrapper"><iframe src="https://www.youtube.com/embed/abc?x=1"></iframe></div>'
        '<iframe src="https://twitter.com/jack/status/20"></iframe>'
        f'<div class="phishy" title="{localization.phishing_warning}">evil / https://evil.com</div>'
        '<table><tr><td style="text-align:center">1</td></tr></table>'
        "<details><summary>Reveal</summary>secret</details>"
        '<iframe src="https://evil.com"></iframe><span>gone</span>'
    )
    once = sanitizer.sanitize(sample)
    assert sanitizer.sanitize(once) == once
