"""
Tests for environment configuration, logging setup and the command line entry point.
"""

import importlib
import io
import sys

import pytest
from loguru import logger

import hive_renderer.__main__ as cli
from hive_renderer import config
from hive_renderer.exceptions import SecurityError
from hive_renderer.logging_setup import configure_logging
from hive_renderer.models import PostContext, format_post_context


@pytest.fixture
def quiet_cli(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level=None: None)


def test_format_post_context():
    assert format_post_context(None) == ""
    assert format_post_context(PostContext()) == ""
    assert format_post_context(PostContext(author="alice")) == " by @alice"
    assert format_post_context(PostContext(author="alice", permlink="hello")) == " in @alice/hello"
    assert format_post_context(PostContext(permlink="hello")) == ""


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("RENDERER_ASSETS_WIDTH", "800")
    monkeypatch.setenv("RENDERER_BREAKS", "false")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.ASSETS_WIDTH == 800
        assert reloaded.BREAKS is False
    finally:
        monkeypatch.delenv("RENDERER_ASSETS_WIDTH")
        monkeypatch.delenv("RENDERER_BREAKS")
        importlib.reload(config)
    assert config.ASSETS_WIDTH == 640


def test_configure_logging_writes_file(tmp_path):
    log_file = tmp_path / "renderer.log"
    try:
        configure_logging(level="debug", log_file=str(log_file))
        logger.debug("file sink check")
    finally:
        logger.remove()
        logger.add(sys.stderr)
    assert "file sink check" in log_file.read_text(encoding="utf-8")


def test_cli_renders_file(tmp_path, capsys, quiet_cli):
    post = tmp_path / "post.md"
    post.write_text("Hello **world**", encoding="utf-8")

    assert cli.main([str(post), "--author", "alice", "--permlink", "hello"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "<p>Hello <strong>world</strong></p>" in out
    assert out.endswith("\n")


def test_cli_rejects_empty_input(tmp_path, capsys, quiet_cli):
    post = tmp_path / "empty.md"
    post.write_text("   \n", encoding="utf-8")

    assert cli.main([str(post)]) == cli.EXIT_EMPTY_INPUT
    assert capsys.readouterr().out == ""


def test_cli_reads_stdin(monkeypatch, capsys, quiet_cli):
    monkeypatch.setattr(sys, "stdin", io.StringIO("hi @alice"))

    assert cli.main([]) == cli.EXIT_OK
    assert 'href="/@alice"' in capsys.readouterr().out


def test_cli_can_hide_images(monkeypatch, capsys, quiet_cli):
    monkeypatch.setattr(sys, "stdin", io.StringIO("![cat](https://example.com/cat.png)"))

    assert cli.main(["--no-images"]) == cli.EXIT_OK
    assert "<img" not in capsys.readouterr().out


def test_cli_reports_security_errors(monkeypatch, capsys, quiet_cli):
    def reject(self, text, post_context=None):
        raise SecurityError("Renderer rejected the input because of insecure content: text contains script tag")

    monkeypatch.setattr(cli.DefaultRenderer, "render", reject)
    monkeypatch.setattr(sys, "stdin", io.StringIO("anything"))

    assert cli.main([]) == cli.EXIT_SECURITY_ERROR
    assert capsys.readouterr().out == ""


def test_parse_args_defaults():
    args = cli.parse_args([])
    assert args.file is None
    assert args.no_images is False
    assert args.base_url == config.BASE_URL
