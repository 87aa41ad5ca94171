# tests/test_cli.py
"""Tests for the CLI: startup failures of `run` and API client URLs."""

import argparse

import httpx
import pytest

from worddies.bot import WorddiesClient
from worddies.cli import client
from worddies.cli.commands.run import run


ENV_KEYS = [
    "DISCORD_TOKEN",
    "REDIS_URL",
    "WORDDIES_CORPUS",
    "WORDDIES_MAX_ATTEMPTS",
    "WORDDIES_DAILY_TIME",
    "DICTIONARY_URL",
    "HTTP_TIMEOUT",
    "LOG_LEVEL",
]


@pytest.fixture
def started(monkeypatch):
    """Clean environment, no .env loading; records any attempt to connect the bot."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("worddies.core.config.load_dotenv", lambda: None)

    calls = []

    async def fake_start(self, token, *args, **kwargs):
        calls.append(token)

    monkeypatch.setattr(WorddiesClient, "start", fake_start)
    return calls


# === run ===

def test_run_missing_token(started, monkeypatch, word_file, capsys):
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

    with pytest.raises(SystemExit) as exc:
        run(argparse.Namespace(corpus=str(word_file)))

    assert exc.value.code == 1
    assert "DISCORD_TOKEN" in capsys.readouterr().out
    assert started == []


def test_run_missing_redis_url(started, monkeypatch, word_file, capsys):
    monkeypatch.setenv("DISCORD_TOKEN", "abc")

    with pytest.raises(SystemExit) as exc:
        run(argparse.Namespace(corpus=str(word_file)))

    assert exc.value.code == 1
    assert "REDIS_URL" in capsys.readouterr().out
    assert started == []


def test_run_unreadable_corpus(started, monkeypatch, tmp_path):
    monkeypatch.setenv("DISCORD_TOKEN", "abc")
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

    with pytest.raises(SystemExit) as exc:
        run(argparse.Namespace(corpus=str(tmp_path / "missing.txt")))

    assert exc.value.code == 1
    assert started == []


# === client ===

class TestClientUrls:
    @pytest.fixture
    def requested(self, monkeypatch):
        urls = []

        def fake_request(url, *args, **kwargs):
            urls.append(url)
            return httpx.Response(200, json={}, request=httpx.Request("GET", url))

        monkeypatch.setattr(client, "BASE_URL", "http://api.test/api")
        monkeypatch.setattr(client.httpx, "get", fake_request)
        monkeypatch.setattr(client.httpx, "put", fake_request)
        monkeypatch.setattr(client.httpx, "delete", fake_request)
        return urls

    def test_define_escapes_word(self, requested):
        client.define("what?")
        assert requested == ["http://api.test/api/words/what%3F"]

    def test_define_escapes_slash(self, requested):
        client.define("and/or")
        assert requested == ["http://api.test/api/words/and%2For"]

    def test_roll(self, requested):
        client.roll("3d6")
        assert requested == ["http://api.test/api/dice/3d6"]

    def test_nickname_paths(self, requested):
        client.get_nickname("a b")
        client.set_nickname("a b", "Sam")
        client.clear_nickname("a b")
        assert requested == ["http://api.test/api/nicknames/a%20b"] * 3
