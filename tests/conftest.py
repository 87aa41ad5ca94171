# tests/conftest.py
"""Shared fixtures: in-memory Redis double, word list, stubbed dictionary."""

import random

import httpx
import pytest
import redis

from worddies.core.corpus import CorpusIndex
from worddies.core.dispatcher import Context
from worddies.core.nicknames import NicknameStore
from worddies.core.subscriptions import SubscriptionStore
from worddies.core.words import DictionaryClient


class MemoryRedis:
    """The subset of redis.asyncio.Redis the stores use, returning bytes."""

    def __init__(self):
        self.data = {}
        self.sets = {}
        self.down = False

    def _check(self):
        if self.down:
            raise redis.ConnectionError("connection refused")

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def set(self, key, value):
        self._check()
        self.data[key] = value.encode() if isinstance(value, str) else value
        return True

    async def delete(self, key):
        self._check()
        return 1 if self.data.pop(key, None) is not None else 0

    async def sadd(self, key, member):
        self._check()
        members = self.sets.setdefault(key, set())
        if member.encode() in members:
            return 0
        members.add(member.encode())
        return 1

    async def srem(self, key, member):
        self._check()
        members = self.sets.get(key, set())
        if member.encode() not in members:
            return 0
        members.discard(member.encode())
        return 1

    async def smembers(self, key):
        self._check()
        return set(self.sets.get(key, set()))


def entry(word: str, *meanings: tuple[str, list[str]]) -> dict:
    """Build a dictionaryapi.dev-shaped entry."""
    return {
        "word": word,
        "phonetics": [],
        "meanings": [
            {
                "partOfSpeech": pos,
                "definitions": [{"definition": d, "synonyms": [], "antonyms": []} for d in defs],
                "synonyms": [],
                "antonyms": [],
            }
            for pos, defs in meanings
        ],
    }


DICTIONARY = {
    "hello": [
        entry("hello", ("noun", ['"Hello!" or an equivalent greeting.']), ("verb", ['To greet with "hello".'])),
        entry("hello", ("interjection", ["A greeting."])),
    ],
    "apple": [entry("apple", ("noun", ["A common, round fruit.", "The tree of the apple."]))],
    "zebra": [entry("zebra", ("noun", ["An African equine with stripes."]))],
}


class QueuedRandom:
    """Deterministic stand-in for random.Random: randrange pops queued values."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, *args):
        return self.values.pop(0)


class FakeDictionary:
    """httpx handler serving DICTIONARY; records every requested path."""

    def __init__(self, entries=None):
        self.entries = DICTIONARY if entries is None else entries
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        word = request.url.path.rsplit("/", 1)[-1]
        self.requests.append(request.url.raw_path.decode())
        if word in self.entries:
            return httpx.Response(200, json=self.entries[word])
        return httpx.Response(404, json={
            "title": "No Definitions Found",
            "message": "Sorry pal, we couldn't find definitions for the word you were looking for.",
        })


@pytest.fixture
def store_client():
    return MemoryRedis()


@pytest.fixture
def fake_dictionary():
    return FakeDictionary()


@pytest.fixture
def dictionary(fake_dictionary):
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_dictionary))
    return DictionaryClient(http, "https://dict.test/api/v2/entries/en")


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("aardvark\nqwxz\napple\nhello\nzebra\n")
    return path


@pytest.fixture
def ctx(word_file, dictionary, store_client):
    return Context(
        corpus=CorpusIndex.build(word_file),
        dictionary=dictionary,
        nicknames=NicknameStore(store_client),
        subscriptions=SubscriptionStore(store_client),
        rng=random.Random(1234),
    )
