# tests/test_nicknames.py
"""Tests for nickname validation and the Redis-backed store."""

import asyncio

import pytest

from worddies.core.errors import StoreUnavailable, ValidationFailed
from worddies.core.nicknames import MAX_NICKNAME_LENGTH, NicknameStore, validate_nickname
from worddies.core.subscriptions import SubscriptionStore


@pytest.fixture
def nicknames(store_client):
    return NicknameStore(store_client)


# === Validation ===

def test_validate_accepts_ten_characters():
    validate_nickname("Samantha J", mention_count=1)


def test_validate_empty():
    with pytest.raises(ValidationFailed, match="need to give me a nickname"):
        validate_nickname("", mention_count=1)


def test_validate_too_long():
    with pytest.raises(ValidationFailed, match="too long"):
        validate_nickname("x" * (MAX_NICKNAME_LENGTH + 1), mention_count=1)


def test_validate_max_length_ok():
    validate_nickname("x" * MAX_NICKNAME_LENGTH, mention_count=1)


def test_validate_link():
    with pytest.raises(ValidationFailed, match="links"):
        validate_nickname("http://spam.example", mention_count=1)


def test_validate_mentions():
    with pytest.raises(ValidationFailed, match="mention"):
        validate_nickname("Sam", mention_count=2)


def test_validate_order_length_before_link():
    # A long link reports the length problem first
    with pytest.raises(ValidationFailed, match="too long"):
        validate_nickname("https://" + "a" * 40, mention_count=2)


# === Store ===

def test_get_unset(nicknames):
    assert asyncio.run(nicknames.get("42")) is None


def test_set_and_get(nicknames, store_client):
    asyncio.run(nicknames.set("42", "Sam"))
    assert asyncio.run(nicknames.get("42")) == "Sam"
    assert store_client.data["nickname:42"] == b"Sam"


def test_set_overwrites(nicknames):
    asyncio.run(nicknames.set("42", "Sam"))
    asyncio.run(nicknames.set("42", "Alex"))
    assert asyncio.run(nicknames.get("42")) == "Alex"


def test_users_are_independent(nicknames):
    asyncio.run(nicknames.set("1", "Sam"))
    asyncio.run(nicknames.set("2", "Alex"))
    assert asyncio.run(nicknames.get("1")) == "Sam"
    assert asyncio.run(nicknames.get("2")) == "Alex"


def test_clear(nicknames):
    asyncio.run(nicknames.set("42", "Sam"))
    assert asyncio.run(nicknames.clear("42")) is True
    assert asyncio.run(nicknames.get("42")) is None
    assert asyncio.run(nicknames.clear("42")) is False


def test_get_degrades_when_store_down(nicknames, store_client):
    asyncio.run(nicknames.set("42", "Sam"))
    store_client.down = True
    assert asyncio.run(nicknames.get("42")) is None


def test_get_ignores_undecodable_value(nicknames, store_client):
    store_client.data["nickname:42"] = b"\xff\xfe"
    assert asyncio.run(nicknames.get("42")) is None


def test_set_fails_when_store_down(nicknames, store_client):
    store_client.down = True
    with pytest.raises(StoreUnavailable):
        asyncio.run(nicknames.set("42", "Sam"))


# === Subscriptions ===

def test_subscriptions(store_client):
    subs = SubscriptionStore(store_client)

    assert asyncio.run(subs.subscribe("100")) is True
    assert asyncio.run(subs.subscribe("100")) is False
    asyncio.run(subs.subscribe("7"))
    assert asyncio.run(subs.channels()) == ["100", "7"]

    assert asyncio.run(subs.unsubscribe("100")) is True
    assert asyncio.run(subs.unsubscribe("100")) is False
    assert asyncio.run(subs.channels()) == ["7"]


def test_subscriptions_store_down(store_client):
    subs = SubscriptionStore(store_client)
    store_client.down = True

    assert asyncio.run(subs.channels()) == []
    with pytest.raises(StoreUnavailable):
        asyncio.run(subs.subscribe("100"))
