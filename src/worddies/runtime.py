# src/worddies/runtime.py
"""
Startup wiring shared by the bot and the API server.
"""

import logging
import random

import httpx
from redis.asyncio import Redis

from worddies.core.config import Settings
from worddies.core.corpus import CorpusIndex
from worddies.core.dispatcher import Context
from worddies.core.nicknames import NicknameStore
from worddies.core.subscriptions import SubscriptionStore
from worddies.core.words import DictionaryClient


logger = logging.getLogger(__name__)


def get_redis(settings: Settings) -> Redis:
    return Redis.from_url(settings.redis_url)


def get_http(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.http_timeout, follow_redirects=True)


def build_context(settings: Settings, client: Redis, http: httpx.AsyncClient) -> Context:
    """Index the corpus and bundle the shared handles. Raises ResourceUnavailable."""
    corpus = CorpusIndex.build(settings.corpus_path)
    return Context(
        corpus=corpus,
        dictionary=DictionaryClient(http, settings.dictionary_url),
        nicknames=NicknameStore(client),
        subscriptions=SubscriptionStore(client),
        rng=random.Random(),
        max_attempts=settings.max_attempts,
    )


async def run_bot(settings: Settings):
    from worddies.bot import WorddiesClient

    token = settings.require_token()
    client = get_redis(settings)
    http = get_http(settings)
    try:
        ctx = build_context(settings, client, http)
        bot = WorddiesClient(ctx, daily_time=settings.daily_time)
        async with bot:
            await bot.start(token)
    finally:
        await http.aclose()
        await client.aclose()
