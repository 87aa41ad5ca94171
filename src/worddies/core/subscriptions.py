# src/worddies/core/subscriptions.py
"""
Channels registered for the daily word.
"""

import logging

import redis
from redis.asyncio import Redis

from worddies.core.errors import StoreUnavailable


logger = logging.getLogger(__name__)


class SubscriptionStore:
    def __init__(self, client: Redis, key: str = "worddies:channels"):
        self.client = client
        self.key = key

    async def subscribe(self, channel_id: str) -> bool:
        """Returns False when the channel was already registered."""
        try:
            return bool(await self.client.sadd(self.key, channel_id))
        except (redis.RedisError, OSError) as e:
            raise StoreUnavailable(f"could not subscribe {channel_id}: {e}") from e

    async def unsubscribe(self, channel_id: str) -> bool:
        try:
            return bool(await self.client.srem(self.key, channel_id))
        except (redis.RedisError, OSError) as e:
            raise StoreUnavailable(f"could not unsubscribe {channel_id}: {e}") from e

    async def channels(self) -> list[str]:
        try:
            members = await self.client.smembers(self.key)
        except (redis.RedisError, OSError) as e:
            logger.warning("Listing subscribed channels failed: %s", e)
            return []
        return sorted(m.decode() if isinstance(m, bytes) else m for m in members)
