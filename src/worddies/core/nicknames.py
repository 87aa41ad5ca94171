# src/worddies/core/nicknames.py
"""
Per-user nicknames in Redis, used to personalize replies.
"""

import logging

import redis
from redis.asyncio import Redis

from worddies.core.errors import StoreUnavailable, ValidationFailed


logger = logging.getLogger(__name__)

MAX_NICKNAME_LENGTH = 32


def validate_nickname(name: str, mention_count: int):
    """Raise ValidationFailed for the first rule the name breaks."""
    if not name.strip():
        raise ValidationFailed("You need to give me a nickname, like `nickname Sam`.")
    if len(name) > MAX_NICKNAME_LENGTH:
        raise ValidationFailed(
            f"That nickname is too long, keep it to {MAX_NICKNAME_LENGTH} characters."
        )
    if "http" in name.lower():
        raise ValidationFailed("Nicknames can't contain links.")
    if mention_count != 1:
        raise ValidationFailed("Nicknames can't mention anyone else.")


class NicknameStore:
    def __init__(self, client: Redis):
        self.client = client

    def _key(self, user_id: str) -> str:
        return f"nickname:{user_id}"

    async def get(self, user_id: str) -> str | None:
        try:
            data = await self.client.get(self._key(user_id))
        except (redis.RedisError, OSError) as e:
            logger.warning("Nickname lookup for %s failed: %s", user_id, e)
            return None
        if data is None:
            return None
        if not isinstance(data, bytes):
            return data
        try:
            return data.decode()
        except UnicodeDecodeError as e:
            logger.warning("Nickname for %s is not valid UTF-8: %s", user_id, e)
            return None

    async def set(self, user_id: str, name: str):
        try:
            await self.client.set(self._key(user_id), name)
        except (redis.RedisError, OSError) as e:
            raise StoreUnavailable(f"could not save nickname for {user_id}: {e}") from e

    async def clear(self, user_id: str) -> bool:
        try:
            return bool(await self.client.delete(self._key(user_id)))
        except (redis.RedisError, OSError) as e:
            raise StoreUnavailable(f"could not clear nickname for {user_id}: {e}") from e
