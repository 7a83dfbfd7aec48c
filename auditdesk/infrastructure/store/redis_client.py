# auditdesk/infrastructure/store/redis_client.py

from typing import List, Optional, Set

import redis.asyncio as redis


class RedisClient:
    """Thin async wrapper over the Redis commands the record store needs. URL is injected."""

    def __init__(self, url: str, timeout: Optional[float] = None):
        self.client = redis.from_url(
            url,
            decode_responses=True,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )

    async def get(self, key: str) -> str | None:
        """Get value for key. Returns None if key does not exist."""
        return await self.client.get(key)

    async def mget(self, keys: List[str]) -> List[Optional[str]]:
        if not keys:
            return []
        return await self.client.mget(keys)

    async def set_document(self, key: str, value: str, index_key: str, member: str) -> None:
        """Write a document and register it in the per-type index in one MULTI/EXEC."""
        async with self.client.pipeline(transaction=True) as pipe:
            pipe.set(key, value)
            pipe.sadd(index_key, member)
            await pipe.execute()

    async def delete_document(self, key: str, index_key: str, member: str) -> bool:
        """Delete a document and drop it from the index. Returns True if the document existed."""
        async with self.client.pipeline(transaction=True) as pipe:
            pipe.delete(key)
            pipe.srem(index_key, member)
            deleted, _ = await pipe.execute()
        return bool(deleted)

    async def smembers(self, key: str) -> Set[str]:
        return await self.client.smembers(key)

    async def close(self) -> None:
        await self.client.aclose()
