import redis.asyncio as redis
from app.core.config import REDIS_URL


async def create_redis() -> redis.Redis | None:
    if not REDIS_URL:
        return None
    return redis.from_url(
        REDIS_URL,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=30,
        retry_on_timeout=True,
        socket_connect_timeout=10,
        socket_timeout=5,
        socket_keepalive=True
    )
