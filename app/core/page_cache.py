import logging
from redis.exceptions import RedisError
from app.core.config import PAGE_CACHE_PREFIX, PAGE_CACHE_TTL_SECONDS
from app.core.ctx import get_redis


logger = logging.getLogger("app.page_cache")


def page_key(path: str) -> str:
    return f"{PAGE_CACHE_PREFIX}{path}"


async def revalidate_path(path: str) -> bool:
    r = get_redis()
    if not r:
        return False
    try:
        await r.delete(page_key(path))
    except RedisError:
        logger.warning("Page cache invalidation failed path=%s", path, exc_info=True)
        return False
    logger.debug("Page cache invalidated path=%s", path)
    return True


async def get_cached_page(path: str) -> str | None:
    r = get_redis()
    if not r:
        return None
    try:
        return await r.get(page_key(path))
    except RedisError:
        logger.warning("Page cache read failed path=%s", path, exc_info=True)
        return None


async def cache_page(path: str, payload: str, ttl: int = PAGE_CACHE_TTL_SECONDS) -> None:
    r = get_redis()
    if not r:
        return
    try:
        await r.set(page_key(path), payload, ex=ttl)
    except RedisError:
        logger.warning("Page cache write failed path=%s", path, exc_info=True)
