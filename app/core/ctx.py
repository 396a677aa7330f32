from contextvars import ContextVar
from typing import Any

REQUEST_ID_CTX: ContextVar[str | None] = ContextVar("request_id", default=None)
REDIS_CTX: ContextVar[Any] = ContextVar("redis", default=None)


def get_redis() -> Any:
    return REDIS_CTX.get()
