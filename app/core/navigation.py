from typing import Any, NoReturn, Sequence
from fastapi import status


class Redirect(Exception):
    """Non-local exit out of a form action.

    Raised by :func:`redirect` and turned into a ``303 See Other`` by the
    handler registered in ``app.api.exceptions``.
    """

    def __init__(
            self,
            url: str,
            *,
            status_code: int = status.HTTP_303_SEE_OTHER,
            cookies: Sequence[dict[str, Any]] = (),
            delete_cookies: Sequence[str] = ()
    ) -> None:
        super().__init__(url)
        self.url = url
        self.status_code = status_code
        self.cookies = list(cookies)
        self.delete_cookies = list(delete_cookies)


def redirect(
        url: str,
        *,
        cookies: Sequence[dict[str, Any]] = (),
        delete_cookies: Sequence[str] = ()
) -> NoReturn:
    raise Redirect(url, cookies=cookies, delete_cookies=delete_cookies)


def safe_local_path(url: str | None, default: str) -> str:
    if not url or not url.startswith("/") or url.startswith("//"):
        return default
    return url
