from urllib.parse import quote
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from app.core.config import DASHBOARD_PATH, LOGIN_PATH
from app.core.ctx import REQUEST_ID_CTX
from app.core.navigation import Redirect
from app.domain.exceptions import AppError, Unauthorized

MEDIA_TYPE = "application/problem+json"

_STATUS_BY_CLASS: dict[type[AppError], int] = {
    Unauthorized: status.HTTP_401_UNAUTHORIZED,
    AppError: status.HTTP_400_BAD_REQUEST,
}

_TITLES: dict[type[AppError], str] = {
    Unauthorized: "Unauthorized",
    AppError: "Application Error",
}


def _status_for(exc: AppError) -> int:
    for cls in type(exc).mro():
        if cls in _STATUS_BY_CLASS:
            return _STATUS_BY_CLASS[cls]
    return status.HTTP_400_BAD_REQUEST


def _title_for(exc: AppError) -> str:
    for cls in type(exc).mro():
        if cls in _TITLES:
            return _TITLES[cls]
    return "Application Error"


def _problem(
    request: Request,
    *,
    http_status: int,
    title: str,
    detail: str | None = None,
    extra: dict | None = None,
) -> JSONResponse:
    body = {
        "status": http_status,
        "title": title,
        "detail": detail,
        "instance": str(request.url),
    }
    req_id = REQUEST_ID_CTX.get()
    if req_id:
        body["trace_id"] = req_id
    if extra:
        body.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=http_status, content=body, media_type=MEDIA_TYPE)


def redirect_response(exc: Redirect) -> RedirectResponse:
    response = RedirectResponse(exc.url, status_code=exc.status_code)
    for cookie in exc.cookies:
        response.set_cookie(**cookie)
    for name in exc.delete_cookies:
        response.delete_cookie(name, path="/")
    return response


def _is_dashboard(request: Request) -> bool:
    path = request.url.path
    return path == DASHBOARD_PATH or path.startswith(f"{DASHBOARD_PATH}/")


def register_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Redirect)
    async def _redirect_handler(request: Request, exc: Redirect):
        return redirect_response(exc)

    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        if isinstance(exc, Unauthorized) and _is_dashboard(request):
            target = f"{LOGIN_PATH}?callbackUrl={quote(request.url.path, safe='')}"
            return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)

        extra = {"context": exc.ctx} if exc.ctx else None
        return _problem(
            request,
            http_status=_status_for(exc),
            title=_title_for(exc),
            detail=str(exc) or None,
            extra=extra
        )
