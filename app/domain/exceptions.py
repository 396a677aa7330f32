from app.core.utils.serialization import normalize_ctx


class AppError(Exception):
    def __init__(self, message: str = "", *, ctx: dict | None = None) -> None:
        super().__init__(message or self.__class__.__name__)
        self.ctx = normalize_ctx(ctx or {})


class Unauthorized(AppError):
    pass


class AuthError(Exception):
    """Sign-in failure classified by ``type``, the way the form reports it."""
    type = "AuthError"

    def __init__(self, message: str = "", *, ctx: dict | None = None) -> None:
        super().__init__(message or self.type)
        self.ctx = normalize_ctx(ctx or {})


class CredentialsSignin(AuthError):
    type = "CredentialsSignin"
class InvalidProvider(AuthError):
    type = "InvalidProvider"
class CallbackRouteError(AuthError):
    type = "CallbackRouteError"
