"""Credentials sign-in provider.

``sign_in`` never returns normally: a successful sign-in leaves through
:func:`app.core.navigation.redirect` with the session cookie attached, and
every failure is an :class:`AuthError` whose ``type`` tells the caller which
message to show.
"""
import logging
from typing import Any, Awaitable, Callable, Mapping, NoReturn
from anyio import to_thread
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import DASHBOARD_PATH, LOGIN_PATH, SESSION_COOKIE_NAME
from app.core.navigation import redirect, safe_local_path
from app.core.security import verify_password, create_session_token, session_cookie
from app.domain.auth.schemas import SignInDTO
from app.domain.exceptions import CredentialsSignin, InvalidProvider, CallbackRouteError
from app.domain.users.crud import get_user_by_email
from app.domain.users.models import User


logger = logging.getLogger("app.sign_in")

Authorize = Callable[[Mapping[str, Any], AsyncSession], Awaitable[User | None]]


async def authorize_credentials(form: Mapping[str, Any], db: AsyncSession) -> User | None:
    try:
        credentials = SignInDTO.model_validate({"email": form.get("email"), "password": form.get("password")})
    except ValidationError:
        return None

    try:
        user = await get_user_by_email(credentials.email, db)
    except SQLAlchemyError as e:
        raise CallbackRouteError("User lookup failed") from e
    if not user:
        return None

    ok = await to_thread.run_sync(verify_password, credentials.password.get_secret_value(), user.password)
    return user if ok else None


PROVIDERS: dict[str, Authorize] = {
    "credentials": authorize_credentials,
}


async def sign_in(provider: str, form: Mapping[str, Any], db: AsyncSession) -> NoReturn:
    authorize = PROVIDERS.get(provider)
    if authorize is None:
        raise InvalidProvider(f"Unknown sign-in provider: {provider}", ctx={"provider": provider})

    user = await authorize(form, db)
    if user is None:
        logger.info("Sign-in rejected provider=%s", provider)
        raise CredentialsSignin("Invalid credentials", ctx={"provider": provider})

    token = create_session_token(subject=user.id)
    target = safe_local_path(form.get("redirectTo"), DASHBOARD_PATH)
    logger.info("Sign-in ok user_id=%s", user.id)
    redirect(target, cookies=[session_cookie(token)])


def sign_out() -> NoReturn:
    redirect(LOGIN_PATH, delete_cookies=[SESSION_COOKIE_NAME])
