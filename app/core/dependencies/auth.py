from fastapi import Depends, Request
from typing import Annotated
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.security import ALGORITHM
from app.core.config import SECRET_KEY, JWT_ISSUER, JWT_AUDIENCE, SESSION_COOKIE_NAME
from app.domain.users.crud import get_user_by_id
from app.domain.users.models import User
from app.domain.auth.schemas import SessionPayload
from app.domain.exceptions import Unauthorized


async def get_session_payload(request: Request) -> SessionPayload:
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        raise Unauthorized("Not signed in", ctx={"reason": "missing_session"})
    try:
        raw_payload = jwt.decode(
            token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
            issuer=JWT_ISSUER,
            audience=JWT_AUDIENCE,
            options={"verify_aud": True, "leeway": 5}
        )
    except JWTError:
        raise Unauthorized("Invalid session", ctx={"reason": "invalid_token"})
    if raw_payload.get("typ") != "session":
        raise Unauthorized("Invalid session", ctx={"reason": "invalid_type"})
    try:
        return SessionPayload.model_validate(raw_payload)
    except ValidationError:
        raise Unauthorized("Invalid session", ctx={"reason": "invalid_token"})


async def get_current_user(
        payload: Annotated[SessionPayload, Depends(get_session_payload)],
        db: Annotated[AsyncSession, Depends(get_db)]
) -> User:
    user = await get_user_by_id(payload.sub, db)
    if not user:
        raise Unauthorized("User not found", ctx={"user_id": payload.sub})
    return user
