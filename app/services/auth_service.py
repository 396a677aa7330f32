from typing import Any, Mapping
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.sign_in import sign_in
from app.domain.exceptions import AuthError, CredentialsSignin


async def authenticate(form: Mapping[str, Any], db: AsyncSession) -> str | None:
    try:
        await sign_in("credentials", form, db)
    except AuthError as e:
        if e.type == CredentialsSignin.type:
            return "Invalid credentials."
        return "Something went wrong."
