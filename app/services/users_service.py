import logging
from typing import Any, Mapping
from anyio import to_thread
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import LOGIN_PATH
from app.core.forms import FormState, field_errors, add_field_error
from app.core.navigation import redirect
from app.core.page_cache import revalidate_path
from app.core.security import hash_password
from app.core.utils.validators import passwords_match
from app.domain.users.crud import email_exists, insert_user
from app.domain.users.schemas import UserRegisterDTO


logger = logging.getLogger("app.users")

REGISTER_FIELDS = ("name", "email", "password", "confirmPassword")
PASSWORD_MISMATCH = "Passwords do not match."


async def user_register(form: Mapping[str, Any], db: AsyncSession) -> FormState:
    raw = {name: form.get(name) for name in REGISTER_FIELDS}
    try:
        dto = UserRegisterDTO.model_validate(raw)
    except ValidationError as e:
        errors = field_errors(e)
        if not passwords_match(raw["password"], raw["confirmPassword"]):
            add_field_error(errors, "confirmPassword", PASSWORD_MISMATCH)
        logger.debug("Register form rejected errors=%s", errors)
        return FormState(errors=errors, message="Missing Fields. Failed to Create User.")

    if not passwords_match(dto.password, dto.confirm_password):
        return FormState(
            errors={"confirmPassword": [PASSWORD_MISMATCH]},
            message="Passwords do not match. Failed to Create User."
        )

    if await email_exists(dto.email, db):
        return FormState(errors={"email": ["Email already exists."]}, message="Email already in use.")

    password_hash = await to_thread.run_sync(hash_password, dto.password.get_secret_value())
    try:
        await insert_user(db, name=dto.name, email=dto.email, password_hash=password_hash)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("User insert failed email=%s", dto.email)
        return FormState(message="Database Error: Failed to Create User.")

    logger.info("User registered email=%s", dto.email)
    await revalidate_path(LOGIN_PATH)
    redirect(LOGIN_PATH)
