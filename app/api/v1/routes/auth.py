from typing import Annotated, Any, Mapping
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.forms import AuthMessage, FormState, read_form
from app.core.sign_in import sign_out
from app.services.auth_service import authenticate
from app.services.users_service import user_register


router = APIRouter(tags=["auth"])
db_dependency = Annotated[AsyncSession, Depends(get_db)]
form_dependency = Annotated[Mapping[str, Any], Depends(read_form)]


@router.post("/login", response_model=AuthMessage)
async def login(db: db_dependency, form: form_dependency):
    return AuthMessage(message=await authenticate(form, db))


@router.post("/logout")
async def logout():
    sign_out()


@router.post("/register", response_model=FormState)
async def register(db: db_dependency, form: form_dependency):
    return await user_register(form, db)
