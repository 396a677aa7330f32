from pydantic import BaseModel, ConfigDict, EmailStr, SecretStr, Field, field_validator
from typing import Literal


class SignInDTO(BaseModel):
    email: EmailStr
    password: SecretStr = Field(min_length=6)

    @field_validator("email")
    def _normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class SessionPayload(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    sub: str
    iat: int
    nbf: int
    exp: int
    jti: str | None = None
    typ: Literal["session"] | None = None
    iss: str | None = None
    aud: str | list[str] | None = None
