from pydantic import BaseModel, EmailStr, Field, field_validator, ConfigDict, SecretStr
from app.core.utils.validators import check_min_length, none_to_empty, strip_text


NAME_MIN_LENGTH = 6
PASSWORD_MIN_LENGTH = 6


class UserRegisterDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: EmailStr
    password: SecretStr
    confirm_password: SecretStr = Field(alias="confirmPassword")

    @field_validator("name", mode="before")
    def _strip_name(cls, v):
        return strip_text(none_to_empty(v))

    @field_validator("password", "confirm_password", mode="before")
    def _none_to_empty(cls, v):
        return none_to_empty(v)

    @field_validator("name")
    def _check_name(cls, v: str) -> str:
        check_min_length(v, NAME_MIN_LENGTH, f"Name must be at least {NAME_MIN_LENGTH} characters.")
        return v

    @field_validator("email", mode="before")
    def _check_email_present(cls, v):
        v = strip_text(none_to_empty(v))
        if not v:
            raise ValueError("Please enter a valid email address.")
        return v

    @field_validator("email")
    def _normalize_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("password")
    def _check_password(cls, v: SecretStr) -> SecretStr:
        check_min_length(v, PASSWORD_MIN_LENGTH, f"Password must be at least {PASSWORD_MIN_LENGTH} characters.")
        return v

    @field_validator("confirm_password")
    def _check_confirm_password(cls, v: SecretStr) -> SecretStr:
        check_min_length(
            v,
            PASSWORD_MIN_LENGTH,
            f"Confirm password must be at least {PASSWORD_MIN_LENGTH} characters."
        )
        return v

