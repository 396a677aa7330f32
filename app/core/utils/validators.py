from typing import Any
from pydantic import SecretStr


def blank_to_zero(v: Any) -> Any:
    """Coerce a missing or blank numeric form field to ``0`` so range checks report it."""
    if v is None:
        return 0
    if isinstance(v, str) and not v.strip():
        return 0
    return v


def strip_text(v: Any) -> Any:
    return v.strip() if isinstance(v, str) else v


def none_to_empty(v: Any) -> Any:
    return "" if v is None else v


def check_min_length(value: str | SecretStr, min_length: int, message: str) -> None:
    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    if len(value) < min_length:
        raise ValueError(message)


def passwords_match(password: Any, password_confirm: Any) -> bool:
    if isinstance(password, SecretStr):
        password = password.get_secret_value()
    if isinstance(password_confirm, SecretStr):
        password_confirm = password_confirm.get_secret_value()
    return password == password_confirm
