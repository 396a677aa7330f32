from typing import Any, Mapping
from fastapi import Request
from pydantic import BaseModel, ValidationError


class FormState(BaseModel):
    errors: dict[str, list[str]] | None = None
    message: str | None = None


class AuthMessage(BaseModel):
    message: str | None = None


_VALUE_ERROR_PREFIX = "Value error, "


def field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten a pydantic error into ``{form_field: [messages]}``.

    Keys are the field aliases, so they match the names posted by the browser
    form (``customerId``, ``confirmPassword``). Errors not bound to a field are
    skipped; the form only renders per-field messages.
    """
    out: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        if not loc:
            continue
        msg = err["msg"]
        if msg.startswith(_VALUE_ERROR_PREFIX):
            msg = msg[len(_VALUE_ERROR_PREFIX):]
        out.setdefault(str(loc[0]), []).append(msg)
    return out


def add_field_error(errors: dict[str, list[str]], field: str, message: str) -> dict[str, list[str]]:
    messages = errors.setdefault(field, [])
    if message not in messages:
        messages.append(message)
    return errors


async def read_form(request: Request) -> Mapping[str, Any]:
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
