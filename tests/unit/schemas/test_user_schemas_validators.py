import pytest
from pydantic import ValidationError
from app.domain.users.schemas import UserRegisterDTO


test_user_payload = {
    "name": "John Derek",
    "email": "john@gmail.com",
}


def create_payload(**override):
    data = dict(test_user_payload)
    data.setdefault("password", "Str0ng!Password")
    data.setdefault("confirmPassword", "Str0ng!Password")
    data.update(override)
    return data


def test_register_payload_passes_validation():
    dto = UserRegisterDTO(**create_payload())
    assert dto.password.get_secret_value() == "Str0ng!Password"
    assert dto.confirm_password.get_secret_value() == "Str0ng!Password"


def test_name_and_email_are_trimmed():
    dto = UserRegisterDTO(**create_payload(name="  John Derek  ", email="  John@Gmail.com "))
    assert dto.name == "John Derek"
    assert dto.email == "john@gmail.com"


@pytest.mark.parametrize("name", ["Joe", "     ", "  Jo e ", None])
def test_short_name_raises_validation_error(name):
    with pytest.raises(ValidationError) as e:
        UserRegisterDTO(**create_payload(name=name))
    assert "Name must be at least 6 characters." in str(e.value)


@pytest.mark.parametrize("email", ["", "   ", None])
def test_missing_email_raises_validation_error(email):
    with pytest.raises(ValidationError) as e:
        UserRegisterDTO(**create_payload(email=email))
    assert "Please enter a valid email address." in str(e.value)


def test_malformed_email_raises_validation_error():
    with pytest.raises(ValidationError):
        UserRegisterDTO(**create_payload(email="john.gmail.com"))


def test_short_password_raises_validation_error():
    with pytest.raises(ValidationError) as e:
        UserRegisterDTO(**create_payload(password="12345"))
    assert "Password must be at least 6 characters." in str(e.value)


def test_short_confirm_password_raises_validation_error():
    with pytest.raises(ValidationError) as e:
        UserRegisterDTO(**create_payload(confirmPassword="12345"))
    assert "Confirm password must be at least 6 characters." in str(e.value)


def test_mismatched_passwords_pass_schema_validation():
    dto = UserRegisterDTO(**create_payload(confirmPassword="Other!Pass1"))
    assert dto.password.get_secret_value() != dto.confirm_password.get_secret_value()
