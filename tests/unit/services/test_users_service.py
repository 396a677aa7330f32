import pytest
from sqlalchemy.exc import IntegrityError
from app.core.navigation import Redirect
from app.core.security import verify_password
from app.services import users_service
from tests.helper import write_db, executed_params, executed_sql


def register_form(**override):
    data = {
        "name": "Jane Doe Smith",
        "email": "Jane@Gmail.com",
        "password": "secret-pass",
        "confirmPassword": "secret-pass",
    }
    data.update(override)
    return data


@pytest.mark.asyncio
async def test_user_register_inserts_hashed_password_and_redirects_to_login(mocker, revalidate_stub):
    db = write_db(mocker)

    with pytest.raises(Redirect) as e:
        await users_service.user_register(register_form(), db)

    assert e.value.url == "/login"
    params = executed_params(db)
    assert executed_sql(db).startswith("INSERT INTO users")
    assert params["name"] == "Jane Doe Smith"
    assert params["email"] == "jane@gmail.com"
    assert params["password"] != "secret-pass"
    assert verify_password("secret-pass", params["password"]) is True
    db.commit.assert_awaited_once()
    assert revalidate_stub == ["/login"]


@pytest.mark.asyncio
async def test_user_register_password_mismatch_returns_confirm_error(mocker, revalidate_stub):
    db = write_db(mocker)

    state = await users_service.user_register(register_form(confirmPassword="other-pass"), db)

    assert state.errors == {"confirmPassword": ["Passwords do not match."]}
    assert state.message == "Passwords do not match. Failed to Create User."
    db.execute.assert_not_awaited()
    db.scalar.assert_not_awaited()
    assert revalidate_stub == []


@pytest.mark.asyncio
async def test_user_register_mismatch_reported_even_when_password_too_short(mocker):
    db = write_db(mocker)

    state = await users_service.user_register(register_form(password="abc", confirmPassword="abcdefg"), db)

    assert state.errors["password"] == ["Password must be at least 6 characters."]
    assert "Passwords do not match." in state.errors["confirmPassword"]
    assert state.message == "Missing Fields. Failed to Create User."
    db.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_user_register_validation_errors(mocker):
    db = write_db(mocker)

    state = await users_service.user_register(
        {"name": "  Jo  ", "email": "   ", "password": "", "confirmPassword": ""},
        db
    )

    assert state.errors == {
        "name": ["Name must be at least 6 characters."],
        "email": ["Please enter a valid email address."],
        "password": ["Password must be at least 6 characters."],
        "confirmPassword": ["Confirm password must be at least 6 characters."],
    }
    db.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_user_register_existing_email_is_rejected(mocker):
    db = write_db(mocker)
    db.scalar.return_value = True

    state = await users_service.user_register(register_form(), db)

    assert state.errors == {"email": ["Email already exists."]}
    assert state.message == "Email already in use."
    db.scalar.assert_awaited_once()
    db.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_user_register_db_failure_returns_message(mocker, revalidate_stub):
    db = write_db(mocker, fail_with=IntegrityError("INSERT", {}, Exception("duplicate key")))

    state = await users_service.user_register(register_form(), db)

    assert state.message == "Database Error: Failed to Create User."
    assert state.errors is None
    db.rollback.assert_awaited_once()
    assert revalidate_stub == []
