"""Unit tests for UserAuthServiceImpl (repository mocked)."""

import logging
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.user import LoginResult
from app.application.services.auth_service import UserAuthServiceImpl
from app.domain.entities.user import UserEntity
from app.domain.exceptions import RecordNotFoundError, UnauthorizedError
from app.infrastructure.security.jwt import decode_token
from app.shared.logging import create_logger

SECRET = "unit-test-secret"


def _entity(**overrides) -> UserEntity:
    values = dict(
        id=7,
        username="sam",
        email="sam@example.com",
        active=True,
        display_name="Sam",
        first_name="Samuel",
        last_name="Smith",
        password="stored-hash",
        salt="s4lt",
    )
    values.update(overrides)
    return UserEntity(**values)


def _service(repo, verifier=lambda plain, hashed: plain == "right") -> UserAuthServiceImpl:
    return UserAuthServiceImpl(
        create_logger("UserAuthServiceImpl"),
        repo,
        secret_key=SECRET,
        algorithm="HS256",
        access_token_ttl=timedelta(minutes=15),
        refresh_token_ttl=timedelta(days=7),
        password_verifier=verifier,
    )


async def test_login_returns_dto_and_tokens() -> None:
    repo = AsyncMock()
    repo.find_by_email.return_value = _entity()
    result = await _service(repo).login("sam@example.com", "right")

    assert isinstance(result, LoginResult)
    assert result.user.email == "sam@example.com"
    assert result.token.type == "Bearer"
    repo.find_by_email.assert_awaited_once_with("sam@example.com")

    access = decode_token(result.token.token, secret_key=SECRET, algorithm="HS256")
    assert access["email"] == "sam@example.com"
    assert access["displayName"] == "Sam"
    assert "password" not in access and "salt" not in access

    refresh = decode_token(result.token.refresh_token, secret_key=SECRET, algorithm="HS256")
    assert refresh["id"] == 7
    assert set(refresh) == {"id", "iat", "exp"}


async def test_token_lifetimes_follow_ttls() -> None:
    repo = AsyncMock()
    repo.find_by_email.return_value = _entity()
    result = await _service(repo).login("sam@example.com", "right")
    access = decode_token(result.token.token, secret_key=SECRET, algorithm="HS256")
    refresh = decode_token(result.token.refresh_token, secret_key=SECRET, algorithm="HS256")
    assert access["exp"] - access["iat"] == 15 * 60
    assert refresh["exp"] - refresh["iat"] == 7 * 24 * 3600


async def test_wrong_password_raises_unauthorized() -> None:
    repo = AsyncMock()
    repo.find_by_email.return_value = _entity()
    with pytest.raises(UnauthorizedError, match="Invalid password for user: sam@example.com"):
        await _service(repo).login("sam@example.com", "wrong")


async def test_password_checked_against_stored_hash() -> None:
    seen: list[tuple[str, str]] = []

    def verifier(plain: str, hashed: str) -> bool:
        seen.append((plain, hashed))
        return True

    repo = AsyncMock()
    repo.find_by_email.return_value = _entity(password="$2b$hash")
    await _service(repo, verifier).login("sam@example.com", "given")
    assert seen == [("given", "$2b$hash")]


async def test_not_found_propagates_unchanged() -> None:
    repo = AsyncMock()
    error = RecordNotFoundError("User with email x@example.com is not found")
    repo.find_by_email.side_effect = error
    with pytest.raises(RecordNotFoundError) as exc_info:
        await _service(repo).login("x@example.com", "right")
    assert exc_info.value is error


async def test_login_logs_email_not_password(caplog: pytest.LogCaptureFixture) -> None:
    repo = AsyncMock()
    repo.find_by_email.return_value = _entity()
    with caplog.at_level(logging.INFO, logger="app.UserAuthServiceImpl"):
        await _service(repo).login("sam@example.com", "right")
    assert "Login with email: sam@example.com" in caplog.text
    assert "right" not in caplog.text
    record = caplog.records[0]
    assert (record.className, record.methodName) == ("UserAuthServiceImpl", "login")


async def test_successive_logins_are_independent() -> None:
    repo = AsyncMock()
    repo.find_by_email.return_value = _entity()
    service = _service(repo)
    first = await service.login("sam@example.com", "right")
    second = await service.login("sam@example.com", "right")
    assert first.user == second.user
    for result in (first, second):
        assert decode_token(result.token.token, secret_key=SECRET, algorithm="HS256")["id"] == 7
