"""User authentication service: verify credentials and mint a token pair."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import timedelta

from app.application.dtos.user import LoginResult, TokenPair, UserDTO
from app.application.interfaces.repositories import IUserAuthRepository
from app.domain.exceptions import UnauthorizedError
from app.infrastructure.security.jwt import create_token
from app.infrastructure.security.password import verify_password
from app.shared.logging import ContextLogger


class UserAuthServiceImpl:
    """Login use case.

    Stored state is never mutated: repeated logins with the same credentials
    simply mint new, independently valid token pairs.
    """

    def __init__(
        self,
        logger: ContextLogger,
        user_repo: IUserAuthRepository,
        *,
        secret_key: str,
        algorithm: str,
        access_token_ttl: timedelta,
        refresh_token_ttl: timedelta,
        password_verifier: Callable[[str, str], bool] = verify_password,
    ) -> None:
        self._logger = logger
        self._user_repo = user_repo
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_token_ttl = access_token_ttl
        self._refresh_token_ttl = refresh_token_ttl
        self._verify_password = password_verifier

    async def login(self, email: str, password: str) -> LoginResult:
        """Verify email/password and return the user projection with a token pair.

        Raises:
            RecordNotFoundError: No record for email (from the repository).
            UnauthorizedError: Password does not match the stored hash.
        """
        log = self._logger.for_method("login")
        log.info("Login with email: %s", email)

        user = await self._user_repo.find_by_email(email)
        user_dto = UserDTO.from_entity(user)

        # bcrypt is CPU-bound; keep it off the event loop.
        matches = await asyncio.to_thread(self._verify_password, password, user.password)
        if not matches:
            raise UnauthorizedError(f"Invalid password for user: {email}")

        token = self._sign(user_dto.to_claims(), self._access_token_ttl)
        refresh_token = self._sign({"id": user_dto.id}, self._refresh_token_ttl)

        return LoginResult(
            user=user_dto,
            token=TokenPair(token=token, refresh_token=refresh_token),
        )

    def _sign(self, claims: dict, ttl: timedelta) -> str:
        return create_token(
            claims,
            ttl,
            secret_key=self._secret_key,
            algorithm=self._algorithm,
        )
