"""Identity business logic layer."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends

from app.core.database import UnitOfWork, get_unit_of_work
from app.core.security import create_access_token, decode_token, hash_password, oauth2_scheme, verify_password
from app.modules.identity.models import User
from app.modules.identity.repository import IdentityRepository
from app.modules.identity.schemas import AccessToken, LoginRequest, UserCreate
from app.shared.exceptions import ConflictException, UnauthorizedException
from app.shared.utils import utc_now

logger = logging.getLogger(__name__)


class IdentityService:
    """Identity domain service."""

    def __init__(self, repository: IdentityRepository, uow: UnitOfWork) -> None:
        self.repository = repository
        self.uow = uow

    async def register(self, payload: UserCreate) -> User:
        """Register new member."""
        existing_user = await self.repository.get_user_by_username(payload.username)
        if existing_user is not None:
            raise ConflictException("Username is already taken")

        user = await self.repository.create_user(
            username=payload.username,
            password_hash=hash_password(payload.password),
            gender=payload.gender,
            known_as=payload.known_as,
            date_of_birth=payload.date_of_birth,
            city=payload.city,
            country=payload.country,
        )
        await self.uow.commit()
        logger.info("Registered member %s", user.id)
        return user

    async def login(self, payload: LoginRequest) -> AccessToken:
        """Authenticate member and issue access token."""
        user = await self.repository.get_user_by_username(payload.username.strip().lower())
        if user is None or not verify_password(payload.password, user.password_hash):
            raise UnauthorizedException("Invalid credentials")

        return AccessToken(access_token=create_access_token(subject=str(user.id)))

    async def get_user_from_access_token(self, token: str) -> User:
        """Resolve member from access token and record activity."""
        payload = decode_token(token)
        if payload.get("type") != "access":
            raise UnauthorizedException("Invalid access token")

        subject = payload.get("sub")
        if not subject:
            raise UnauthorizedException("Token subject is missing")

        try:
            user_id = UUID(subject)
        except ValueError as exc:
            raise UnauthorizedException("Invalid access token") from exc

        user = await self.repository.get_user_by_id(user_id)
        if user is None:
            raise UnauthorizedException("User not found")

        await self.repository.touch_last_active(user, utc_now())
        await self.uow.commit()
        return user


async def get_identity_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> IdentityService:
    """Dependency to provide identity service."""
    return IdentityService(IdentityRepository(uow), uow)


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    service: IdentityService = Depends(get_identity_service),
) -> User:
    """Resolve currently authenticated member from bearer token."""
    return await service.get_user_from_access_token(token)
