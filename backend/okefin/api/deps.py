from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, Header, Query
from sqlalchemy.orm import Session

from okefin.core.exceptions import ForbiddenError, InternalError, UnauthorizedError
from okefin.core.logger import setup_logger
from okefin.core.security import decode_access_token
from okefin.database.database import SessionLocal
from okefin.repositories import UserRepository, user_repository
from okefin.utils.parse import DEFAULT_LIMIT, DEFAULT_PAGE, parse_positive_int

logger = setup_logger("api.deps")


def get_db():
    with SessionLocal() as db:
        yield db


@dataclass
class CurrentUser:
    id: int
    email: Optional[str] = None


@dataclass
class PaginationParams:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


def get_pagination(page: Optional[str] = Query(None), limit: Optional[str] = Query(None)) -> PaginationParams:
    # Garbage, zero and negative values fall back to the defaults instead of failing the request
    return PaginationParams(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
    )


class JWTBearer:
    """Resolves the ``Authorization: Bearer <token>`` header into a CurrentUser."""

    prefix = "Bearer "

    def __call__(self, authorization: Optional[str] = Header(None)) -> CurrentUser:
        if not authorization:
            raise UnauthorizedError("Authorization header is required", message="Missing authorization header")
        if not authorization.startswith(self.prefix):
            raise UnauthorizedError("Token must start with 'Bearer '", message="Invalid token format")

        try:
            claims = decode_access_token(authorization[len(self.prefix):])
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected token: {str(e)}")
            raise UnauthorizedError("Token validation failed", message="Invalid or expired token")

        try:
            user_id = int(claims.get("id"))
        except (TypeError, ValueError):
            raise UnauthorizedError("Unable to extract token claims", message="Invalid token claims")
        return CurrentUser(id=user_id, email=claims.get("email"))


get_current_user = JWTBearer()


class AdminOnly:
    """Admin gate, applied after JWTBearer. Re-reads the user row on every request."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def __call__(
        self,
        current_user: CurrentUser = Depends(get_current_user),
        db: Session = Depends(get_db)
    ) -> CurrentUser:
        try:
            user = self.repository.get(db, current_user.id)
        except Exception as e:
            logger.error(f"Error fetching user {current_user.id}: {str(e)}", exc_info=True)
            raise InternalError(str(e), message="Failed to fetch user")
        if user is None:
            raise InternalError("user not found", message="Failed to fetch user")
        if not user.is_admin:
            raise ForbiddenError("Only admins can perform this action", message="Admin access required")
        return current_user


require_admin = AdminOnly(user_repository)
