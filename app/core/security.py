# app/core/security.py

"""
Security utilities and dependencies.

- Password hashing and verification (bcrypt via passlib).
- JWT creation and verification (python-jose).
- Bearer token extraction producing the caller's identity.
- Role-based authorization: one table maps each protected operation to the
  set of roles allowed to perform it.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, FrozenSet, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.domains.employee.models import Role
from app.domains.employee.schemas import CurrentIdentity

logger = logging.getLogger(__name__)


# --- Password hashing ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# --- Bearer scheme ---
# auto_error=False so a missing header goes through UnauthorizedError and the
# common error body instead of FastAPI's default 403.
bearer_scheme = HTTPBearer(auto_error=False)


# --- JWT ---
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Signs `data` into an access token that expires after `expires_delta`
    (defaults to ACCESS_TOKEN_EXPIRE_MINUTES).
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> CurrentIdentity:
    """
    Verifies signature and expiry and returns the identity stored in the token.
    Raises UnauthorizedError for anything that is not a valid token.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
        return CurrentIdentity(
            id=payload.get("sub"),
            name=payload.get("name"),
            email=payload.get("email"),
            role=payload.get("role"),
        )
    except (JWTError, PydanticValidationError) as e:
        logger.debug("Rejected access token: %s", e)
        raise UnauthorizedError("Invalid or expired token")


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentIdentity:
    """
    Extracts the bearer token from the request and returns the caller's identity.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication token is missing")
    return decode_access_token(credentials.credentials)


# =============================================================================
# Role-based authorization
# =============================================================================
ELEVATED_ROLES: FrozenSet[Role] = frozenset({Role.HR, Role.ADMIN})

# operation -> roles allowed to perform it
ROLE_PERMISSIONS: Dict[str, FrozenSet[Role]] = {
    "employee:create": ELEVATED_ROLES,
    "employee:delete": ELEVATED_ROLES,
    "department:create": ELEVATED_ROLES,
    "department:delete": ELEVATED_ROLES,
}


def is_allowed(operation: str, role: Role) -> bool:
    return role in ROLE_PERMISSIONS[operation]


def require_permission(operation: str) -> Callable[..., CurrentIdentity]:
    """
    Builds a dependency that authenticates the caller and checks that their role
    may perform `operation`. Raises ForbiddenError otherwise.
    """
    if operation not in ROLE_PERMISSIONS:
        raise KeyError(f"Unknown operation: {operation}")
    resource, _, action = operation.partition(":")
    article = "an" if resource[:1] in "aeiou" else "a"

    async def _check(identity: CurrentIdentity = Depends(get_current_identity)) -> CurrentIdentity:
        if not is_allowed(operation, identity.role):
            logger.info("Employee %s (%s) denied %s", identity.id, identity.role.value, operation)
            raise ForbiddenError(f"You are not authorized to {action} {article} {resource}")
        return identity

    return _check
