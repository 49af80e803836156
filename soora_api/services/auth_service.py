# soora_api/services/auth_service.py
"""
Caller identity and the authorization policy.

Tokens are issued elsewhere (the auth service); this module only verifies
them. A verified token becomes a ``CurrentUser`` which is passed into the
handlers explicitly, and the two policy checks below are the only places
that compare roles or owners.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from soora_api.config.settings import get_settings
from soora_api.database.session import get_db
from soora_api.models.enums import UserRole
from soora_api.models.user_model import User

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_AUTH_HEADERS = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def create_access_token(user_id: str, role: UserRole, expires_minutes: Optional[int] = None) -> str:
    settings = get_settings()
    minutes = expires_minutes if expires_minutes is not None else settings.jwt_expires_min
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "role": role.value if isinstance(role, UserRole) else str(role),
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired", headers=_AUTH_HEADERS)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token", headers=_AUTH_HEADERS)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> CurrentUser:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Authentication required", headers=_AUTH_HEADERS)

    payload = decode_access_token(credentials.credentials)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token", headers=_AUTH_HEADERS)

    user = db.get(User, user_id)
    if not user or not user.is_active:
        logger.info("Rejected token for unknown or inactive user %s", user_id)
        raise HTTPException(status_code=401, detail="User not found or inactive", headers=_AUTH_HEADERS)

    # role is read from the database so a demoted admin loses access at once
    return CurrentUser(id=user.id, email=user.email, role=user.role)


def require_admin(current: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not current.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return current


def ensure_owner(owner_id: Optional[str], current: CurrentUser, detail: str) -> None:
    """404 (not 403) so that non-owners cannot tell whether the row exists."""
    if owner_id is None or owner_id != current.id:
        raise HTTPException(status_code=404, detail=detail)
