"""
Token issuing and the authentication dependencies used by the routers.
"""
from datetime import timedelta
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from app.config import Settings, get_settings
from dnarepair.classes.admin import ROLES, Admin
from dnarepair.common import logger, utcnow
from dnarepair.errors import Forbidden, Unauthorized
from dnarepair.services import admins

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    id: str
    username: str
    role: str

    @property
    def is_admin(self):
        return self.role in ROLES


def create_access_token(admin, settings: Settings = None) -> str:
    settings = settings or get_settings()
    issued = utcnow()
    payload = {
        "id": str(admin.id),
        "username": admin.username,
        "role": admin.role,
        "iat": issued,
        "exp": issued + timedelta(hours=settings.jwt_expire_hours),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings = None) -> dict:
    settings = settings or get_settings()
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Admin:
    if credentials is None:
        raise Unauthorized("No token, authorization denied")

    try:
        payload = decode_access_token(credentials.credentials, settings)
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected token: {e}")
        raise Unauthorized("Token is not valid")

    # The admin may have been removed since the token was issued.
    admin = admins.get_admin(payload.get("id"))
    if admin is None:
        raise Unauthorized("Token is not valid")
    return admin


def _as_user(admin) -> CurrentUser:
    return CurrentUser(id=str(admin.id), username=admin.username, role=admin.role)


def get_current_user(admin: Admin = Depends(get_current_admin)) -> CurrentUser:
    return _as_user(admin)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Optional[CurrentUser]:
    """
    Like get_current_user, but anonymous callers and bad tokens yield None instead of a 401.
    """
    if credentials is None:
        return None
    try:
        return _as_user(get_current_admin(credentials, settings))
    except Unauthorized:
        return None


def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if user.role not in ROLES:
        raise Forbidden("Admin access required")
    return user
