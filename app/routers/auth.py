from typing import Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from app.common import settings
from app.rate_limit import SlidingWindowRateLimiter
from app.security import CurrentUser, create_access_token, get_current_admin, get_current_user
from dnarepair.classes.admin import Admin
from dnarepair.errors import InvalidRequest
from dnarepair.services import admins

router = APIRouter()

login_limiter = SlidingWindowRateLimiter(
    max_attempts=settings.login_max_attempts,
    window=settings.login_window_seconds,
    message="Too many login attempts, please try again later.",
)


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class SetupRequest(LoginRequest):
    email: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None


def limit_login(request: Request):
    client = request.client.host if request.client else "unknown"
    login_limiter.hit(client)


def _session(admin, message):
    return {
        "message": message,
        "token": create_access_token(admin, settings),
        "user": admin.public(),
    }


@router.post("/login", summary="Admin login", dependencies=[Depends(limit_login)])
def login(body: LoginRequest):
    """
    Exchanges a username and password for a bearer token valid for 24 hours.
    At most five attempts are accepted per client address in any 15 minute window.
    """
    if not body.username or not body.password:
        raise InvalidRequest("Username and password are required")
    admin = admins.authenticate(body.username, body.password)
    return _session(admin, "Login successful")


@router.get("/verify", summary="Verify token")
def verify(admin: Admin = Depends(get_current_admin)):
    return {"user": admin.public()}


@router.post("/logout", summary="Logout")
def logout(_: CurrentUser = Depends(get_current_user)):
    """
    Tokens are stateless; the client discards its copy.
    """
    return {"message": "Logged out successfully"}


@router.post("/setup", status_code=201, summary="Create the first admin")
def setup(body: SetupRequest):
    """
    Creates the initial super_admin. Only allowed while no admin exists.
    """
    admin = admins.setup_first_admin(
        body.username, body.password, email=body.email, rounds=settings.bcrypt_rounds
    )
    return _session(admin, "Admin created successfully")


@router.post("/change-password", summary="Change password")
def change_password(body: ChangePasswordRequest, admin: Admin = Depends(get_current_admin)):
    admins.change_password(
        admin, body.currentPassword, body.newPassword, rounds=settings.bcrypt_rounds
    )
    return _session(admin, "Password changed successfully")
