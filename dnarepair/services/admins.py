from functools import lru_cache

import bcrypt
from bson import ObjectId
from mongoengine.errors import NotUniqueError, ValidationError

from dnarepair.classes.admin import Admin
from dnarepair.common import logger
from dnarepair.errors import Forbidden, InvalidRequest, Unauthorized

MIN_PASSWORD_LENGTH = 6


@lru_cache()
def _dummy_hash():
    return bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt(rounds=4))


def count_admins():
    return Admin.objects.count()


def get_admin(admin_id):
    if not admin_id or not ObjectId.is_valid(str(admin_id)):
        return None
    return Admin.objects(id=admin_id).first()


def find_by_username(username):
    return Admin.objects(username=username).first()


def create_admin(username, password, email=None, role="admin", rounds=12):
    if not username or not password:
        raise InvalidRequest("Username and password are required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidRequest(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    admin = Admin(
        username=username.strip(),
        email=email.strip().lower() if email else None,
        role=role,
    )
    admin.set_password(password, rounds=rounds)
    try:
        admin.save()
    except NotUniqueError:
        raise InvalidRequest(f"Username {admin.username!r} is already taken")
    except ValidationError as e:
        raise InvalidRequest("Invalid admin data", str(e))

    logger.info(f"Created {admin.role} {admin.username!r}")
    return admin


def setup_first_admin(username, password, email=None, rounds=12):
    """
    Creates the first administrator as a super_admin. Refused once any admin exists.
    """
    if count_admins() > 0:
        logger.warning("Refused admin setup - an admin already exists")
        raise Forbidden("Admin already exists")
    return create_admin(username, password, email=email, role="super_admin", rounds=rounds)


def authenticate(username, password):
    username = username.strip()
    admin = find_by_username(username)
    if admin is None:
        # Same hashing cost as a known username with a wrong password.
        bcrypt.checkpw(password.encode("utf-8"), _dummy_hash())
        logger.warning(f"Login failed for unknown user {username!r}")
        raise Unauthorized("Invalid credentials")

    if not admin.check_password(password):
        logger.warning(f"Login failed for {username!r} - wrong password")
        raise Unauthorized("Invalid credentials")

    logger.info(f"{username!r} logged in")
    return admin


def change_password(admin, current_password, new_password, rounds=12):
    if not current_password or not new_password:
        raise InvalidRequest("Current and new password are required")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise InvalidRequest(f"New password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not admin.check_password(current_password):
        raise Unauthorized("Current password is incorrect")

    admin.set_password(new_password, rounds=rounds)
    admin.save()
    logger.info(f"Password changed for {admin.username!r}")
    return admin
