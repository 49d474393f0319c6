import bcrypt
from mongoengine import (
    StringField as _StringField,
)

from dnarepair.classes.base import TimestampedDocument

ROLES = ("admin", "super_admin")


class Admin(TimestampedDocument):
    meta = {
        "collection": "admins",
    }

    username = _StringField(required=True, unique=True, min_length=3, max_length=30)
    # bcrypt hash, never the plain password
    password = _StringField(required=True)
    email = _StringField()
    role = _StringField(choices=ROLES, default="admin")

    def set_password(self, raw_password, rounds=12):
        salt = bcrypt.gensalt(rounds=rounds)
        self.password = bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")

    def check_password(self, raw_password):
        if not self.password:
            return False
        return bcrypt.checkpw(raw_password.encode("utf-8"), self.password.encode("utf-8"))

    def public(self):
        return {
            "id": str(self.id),
            "username": self.username,
            "role": self.role,
            "email": self.email,
        }
