from mongoengine import (
    BooleanField as _BooleanField,
    DateTimeField as _DateTimeField,
    ListField as _ListField,
    StringField as _StringField,
)

from dnarepair.classes.base import TimestampedDocument
from dnarepair.common import utcnow

CATEGORIES = ("DNA-Repair", "Research", "General")


class Blog(TimestampedDocument):
    meta = {
        "collection": "blogs",
        "indexes": [
            "category",
            "-publishDate",
        ],
    }

    title = _StringField(required=True, min_length=1)
    content = _StringField(required=True, min_length=1)
    excerpt = _StringField(required=True, min_length=1)
    author = _StringField(required=True, min_length=1)
    publishDate = _DateTimeField(default=utcnow)
    tags = _ListField(_StringField(), default=list)
    category = _StringField(required=True, choices=CATEGORIES, default="General")
    isAdminOnly = _BooleanField(default=False)
