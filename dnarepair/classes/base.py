from mongoengine import (
    Document as _Document,
    DateTimeField as _DateTimeField,
)

from dnarepair.common import utcnow


class TimestampedDocument(_Document):
    meta = {"abstract": True}

    createdAt = _DateTimeField(default=utcnow)
    updatedAt = _DateTimeField(default=utcnow)

    def save(self, *args, **kwargs):
        self.updatedAt = utcnow()
        return super().save(*args, **kwargs)
