from mongoengine import (
    ObjectIdField as _ObjectIdField,
    StringField as _StringField,
)

from dnarepair.classes.base import TimestampedDocument


class ProteinModification(TimestampedDocument):
    meta = {
        "collection": "proteinmodifications",
        "indexes": [
            {"fields": ["proteinId", "position"], "unique": True},
        ],
    }

    proteinId = _ObjectIdField(required=True)
    type = _StringField(required=True, min_length=1)  # e.g. phosphorylation, ubiquitination
    position = _StringField(required=True, min_length=1)  # residue, e.g. S988
    description = _StringField()
    effect = _StringField()
