from mongoengine import (
    EmbeddedDocument as _EmbeddedDocument,
    EmbeddedDocumentField as _EmbeddedDocumentField,
    EmbeddedDocumentListField as _EmbeddedDocumentListField,
    ObjectIdField as _ObjectIdField,
    StringField as _StringField,
)

from dnarepair.classes.base import TimestampedDocument

PATHWAYS = ("HR", "NHEJ", "Both")


class TargetModification(_EmbeddedDocument):
    position = _StringField()
    type = _StringField()


class Interaction(_EmbeddedDocument):
    # Not checked against the protein collection.
    targetId = _ObjectIdField(required=True)
    type = _StringField()
    description = _StringField()
    targetModification = _EmbeddedDocumentField(TargetModification)


class Protein(TimestampedDocument):
    meta = {
        "collection": "proteins",
        "indexes": [
            "pathway",
        ],
    }

    name = _StringField(required=True, min_length=1)
    uniprotId = _StringField(required=True, min_length=1, unique=True)
    pathway = _StringField(required=True, choices=PATHWAYS)
    description = _StringField(required=True, min_length=1)
    function = _StringField(required=True, min_length=1)
    interactions = _EmbeddedDocumentListField(Interaction, default=list)
