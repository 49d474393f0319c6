from mongoengine import (
    EmbeddedDocument as _EmbeddedDocument,
    EmbeddedDocumentField as _EmbeddedDocumentField,
    FloatField as _FloatField,
    StringField as _StringField,
)

from dnarepair.classes.base import TimestampedDocument

PATHWAYS = ("HR", "NHEJ")


class Position(_EmbeddedDocument):
    x = _FloatField(required=True, default=0)
    y = _FloatField(required=True, default=0)

    def as_dict(self):
        return {"x": self.x, "y": self.y}


class ProteinPosition(TimestampedDocument):
    meta = {
        "collection": "proteinpositions",
        "indexes": [
            "pathway",
        ],
    }

    proteinId = _StringField(required=True)
    pathway = _StringField(required=True, choices=PATHWAYS, unique_with="proteinId")
    position = _EmbeddedDocumentField(Position, default=Position)
