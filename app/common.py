from bson import ObjectId
from fastapi.encoders import jsonable_encoder

from app.config import get_settings

settings = get_settings()


def serialize(doc):
    """
    JSON-ready dict of a stored document; `_id` and other ObjectIds become strings.
    """
    return jsonable_encoder(doc.to_mongo().to_dict(), custom_encoder={ObjectId: str})


def serialize_all(docs):
    return [serialize(doc) for doc in docs]
