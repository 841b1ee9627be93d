from bson import ObjectId
from bson.errors import InvalidId
from contestpro.core.exceptions import InvalidIdError


def to_object_id(value: str) -> ObjectId:
    """Parse a path id, rejecting malformed values"""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdError()
