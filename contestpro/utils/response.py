from typing import Any, Optional
from datetime import datetime, timedelta
from bson import ObjectId
from fastapi.responses import JSONResponse


def serialize_value(value: Any) -> Any:
    """Recursively convert BSON/datetime values into JSON-serializable ones"""
    if isinstance(value, ObjectId):
        return str(value)
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, timedelta):
        return str(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(item) for item in value]
    return value


def json_response(data: Any = None, status_code: int = 200) -> JSONResponse:
    """
    Send a document, a list of documents or a plain dict as JSON.

    Documents are returned as stored (``_id`` included), matching what
    existing clients read.
    """
    return JSONResponse(content=serialize_value(data), status_code=status_code)


def error_response(
    message: str = "Error",
    status_code: int = 400,
    field: str = "message"
) -> JSONResponse:
    """Error body of the form {field: message}"""
    return JSONResponse(content={field: message}, status_code=status_code)


def insert_result(result) -> dict:
    """Shape of a driver InsertOneResult as clients expect it"""
    return {
        "acknowledged": result.acknowledged,
        "insertedId": serialize_value(result.inserted_id)
    }


def update_result(result) -> dict:
    """Shape of a driver UpdateResult as clients expect it"""
    upserted_id: Optional[Any] = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": serialize_value(upserted_id),
        "upsertedCount": 1 if upserted_id is not None else 0
    }


def delete_result(result) -> dict:
    """Shape of a driver DeleteResult as clients expect it"""
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count
    }
