"""Response helpers shared by every router."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from furniro.config.settings import SERVER_ERROR_MESSAGE

_BSON_ENCODERS: dict[Any, Any] = {ObjectId: str}


def encode_documents(payload: Any) -> Any:
    """Turn raw documents (and DTOs) into JSON-ready values; ObjectIds become hex strings."""
    return jsonable_encoder(payload, custom_encoder=_BSON_ENCODERS)


def json_response(payload: Any) -> JSONResponse:
    return JSONResponse(content=encode_documents(payload))


def server_error_response() -> PlainTextResponse:
    """The single, detail-free answer for every internal failure."""
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=500)
