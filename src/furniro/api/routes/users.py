from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response

from furniro.api.dependencies import get_store
from furniro.api.queries import find_document, insert_document, list_documents
from furniro.api.responses import json_response, server_error_response
from furniro.api.schemas import InsertResultDTO, NotFoundDTO
from furniro.db import MongoStore
from furniro.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "/addUser",
    summary="Store a user document",
    description="Inserts the posted JSON object into `users` as-is.",
    tags=["users"],
)
def add_user(
    store: Annotated[MongoStore, Depends(get_store)],
    user: Annotated[dict[str, Any] | None, Body()] = None,
) -> Response:
    try:
        result = insert_document(store.users, user or {})
        return json_response(InsertResultDTO.from_result(result))
    except Exception:
        logger.exception("Inserting user failed")
        return server_error_response()


@router.get("/allUsers", summary="List every user", tags=["users"])
def list_users(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        users = list_documents(store.users)
        return json_response(users)
    except Exception:
        logger.exception("Listing users failed")
        return server_error_response()


@router.get(
    "/user/{email}",
    summary="Find a user by email",
    description=(
        "Exact match on the `email` field. A missing user yields status 200 "
        "with an `error` marker instead of a 404."
    ),
    tags=["users"],
)
def get_user(
    email: str,
    store: Annotated[MongoStore, Depends(get_store)],
) -> Response:
    try:
        user = find_document(store.users, {"email": email})
        if user is None:
            logger.debug("User %s not found", email)
            return json_response(NotFoundDTO.for_entity("User"))
        return json_response(user)
    except Exception:
        logger.exception("Fetching user %s failed", email)
        return server_error_response()
