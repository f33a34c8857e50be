from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from furniro.api.dependencies import get_store
from furniro.api.queries import count_documents_per_collection
from furniro.api.responses import json_response, server_error_response
from furniro.api.schemas import DocumentCountDTO
from furniro.db import MongoStore
from furniro.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get(
    "/documentCount",
    summary="Count documents in every storefront collection",
    tags=["stats"],
)
def document_count(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        counts = count_documents_per_collection(store)
        return json_response(DocumentCountDTO(**counts))
    except Exception:
        logger.exception("Counting documents failed")
        return server_error_response()
