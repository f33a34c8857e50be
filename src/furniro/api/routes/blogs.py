from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response

from furniro.api.dependencies import get_store
from furniro.api.queries import (
    count_grouped_by,
    delete_document_by_id,
    find_document_by_id,
    insert_document,
    list_documents,
)
from furniro.api.responses import json_response, server_error_response
from furniro.api.schemas import DeleteResultDTO, InsertResultDTO, NotFoundDTO
from furniro.db import MongoStore
from furniro.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/addBlog", summary="Store a blog post", tags=["blogs"])
def add_blog(
    store: Annotated[MongoStore, Depends(get_store)],
    blog: Annotated[dict[str, Any] | None, Body()] = None,
) -> Response:
    try:
        result = insert_document(store.blogs, blog or {})
        return json_response(InsertResultDTO.from_result(result))
    except Exception:
        logger.exception("Inserting blog failed")
        return server_error_response()


@router.get("/allBlogs", summary="List every blog post", tags=["blogs"])
def list_blogs(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        blogs = list_documents(store.blogs)
        return json_response(blogs)
    except Exception:
        logger.exception("Listing blogs failed")
        return server_error_response()


@router.get("/blog/{blog_id}", summary="Find a blog post by id", tags=["blogs"])
def get_blog(
    blog_id: str,
    store: Annotated[MongoStore, Depends(get_store)],
) -> Response:
    try:
        blog = find_document_by_id(store.blogs, blog_id)
        if blog is None:
            return json_response(NotFoundDTO.for_entity("Blog"))
        return json_response(blog)
    except Exception:
        logger.exception("Fetching blog %s failed", blog_id)
        return server_error_response()


@router.delete("/deleteBlog/{blog_id}", summary="Delete a blog post by id", tags=["blogs"])
def delete_blog(
    blog_id: str,
    store: Annotated[MongoStore, Depends(get_store)],
) -> Response:
    try:
        result = delete_document_by_id(store.blogs, blog_id)
        return json_response(DeleteResultDTO.from_result(result))
    except Exception:
        logger.exception("Deleting blog %s failed", blog_id)
        return server_error_response()


@router.get(
    "/blogCategoryCount",
    summary="Count blog posts per category",
    description="Returns `[{\"_id\": category, \"count\": n}]`.",
    tags=["blogs", "stats"],
)
def blog_category_count(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        stats = count_grouped_by(store.blogs, "category")
        return json_response(stats)
    except Exception:
        logger.exception("Aggregating blog categories failed")
        return server_error_response()
