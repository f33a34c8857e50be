from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response

from furniro.api.dependencies import get_store
from furniro.api.queries import (
    count_grouped_by,
    insert_document,
    list_documents,
    set_document_field,
    sum_grouped_by,
)
from furniro.api.responses import json_response, server_error_response
from furniro.api.schemas import InsertResultDTO, UpdateResultDTO
from furniro.config.settings import (
    ORDER_STATUS_CANCELLED,
    ORDER_STATUS_COMPLETED,
    ORDER_STATUS_PENDING,
)
from furniro.db import MongoStore
from furniro.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/addOrder", summary="Store an order document", tags=["orders"])
def add_order(
    store: Annotated[MongoStore, Depends(get_store)],
    order: Annotated[dict[str, Any] | None, Body()] = None,
) -> Response:
    try:
        result = insert_document(store.orders, order or {})
        return json_response(InsertResultDTO.from_result(result))
    except Exception:
        logger.exception("Inserting order failed")
        return server_error_response()


@router.get(
    "/orders/{email}",
    summary="List the orders placed with an email",
    description="Matches the order's `primaryEmail` field exactly.",
    tags=["orders"],
)
def list_orders_for_email(
    email: str,
    store: Annotated[MongoStore, Depends(get_store)],
) -> Response:
    try:
        orders = list_documents(store.orders, {"primaryEmail": email})
        return json_response(orders)
    except Exception:
        logger.exception("Listing orders for %s failed", email)
        return server_error_response()


@router.get("/allOrders", summary="List every order", tags=["orders"])
def list_orders(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        orders = list_documents(store.orders)
        return json_response(orders)
    except Exception:
        logger.exception("Listing orders failed")
        return server_error_response()


def _list_orders_with_status(store: MongoStore, status: str) -> Response:
    try:
        orders = list_documents(store.orders, {"status": status})
        return json_response(orders)
    except Exception:
        logger.exception("Listing %s orders failed", status)
        return server_error_response()


@router.get("/pendingOrders", summary="List pending orders", tags=["orders"])
def list_pending_orders(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    return _list_orders_with_status(store, ORDER_STATUS_PENDING)


@router.get("/completedOrders", summary="List completed orders", tags=["orders"])
def list_completed_orders(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    return _list_orders_with_status(store, ORDER_STATUS_COMPLETED)


@router.get("/cancelledOrders", summary="List cancelled orders", tags=["orders"])
def list_cancelled_orders(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    return _list_orders_with_status(store, ORDER_STATUS_CANCELLED)


@router.put(
    "/updateOrder/{order_id}",
    summary="Change an order's status",
    description="Sets `status` from the request body; no other field is touched.",
    tags=["orders"],
)
def update_order_status(
    order_id: str,
    store: Annotated[MongoStore, Depends(get_store)],
    payload: Annotated[dict[str, Any] | None, Body()] = None,
) -> Response:
    try:
        result = set_document_field(store.orders, order_id, "status", (payload or {})["status"])
        return json_response(UpdateResultDTO.from_result(result))
    except Exception:
        logger.exception("Updating order %s failed", order_id)
        return server_error_response()


@router.get(
    "/orderStats",
    summary="Count orders per status",
    description="Returns `[{\"_id\": status, \"count\": n}]`.",
    tags=["orders", "stats"],
)
def order_stats(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        stats = count_grouped_by(store.orders, "status")
        return json_response(stats)
    except Exception:
        logger.exception("Aggregating order counts failed")
        return server_error_response()


@router.get(
    "/orderAmountStats",
    summary="Sum order totals per status",
    description="Returns `[{\"_id\": status, \"totalAmount\": sum of totalPrice}]`.",
    tags=["orders", "stats"],
)
def order_amount_stats(store: Annotated[MongoStore, Depends(get_store)]) -> Response:
    try:
        stats = sum_grouped_by(store.orders, "status", "totalPrice")
        return json_response(stats)
    except Exception:
        logger.exception("Aggregating order amounts failed")
        return server_error_response()
