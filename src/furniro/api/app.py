from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from furniro.api.responses import server_error_response
from furniro.api.routes import blogs, orders, products, reviews, stats, users
from furniro.api.schemas import HealthDTO
from furniro.config.settings import CORS_ORIGINS, WELCOME_MESSAGE
from furniro.db import StoreConnectionError, get_connection_cache
from furniro.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect lazily on first request; close the cached client on shutdown."""
    yield
    get_connection_cache().reset()
    logger.info("MongoDB client closed.")


app = FastAPI(
    title="Furniro API",
    version="1.0.0",
    description=(
        "Furniro exposes the storefront's MongoDB collections (users, products, "
        "orders, blogs and reviews) as plain CRUD and aggregation endpoints."
    ),
    lifespan=lifespan,
)

app.include_router(users.router)
app.include_router(products.router)
app.include_router(orders.router)
app.include_router(blogs.router)
app.include_router(reviews.router)
app.include_router(stats.router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreConnectionError)
async def store_connection_error_handler(
    request: Request, exc: StoreConnectionError
) -> PlainTextResponse:
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    return server_error_response()


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    # Bodies are stored as-is; anything that is not a JSON object is a server error.
    logger.error("%s %s: unusable request body", request.method, request.url.path)
    return server_error_response()


@app.get("/health", response_model=HealthDTO, tags=["root"])
async def health() -> HealthDTO:
    """Liveness probe; does not touch the store."""
    return HealthDTO(status="ok")


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    return {"welcomeMessage": WELCOME_MESSAGE}
