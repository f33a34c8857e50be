"""DTO definitions for the FastAPI layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def _id_to_str(value: Any) -> str | None:
    return None if value is None else str(value)


class _DriverResultDTO(BaseModel):
    """Write results rendered with the camelCase keys clients expect."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    acknowledged: bool


class InsertResultDTO(_DriverResultDTO):
    inserted_id: str = Field(alias="insertedId")

    @classmethod
    def from_result(cls, result: InsertOneResult) -> InsertResultDTO:
        return cls(
            acknowledged=result.acknowledged,
            inserted_id=str(result.inserted_id),
        )


class DeleteResultDTO(_DriverResultDTO):
    deleted_count: int = Field(alias="deletedCount")

    @classmethod
    def from_result(cls, result: DeleteResult) -> DeleteResultDTO:
        return cls(
            acknowledged=result.acknowledged,
            deleted_count=result.deleted_count,
        )


class UpdateResultDTO(_DriverResultDTO):
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_count: int = Field(alias="upsertedCount")
    upserted_id: str | None = Field(alias="upsertedId")

    @classmethod
    def from_result(cls, result: UpdateResult) -> UpdateResultDTO:
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=_id_to_str(upserted_id),
        )


class NotFoundDTO(BaseModel):
    """Error marker returned with status 200 when a lookup finds nothing."""

    model_config = ConfigDict(extra="forbid")

    error: str

    @classmethod
    def for_entity(cls, entity: str) -> NotFoundDTO:
        return cls(error=f"{entity} not found")


class DocumentCountDTO(BaseModel):
    """Document totals per storefront collection."""

    model_config = ConfigDict(extra="forbid")

    users: int
    products: int
    orders: int
    reviews: int
    blogs: int


class HealthDTO(BaseModel):
    status: str
