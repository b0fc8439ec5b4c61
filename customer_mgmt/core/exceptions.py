from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DataAccessError(Exception):
    """Base for every typed failure surfaced by the data-access core."""

    message: str
    code: str = "DATA_ACCESS_ERROR"

    def __str__(self) -> str:
        return self.message

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


@dataclass
class NotFoundError(DataAccessError):
    code: str = "NOT_FOUND"
    entity: str | None = None
    entity_id: int | None = None

    @classmethod
    def for_entity(cls, entity: str, entity_id: int) -> "NotFoundError":
        return cls(
            message=f"{entity} {entity_id} not found.",
            entity=entity,
            entity_id=entity_id,
        )

    def to_detail(self) -> dict:
        detail = super().to_detail()
        if self.entity:
            detail["entity"] = self.entity
        if self.entity_id is not None:
            detail["id"] = self.entity_id
        return detail


@dataclass
class ConstraintViolationError(DataAccessError):
    """Unique or foreign-key constraint hit (email uniqueness, dangling references)."""

    code: str = "CONSTRAINT_VIOLATION"


@dataclass
class InvalidInputError(DataAccessError):
    code: str = "INVALID_INPUT"
    errors: list[str] | None = None

    def to_detail(self) -> dict:
        detail = super().to_detail()
        if self.errors:
            detail["errors"] = list(self.errors)
        return detail


@dataclass
class TransientStoreError(DataAccessError):
    """Connection loss or timeout. Never retried by the core."""

    code: str = "STORE_UNAVAILABLE"
