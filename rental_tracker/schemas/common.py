from pydantic import BaseModel, Field
from typing import TypeVar, Generic, Any

from rental_tracker.utils.exceptions import AppException

T = TypeVar("T")


# ─── Error Body ───────────────────────────────────────────────────────────────
class ErrorBody(BaseModel):
    code: str
    field: str | None = None


# ─── Operation Result ─────────────────────────────────────────────────────────
class OperationResult(BaseModel, Generic[T]):
    """
    Outcome of a directory mutation.

    success reflects the in-memory part only; persisted says whether the
    matching log line reached disk. Truthiness follows success so callers
    can keep treating registration as a plain boolean.
    """
    success:   bool = True
    message:   str
    data:      T | None = None
    error:     ErrorBody | None = None
    persisted: bool = True
    warnings:  list[str] = Field(default_factory=list)

    def __bool__(self) -> bool:
        return self.success


# ─── Load Report ──────────────────────────────────────────────────────────────
class EntityLoadStats(BaseModel):
    loaded:  int = 0
    skipped: int = 0


class LoadReport(BaseModel):
    vehicles:  EntityLoadStats = Field(default_factory=EntityLoadStats)
    customers: EntityLoadStats = Field(default_factory=EntityLoadStats)
    records:   EntityLoadStats = Field(default_factory=EntityLoadStats)
    errors:    list[str]       = Field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.errors


# ─── Helper Functions ─────────────────────────────────────────────────────────
def success_result(message: str, data: Any = None) -> OperationResult:
    """Return a standardized success result."""
    return OperationResult(success=True, message=message, data=data)


def error_result(exc: AppException) -> OperationResult:
    """Turn an AppException into a failed result. Nothing was mutated."""
    return OperationResult(
        success=False,
        message=exc.message,
        error=ErrorBody(code=exc.error_code, field=exc.field),
        persisted=False,
    )
