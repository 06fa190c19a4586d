"""ServiceResult and ServiceError — what every service operation returns.

INVARIANT: Expected failures (unknown participant, no connection, missing
data file) come back as ``ok=False`` results, never as exceptions.
The CLI and the interactive shell both consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Error codes carried in ServiceError.code
NOT_FOUND = "NOT_FOUND"
NO_PATH = "NO_PATH"
SOURCE_UNAVAILABLE = "SOURCE_UNAVAILABLE"
EMPTY_GRAPH = "EMPTY_GRAPH"
INVALID_INPUT = "INVALID_INPUT"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"load"``, ``"stats"``, ``"connection"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result with a single ServiceError."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
