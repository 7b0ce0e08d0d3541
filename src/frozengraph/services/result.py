"""Result values returned by the graph and ID services.

Services never raise for an expected failure such as a missing vertex or an
invalid count. They return a ``ServiceResult`` with ``ok=False`` and a
``ServiceError`` whose ``code`` callers can branch on.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code``, a message, and extra detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when ``error`` is set.
        op: Operation name, which also selects the renderer
            (``"add_edge"``, ``"show_graph"``, ...).
        data: Operation payload; JSON-compatible.
        warnings: Problems that did not stop the operation, for example an
            edge skipped because an endpoint is missing.
        error: Set when ``ok`` is False.
        meta: Extra information shown with ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        warnings: Iterable[str] = (),
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result for *op*; keyword arguments become ``error.detail``."""
        return cls(
            ok=False,
            op=op,
            warnings=list(warnings),
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def with_warnings(self, warnings: Iterable[str]) -> ServiceResult:
        """Copy of this result with *warnings* placed before its own."""
        earlier = list(warnings)
        if not earlier:
            return self
        return self.model_copy(update={"warnings": [*earlier, *self.warnings]})
