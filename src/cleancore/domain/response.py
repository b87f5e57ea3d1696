"""Response: the immutable result a use case hands to its presenter."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cleancore.domain.paths import get_path
from cleancore.domain.status import StatusCode


class Response(BaseModel):
    """Outcome of a use case.

    Attributes:
        success: Whether the use case succeeded.
        status_code: HTTP-like status number.
        message: Optional human/translation-key message.
        data: Payload on success, error details on failure.
    """

    model_config = {"frozen": True}

    success: bool = True
    status_code: int = StatusCode.NO_CONTENT
    message: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def create(
        cls,
        success: bool = True,
        status_code: int = StatusCode.NO_CONTENT,
        message: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> Response:
        return cls(
            success=success,
            status_code=int(status_code),
            message=message,
            data=dict(data or {}),
        )

    def is_success(self) -> bool:
        return self.success

    def get_status_code(self) -> int:
        return self.status_code

    def get_message(self) -> str | None:
        return self.message

    def get_data(self) -> dict[str, Any]:
        return dict(self.data)

    def get(self, path: str, default: Any = None) -> Any:
        """Look up ``user.account.balance``-style paths in the data."""
        return get_path(self.data, path, default)
