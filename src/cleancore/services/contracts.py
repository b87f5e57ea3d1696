"""Capability protocols and formatted-payload contracts.

The protocols describe what the rest of the library needs from a request,
a presenter, or a use case, so hosts can plug in their own objects
without subclassing ours. The payload models validate formatted output
shapes before they leave the library, so key regressions (for example
``data`` vs ``details``) fail fast.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Literal, Protocol, Self, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from cleancore.config.models import ValidationConfig
    from cleancore.domain.response import Response

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


# --- Capabilities ---


@runtime_checkable
class Validatable(Protocol):
    """A request built from a raw payload through validation."""

    @classmethod
    def create_from_payload(
        cls, payload: Mapping[str, Any], validation: ValidationConfig | None = None
    ) -> Self: ...

    def get(self, path: str, default: Any = None) -> Any: ...

    def get_all(self) -> Mapping[str, Any]: ...

    def get_id(self) -> str: ...


@runtime_checkable
class Presentable(Protocol):
    """Receives a use case's response and exposes it to the caller."""

    def present(self, response: Response) -> None: ...

    def get_response(self) -> Response: ...

    def get_formatted_response(self) -> dict[str, Any]: ...


@runtime_checkable
class Executable(Protocol):
    """Runs business logic."""

    def execute(self) -> None: ...


# --- Formatted payloads ---


class SuccessPayload(BaseModel):
    """Shape of a formatted successful response."""

    model_config = ConfigDict(extra="forbid")

    status: Literal["success"]
    code: int
    message: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)


class ErrorPayload(BaseModel):
    """Shape of a formatted failed response."""

    model_config = ConfigDict(extra="forbid")

    status: Literal["error"]
    code: int
    message: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)
