"""cleancore: requests, use cases, presenters, and structured errors."""

from __future__ import annotations

from cleancore.domain.errors import (
    ApplicationError,
    BadRequestContentError,
    ConflictError,
    ForbiddenError,
    InvalidFieldSpecError,
    NotFoundError,
    PresenterResponseNotSetError,
    UnauthorizedError,
    UnauthorizedFieldError,
    UnprocessableError,
)
from cleancore.domain.fields import FieldSpec
from cleancore.domain.response import Response
from cleancore.domain.status import StatusCode
from cleancore.output.formatters import format_response, render_json
from cleancore.output.presenter import Presenter
from cleancore.services.request import Request, RequestDefinition
from cleancore.services.usecase import Usecase
from cleancore.services.validator import ValidationResult, validate

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "BadRequestContentError",
    "ConflictError",
    "FieldSpec",
    "ForbiddenError",
    "InvalidFieldSpecError",
    "NotFoundError",
    "Presenter",
    "PresenterResponseNotSetError",
    "Request",
    "RequestDefinition",
    "Response",
    "StatusCode",
    "UnauthorizedError",
    "UnauthorizedFieldError",
    "UnprocessableError",
    "Usecase",
    "ValidationResult",
    "__version__",
    "format_response",
    "render_json",
    "validate",
]
