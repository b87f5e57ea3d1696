"""Application error hierarchy with structured, machine-readable details.

Every error carries a human ``message``, a ``details`` mapping, and an
HTTP-like ``code``. Subclasses fix a default message and code at class
level; callers may override both per instance.

INVARIANT: ``format()`` always returns the same four keys, so a single
handler at the boundary can render any failure uniformly.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from cleancore.domain.status import StatusCode


class ApplicationError(Exception):
    """Base for all errors raised by cleancore and by use-case logic."""

    default_message: ClassVar[str] = "error.internal"
    default_code: ClassVar[int] = StatusCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str | None = None,
        details: Mapping[str, Any] | Sequence[Any] | str | None = None,
        code: int | None = None,
    ) -> None:
        self.message = message if message is not None else self.default_message
        self.code = int(code if code is not None else self.default_code)
        if details is None:
            self.details: dict[str, Any] | list[Any] = {}
        elif isinstance(details, Mapping):
            self.details = dict(details)
        elif isinstance(details, str):
            self.details = {"error": details}
        else:
            self.details = list(details)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code})"

    def get_message(self) -> str:
        return self.message

    def get_code(self) -> int:
        return self.code

    def get_details(self) -> dict[str, Any] | list[Any]:
        return self.details

    def get_errors(self) -> dict[str, Any]:
        """Return the details as a mapping, wrapping list-shaped details."""
        if isinstance(self.details, dict):
            return dict(self.details)
        return {"details": list(self.details)}

    def get_details_message(self) -> str | None:
        """Return the ``error`` entry of the details, if any."""
        if isinstance(self.details, dict):
            return self.details.get("error")
        return None

    def format(self) -> dict[str, Any]:
        """Canonical serializable shape for any error."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def get_errors_for_log(self) -> dict[str, Any]:
        """Diagnostic bundle for observability. Not for control flow.

        ``file`` and ``line`` point at the frame that raised the error and
        are ``None`` for an error that was never raised.
        """
        file: str | None = None
        line: int | None = None
        if self.__traceback__ is not None:
            origin = traceback.extract_tb(self.__traceback__)[-1]
            file, line = origin.filename, origin.lineno
        previous = self.__cause__ or self.__context__
        return {
            "message": self.message,
            "code": self.code,
            "errors": self.get_errors(),
            "file": file,
            "line": line,
            "previous": repr(previous) if previous is not None else None,
            "trace": "".join(traceback.format_exception(self)),
        }


class BadRequestContentError(ApplicationError):
    """Structural or constraint validation failure of a request payload.

    ``missing`` maps dotted paths to ``"required"``; ``unauthorized``
    lists dotted paths of undeclared keys. Both stay recoverable from the
    exception independently of ``details``.
    """

    default_message = "error.bad_request_content"
    default_code = StatusCode.BAD_REQUEST

    def __init__(
        self,
        message: str | None = None,
        details: Mapping[str, Any] | Sequence[Any] | str | None = None,
        code: int | None = None,
        *,
        missing: Mapping[str, str] | None = None,
        unauthorized: Sequence[str] | None = None,
    ) -> None:
        self.missing: dict[str, str] = dict(missing or {})
        self.unauthorized: list[str] = list(unauthorized or [])
        if details is None and (self.missing or self.unauthorized):
            structural: dict[str, Any] = {}
            if self.missing:
                structural["missing"] = dict(self.missing)
            if self.unauthorized:
                structural["unauthorized"] = list(self.unauthorized)
            details = structural
        super().__init__(message, details, code)


class UnauthorizedFieldError(BadRequestContentError):
    """Payload carried fields the request does not declare."""

    default_message = "error.unauthorized_field"


class UnauthorizedError(ApplicationError):
    default_message = "error.unauthorized"
    default_code = StatusCode.UNAUTHORIZED


class ForbiddenError(ApplicationError):
    default_message = "error.forbidden"
    default_code = StatusCode.FORBIDDEN


class NotFoundError(ApplicationError):
    default_message = "error.not_found"
    default_code = StatusCode.NOT_FOUND


class ConflictError(ApplicationError):
    default_message = "error.conflict"
    default_code = StatusCode.CONFLICT


class UnprocessableError(ApplicationError):
    default_message = "error.unprocessable"
    default_code = StatusCode.UNPROCESSABLE


class PresenterResponseNotSetError(ApplicationError):
    """A presenter was read before any response was presented."""

    default_message = "error.presenter_response_not_set"


class InvalidFieldSpecError(ApplicationError):
    """A field specification is malformed (non-boolean leaf, bad nesting)."""

    default_message = "error.invalid_field_spec"


class ConfigFileError(ApplicationError):
    """A ``cleancore.toml`` file could not be parsed."""

    default_message = "error.config_file"
