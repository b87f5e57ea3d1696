"""Request: a validated, normalized, read-only view of an input payload.

Concrete requests declare what they accept by attaching a
:class:`RequestDefinition` as the ``definition`` class attribute::

    class CreateUserRequest(Request):
        definition = RequestDefinition(
            fields={"email": True, "profile": {"nickname": False}},
            constraint=check_email,
        )

    request = CreateUserRequest.create_from_payload(raw)

Construction pipeline: VALIDATE → RAISE ON STRUCTURE → CONSTRAIN → BUILD.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Self

from pydantic import ValidationError

from cleancore.config.models import ValidationConfig
from cleancore.domain.errors import BadRequestContentError
from cleancore.domain.fields import FieldSpec
from cleancore.domain.paths import get_path
from cleancore.services.validator import validate

logger = logging.getLogger(__name__)

Constraint = Callable[[Mapping[str, Any]], None]


@dataclass(frozen=True)
class RequestDefinition:
    """Declaration of the fields a request accepts.

    Attributes:
        fields: Field spec, or a plain nested mapping converted on creation.
        constraint: Optional domain check run on the normalized data after
            structural validation succeeds.
        validation: Validator options (emptiness predicate).
    """

    fields: FieldSpec = field(default_factory=FieldSpec.of)
    constraint: Constraint | None = None
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, FieldSpec):
            object.__setattr__(self, "fields", FieldSpec.of(self.fields))


def _pydantic_details(exc: ValidationError) -> dict[str, Any]:
    return {
        ".".join(str(part) for part in err["loc"]) or "error": err["msg"] for err in exc.errors()
    }


class Request:
    """Validated request data with a unique, stable identifier.

    Build instances with :meth:`create_from_payload`, never the constructor.
    """

    definition: ClassVar[RequestDefinition] = RequestDefinition()

    def __init__(self, data: Mapping[str, Any]) -> None:
        """Internal: wrap data already normalized by :meth:`create_from_payload`.

        Calling this directly skips validation.
        """
        self._id = str(uuid.uuid4())
        self._data: dict[str, Any] = dict(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"

    @classmethod
    def create_from_payload(
        cls,
        payload: Mapping[str, Any] | None,
        validation: ValidationConfig | None = None,
    ) -> Self:
        """Validate *payload* and build a request from the normalized data.

        This is the only supported way to build a request. *validation*
        replaces the definition's validator options for this call, which is
        how a host applies ``CoreSettings.validation``.

        Raises:
            BadRequestContentError: a non-mapping payload, missing required
                fields, or a failed constraint check.
            UnauthorizedFieldError: undeclared fields only.
        """
        definition = cls.definition
        if validation is None:
            validation = definition.validation
        result = validate(definition.fields, payload, validation)
        result.raise_for_errors()
        try:
            cls.apply_constraints_on_fields(result.data)
        except ValidationError as exc:
            raise BadRequestContentError(details=_pydantic_details(exc)) from exc
        except ValueError as exc:
            raise BadRequestContentError(details={"error": str(exc)}) from exc
        request = cls(result.data)
        logger.debug("Created %s %s", cls.__name__, request.get_id())
        return request

    @classmethod
    def apply_constraints_on_fields(cls, data: Mapping[str, Any]) -> None:
        """Run the definition's constraint on the normalized *data*.

        Override for domain checks (format, range, cross-field). A
        ``ValueError`` (pydantic ``ValidationError`` included) raised here is
        turned into :class:`BadRequestContentError` by
        :meth:`create_from_payload`; application errors propagate as-is.
        """
        constraint = cls.definition.constraint
        if constraint is not None:
            constraint(data)

    def get(self, path: str, default: Any = None) -> Any:
        """Look up a dotted *path* such as ``"profile.nickname"``."""
        return get_path(self._data, path, default)

    def get_all(self) -> Mapping[str, Any]:
        return MappingProxyType(self._data)

    def get_id(self) -> str:
        return self._id
