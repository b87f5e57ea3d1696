"""Structural validation of raw payloads against a FieldSpec.

Algorithm (recursive over the spec, with a dotted-path prefix):

1. Payload keys not declared at this level are ``unauthorized``.
2. Declared keys are checked in declaration order:
   - nested spec: recurse into the sub-payload, or into ``{}`` when the key
     is absent or not a mapping, so required leaves below are reported;
   - ``True``: absent or empty values are ``missing`` (``"required"``);
   - ``False``: carried through when present.
3. Both checks always run to completion. Any finding makes the result
   invalid and drops the normalized data.

INVARIANT: normalized data never contains an undeclared key.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from cleancore.config.models import ValidationConfig
from cleancore.domain.errors import BadRequestContentError, UnauthorizedFieldError
from cleancore.domain.fields import FieldSpec
from cleancore.domain.paths import join_path

logger = logging.getLogger(__name__)

REQUIRED = "required"


class ValidationResult(BaseModel):
    """Outcome of :func:`validate`.

    Attributes:
        missing: Dotted path -> ``"required"`` for each absent/empty required leaf.
        unauthorized: Dotted paths of undeclared payload keys, in payload order.
        data: Normalized projection of the payload. Empty when invalid.
    """

    model_config = {"frozen": True}

    missing: dict[str, str] = Field(default_factory=dict)
    unauthorized: list[str] = Field(default_factory=list)
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.missing and not self.unauthorized

    def raise_for_errors(self) -> None:
        """Raise the structural failure, if any. No-op on a valid result."""
        if self.is_valid:
            return
        if not self.missing:
            raise UnauthorizedFieldError(unauthorized=self.unauthorized)
        raise BadRequestContentError(missing=self.missing, unauthorized=self.unauthorized)


def is_empty(value: Any, config: ValidationConfig | None = None) -> bool:
    """Emptiness predicate for required leaves.

    ``None`` and ``""`` are empty. Whitespace-only strings are empty only
    when ``config.blank_strings_are_empty`` is set. ``0``, ``False`` and
    empty containers are values, not absences.
    """
    if value is None or value == "":
        return True
    if config is not None and config.blank_strings_are_empty and isinstance(value, str):
        return not value.strip()
    return False


def _walk(
    spec: FieldSpec,
    payload: Mapping[str, Any],
    prefix: str,
    config: ValidationConfig | None,
    missing: dict[str, str],
    unauthorized: list[str],
) -> dict[str, Any]:
    for key in payload:
        if key not in spec:
            unauthorized.append(join_path(prefix, key))

    normalized: dict[str, Any] = {}
    for name, rule in spec.items():
        path = join_path(prefix, name)
        present = name in payload
        value = payload.get(name)

        if isinstance(rule, FieldSpec):
            if present and isinstance(value, Mapping):
                normalized[name] = _walk(rule, value, path, config, missing, unauthorized)
            else:
                _walk(rule, {}, path, config, missing, unauthorized)
            continue

        if rule and (not present or is_empty(value, config)):
            missing[path] = REQUIRED
            continue

        if present:
            normalized[name] = value
    return normalized


def validate(
    spec: FieldSpec | Mapping[str, Any],
    payload: Mapping[str, Any] | None,
    config: ValidationConfig | None = None,
) -> ValidationResult:
    """Validate *payload* against *spec* and return the outcome.

    Pure and deterministic: the same inputs always give the same result.

    Raises:
        BadRequestContentError: *payload* is neither ``None`` nor a mapping.
    """
    if payload is not None and not isinstance(payload, Mapping):
        logger.debug("Payload rejected: %s is not a mapping", type(payload).__name__)
        raise BadRequestContentError(details={"error": "payload must be a mapping"})
    field_spec = FieldSpec.of(spec)
    missing: dict[str, str] = {}
    unauthorized: list[str] = []
    normalized = _walk(field_spec, payload or {}, "", config, missing, unauthorized)

    if missing or unauthorized:
        logger.debug(
            "Payload rejected: %d missing, %d unauthorized",
            len(missing),
            len(unauthorized),
        )
        return ValidationResult(missing=missing, unauthorized=unauthorized)
    return ValidationResult(data=normalized)
