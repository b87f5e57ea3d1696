"""Declarative field specifications for requests.

A spec maps each accepted field name to ``True`` (required), ``False``
(optional), or a nested spec describing a sub-tree of fields::

    FieldSpec.of({
        "email": True,
        "nickname": False,
        "address": {"city": True, "zip": False},
    })

INVARIANT: every leaf is a real ``bool``; every non-leaf is itself a spec.
Specs are frozen once built and safe to share between requests.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ConfigDict, RootModel, StrictBool, ValidationError

from cleancore.domain.errors import InvalidFieldSpecError
from cleancore.domain.paths import join_path


class FieldSpec(RootModel):
    """Immutable tree of accepted request fields."""

    model_config = ConfigDict(frozen=True)

    root: dict[str, StrictBool | FieldSpec]

    @classmethod
    def of(cls, fields: Mapping[str, Any] | FieldSpec | None = None) -> FieldSpec:
        """Build a spec from a plain nested mapping.

        Raises:
            InvalidFieldSpecError: when a leaf is not a bool or a key is not
                a string.
        """
        if isinstance(fields, FieldSpec):
            return fields
        try:
            return cls.model_validate(dict(fields or {}))
        except ValidationError as exc:
            details = {
                ".".join(str(part) for part in err["loc"]): err["msg"] for err in exc.errors()
            }
            raise InvalidFieldSpecError(details=details) from exc

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, name: str) -> bool | FieldSpec:
        return self.root[name]

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def __len__(self) -> int:
        return len(self.root)

    def items(self) -> Iterator[tuple[str, bool | FieldSpec]]:
        return iter(self.root.items())

    def is_nested(self, name: str) -> bool:
        return isinstance(self.root.get(name), FieldSpec)

    def required_paths(self, prefix: str = "") -> list[str]:
        """Dotted paths of every required leaf, in declaration order."""
        paths: list[str] = []
        for name, rule in self.root.items():
            path = join_path(prefix, name)
            if isinstance(rule, FieldSpec):
                paths.extend(rule.required_paths(path))
            elif rule:
                paths.append(path)
        return paths

    def to_dict(self) -> dict[str, Any]:
        """Plain nested ``dict`` copy of the spec."""
        return {
            name: rule.to_dict() if isinstance(rule, FieldSpec) else rule
            for name, rule in self.root.items()
        }


FieldSpec.model_rebuild()
