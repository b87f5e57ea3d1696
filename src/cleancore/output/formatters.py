"""Response formatting for serialization at the boundary.

A host renders a :class:`Response` as a plain mapping (for its own JSON
layer) or as JSON text. Success and failure differ in the payload key:
``data`` on success, ``details`` on failure.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from cleancore.services.contracts import ErrorPayload, SuccessPayload, dump_validated

if TYPE_CHECKING:
    from cleancore.domain.response import Response


def format_response(response: Response) -> dict[str, Any]:
    """Format *response* as ``{status, code, message, data|details}``."""
    if response.success:
        return dump_validated(
            SuccessPayload,
            {
                "status": "success",
                "code": response.status_code,
                "message": response.message,
                "data": response.get_data(),
            },
        )
    return dump_validated(
        ErrorPayload,
        {
            "status": "error",
            "code": response.status_code,
            "message": response.message,
            "details": response.get_data(),
        },
    )


def render_json(response: Response, *, indent: int | None = None) -> str:
    """Format *response* and serialize it to JSON text."""
    return _json.dumps(format_response(response), indent=indent, default=str)
