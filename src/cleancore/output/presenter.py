"""Presenter: one-shot holder for a use case's response."""

from __future__ import annotations

import logging
from typing import Any

from cleancore.domain.errors import PresenterResponseNotSetError
from cleancore.domain.response import Response
from cleancore.output.formatters import format_response

logger = logging.getLogger(__name__)


class Presenter:
    """Captures the response a use case presents.

    The last presented response wins. Create one presenter per use-case run.
    """

    def __init__(self) -> None:
        self._response: Response | None = None

    def present(self, response: Response) -> None:
        if self._response is not None:
            logger.debug("Presenter response replaced")
        self._response = response

    def has_response(self) -> bool:
        return self._response is not None

    def get_response(self) -> Response:
        """Return the presented response.

        Raises:
            PresenterResponseNotSetError: nothing was presented yet.
        """
        if self._response is None:
            raise PresenterResponseNotSetError()
        return self._response

    def get_formatted_response(self) -> dict[str, Any]:
        return format_response(self.get_response())
