"""Usecase: abstract foundation for application business logic.

A use case optionally holds a request (its input) and a presenter (its
output channel). Both are set through chainable setters::

    ListOrdersUsecase().set_request(request).set_presenter(presenter).execute()

Subclasses implement :meth:`execute` and decide whether to present a
:class:`Response` at all. Without a presenter the use case runs purely for
its side effects.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from cleancore.domain.response import Response
    from cleancore.services.contracts import Presentable, Validatable

logger = logging.getLogger(__name__)


class Usecase(ABC):
    """Abstract base for all use cases.

    Usage::

        class GreetUsecase(Usecase):
            def execute(self) -> None:
                name = self.get_field("name", "stranger")
                self.present(Response.create(status_code=200, data={"greeting": name}))
    """

    def __init__(self) -> None:
        self._request: Validatable | None = None
        self._presenter: Presentable | None = None

    @property
    def request(self) -> Validatable | None:
        return self._request

    @property
    def presenter(self) -> Presentable | None:
        return self._presenter

    def set_request(self, request: Validatable) -> Self:
        self._request = request
        return self

    def set_presenter(self, presenter: Presentable) -> Self:
        self._presenter = presenter
        return self

    def get_field(self, name: str, default: Any = None) -> Any:
        """Dotted-path lookup into the request, or *default* without one."""
        if self._request is None:
            return default
        return self._request.get(name, default)

    def get_request_data(self) -> Mapping[str, Any]:
        if self._request is None:
            return {}
        return self._request.get_all()

    def present(self, response: Response) -> None:
        """Hand *response* to the presenter, if one was set."""
        if self._presenter is None:
            logger.debug("%s has no presenter; response dropped", type(self).__name__)
            return
        self._presenter.present(response)

    @abstractmethod
    def execute(self) -> None:
        """Run the business logic."""
