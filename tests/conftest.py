"""Shared pytest fixtures and test helpers for cleancore tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from cleancore.domain.errors import NotFoundError
from cleancore.domain.response import Response
from cleancore.domain.status import StatusCode
from cleancore.output.presenter import Presenter
from cleancore.services.request import Request, RequestDefinition
from cleancore.services.usecase import Usecase


class FlatRequest(Request):
    """Two required fields, nothing nested."""

    definition = RequestDefinition(fields={"field_1": True, "field_2": True})


class MixedRequest(Request):
    """One required and one optional field."""

    definition = RequestDefinition(fields={"field_1": True, "field_2": False})


class NestedRequest(Request):
    """Required leaf three levels deep."""

    definition = RequestDefinition(
        fields={
            "field_1": True,
            "field_2": True,
            "field_4": {"field_5": {"field_6": True}},
        }
    )


def _positive_amount(data: Mapping[str, Any]) -> None:
    if data["amount"] <= 0:
        raise ValueError("amount must be positive")


class TransferRequest(Request):
    """Request with a domain constraint on the normalized data."""

    definition = RequestDefinition(
        fields={"amount": True, "memo": False, "target": {"iban": True, "name": False}},
        constraint=_positive_amount,
    )


ACCOUNTS = {"FR76": {"owner": "Ada", "balance": 120}}


class ShowAccountUsecase(Usecase):
    """Looks up an account by IBAN and presents it."""

    def execute(self) -> None:
        iban = self.get_field("target.iban")
        account = ACCOUNTS.get(iban)
        if account is None:
            raise NotFoundError(details={"error": f"unknown account {iban}"})
        self.present(
            Response.create(
                status_code=StatusCode.OK,
                message="account.found",
                data={"account": account},
            )
        )


@pytest.fixture
def presenter() -> Presenter:
    """A fresh presenter per test."""
    return Presenter()


@pytest.fixture
def transfer_payload() -> dict[str, Any]:
    """A payload that satisfies TransferRequest."""
    return {"amount": 50, "memo": "rent", "target": {"iban": "FR76", "name": "Ada"}}
