"""Shared test fixtures."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from moneroo_payments import Customer, PaymentRequest, PayoutRequest


def build_response(status_code, body=None, *, text=None):
    """Return a real ``requests.Response`` carrying ``body`` as JSON (or raw ``text``)."""
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.headers["Content-Type"] = "application/json"
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def session():
    """A session double; tests set ``session.request.return_value``."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def payment_request():
    return PaymentRequest(
        amount=1000,
        currency="XOF",
        description="Test payment",
        email="test@example.com",
        first_name="John",
        last_name="Doe",
        return_url="https://example.com/return",
    )


@pytest.fixture
def payout_request():
    return PayoutRequest(
        amount=1000,
        currency="XOF",
        description="Refund for order #123",
        customer=Customer(email="customer@example.com", first_name="John", last_name="Doe"),
        method="mtn_bj",
        msisdn="22912345678",
    )
