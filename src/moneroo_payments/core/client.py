"""
HTTP client helpers for the Moneroo API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import requests

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_PAYMENT_METHOD,
    DEFAULT_TIMEOUT_SECONDS,
    ClientConfig,
)
from .errors import (
    ApiError,
    ConfigurationError,
    MonerooError,
    ResponseShapeError,
    TransportError,
    ValidationError,
)
from .methods import PAYMENT_METHOD_REGISTRY, PaymentMethod
from .models import (
    PaymentInitResult,
    PaymentRequest,
    PayoutInitResult,
    PayoutRequest,
    PayoutStatus,
    ProviderError,
    TransactionStatus,
)
from .payloads import build_payment_payload, build_payout_payload
from .payout_methods import PAYOUT_METHOD_REGISTRY

__all__ = [
    "MonerooClient",
    "check_transaction_status",
    "get_payout",
    "initiate_payment",
    "initiate_payout",
    "verify_payout",
]


def _require_api_key(api_key: Optional[str]) -> str:
    if not api_key:
        raise ConfigurationError("A Moneroo API key is required")
    return api_key


def _require_identifier(value: Optional[str], label: str) -> str:
    if not value:
        raise ValidationError(f"{label} is required")
    return quote(str(value), safe="")


def _headers(api_key: str, *, with_body: bool) -> Dict[str, str]:
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }
    if with_body:
        headers["Content-Type"] = "application/json"
    return headers


def _api_error(response: requests.Response) -> ApiError:
    try:
        body = response.json()
    except ValueError:
        body = None

    message = None
    error = None
    if isinstance(body, dict):
        message = body.get("message")
        error = ProviderError.from_payload(body.get("errors"))
        if error is None and message:
            error = ProviderError(message=message)
    return ApiError(
        message or f"HTTP Error: {response.status_code}",
        status_code=response.status_code,
        error=error,
    )


def _request_json(
    session: requests.Session,
    method: str,
    url: str,
    api_key: str,
    *,
    body: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Dict[str, Any]:
    try:
        response = session.request(
            method,
            url,
            headers=_headers(api_key, with_body=body is not None),
            json=body,
            timeout=timeout,
        )
    except MonerooError:
        raise
    except requests.RequestException as exc:
        raise TransportError(str(exc) or "Unknown error occurred") from exc

    if not 200 <= response.status_code < 300:
        raise _api_error(response)

    try:
        payload = response.json()
    except ValueError as exc:
        raise ResponseShapeError(
            f"Failed to parse JSON from Moneroo at {url}: {response.text}"
        ) from exc
    if not isinstance(payload, dict):
        raise ResponseShapeError(f"Expected a JSON object from Moneroo at {url}")
    return payload


def _send(
    session: Optional[requests.Session],
    method: str,
    url: str,
    api_key: str,
    *,
    body: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> Dict[str, Any]:
    # A caller-supplied session stays open; a one-shot session is closed here.
    if session is not None:
        return _request_json(session, method, url, api_key, body=body, timeout=timeout)
    with requests.Session() as owned:
        return _request_json(owned, method, url, api_key, body=body, timeout=timeout)


def initiate_payment(
    params: PaymentRequest,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    *,
    session: Optional[requests.Session] = None,
    default_method: Union[PaymentMethod, str] = DEFAULT_PAYMENT_METHOD,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> PaymentInitResult:
    """
    Initialize a payment and return the checkout details.

    Raises :class:`ResponseShapeError` when the provider accepts the payment
    but does not return a ``checkout_url``.
    """
    api_key = _require_api_key(api_key)
    body = build_payment_payload(params, default_method=default_method)

    url = f"{base_url.rstrip('/')}/payments/initialize"
    logging.info("Initializing %s %s payment at %s", body["amount"], body["currency"], url)
    logging.debug("Payment methods: %s", body["methods"])
    payload = _send(
        session, "POST", url, api_key, body=body, timeout=timeout
    )

    result = PaymentInitResult.from_response(payload)
    if not result.checkout_url:
        raise ResponseShapeError("checkout_url is missing!")
    return result


def check_transaction_status(
    transaction_id: str,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> TransactionStatus:
    api_key = _require_api_key(api_key)
    transaction = _require_identifier(transaction_id, "Transaction ID")

    url = f"{base_url.rstrip('/')}/payments/{transaction}"
    logging.info("Fetching transaction status from %s", url)
    payload = _send(session, "GET", url, api_key, timeout=timeout)
    return TransactionStatus.from_response(payload)


def initiate_payout(
    params: PayoutRequest,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> PayoutInitResult:
    """
    Initialize a payout to a recipient.

    The method's required fields are checked before anything is sent.
    """
    api_key = _require_api_key(api_key)
    body = build_payout_payload(params)

    url = f"{base_url.rstrip('/')}/payouts/initialize"
    logging.info(
        "Initializing %s payout of %s %s at %s",
        body["method"],
        body["amount"],
        body["currency"],
        url,
    )
    payload = _send(
        session, "POST", url, api_key, body=body, timeout=timeout
    )

    result = PayoutInitResult.from_response(payload)
    if not result.id:
        raise ResponseShapeError("Transaction ID missing in response!")
    return result


def verify_payout(
    payout_id: str,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> PayoutStatus:
    api_key = _require_api_key(api_key)
    payout = _require_identifier(payout_id, "Payout ID")

    url = f"{base_url.rstrip('/')}/payouts/{payout}/verify"
    logging.info("Verifying payout at %s", url)
    payload = _send(session, "GET", url, api_key, timeout=timeout)
    return PayoutStatus.from_response(payload)


def get_payout(
    payout_id: str,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> PayoutStatus:
    api_key = _require_api_key(api_key)
    payout = _require_identifier(payout_id, "Payout ID")

    url = f"{base_url.rstrip('/')}/payouts/{payout}"
    logging.info("Fetching payout details from %s", url)
    payload = _send(session, "GET", url, api_key, timeout=timeout)
    return PayoutStatus.from_response(payload)


class MonerooClient:
    """
    Thin convenience wrapper binding a :class:`ClientConfig` to a session.
    """

    payment_methods = PAYMENT_METHOD_REGISTRY
    payout_methods = PAYOUT_METHOD_REGISTRY

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def build_payment_payload(self, params: PaymentRequest) -> Dict[str, Any]:
        return build_payment_payload(
            params, default_method=self.config.default_payment_method
        )

    def build_payout_payload(self, params: PayoutRequest) -> Dict[str, Any]:
        return build_payout_payload(params)

    def initiate_payment(self, params: PaymentRequest) -> PaymentInitResult:
        return initiate_payment(
            params,
            self.config.api_key,
            self.config.base_url,
            session=self.session,
            default_method=self.config.default_payment_method,
            timeout=self.config.timeout_seconds,
        )

    def check_transaction_status(self, transaction_id: str) -> TransactionStatus:
        return check_transaction_status(
            transaction_id,
            self.config.api_key,
            self.config.base_url,
            session=self.session,
            timeout=self.config.timeout_seconds,
        )

    def initiate_payout(self, params: PayoutRequest) -> PayoutInitResult:
        return initiate_payout(
            params,
            self.config.api_key,
            self.config.base_url,
            session=self.session,
            timeout=self.config.timeout_seconds,
        )

    def verify_payout(self, payout_id: str) -> PayoutStatus:
        return verify_payout(
            payout_id,
            self.config.api_key,
            self.config.base_url,
            session=self.session,
            timeout=self.config.timeout_seconds,
        )

    def get_payout(self, payout_id: str) -> PayoutStatus:
        return get_payout(
            payout_id,
            self.config.api_key,
            self.config.base_url,
            session=self.session,
            timeout=self.config.timeout_seconds,
        )
