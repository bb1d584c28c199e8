"""
Helpers for constructing the JSON payloads sent to the Moneroo API.

Everything here is side-effect free: parameters are validated against the
method registries and turned into plain dicts ready for ``requests``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Union

from .config import DEFAULT_PAYMENT_METHOD
from .errors import ValidationError
from .methods import PAYMENT_METHOD_REGISTRY, PaymentMethod
from .models import Customer, PaymentRequest, PayoutRequest
from .payout_methods import PAYOUT_METHOD_REGISTRY, PayoutMethodDetails

__all__ = [
    "OPTIONAL_PAYOUT_FIELDS",
    "build_payment_payload",
    "build_payout_payload",
    "resolve_payment_methods",
    "validate_payout_request",
]

# Channel-specific recipient identifiers, forwarded only when set.
OPTIONAL_PAYOUT_FIELDS = ("msisdn", "phone", "account_number")


def _code(value: Any) -> str:
    if isinstance(value, Enum):
        return value.value
    return str(value)


def _check_amount(amount: Any) -> None:
    # bool is an int subclass but never a valid amount.
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(
            f"Amount must be an integer number of minor units, got {amount!r}"
        )
    if amount <= 0:
        raise ValidationError("Amount must be greater than zero")


def resolve_payment_methods(
    request: PaymentRequest,
    *,
    default_method: Union[PaymentMethod, str] = DEFAULT_PAYMENT_METHOD,
) -> List[str]:
    """
    Work out the ``methods`` list for a payment.

    An explicit ``method`` wins, then a non-empty legacy ``methods`` list, then
    ``default_method``.
    """
    if request.method:
        member = PAYMENT_METHOD_REGISTRY.coerce(request.method)
        if member is None:
            raise ValidationError(f"Invalid payment method: {_code(request.method)}")
        return [member.value]
    if request.methods:
        # PaymentMethod is a str too; a lone code must not be split into characters.
        if isinstance(request.methods, str):
            return [_code(request.methods)]
        return [_code(method) for method in request.methods]
    return [_code(default_method)]


def build_payment_payload(
    request: PaymentRequest,
    *,
    default_method: Union[PaymentMethod, str] = DEFAULT_PAYMENT_METHOD,
) -> Dict[str, Any]:
    """Build the body submitted to ``/payments/initialize``."""
    _check_amount(request.amount)
    methods = resolve_payment_methods(request, default_method=default_method)

    selected = PAYMENT_METHOD_REGISTRY.get_details(methods[0]) if len(methods) == 1 else None
    if selected is not None and selected.currency != str(request.currency).upper():
        # Not rejected: the provider decides whether the pair is acceptable.
        logging.debug(
            "Payment currency %s differs from %s currency %s",
            request.currency,
            selected.code.value,
            selected.currency,
        )

    return {
        "amount": request.amount,
        "currency": request.currency,
        "description": request.description,
        "customer": request.customer.as_payload(),
        "return_url": request.return_url,
        "methods": methods,
    }


def validate_payout_request(request: PayoutRequest) -> PayoutMethodDetails:
    """
    Check the payout method and its required fields.

    Required fields are checked in registry order and the first missing one is
    reported.
    """
    _check_amount(request.amount)
    details = PAYOUT_METHOD_REGISTRY.get_details(request.method)
    if details is None:
        raise ValidationError(f"Invalid payout method: {_code(request.method)}")

    for field_name in details.required_fields:
        if not getattr(request, field_name, None):
            raise ValidationError(
                f"Field '{field_name}' is required for payout method '{details.code.value}'"
            )
    return details


def _customer_payload(customer: Union[Customer, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(customer, Customer):
        return customer.as_payload()
    return dict(customer)


def build_payout_payload(request: PayoutRequest) -> Dict[str, Any]:
    """Build the body submitted to ``/payouts/initialize``."""
    details = validate_payout_request(request)

    payload: Dict[str, Any] = {
        "amount": request.amount,
        "currency": request.currency,
        "description": request.description,
        "customer": _customer_payload(request.customer),
        "method": details.code.value,
        "metadata": dict(request.metadata or {}),
    }
    for field_name in OPTIONAL_PAYOUT_FIELDS:
        value = getattr(request, field_name)
        if value:
            payload[field_name] = value
    return payload
