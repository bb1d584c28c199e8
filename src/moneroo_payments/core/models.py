"""
Typed request parameters and normalized provider responses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .methods import PAYMENT_METHOD_REGISTRY, PaymentMethod
from .payout_methods import PayoutMethod

__all__ = [
    "Customer",
    "PaymentInitResult",
    "PaymentRequest",
    "PayoutInitResult",
    "PayoutRequest",
    "PayoutStatus",
    "ProviderError",
    "TransactionStatus",
]


@dataclass(frozen=True)
class Customer:
    email: str
    first_name: str
    last_name: str

    def as_payload(self) -> Dict[str, str]:
        return {
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
        }

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Customer":
        return cls(
            email=values.get("email", ""),
            first_name=values.get("first_name", ""),
            last_name=values.get("last_name", ""),
        )


@dataclass(frozen=True)
class PaymentRequest:
    """
    Parameters for ``POST /payments/initialize``.

    ``amount`` is expressed in minor units. ``method`` selects a single payment
    method and is checked against the registry; ``methods`` is the older
    list-based selection and is forwarded untouched.
    """

    amount: int
    currency: str
    description: str
    email: str
    first_name: str
    last_name: str
    return_url: str
    method: Optional[Union[PaymentMethod, str]] = None
    methods: Optional[Sequence[Union[PaymentMethod, str]]] = None

    @property
    def customer(self) -> Customer:
        return Customer(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
        )


@dataclass(frozen=True)
class PayoutRequest:
    """
    Parameters for ``POST /payouts/initialize``.

    ``msisdn``, ``phone`` and ``account_number`` are channel specific; which of
    them must be set depends on the payout method.
    """

    amount: int
    currency: str
    description: str
    customer: Union[Customer, Mapping[str, Any]]
    method: Union[PayoutMethod, str]
    msisdn: Optional[str] = None
    phone: Optional[str] = None
    account_number: Optional[str] = None
    metadata: Optional[Mapping[str, Any]] = None


_KNOWN_ERROR_KEYS = ("message", "code")


@dataclass(frozen=True)
class ProviderError:
    """
    The ``errors`` object of a provider response.

    Only ``message`` and ``code`` have a fixed meaning; any other key the
    provider sends is kept in ``extra``.
    """

    message: Optional[str] = None
    code: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["ProviderError"]:
        if not payload:
            return None
        if not isinstance(payload, Mapping):
            return cls(message=str(payload))
        code = payload.get("code")
        return cls(
            message=payload.get("message"),
            code=None if code is None else str(code),
            extra={k: v for k, v in payload.items() if k not in _KNOWN_ERROR_KEYS},
        )


def _data_section(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    data = payload.get("data")
    return data if isinstance(data, Mapping) else {}


@dataclass(frozen=True)
class PaymentInitResult:
    message: Optional[str]
    id: Optional[str]
    checkout_url: Optional[str]
    errors: Optional[ProviderError]
    raw: Dict[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "PaymentInitResult":
        data = _data_section(payload)
        return cls(
            message=payload.get("message"),
            id=data.get("id"),
            checkout_url=data.get("checkout_url"),
            errors=ProviderError.from_payload(payload.get("errors")),
            raw=payload,
        )


def _method_code(data: Mapping[str, Any]) -> Optional[str]:
    value = data.get("paymentMethod") or data.get("payment_method")
    if isinstance(value, Mapping):
        value = value.get("code")
    if value is None or value == "":
        return None
    return str(value)


def _enrich_payment_method(code: Optional[str]) -> Optional[Union[PaymentMethod, str]]:
    if code is None:
        return None
    member = PAYMENT_METHOD_REGISTRY.coerce(code)
    if member is None:
        logging.warning("Provider reported unregistered payment method %r", code)
        return code
    return member


@dataclass(frozen=True)
class TransactionStatus:
    """
    Normalized body of ``GET /payments/{id}``.

    ``payment_method`` is the :class:`PaymentMethod` named by the provider, or
    the raw code when it is not part of the registry.
    """

    message: Optional[str]
    id: Optional[str]
    status: Optional[str]
    amount: Any
    currency: Any
    customer: Optional[Customer]
    created_at: Optional[str]
    updated_at: Optional[str]
    payment_method: Optional[Union[PaymentMethod, str]]
    errors: Optional[ProviderError]
    raw: Dict[str, Any]

    @property
    def currency_code(self) -> Optional[str]:
        if isinstance(self.currency, Mapping):
            return self.currency.get("code")
        return self.currency

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "TransactionStatus":
        data = _data_section(payload)
        customer = data.get("customer")
        return cls(
            message=payload.get("message"),
            id=data.get("id"),
            status=data.get("status"),
            amount=data.get("amount"),
            currency=data.get("currency"),
            customer=Customer.from_mapping(customer) if isinstance(customer, Mapping) else None,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            payment_method=_enrich_payment_method(_method_code(data)),
            errors=ProviderError.from_payload(payload.get("errors")),
            raw=payload,
        )


@dataclass(frozen=True)
class PayoutInitResult:
    message: Optional[str]
    id: Optional[str]
    errors: Optional[ProviderError]
    raw: Dict[str, Any]

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "PayoutInitResult":
        data = _data_section(payload)
        return cls(
            message=payload.get("message"),
            id=data.get("id"),
            errors=ProviderError.from_payload(payload.get("errors")),
            raw=payload,
        )


@dataclass(frozen=True)
class PayoutStatus:
    message: Optional[str]
    id: Optional[str]
    status: Optional[str]
    is_processed: bool
    amount: Any
    amount_formatted: Optional[str]
    currency: Any
    description: Optional[str]
    customer: Optional[Customer]
    method: Optional[Mapping[str, Any]]
    environment: Optional[str]
    initiated_at: Optional[str]
    processed_at: Optional[str]
    errors: Optional[ProviderError]
    raw: Dict[str, Any]

    @property
    def method_code(self) -> Optional[str]:
        if self.method is None:
            return None
        return self.method.get("code")

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "PayoutStatus":
        data = _data_section(payload)
        customer = data.get("customer")
        method = data.get("method")
        if isinstance(method, str):
            method = {"code": method}
        return cls(
            message=payload.get("message"),
            id=data.get("id"),
            status=data.get("status"),
            is_processed=bool(data.get("is_processed")),
            amount=data.get("amount"),
            amount_formatted=data.get("amount_formatted"),
            currency=data.get("currency"),
            description=data.get("description"),
            customer=Customer.from_mapping(customer) if isinstance(customer, Mapping) else None,
            method=method if isinstance(method, Mapping) else None,
            environment=data.get("environment"),
            initiated_at=data.get("initiated_at"),
            processed_at=data.get("processed_at"),
            errors=ProviderError.from_payload(payload.get("errors")),
            raw=payload,
        )
