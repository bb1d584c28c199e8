"""
Public facade for the Moneroo payments client.

The module re-exports the pieces integrators need so they can
``from moneroo_payments import ...`` without navigating the package.
"""

from .api import create_client
from .core import (
    DEFAULT_BASE_URL,
    DEFAULT_PAYMENT_METHOD,
    PAYMENT_METHOD_REGISTRY,
    PAYOUT_METHOD_REGISTRY,
    ApiError,
    ClientConfig,
    ClientParameters,
    ConfigurationError,
    Customer,
    MonerooClient,
    MonerooError,
    PaymentInitResult,
    PaymentMethod,
    PaymentMethodDetails,
    PaymentRequest,
    PayoutInitResult,
    PayoutMethod,
    PayoutMethodDetails,
    PayoutRequest,
    PayoutStatus,
    ProviderError,
    ResponseShapeError,
    TransactionStatus,
    TransportError,
    ValidationError,
    build_payment_payload,
    build_payout_payload,
    check_transaction_status,
    get_payout,
    initiate_payment,
    initiate_payout,
    load_client_config,
    read_env_file,
    verify_payout,
)

__all__ = (
    "ApiError",
    "ClientConfig",
    "ClientParameters",
    "ConfigurationError",
    "Customer",
    "DEFAULT_BASE_URL",
    "DEFAULT_PAYMENT_METHOD",
    "MonerooClient",
    "MonerooError",
    "PAYMENT_METHOD_REGISTRY",
    "PAYOUT_METHOD_REGISTRY",
    "PaymentInitResult",
    "PaymentMethod",
    "PaymentMethodDetails",
    "PaymentRequest",
    "PayoutInitResult",
    "PayoutMethod",
    "PayoutMethodDetails",
    "PayoutRequest",
    "PayoutStatus",
    "ProviderError",
    "ResponseShapeError",
    "TransactionStatus",
    "TransportError",
    "ValidationError",
    "build_payment_payload",
    "build_payout_payload",
    "check_transaction_status",
    "create_client",
    "get_payout",
    "initiate_payment",
    "initiate_payout",
    "load_client_config",
    "read_env_file",
    "verify_payout",
)
