"""
Core primitives that implement the Moneroo payment and payout flows.
"""

from .client import (
    MonerooClient,
    check_transaction_status,
    get_payout,
    initiate_payment,
    initiate_payout,
    verify_payout,
)
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_PAYMENT_METHOD,
    DEFAULT_TIMEOUT_SECONDS,
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .environment import build_environment, read_env_file
from .errors import (
    ApiError,
    ConfigurationError,
    MonerooError,
    ResponseShapeError,
    TransportError,
    ValidationError,
)
from .methods import (
    PAYMENT_METHOD_REGISTRY,
    MethodRegistry,
    PaymentMethod,
    PaymentMethodDetails,
)
from .models import (
    Customer,
    PaymentInitResult,
    PaymentRequest,
    PayoutInitResult,
    PayoutRequest,
    PayoutStatus,
    ProviderError,
    TransactionStatus,
)
from .payloads import build_payment_payload, build_payout_payload, resolve_payment_methods
from .payout_methods import PAYOUT_METHOD_REGISTRY, PayoutMethod, PayoutMethodDetails

__all__ = [
    "ApiError",
    "ClientConfig",
    "ClientParameters",
    "ConfigurationError",
    "Customer",
    "DEFAULT_BASE_URL",
    "DEFAULT_PAYMENT_METHOD",
    "DEFAULT_TIMEOUT_SECONDS",
    "MethodRegistry",
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
    "build_environment",
    "build_payment_payload",
    "build_payout_payload",
    "check_transaction_status",
    "get_payout",
    "initiate_payment",
    "initiate_payout",
    "load_client_config",
    "read_env_file",
    "resolve_payment_methods",
    "verify_payout",
]
