"""
Configuration objects and helpers for the Moneroo client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from .environment import build_environment
from .errors import ConfigurationError
from .methods import PAYMENT_METHOD_REGISTRY, PaymentMethod

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "DEFAULT_BASE_URL",
    "DEFAULT_PAYMENT_METHOD",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_client_config",
]

DEFAULT_BASE_URL = "https://api.moneroo.io/v1"
DEFAULT_TIMEOUT_SECONDS = 30
# Used when a payment names neither ``method`` nor ``methods``.
DEFAULT_PAYMENT_METHOD = PaymentMethod.MTN_BJ

_PARAMETER_TO_ENV_KEY = {
    "api_key": "MONEROO_API_KEY",
    "base_url": "MONEROO_API_URL",
    "timeout_seconds": "MONEROO_TIMEOUT_SECONDS",
    "default_payment_method": "MONEROO_DEFAULT_METHOD",
}


def _stringify(value: Any) -> str:
    if isinstance(value, PaymentMethod):
        return value.value
    return str(value)


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_client_config`.
    """

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout_seconds: Optional[Union[int, str]] = None
    default_payment_method: Optional[Union[PaymentMethod, str]] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _normalize_api_key(raw_key: Optional[str]) -> str:
    key = (raw_key or "").strip()
    if not key:
        raise ConfigurationError("MONEROO_API_KEY must be provided")
    return key


def _normalize_timeout(raw_timeout: str) -> int:
    try:
        timeout = int(raw_timeout)
    except ValueError as exc:
        raise ConfigurationError(
            f"MONEROO_TIMEOUT_SECONDS must be an integer, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigurationError("MONEROO_TIMEOUT_SECONDS must be greater than zero")
    return timeout


def _normalize_method(raw_method: str) -> PaymentMethod:
    method = PAYMENT_METHOD_REGISTRY.coerce(raw_method.strip())
    if method is None:
        raise ConfigurationError(
            f"MONEROO_DEFAULT_METHOD is not a supported payment method: '{raw_method}'"
        )
    return method


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    default_payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, "
            f"default_payment_method={self.default_payment_method.value!r})"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        api_key = _normalize_api_key(values.get("MONEROO_API_KEY"))
        base_url = (values.get("MONEROO_API_URL") or DEFAULT_BASE_URL).strip().rstrip("/")
        timeout_seconds = _normalize_timeout(
            values.get("MONEROO_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )
        default_payment_method = _normalize_method(
            values.get("MONEROO_DEFAULT_METHOD", DEFAULT_PAYMENT_METHOD.value)
        )
        return cls(
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            default_payment_method=default_payment_method,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[Union[int, str]] = None,
        default_payment_method: Optional[Union[PaymentMethod, str]] = None,
    ) -> "ClientConfig":
        explicit = ClientParameters(
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            default_payment_method=default_payment_method,
        )
        merged_overrides = dict(overrides or {})
        if parameters is not None:
            merged_overrides.update(parameters.as_overrides())
        merged_overrides.update(explicit.as_overrides())

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[Union[int, str]] = None,
    default_payment_method: Optional[Union[PaymentMethod, str]] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, keyword
    arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
        default_payment_method=default_payment_method,
    )
