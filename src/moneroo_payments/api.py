"""
Public, high-level helpers for interacting with the Moneroo API.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

import requests

from .core.client import MonerooClient
from .core.config import (
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .core.methods import PaymentMethod

__all__ = ["create_client"]


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[Union[int, str]] = None,
    default_payment_method: Optional[Union[PaymentMethod, str]] = None,
) -> MonerooClient:
    """
    Construct a :class:`MonerooClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            api_key,
            base_url,
            timeout_seconds,
            default_payment_method,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            default_payment_method=default_payment_method,
        )
    return MonerooClient(cfg, session=session)
