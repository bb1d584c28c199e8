"""
Layered settings lookup for :class:`moneroo_payments.core.config.ClientConfig`.
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

__all__ = ["build_environment", "read_env_file"]


def read_env_file(path: str) -> Dict[str, str]:
    """Return the assignments in a ``.env`` file; a missing file yields ``{}``."""
    if not os.path.isfile(path):
        return {}
    # Bare keys without "=" come back as None.
    return {
        key: value
        for key, value in dotenv_values(path, encoding="utf-8").items()
        if value is not None
    }


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Merge settings by precedence: ``overrides``, then ``base``, then ``env_file``.

    ``base`` defaults to :data:`os.environ`; pass ``env_file=None`` to skip the file.
    """
    merged: Dict[str, str] = read_env_file(env_file) if env_file is not None else {}
    merged.update(os.environ if base is None else base)
    merged.update(overrides or {})
    return merged
