"""
Payout methods accepted by Moneroo, including the fields each one requires.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from .methods import MethodRegistry

__all__ = [
    "PAYOUT_METHODS",
    "PAYOUT_METHOD_REGISTRY",
    "PayoutMethod",
    "PayoutMethodDetails",
    "get_all",
    "get_by_country",
    "get_by_currency",
    "get_details",
    "is_supported",
]


class PayoutMethod(str, Enum):
    MTN_BJ = "mtn_bj"
    MOOV_BJ = "moov_bj"
    ORANGE_SN = "orange_sn"
    ORANGE_CI = "orange_ci"
    ORANGE_ML = "orange_ml"
    E_MONEY_SN = "e_money_sn"
    WAVE_SN = "wave_sn"
    WAVE_CI = "wave_ci"
    FREEMONEY_SN = "freemoney_sn"
    MTN_CI = "mtn_ci"
    MOOV_CI = "moov_ci"
    TOGOCEL = "togocel"
    DJAMO_CI = "djamo_ci"
    DJAMO_SN = "djamo_sn"
    MONEROO_PAYOUT_DEMO = "moneroo_payout_demo"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PayoutMethodDetails:
    name: str
    code: PayoutMethod
    currency: str
    countries: Tuple[str, ...]
    # Checked in this order when a payout is built.
    required_fields: Tuple[str, ...]

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "code": self.code.value,
            "currency": self.currency,
            "countries": list(self.countries),
            "required_fields": list(self.required_fields),
        }


def _mobile_money(code: PayoutMethod, name: str, country: str) -> PayoutMethodDetails:
    return PayoutMethodDetails(
        name=name,
        code=code,
        currency="XOF",
        countries=(country,),
        required_fields=("msisdn",),
    )


PAYOUT_METHODS: Mapping[PayoutMethod, PayoutMethodDetails] = MappingProxyType(
    {
        PayoutMethod.MTN_BJ: _mobile_money(PayoutMethod.MTN_BJ, "MTN Mobile Money Benin", "BJ"),
        PayoutMethod.MOOV_BJ: _mobile_money(PayoutMethod.MOOV_BJ, "Moov Money Benin", "BJ"),
        PayoutMethod.ORANGE_SN: _mobile_money(PayoutMethod.ORANGE_SN, "Orange Money Senegal", "SN"),
        PayoutMethod.ORANGE_CI: _mobile_money(
            PayoutMethod.ORANGE_CI, "Orange Money Ivory Coast", "CI"
        ),
        PayoutMethod.ORANGE_ML: _mobile_money(PayoutMethod.ORANGE_ML, "Orange Money Mali", "ML"),
        PayoutMethod.E_MONEY_SN: _mobile_money(PayoutMethod.E_MONEY_SN, "E-money Senegal", "SN"),
        PayoutMethod.WAVE_SN: _mobile_money(PayoutMethod.WAVE_SN, "Wave Senegal", "SN"),
        PayoutMethod.WAVE_CI: _mobile_money(PayoutMethod.WAVE_CI, "Wave Ivory Coast", "CI"),
        PayoutMethod.FREEMONEY_SN: _mobile_money(
            PayoutMethod.FREEMONEY_SN, "Free Money Senegal", "SN"
        ),
        PayoutMethod.MTN_CI: _mobile_money(PayoutMethod.MTN_CI, "MTN MoMo Ivory Coast", "CI"),
        PayoutMethod.MOOV_CI: _mobile_money(PayoutMethod.MOOV_CI, "Moov Money Ivory Coast", "CI"),
        PayoutMethod.TOGOCEL: _mobile_money(PayoutMethod.TOGOCEL, "T-Money", "TG"),
        PayoutMethod.DJAMO_CI: _mobile_money(PayoutMethod.DJAMO_CI, "Djamo Ivory Coast", "CI"),
        PayoutMethod.DJAMO_SN: _mobile_money(PayoutMethod.DJAMO_SN, "Djamo Senegal", "SN"),
        PayoutMethod.MONEROO_PAYOUT_DEMO: PayoutMethodDetails(
            name="Moneroo Demo Transfer",
            code=PayoutMethod.MONEROO_PAYOUT_DEMO,
            currency="XOF",
            countries=("US",),
            required_fields=("account_number",),
        ),
    }
)

PAYOUT_METHOD_REGISTRY: MethodRegistry[PayoutMethod, PayoutMethodDetails] = MethodRegistry(
    PayoutMethod, PAYOUT_METHODS
)

get_details = PAYOUT_METHOD_REGISTRY.get_details
get_all = PAYOUT_METHOD_REGISTRY.get_all
get_by_country = PAYOUT_METHOD_REGISTRY.get_by_country
get_by_currency = PAYOUT_METHOD_REGISTRY.get_by_currency
is_supported = PAYOUT_METHOD_REGISTRY.is_supported
