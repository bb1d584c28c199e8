"""
Payment methods accepted by Moneroo and the registry used to look them up.

The tables are built once at import time and exposed through read-only
mappings. Lookups accept either the enum member or its plain string code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Generic, Iterator, Mapping, Optional, Tuple, Type, TypeVar, Union

__all__ = [
    "MethodRegistry",
    "PAYMENT_METHODS",
    "PAYMENT_METHOD_REGISTRY",
    "PaymentMethod",
    "PaymentMethodDetails",
    "get_all",
    "get_by_country",
    "get_by_currency",
    "get_details",
    "is_supported",
]


class PaymentMethod(str, Enum):
    AIRTEL_CD = "airtel_cd"
    AIRTEL_MW = "airtel_mw"
    AIRTEL_NE = "airtel_ne"
    AIRTEL_NG = "airtel_ng"
    AIRTEL_RW = "airtel_rw"
    AIRTEL_TZ = "airtel_tz"
    AIRTEL_UG = "airtel_ug"
    AIRTEL_ZM = "airtel_zm"
    BANK_TRANSFER_NG = "bank_transfer_ng"
    BARTER = "barter"
    CARD_GHS = "card_ghs"
    CARD_KES = "card_kes"
    CARD_NGN = "card_ngn"
    CARD_TZS = "card_tzs"
    CARD_UGX = "card_ugx"
    CARD_USD = "card_usd"
    CARD_XAF = "card_xaf"
    CARD_XOF = "card_xof"
    CARD_ZAR = "card_zar"
    CRYPTO_EUR = "crypto_eur"
    CRYPTO_GHS = "crypto_ghs"
    CRYPTO_NGN = "crypto_ngn"
    CRYPTO_USD = "crypto_usd"
    CRYPTO_XAF = "crypto_xaf"
    CRYPTO_XOF = "crypto_xof"
    E_MONEY_SN = "e_money_sn"
    EU_MOBILE_CM = "eu_mobile_cm"
    FREEMONEY_SN = "freemoney_sn"
    HALOPESA_TZ = "halopesa_tz"
    MOBI_CASH_ML = "mobi_cash_ml"
    MONEROO_PAYMENT_DEMO = "moneroo_payment_demo"
    MOOV_BF = "moov_bf"
    MOOV_BJ = "moov_bj"
    MOOV_CI = "moov_ci"
    MOOV_ML = "moov_ml"
    MOOV_TG = "moov_tg"
    MPESA_KE = "mpesa_ke"
    MPESA_TZ = "mpesa_tz"
    MTN_BJ = "mtn_bj"
    MTN_CI = "mtn_ci"
    MTN_CM = "mtn_cm"
    MTN_GH = "mtn_gh"
    MTN_GN = "mtn_gn"
    MTN_NG = "mtn_ng"
    MTN_RW = "mtn_rw"
    MTN_UG = "mtn_ug"
    MTN_ZM = "mtn_zm"
    ORANGE_BF = "orange_bf"
    ORANGE_CD = "orange_cd"
    ORANGE_CI = "orange_ci"
    ORANGE_CM = "orange_cm"
    ORANGE_GN = "orange_gn"
    ORANGE_ML = "orange_ml"
    ORANGE_SN = "orange_sn"
    QR_NGN = "qr_ngn"
    TIGO_GH = "tigo_gh"
    TIGO_TZ = "tigo_tz"
    TNM_MW = "tnm_mw"
    TOGOCEL = "togocel"
    USSD_NGN = "ussd_ngn"
    VODACOM_CD = "vodacom_cd"
    VODAFONE_GH = "vodafone_gh"
    WAVE_CI = "wave_ci"
    WAVE_SN = "wave_sn"
    WIZALL_SN = "wizall_sn"
    ZAMTEL_ZM = "zamtel_zm"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaymentMethodDetails:
    name: str
    code: PaymentMethod
    currency: str
    countries: Tuple[str, ...]

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "code": self.code.value,
            "currency": self.currency,
            "countries": list(self.countries),
        }


M = TypeVar("M", bound=Enum)
D = TypeVar("D")


class MethodRegistry(Generic[M, D]):
    """
    Read-only lookup over an enum-keyed table of method details.

    Every entry must expose ``code``, ``currency`` and ``countries``.
    """

    def __init__(self, method_type: Type[M], table: Mapping[M, D]) -> None:
        missing = [member for member in method_type if member not in table]
        if missing:
            raise ValueError(
                f"No details registered for {', '.join(m.value for m in missing)}"
            )
        self.method_type = method_type
        self._table: Mapping[M, D] = MappingProxyType(dict(table))
        self._entries: Tuple[D, ...] = tuple(self._table.values())

    def coerce(self, method: Union[M, str, None]) -> Optional[M]:
        """Return the enum member for ``method`` or ``None`` when it is unknown."""
        if isinstance(method, self.method_type):
            return method
        if not isinstance(method, str):
            return None
        try:
            return self.method_type(method)
        except ValueError:
            return None

    def get_details(self, method: Union[M, str, None]) -> Optional[D]:
        member = self.coerce(method)
        if member is None:
            return None
        return self._table.get(member)

    def get_all(self) -> Tuple[D, ...]:
        return self._entries

    def get_by_country(self, country_code: str) -> Tuple[D, ...]:
        wanted = country_code.strip().upper()
        return tuple(entry for entry in self._entries if wanted in entry.countries)

    def get_by_currency(self, currency_code: str) -> Tuple[D, ...]:
        wanted = currency_code.strip().upper()
        return tuple(entry for entry in self._entries if entry.currency == wanted)

    def is_supported(self, method: Union[M, str, None]) -> bool:
        return self.coerce(method) is not None

    def __contains__(self, method: object) -> bool:
        return self.is_supported(method)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[D]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


_CFA_CENTRAL = ("CM", "CF", "CG", "GA", "GQ", "TD")
_EUROZONE_AND_EU = (
    "AT", "BE", "BG", "CY", "CZ", "DE", "DK", "EE", "ES", "FI", "FR", "GR", "HR", "HU",
    "IE", "IT", "LT", "LU", "LV", "MT", "NL", "PL", "PT", "RO", "SE", "SI", "SK",
)

_ROWS = (
    # Airtel
    (PaymentMethod.AIRTEL_CD, "Airtel Congo", "CDF", ("CD",)),
    (PaymentMethod.AIRTEL_MW, "Airtel Money Malawi", "MWK", ("MW",)),
    (PaymentMethod.AIRTEL_NE, "Airtel Niger", "XOF", ("NE",)),
    (PaymentMethod.AIRTEL_NG, "Airtel Nigeria", "NGN", ("NG",)),
    (PaymentMethod.AIRTEL_RW, "Airtel Rwanda", "RWF", ("RW",)),
    (PaymentMethod.AIRTEL_TZ, "Airtel Tanzania", "TZS", ("TZ",)),
    (PaymentMethod.AIRTEL_UG, "Airtel Uganda", "UGX", ("UG",)),
    (PaymentMethod.AIRTEL_ZM, "Airtel Zambia", "ZMW", ("ZM",)),
    # Bank transfer and Barter
    (PaymentMethod.BANK_TRANSFER_NG, "Bank Transfer Nigeria", "NGN", ("NG",)),
    (PaymentMethod.BARTER, "Barter", "NGN", ("NG",)),
    # Cards
    (PaymentMethod.CARD_GHS, "Card Ghana", "GHS", ("GH",)),
    (PaymentMethod.CARD_KES, "Card Kenya", "KES", ("KE",)),
    (PaymentMethod.CARD_NGN, "Card Nigeria", "NGN", ("NG",)),
    (PaymentMethod.CARD_TZS, "Card Tanzania", "TZS", ("TZ",)),
    (PaymentMethod.CARD_UGX, "Card Uganda", "UGX", ("UG",)),
    (PaymentMethod.CARD_USD, "Card USD", "USD", ("US",)),
    (PaymentMethod.CARD_XAF, "Card XAF", "XAF", _CFA_CENTRAL),
    (PaymentMethod.CARD_XOF, "Card XOF", "XOF", ("CI", "BF", "TG", "BJ", "ML")),
    (PaymentMethod.CARD_ZAR, "Card South Africa", "ZAR", ("ZA",)),
    # Crypto
    (PaymentMethod.CRYPTO_EUR, "Crypto EUR", "EUR", _EUROZONE_AND_EU),
    (PaymentMethod.CRYPTO_GHS, "Crypto Ghana", "GHS", ("GH",)),
    (PaymentMethod.CRYPTO_NGN, "Crypto Nigeria", "NGN", ("NG",)),
    (PaymentMethod.CRYPTO_USD, "Crypto USD", "USD", ("US",)),
    (PaymentMethod.CRYPTO_XAF, "Crypto XAF", "XAF", _CFA_CENTRAL),
    (
        PaymentMethod.CRYPTO_XOF,
        "Crypto XOF",
        "XOF",
        ("BJ", "BF", "CI", "GW", "ML", "NE", "SN", "TG"),
    ),
    # Wallets
    (PaymentMethod.E_MONEY_SN, "E-Money Senegal", "XOF", ("SN",)),
    (PaymentMethod.EU_MOBILE_CM, "EU Mobile Cameroon", "XAF", ("CM",)),
    (PaymentMethod.FREEMONEY_SN, "Free Money Senegal", "XOF", ("SN",)),
    (PaymentMethod.HALOPESA_TZ, "Halopesa Tanzania", "TZS", ("TZ",)),
    (PaymentMethod.MOBI_CASH_ML, "Mobi Cash Mali", "XOF", ("ML",)),
    (PaymentMethod.MONEROO_PAYMENT_DEMO, "Moneroo Demo", "USD", ("US",)),
    # Moov
    (PaymentMethod.MOOV_BF, "Moov Burkina Faso", "XOF", ("BF",)),
    (PaymentMethod.MOOV_BJ, "Moov Benin", "XOF", ("BJ",)),
    (PaymentMethod.MOOV_CI, "Moov Cote d'Ivoire", "XOF", ("CI",)),
    (PaymentMethod.MOOV_ML, "Moov Mali", "XOF", ("ML",)),
    (PaymentMethod.MOOV_TG, "Moov Togo", "XOF", ("TG",)),
    # M-Pesa
    (PaymentMethod.MPESA_KE, "M-Pesa Kenya", "KES", ("KE",)),
    (PaymentMethod.MPESA_TZ, "M-Pesa Tanzania", "TZS", ("TZ",)),
    # MTN
    (PaymentMethod.MTN_BJ, "MTN MoMo Benin", "XOF", ("BJ",)),
    (PaymentMethod.MTN_CI, "MTN MoMo Cote d'Ivoire", "XOF", ("CI",)),
    (PaymentMethod.MTN_CM, "MTN Mobile Money Cameroon", "XAF", ("CM",)),
    (PaymentMethod.MTN_GH, "MTN Mobile Money Ghana", "GHS", ("GH",)),
    (PaymentMethod.MTN_GN, "MTN Mobile Money Guinea", "GNF", ("GN",)),
    (PaymentMethod.MTN_NG, "MTN Mobile Money Nigeria", "NGN", ("NG",)),
    (PaymentMethod.MTN_RW, "MTN Mobile Money Rwanda", "RWF", ("RW",)),
    (PaymentMethod.MTN_UG, "MTN Mobile Money Uganda", "UGX", ("UG",)),
    (PaymentMethod.MTN_ZM, "MTN Mobile Money Zambia", "ZMW", ("ZM",)),
    # Orange
    (PaymentMethod.ORANGE_BF, "Orange Burkina Faso", "XOF", ("BF",)),
    (PaymentMethod.ORANGE_CD, "Orange Congo", "CDF", ("CD",)),
    (PaymentMethod.ORANGE_CI, "Orange Cote d'Ivoire", "XOF", ("CI",)),
    (PaymentMethod.ORANGE_CM, "Orange Cameroon", "XAF", ("CM",)),
    (PaymentMethod.ORANGE_GN, "Orange Guinea", "GNF", ("GN",)),
    (PaymentMethod.ORANGE_ML, "Orange Mali", "XOF", ("ML",)),
    (PaymentMethod.ORANGE_SN, "Orange Senegal", "XOF", ("SN",)),
    # Nigerian bank rails
    (PaymentMethod.QR_NGN, "QR Code Nigeria", "NGN", ("NG",)),
    (PaymentMethod.USSD_NGN, "USSD Nigeria", "NGN", ("NG",)),
    # Tigo, TNM, Togocel
    (PaymentMethod.TIGO_GH, "Tigo Ghana", "GHS", ("GH",)),
    (PaymentMethod.TIGO_TZ, "Tigo Tanzania", "TZS", ("TZ",)),
    (PaymentMethod.TNM_MW, "TNM Mpamba Malawi", "MWK", ("MW",)),
    (PaymentMethod.TOGOCEL, "Togocel", "XOF", ("TG",)),
    # Vodacom and Vodafone
    (PaymentMethod.VODACOM_CD, "Vodacom Congo", "CDF", ("CD",)),
    (PaymentMethod.VODAFONE_GH, "Vodafone Ghana", "GHS", ("GH",)),
    # Wave, Wizall, Zamtel
    (PaymentMethod.WAVE_CI, "Wave Cote d'Ivoire", "XOF", ("CI",)),
    (PaymentMethod.WAVE_SN, "Wave Senegal", "XOF", ("SN",)),
    (PaymentMethod.WIZALL_SN, "Wizall Senegal", "XOF", ("SN",)),
    (PaymentMethod.ZAMTEL_ZM, "Zamtel Zambia", "ZMW", ("ZM",)),
)

PAYMENT_METHODS: Mapping[PaymentMethod, PaymentMethodDetails] = MappingProxyType(
    {
        code: PaymentMethodDetails(
            name=name,
            code=code,
            currency=currency,
            countries=countries,
        )
        for code, name, currency, countries in _ROWS
    }
)

PAYMENT_METHOD_REGISTRY: MethodRegistry[PaymentMethod, PaymentMethodDetails] = (
    MethodRegistry(PaymentMethod, PAYMENT_METHODS)
)

get_details = PAYMENT_METHOD_REGISTRY.get_details
get_all = PAYMENT_METHOD_REGISTRY.get_all
get_by_country = PAYMENT_METHOD_REGISTRY.get_by_country
get_by_currency = PAYMENT_METHOD_REGISTRY.get_by_currency
is_supported = PAYMENT_METHOD_REGISTRY.is_supported
