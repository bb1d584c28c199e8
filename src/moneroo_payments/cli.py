"""
Command-line interface for exercising the Moneroo payment APIs.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, Tuple

import requests

from .api import create_client
from .core.config import load_client_config
from .core.errors import ConfigurationError, MonerooError
from .core.methods import PAYMENT_METHOD_REGISTRY
from .core.models import Customer, PaymentRequest, PayoutRequest
from .core.payout_methods import PAYOUT_METHOD_REGISTRY


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _key_value(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Values must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Key must not be empty")
    return key, val


def _collect(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    collected: dict[str, str] = {}
    for key, value in pairs:
        collected[key] = value
    return collected


def _add_customer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--amount", type=int, required=True, help="Amount in minor units")
    parser.add_argument("--currency", required=True, help="ISO 4217 currency code")
    parser.add_argument("--description", required=True)
    parser.add_argument("--email", required=True, help="Customer email")
    parser.add_argument("--first-name", required=True, help="Customer first name")
    parser.add_argument("--last-name", required=True, help="Customer last name")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moneroo-payments",
        description="Create and inspect Moneroo payments and payouts",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MONEROO_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    methods = commands.add_parser("methods", help="List supported payment or payout methods")
    methods.add_argument("--payout", action="store_true", help="List payout methods instead")
    methods.add_argument("--country", help="Only methods available in this country")
    methods.add_argument("--currency", help="Only methods settling in this currency")

    pay = commands.add_parser("pay", help="Initialize a payment")
    _add_customer_arguments(pay)
    pay.add_argument("--return-url", required=True)
    pay.add_argument("--method", help="Single payment method code, checked locally")
    pay.add_argument("--methods", help="Comma-separated list of payment method codes")

    status = commands.add_parser("status", help="Check a payment transaction")
    status.add_argument("transaction_id")

    payout = commands.add_parser("payout", help="Initialize a payout")
    _add_customer_arguments(payout)
    payout.add_argument("--method", required=True, help="Payout method code")
    payout.add_argument("--msisdn")
    payout.add_argument("--phone")
    payout.add_argument("--account-number")
    payout.add_argument(
        "--metadata",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
    )

    payout_status = commands.add_parser("payout-status", help="Verify a payout")
    payout_status.add_argument("payout_id")
    payout_status.add_argument(
        "--details",
        action="store_true",
        help="Retrieve the full payout instead of verifying it",
    )
    return parser


def _list_methods(args: argparse.Namespace) -> int:
    registry = PAYOUT_METHOD_REGISTRY if args.payout else PAYMENT_METHOD_REGISTRY
    entries = registry.get_all()
    if args.country:
        entries = tuple(e for e in entries if e in registry.get_by_country(args.country))
    if args.currency:
        entries = tuple(e for e in entries if e in registry.get_by_currency(args.currency))

    if not entries:
        logging.warning("No methods match the given filters")
        return 0
    for entry in entries:
        countries = ",".join(entry.countries)
        print(f"{entry.code.value:<22} {entry.currency:<4} {countries:<20} {entry.name}")
    return 0


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    session: Optional[requests.Session] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    if args.command == "methods":
        return _list_methods(args)

    overrides = _collect(args.set or ())
    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigurationError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config, session=session)

    try:
        if args.command == "pay":
            payment = client.initiate_payment(
                PaymentRequest(
                    amount=args.amount,
                    currency=args.currency,
                    description=args.description,
                    email=args.email,
                    first_name=args.first_name,
                    last_name=args.last_name,
                    return_url=args.return_url,
                    method=args.method,
                    methods=[m.strip() for m in args.methods.split(",") if m.strip()]
                    if args.methods
                    else None,
                )
            )
            logging.info("Payment %s created. Checkout URL: %s", payment.id, payment.checkout_url)
        elif args.command == "status":
            transaction = client.check_transaction_status(args.transaction_id)
            logging.info(
                "Transaction %s is %s (method: %s)",
                transaction.id,
                transaction.status,
                transaction.payment_method or "unknown",
            )
        elif args.command == "payout":
            result = client.initiate_payout(
                PayoutRequest(
                    amount=args.amount,
                    currency=args.currency,
                    description=args.description,
                    customer=Customer(
                        email=args.email,
                        first_name=args.first_name,
                        last_name=args.last_name,
                    ),
                    method=args.method,
                    msisdn=args.msisdn,
                    phone=args.phone,
                    account_number=args.account_number,
                    metadata=_collect(args.metadata or ()),
                )
            )
            logging.info("Payout %s created", result.id)
        else:
            lookup = client.get_payout if args.details else client.verify_payout
            payout = lookup(args.payout_id)
            logging.info(
                "Payout %s is %s (processed: %s)",
                payout.id,
                payout.status,
                "yes" if payout.is_processed else "no",
            )
    except MonerooError as exc:
        logging.error("Moneroo request failed: %s", exc)
        return 1
    return 0


def main() -> None:
    sys.exit(run_cli())
