#!/usr/bin/env python3
"""
Format selected attributes from the command line.

Usage:
    python run.py product --product-id 1 --attributes-xml '<Attributes>...</Attributes>'
    python run.py checkout --attributes-xml '<Attributes>...</Attributes>' --no-html-encode
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation

import config
from db import create_db_and_tables, get_db_session
from enums.currency import Currency
from exceptions.base import StoreException
from exceptions.product import ProductNotFoundException
from models.customer import CustomerDTO, WorkContextDTO
from repositories.product import ProductRepository
from services.checkout_attribute_formatter import CheckoutAttributeFormatter
from services.product_attribute_formatter import ProductAttributeFormatter
from utils.logging_config import setup_logging


def parse_currency(value: str) -> Currency:
    return Currency(value.upper())


def parse_rate(value: str) -> Decimal:
    try:
        rate = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid currency rate: {value!r}")
    if not rate.is_finite() or rate <= 0:
        raise argparse.ArgumentTypeError(f"currency rate must be positive: {value!r}")
    return rate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render selected product or checkout attributes")
    subparsers = parser.add_subparsers(dest="command", required=True)

    product_parser = subparsers.add_parser("product", help="Format product attributes of a cart item")
    product_parser.add_argument("--product-id", type=int, required=True)
    product_parser.add_argument("--no-gift-card", action="store_true", help="Skip gift card sender/recipient")

    checkout_parser = subparsers.add_parser("checkout", help="Format checkout attributes")

    for sub in (product_parser, checkout_parser):
        sub.add_argument("--attributes-xml", required=True)
        sub.add_argument("--language", default=config.STORE_LANGUAGE)
        sub.add_argument("--currency", type=parse_currency, default=config.CURRENCY)
        sub.add_argument("--currency-rate", type=parse_rate, default=Decimal("1"))
        sub.add_argument("--separator", default="\n")
        sub.add_argument("--tax-exempt", action="store_true")
        sub.add_argument("--no-html-encode", action="store_true")
        sub.add_argument("--no-prices", action="store_true")
        sub.add_argument("--no-hyperlinks", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    customer = CustomerDTO(is_tax_exempt=args.tax_exempt)
    work_context = WorkContextDTO(
        language=args.language,
        currency=args.currency,
        currency_rate=args.currency_rate
    )

    create_db_and_tables()
    try:
        with get_db_session() as session:
            if args.command == "product":
                product = ProductRepository.get_by_id(args.product_id, session)
                if product is None:
                    raise ProductNotFoundException(args.product_id)
                text = ProductAttributeFormatter.format_attributes(
                    product, args.attributes_xml, customer, work_context, session,
                    separator=args.separator,
                    html_encode=not args.no_html_encode,
                    render_prices=not args.no_prices,
                    render_gift_card_attributes=not args.no_gift_card,
                    allow_hyperlinks=not args.no_hyperlinks
                )
            else:
                text = CheckoutAttributeFormatter.format_attributes(
                    args.attributes_xml, customer, work_context, session,
                    separator=args.separator,
                    html_encode=not args.no_html_encode,
                    render_prices=not args.no_prices,
                    allow_hyperlinks=not args.no_hyperlinks
                )
    except StoreException as e:
        logging.error(f"Formatting failed: {e!r}")
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
