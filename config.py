import os
import sys
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv

from enums.currency import Currency

# Load .env but don't override existing environment variables
# This allows scripts to set values before import
load_dotenv(".env", override=False)

STORE_LANGUAGE = os.environ.get("STORE_LANGUAGE", "en")  # Default to English

# Parse CURRENCY with clear error message on misconfiguration
try:
    CURRENCY = Currency(os.environ.get("CURRENCY", "EUR").upper())
except ValueError as e:
    valid_values = [currency.value for currency in Currency]
    print(f"\n ERROR: Invalid CURRENCY configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_values)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('CURRENCY')}\n", file=sys.stderr)
    sys.exit(1)

# Base URL used for file upload download links, always ends with "/"
STORE_URL = os.environ.get("STORE_URL", "http://localhost/")
if not STORE_URL.endswith("/"):
    STORE_URL = f"{STORE_URL}/"

# Shopping cart display
RENDER_ASSOCIATED_ATTRIBUTE_VALUE_QUANTITY = os.environ.get(
    "RENDER_ASSOCIATED_ATTRIBUTE_VALUE_QUANTITY", "true"
) == "true"  # Default: enabled

# Tax
DISPLAY_PRICES_INCLUDING_TAX = os.environ.get("DISPLAY_PRICES_INCLUDING_TAX", "true") == "true"
try:
    TAX_RATE_PERCENT = Decimal(os.environ.get("TAX_RATE_PERCENT", "0"))
    if TAX_RATE_PERCENT < 0:
        raise ValueError(f"TAX_RATE_PERCENT must not be negative (got: {TAX_RATE_PERCENT})")
except (InvalidOperation, ValueError) as e:
    print(f"\n ERROR: Invalid TAX_RATE_PERCENT configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Non-negative number (e.g., 0, 7, 19.5)", file=sys.stderr)
    print(f"Current value: {os.environ.get('TAX_RATE_PERCENT')}\n", file=sys.stderr)
    sys.exit(1)

DB_NAME = os.environ.get("DB_NAME", "store.db")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"
try:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "7"))
    if LOG_RETENTION_DAYS <= 0:
        raise ValueError(f"LOG_RETENTION_DAYS must be positive (got: {LOG_RETENTION_DAYS})")
except ValueError as e:
    print(f"\n ERROR: Invalid LOG_RETENTION_DAYS configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Positive integer (e.g., 7, 30)", file=sys.stderr)
    print(f"Current value: {os.environ.get('LOG_RETENTION_DAYS')}\n", file=sys.stderr)
    sys.exit(1)
