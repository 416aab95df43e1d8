# Role: Local developer CLI to price a request without the web server.
# Reads a calculation request (JSON file or stdin), runs validation + the engine, prints the result JSON.

from __future__ import annotations

import argparse
import json
import sys

import tour_pricing.config
tour_pricing.config.load_env()
tour_pricing.config.configure_logging()

from tour_pricing.api.deps import build_catalog
from tour_pricing.core.currency_converter import CurrencyConverter
from tour_pricing.core.errors import NotFoundError, RequestValidationFailed
from tour_pricing.core.pricing_engine import PriceCalculator
from tour_pricing.core.validator import Validator


def _read_payload(path: str | None) -> dict:
    if path and path != "-":
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    return json.load(sys.stdin)


def main(argv: list[str] | None = None) -> int:
    # 1) Load the request JSON
    # 2) Validate -> price (offline mode keeps the built-in FX rates)
    # 3) Print the result, or the error and a non-zero exit code
    parser = argparse.ArgumentParser(description="Price a tour calculation request.")
    parser.add_argument("request", nargs="?", help="Path to a request JSON file (default: stdin)")
    parser.add_argument("--offline", action="store_true", help="Do not fetch live exchange rates")
    args = parser.parse_args(argv)

    try:
        payload = _read_payload(args.request)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Could not read request: {e}", file=sys.stderr)
        return 2

    converter = CurrencyConverter(auto_refresh=not args.offline)
    calculator = PriceCalculator(build_catalog(), converter=converter)

    try:
        request = Validator().validate(payload)
        result = calculator.calculate(request)
    except RequestValidationFailed as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1
    except NotFoundError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(json.dumps(result.to_json_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
