"""CLI printing the resolved dev-services configuration."""

from __future__ import annotations

import argparse
import json
import sys

from infinispan_devservices.exceptions import ConfigurationError
from infinispan_devservices.logging import configure_logging, get_logger
from infinispan_devservices.properties import load_properties_file
from infinispan_devservices.reuse import discovery_labels
from infinispan_devservices.schema import DEFAULT_PREFIX
from infinispan_devservices.settings import load_from_env

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show the Infinispan dev-services configuration.")
    parser.add_argument(
        "--properties",
        default=None,
        help="Path to a properties file (e.g. application.properties). "
        "Without it, INFINISPAN_CLIENT_DEVSERVICES_* variables and .env are read.",
    )
    parser.add_argument(
        "--prefix",
        default=None,
        help=f"Key prefix of the options in the properties file (default: {DEFAULT_PREFIX})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Emit console logs instead of JSON",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.prefix is not None and not args.properties:
        parser.error("--prefix requires --properties")
    configure_logging(level=args.log_level.upper(), json_output=not args.plain_logs)

    try:
        if args.properties:
            config = load_properties_file(args.properties, prefix=args.prefix or DEFAULT_PREFIX)
        else:
            config = load_from_env()
    except ConfigurationError as exc:
        logger.error("devservices.cli.config_error", error=exc.error_code, details=exc.details)
        print(json.dumps(exc.to_dict(), indent=2), file=sys.stderr)
        return 2

    payload = {
        "config": config.model_dump(mode="json"),
        "labels": discovery_labels(config),
    }
    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
