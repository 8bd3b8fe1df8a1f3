"""Build dev-services configuration from property-style key/value input.

Keys look like ``quarkus.infinispan-client.devservices.port=11222``; cache
entries use one key per cache, ``...devservices.caches.<name>=<template>``,
where the name may be double-quoted when it contains dots. ``artifacts`` is a
comma-separated list.

Only ``key=value`` lines and ``#`` comments are understood. Any other line,
such as ``key: value``, is rejected instead of being skipped.
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv.parser import parse_stream
from pydantic import ValidationError

from infinispan_devservices.config import DevServicesConfig
from infinispan_devservices.exceptions import ConfigurationError
from infinispan_devservices.logging import get_logger
from infinispan_devservices.schema import CACHES_KEY, DEFAULT_PREFIX, option_for_key

logger = get_logger(__name__)


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` lines (``#`` comments allowed) into a dict.

    Raises:
        ConfigurationError: If a line is not a comment, blank or ``key=value``.
    """
    values: dict[str, str] = {}
    unparsable: list[dict[str, Any]] = []
    for binding in parse_stream(io.StringIO(text)):
        # A key without "=" is how dotenv reads "key:value" and other separators
        if binding.error or (binding.key is not None and binding.value is None):
            unparsable.append({"line": binding.original.line, "text": binding.original.string.strip()})
        elif binding.key is not None:
            values[binding.key] = binding.value

    if unparsable:
        raise ConfigurationError(
            message="Properties contain lines that are not key=value pairs",
            error_code="unparsable_line",
            details={"lines": unparsable},
        )
    return values


def load_properties_file(path: str | Path, prefix: str = DEFAULT_PREFIX) -> DevServicesConfig:
    """Read a properties file and build the configuration it describes."""
    properties_path = Path(path)
    if not properties_path.is_file():
        raise ConfigurationError(
            message=f"Properties file not found: {properties_path}",
            error_code="missing_properties_file",
            details={"path": str(properties_path)},
        )

    values = parse_properties(properties_path.read_text(encoding="utf-8"))
    config = load_properties(values, prefix=prefix)
    logger.info(
        "devservices.properties.loaded",
        path=str(properties_path),
        enabled=config.enabled,
        shared=config.shared,
        service_name=config.service_name,
        caches=len(config.caches),
    )
    return config


def load_properties(values: Mapping[str, str | None], prefix: str = DEFAULT_PREFIX) -> DevServicesConfig:
    """Build a configuration from the keys under ``prefix``.

    Keys outside the prefix are ignored. Empty values count as unset, so the
    option keeps its default.

    Raises:
        ConfigurationError: If a value cannot be converted to its option type.
    """
    scope = prefix.rstrip(".") + "."
    fields: dict[str, Any] = {}
    caches: dict[str, str] = {}
    sources: dict[str, str] = {}

    for raw_key, raw_value in values.items():
        if not raw_key.startswith(scope):
            continue
        suffix = raw_key[len(scope) :]
        option = option_for_key(suffix)
        if option is None:
            logger.warning("devservices.properties.unknown_key", key=raw_key)
            continue

        value = (raw_value or "").strip()
        if not value:
            continue

        if option.is_mapping:
            caches[_cache_name(suffix[len(CACHES_KEY) + 1 :])] = value
        elif option.field == "artifacts":
            artifacts = [item.strip() for item in value.split(",") if item.strip()]
            if artifacts:
                fields["artifacts"] = artifacts
        else:
            fields[option.field] = value
        sources.setdefault(option.field, raw_key)

    if caches:
        fields["caches"] = caches

    try:
        return DevServicesConfig(**fields)
    except ValidationError as exc:
        errors = exc.errors()
        keys = sorted({sources.get(str(error["loc"][0]), str(error["loc"][0])) for error in errors})
        raise ConfigurationError(
            message="Invalid dev-services configuration value",
            error_code="invalid_option",
            details={"keys": keys, "errors": [error["msg"] for error in errors]},
        ) from exc


def _cache_name(raw: str) -> str:
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return raw[1:-1]
    return raw
