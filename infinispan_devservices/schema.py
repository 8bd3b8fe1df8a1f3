"""Option table for the Infinispan dev-services configuration group."""

from __future__ import annotations

from typing import Any, NamedTuple

DEFAULT_PREFIX = "quarkus.infinispan-client.devservices"
DEFAULT_SERVICE_NAME = "infinispan"
CACHES_KEY = "caches"


class OptionSpec(NamedTuple):
    """One recognised option: its key suffix, target field, type and default."""

    key: str
    field: str
    type_name: str
    default: Any
    description: str

    @property
    def is_mapping(self) -> bool:
        """Mapping options take one key per entry (``caches.<name>``)."""
        return self.key == CACHES_KEY


OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        key="enabled",
        field="enabled",
        type_name="boolean",
        default=True,
        description="Whether dev services may start an Infinispan server in dev or test mode.",
    ),
    OptionSpec(
        key="port",
        field="port",
        type_name="integer",
        default=None,
        description="Optional fixed port the dev service listens on. A random port is chosen when unset.",
    ),
    OptionSpec(
        key="shared",
        field="shared",
        type_name="boolean",
        default=True,
        description="Reuse a running server found through label-based discovery instead of starting a new one.",
    ),
    OptionSpec(
        key="service-name",
        field="service_name",
        type_name="string",
        default=DEFAULT_SERVICE_NAME,
        description="Value of the discovery label attached to (and searched on) shared servers.",
    ),
    OptionSpec(
        key="artifacts",
        field="artifacts",
        type_name="list of string",
        default=None,
        description="Maven coordinates or URLs of extra libraries added to the server. "
        "Invalid values fail at server startup.",
    ),
    OptionSpec(
        key=CACHES_KEY,
        field="caches",
        type_name="map of string to string",
        default={},
        description="Caches to pre-create, keyed by name, each with a cache template such as DIST_SYNC. "
        "Unknown templates fail at server startup.",
    ),
)

FIELD_NAMES: tuple[str, ...] = tuple(option.field for option in OPTIONS)

_BY_KEY = {option.key: option for option in OPTIONS}


def option_for_key(key: str) -> OptionSpec | None:
    """Return the option a key suffix binds to, or None when it is not recognised.

    ``caches.<name>`` resolves to the ``caches`` option; a bare ``caches`` key
    does not, since each cache is configured under its own key.
    """
    if key.startswith(CACHES_KEY + "."):
        return _BY_KEY[CACHES_KEY] if len(key) > len(CACHES_KEY) + 1 else None
    option = _BY_KEY.get(key)
    if option is not None and option.is_mapping:
        return None
    return option
