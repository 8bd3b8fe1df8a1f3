"""Value type holding the Infinispan dev-services options."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_serializer

from infinispan_devservices.schema import DEFAULT_SERVICE_NAME


def _read_only(caches: Mapping[str, str]) -> Mapping[str, str]:
    # Copy first so the caller's dict cannot change the snapshot either
    return MappingProxyType(dict(caches))


CacheTemplates = Annotated[Mapping[str, str], AfterValidator(_read_only)]


class DevServicesConfig(BaseModel):
    """Snapshot of the dev-services options for one configuration load.

    Instances are frozen and compare by value, so the orchestrator can use them
    as a cache key and reuse a running server while the configuration is
    unchanged. ``caches`` is exposed as a read-only mapping. Only the shape is
    checked here: ports, artifact coordinates and cache templates are handed to
    the server untouched.
    """

    enabled: bool = True
    port: int | None = None
    shared: bool = True
    service_name: str = DEFAULT_SERVICE_NAME
    artifacts: tuple[str, ...] | None = None
    caches: CacheTemplates = Field(default_factory=dict, validate_default=True)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_serializer("caches")
    def _serialize_caches(self, caches: Mapping[str, str]) -> dict[str, str]:
        return dict(caches)

    def __hash__(self) -> int:
        return hash(
            (
                self.enabled,
                self.port,
                self.shared,
                self.service_name,
                self.artifacts,
                frozenset(self.caches.items()),
            )
        )
