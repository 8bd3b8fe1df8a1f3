"""Helpers the orchestrator uses to tag shared servers and decide on reuse."""

from __future__ import annotations

from infinispan_devservices.config import DevServicesConfig
from infinispan_devservices.logging import get_logger
from infinispan_devservices.schema import FIELD_NAMES

DISCOVERY_LABEL = "quarkus-dev-service-infinispan"

logger = get_logger(__name__)


def discovery_labels(config: DevServicesConfig) -> dict[str, str]:
    """Container labels used to find (and tag) a shared server.

    Unshared servers carry no discovery label so they are never picked up by
    another build.
    """
    if not config.shared:
        return {}
    return {DISCOVERY_LABEL: config.service_name}


def changed_fields(previous: DevServicesConfig, current: DevServicesConfig) -> list[str]:
    """Names of the options whose values differ, in option-table order."""
    return [name for name in FIELD_NAMES if getattr(previous, name) != getattr(current, name)]


def can_reuse(previous: DevServicesConfig | None, current: DevServicesConfig) -> bool:
    """Return True when a server started for ``previous`` can serve ``current``."""
    if previous is None:
        logger.debug("devservices.reuse.decision", reuse=False, reason="no_previous_config")
        return False

    if previous == current:
        logger.debug("devservices.reuse.decision", reuse=True, service_name=current.service_name)
        return True

    logger.info(
        "devservices.reuse.decision",
        reuse=False,
        reason="config_changed",
        changed=changed_fields(previous, current),
    )
    return False
