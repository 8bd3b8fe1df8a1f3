"""Shared fixtures for dev-services configuration tests."""

import logging
import os

import pytest
import structlog

from infinispan_devservices.config import DevServicesConfig
from infinispan_devservices.settings import ENV_PREFIX


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and any local .env file."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def restore_logging():
    """Undo the root logger and structlog changes made by configure_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def sample_properties_text() -> str:
    """Properties file overriding every dev-services option."""
    return """
# Infinispan dev services
quarkus.infinispan-client.devservices.enabled=true
quarkus.infinispan-client.devservices.port=31000
quarkus.infinispan-client.devservices.shared=false
quarkus.infinispan-client.devservices.service-name=grid-a
quarkus.infinispan-client.devservices.artifacts=org.postgresql:postgresql:42.3.1, https://repo.example.com/lib.jar
quarkus.infinispan-client.devservices.caches.cache1=DIST_SYNC
quarkus.infinispan-client.devservices.caches.cache2=REPL_SYNC

quarkus.http.port=8080
"""


@pytest.fixture
def custom_config() -> DevServicesConfig:
    """Configuration matching ``sample_properties_text``."""
    return DevServicesConfig(
        enabled=True,
        port=31000,
        shared=False,
        service_name="grid-a",
        artifacts=["org.postgresql:postgresql:42.3.1", "https://repo.example.com/lib.jar"],
        caches={"cache1": "DIST_SYNC", "cache2": "REPL_SYNC"},
    )
