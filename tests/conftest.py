import os

# Environment setup for testing
os.environ["FLUENT_DOUBLE_LOG_LEVEL"] = "DEBUG"
os.environ["FLUENT_DOUBLE_MESSAGE_REPR_LIMIT"] = "200"

import logging

import pytest

from fluent_double.core.config import FluentDoubleSettings
from fluent_double.service.session import ChainSession
from fluent_double.service.surface_registry import SurfaceRegistry
from utils import ChainScenarioFactory


@pytest.fixture
def test_settings():
    """Settings with safe defaults, independent of the environment"""
    return FluentDoubleSettings(
        LOG_LEVEL="DEBUG",
        ALLOW_EXTRA_CALLS=False,
        MESSAGE_REPR_LIMIT=200,
        VERIFY_ON_TEARDOWN=True,
    )


@pytest.fixture
def registry():
    """Fresh registry with the built-in surfaces"""
    return SurfaceRegistry()


@pytest.fixture
def session(registry, test_settings):
    """Strict session: extra calls fail"""
    return ChainSession(registry=registry, settings=test_settings)


@pytest.fixture
def lenient_session(registry, test_settings):
    """Session that absorbs calls made after a chain is consumed"""
    return ChainSession(registry=registry, settings=test_settings, allow_extra_calls=True)


@pytest.fixture
def country_query(session):
    """select -> field -> equals('USA') -> sort -> get_query -> execute() == 'OK'"""
    return ChainScenarioFactory.record_country_query(session)


@pytest.fixture
def capture_logs(caplog):
    """Capture logs for testing"""
    caplog.set_level(logging.DEBUG, logger="fluent_double")
    yield caplog
