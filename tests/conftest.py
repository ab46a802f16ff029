"""
Shared pytest fixtures for the test suite.
"""

import pytest
from loguru import logger

from citydistance.domain.models import Place
from citydistance.domain.services import DistanceCalculator, LocationDirectory
from citydistance.domain.value_objects import City, Location
from citydistance.services.workflow import (
    ComposedWorkflow,
    ResultSerializer,
    StagedWorkflow,
)
from citydistance.utils.config import ConfigManager


@pytest.fixture
def error_messages():
    """Collect messages logged at ERROR or above while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="ERROR"
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture(scope="session")
def config():
    """Load the packaged configuration."""
    return ConfigManager()


@pytest.fixture
def directory(config):
    """Directory seeded from the packaged configuration."""
    return LocationDirectory.from_config(config.directory)


@pytest.fixture
def calculator():
    return DistanceCalculator()


@pytest.fixture
def renderer():
    return ResultSerializer()


@pytest.fixture
def composed_workflow(directory, calculator, renderer):
    return ComposedWorkflow(directory=directory, calculator=calculator, renderer=renderer)


@pytest.fixture
def staged_workflow(directory, calculator, renderer):
    return StagedWorkflow(directory=directory, calculator=calculator, renderer=renderer)


@pytest.fixture
def houston():
    return Place(
        name=City.create("Houston, TX"),
        location=Location.create(29.760427, -95.369803),
    )


@pytest.fixture
def san_mateo():
    return Place(
        name=City.create("San Mateo, CA"),
        location=Location.create(37.5599, -122.3131),
    )


@pytest.fixture
def atlantis():
    return Place(name=City.create("Atlantis"))
