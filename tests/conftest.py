import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before the domain is first imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def _aurum_domain():
    """Initialize the aurum domain once per session."""
    from aurum.domain import aurum

    aurum.init()
    return aurum


@pytest.fixture(autouse=True)
def run_around_tests(_aurum_domain):
    """Push domain context before each test, wipe the memory stores after."""
    ctx = _aurum_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def process():
    """Process a command synchronously and return the handler's result."""
    from protean import current_domain

    def _process(command):
        return current_domain.process(command, asynchronous=False)

    return _process


@pytest.fixture()
def seeded():
    from aurum.seed import seed

    seed()
