import pytest

import lazypatch
from lazypatch.structs.configuration import settings_var


def pytest_configure(config):
    # Unexpected warnings should fail the tests. Use `-Wignore` to explicitly disable it.
    config.addinivalue_line('filterwarnings', 'error')


@pytest.fixture()
def settings():
    return lazypatch.Settings()


@pytest.fixture()
def settings_in_context(settings):
    token = settings_var.set(settings)
    try:
        yield settings
    finally:
        settings_var.reset(token)


@pytest.fixture()
def parser(mocker):
    """ A member parser that remembers the calls, and does nothing else. """
    return mocker.Mock(return_value=None)


@pytest.fixture()
def node(parser):
    return lazypatch.ChangeTrackingNode(parser=parser)


@pytest.fixture()
def child():
    return lazypatch.ChangeTrackingNode()


