"""Shared fixtures: the Flask app with a recording contact sender."""

from unittest.mock import MagicMock

import pytest

from main import app as flask_app


@pytest.fixture
def sender():
    return MagicMock()


@pytest.fixture
def app(sender):
    flask_app.config.update(TESTING=True, CONTACT_DELIVERY=sender)
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()
