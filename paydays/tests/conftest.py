from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from paydays.app import create_app
from paydays.config import Settings


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app(Settings(log_level="WARNING"))
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
