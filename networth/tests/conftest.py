from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from networth.app import create_app
from networth.config import Settings


@pytest.fixture()
def flask_app() -> Flask:
    app = create_app(Settings(env="test", log_level="WARNING"))
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(flask_app: Flask) -> FlaskClient:
    with flask_app.test_client() as test_client:
        yield test_client
