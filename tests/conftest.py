from __future__ import annotations

from random import Random

import pytest

from weather_app import create_app
from weather_app.config import Config


class TestConfig(Config):
    TESTING = True
    PRODUCTION = False
    LOG_LEVEL = "DEBUG"


class ProductionTestConfig(TestConfig):
    PRODUCTION = True


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def rng():
    return Random(1234)


@pytest.fixture()
def production_app():
    return create_app(ProductionTestConfig)
