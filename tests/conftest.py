import mongomock
import pytest

from webapp import create_app

TEST_ENV = {
    "MONGODB_URI": "mongodb://localhost:27017/webapp_test",
    "LOG_LEVEL": "DEBUG",
}


@pytest.fixture()
def env():
    return dict(TEST_ENV)


@pytest.fixture()
def make_app(env):
    """create_app against an in-memory MongoDB."""

    def _make(**kwargs):
        kwargs.setdefault("env", env)
        kwargs.setdefault("client_factory", mongomock.MongoClient)
        app = create_app(**kwargs)
        app.config.update(TESTING=True)
        return app

    return _make


@pytest.fixture(scope="session")
def app():
    app = create_app(env=dict(TEST_ENV), client_factory=mongomock.MongoClient)
    app.config.update(
        TESTING=True,
    )
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
