import pytest

from app import app as flask_app


@pytest.fixture
def app():
    flask_app.config.update(
        TESTING=True,
        SUBSCRIBE_WEBHOOK_URL='https://hooks.example.com/subscribe',
        SUBSCRIBE_SOURCE='prjct-zenith-calculator',
        SUBSCRIBE_TIMEOUT=5,
    )
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()
