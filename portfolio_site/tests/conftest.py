import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from portfolio_site.main import app
from portfolio_site.api.dependencies import get_backend_context
from portfolio_site.core.config import settings
from portfolio_site.tests.fixtures.session import *


def _client_for(context, mocker):
    # keep the lifespan bootstrap away from any configured backend
    mocker.patch.object(settings, "BACKEND_CONFIG", {})
    app.dependency_overrides[get_backend_context] = lambda: context
    return TestClient(app)


@pytest_asyncio.fixture(scope="function", loop_scope="function")
async def ready_client(ready_context, mocker):
    """Fixture providing a TestClient bound to a context with session 'anon123'."""
    with _client_for(ready_context, mocker) as c:
        yield c

    # Clean up overrides after the test finished
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function", loop_scope="function")
async def unconfigured_client(unconfigured_context, mocker):
    """Fixture providing a TestClient bound to a context bootstrapped without config."""
    with _client_for(unconfigured_context, mocker) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def lifespan_client(mocker):
    """Fixture providing a TestClient that uses the lifespan-created context."""
    mocker.patch.object(settings, "BACKEND_CONFIG", {})
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def failing_client(mocker):
    """Fixture providing a TestClient whose backend dependency raises."""

    def broken_context():
        raise RuntimeError("backend context unavailable")

    mocker.patch.object(settings, "BACKEND_CONFIG", {})
    app.dependency_overrides[get_backend_context] = broken_context
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c

    app.dependency_overrides.clear()
