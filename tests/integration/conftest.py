import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.adapter.repositories.points_ledger_repository import InMemoryPointsLedgerRepository


class IntegrationConfig:
    API_PREFIX = ""
    CORS_ORIGINS = []
    CORS_ALLOW_CREDENTIALS = True
    LOG_LEVEL = "INFO"
    LOG_PATH = None
    ENABLE_LOGGING_MIDDLEWARE = True
    RECONCILIATION_ENABLED = False
    RECONCILIATION_INTERVAL_SECONDS = 3600


@pytest.fixture
def api_ledger():
    """Ledger served by the test application"""
    return InMemoryPointsLedgerRepository()


@pytest_asyncio.fixture
async def client(api_ledger):
    """Create test client bound to a fresh ledger"""
    from src.api.app import create_app

    app = create_app(IntegrationConfig, ledger=api_ledger)

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
