import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.adapter.repositories.invoice_repository import JsonFileInvoiceRepository
from src.depends import get_invoice_repository


class IntegrationConfig(ApplicationConfig):
    ENABLE_SENTRY = 0
    ENABLE_LOGGING_MIDDLEWARE = True


@pytest_asyncio.fixture
async def invoice_repo(tmp_path):
    """Repository backed by a temp file, loaded like on startup"""
    repo = JsonFileInvoiceRepository(tmp_path / "invoices.json")
    await repo.load()
    return repo


@pytest.fixture
def app(invoice_repo, tmp_path):
    """Create app with the repository dependency pointed at a temp file"""
    from src.api.app import create_app

    IntegrationConfig.STORAGE_FILE = str(tmp_path / "invoices.json")
    app = create_app(IntegrationConfig)

    app.dependency_overrides[get_invoice_repository] = lambda: invoice_repo
    return app


@pytest_asyncio.fixture
async def client(app):
    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def api_prefix():
    return IntegrationConfig.API_PREFIX
