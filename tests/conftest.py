# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from fakes import FakeCategoryRepository, FakeProductRepository, InMemoryStore
from storefront.services import AssetStore, CatalogService
from storefront.web import create_app


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def assets(tmp_path):
    return AssetStore(tmp_path / "uploads", max_size=5 * 1024 * 1024, io_timeout=5)


@pytest.fixture
def catalog(store, assets):
    return CatalogService(
        FakeCategoryRepository(store),
        FakeProductRepository(store),
        assets
    )


@pytest.fixture
def client(catalog):
    return TestClient(create_app(catalog))


@pytest.fixture
def uploaded_files(assets):
    def _list():
        return sorted(path.name for path in assets.upload_path.iterdir())
    return _list
