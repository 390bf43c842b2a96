"""Pytest configuration and fixtures"""
import os
import pytest
from fastapi.testclient import TestClient

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SHOPCART_ENV", "test")

from api.index import app
from shopcart.auth import SessionStore, get_session_store
from shopcart.cart import CartManager, get_cart_manager
from shopcart.services.catalog import ProductCatalog, get_catalog


SAMPLE_PRODUCTS = [
    {"id": 1, "name": "Classic T-Shirt", "price": "10.00", "stock": 10},
    {"id": 2, "name": "Canvas Tote Bag", "price": "10.00", "stock": 10},
    {"id": 3, "name": "Enamel Pin", "price": "2.50", "stock": 3},
    {"id": 4, "name": "Sold Out Hoodie", "price": "45.00", "stock": 0},
]


@pytest.fixture
def sample_products():
    """Raw product rows"""
    return [dict(row) for row in SAMPLE_PRODUCTS]


@pytest.fixture
def catalog(sample_products):
    """Fresh catalog per test"""
    return ProductCatalog.from_dicts(sample_products)


@pytest.fixture
def sessions():
    """Fresh session store per test"""
    return SessionStore()


@pytest.fixture
def session_id(sessions):
    """Token of a logged-in shopper"""
    return sessions.create_web_session("testuser")


@pytest.fixture
def cart_manager(catalog, sessions):
    """CartManager wired to the test catalog and sessions"""
    return CartManager(catalog=catalog, sessions=sessions)


@pytest.fixture
def client(catalog, sessions, cart_manager):
    """Test client with the singletons replaced by per-test instances"""
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_session_store] = lambda: sessions
    app.dependency_overrides[get_cart_manager] = lambda: cart_manager
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(session_id):
    """Bearer header for the logged-in shopper"""
    return {"Authorization": f"Bearer {session_id}"}
