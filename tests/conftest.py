import uuid

import pytest
from fastapi.testclient import TestClient

from storefront.config import Settings
from storefront.main import create_app
from storefront.models.domain import GeoCoordinate, PaymentResult
from storefront.persistence.base import Document, StoreHandle


class InMemoryStore(StoreHandle):
    def __init__(self) -> None:
        self.products: dict[str, Document] = {}
        self.orders: dict[str, Document] = {}
        self.settings: Document | None = None
        self.calls: list[str] = []

    def list_products(self):
        self.calls.append("list_products")
        return list(self.products.values())

    def create_product(self, product):
        self.calls.append("create_product")
        doc = {"_id": str(uuid.uuid4()), **product}
        self.products[doc["_id"]] = doc
        return dict(doc)

    def update_product(self, product_id, fields):
        self.calls.append("update_product")
        if product_id not in self.products:
            return False
        self.products[product_id].update(fields)
        return True

    def delete_product(self, product_id):
        self.calls.append("delete_product")
        return self.products.pop(product_id, None) is not None

    def create_order(self, order):
        self.calls.append("create_order")
        doc = {"_id": str(uuid.uuid4()), **order}
        self.orders[doc["_id"]] = doc
        return dict(doc)

    def list_orders(self, status=None):
        self.calls.append("list_orders")
        orders = [o for o in self.orders.values() if status is None or o.get("status") == status]
        return sorted(orders, key=lambda o: o.get("createdAt", ""), reverse=True)

    def update_order(self, order_id, fields):
        self.calls.append("update_order")
        if order_id not in self.orders:
            return False
        self.orders[order_id].update(fields)
        return True

    def delete_order(self, order_id):
        self.calls.append("delete_order")
        return self.orders.pop(order_id, None) is not None

    def get_settings(self):
        self.calls.append("get_settings")
        return dict(self.settings) if self.settings else None

    def save_settings(self, fields):
        self.calls.append("save_settings")
        self.settings = {"_id": "store", **(self.settings or {}), **fields}
        return dict(self.settings)


class StubGeocoder:
    def __init__(self, result: GeoCoordinate | None = GeoCoordinate(35.8456, -103.3181)) -> None:
        self.result = result
        self.addresses: list[str] = []

    def resolve(self, address):
        self.addresses.append(address)
        return self.result


class StubGateway:
    def __init__(self, status: str = "COMPLETED", error: Exception | None = None) -> None:
        self.status = status
        self.error = error
        self.requests: list[dict] = []

    def submit_payment(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        return PaymentResult(payment_id="pay_123", status=self.status)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        static_root=None,
        google_maps_api_key="test-key",
        square_application_id="sq0idp-test",
        square_location_id="LOC123",
    )


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def geocoder() -> StubGeocoder:
    return StubGeocoder()


@pytest.fixture
def gateway() -> StubGateway:
    return StubGateway()


@pytest.fixture
def api_client(test_settings, memory_store, geocoder, gateway) -> TestClient:
    app = create_app(test_settings, store=memory_store, geocoder=geocoder, payment_gateway=gateway)
    return TestClient(app)
