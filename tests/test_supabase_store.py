from pathlib import Path
from unittest.mock import MagicMock

from storefront.persistence.base import UnavailableStore
from storefront.persistence.supabase_store import SupabaseStore, connect_store

PRODUCT_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"
ORDER_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


def _client() -> MagicMock:
    client = MagicMock()
    client.table.return_value = MagicMock()
    return client


def test_create_product_maps_document_to_row():
    client = _client()
    table = client.table.return_value
    table.insert.return_value.execute.return_value.data = [
        {"id": PRODUCT_ID, "name": "Dragon", "description": "Resin", "price": 24.5, "emoji": "🐉", "created_at": "2024-01-01"}
    ]

    created = SupabaseStore(client).create_product(
        {"name": "Dragon", "description": "Resin", "price": 24.5, "emoji": "🐉", "createdAt": "2024-01-01"}
    )

    client.table.assert_called_with("products")
    table.insert.assert_called_once_with(
        {"name": "Dragon", "description": "Resin", "price": 24.5, "emoji": "🐉", "created_at": "2024-01-01"}
    )
    assert created == {
        "_id": PRODUCT_ID,
        "name": "Dragon",
        "description": "Resin",
        "price": 24.5,
        "emoji": "🐉",
        "createdAt": "2024-01-01",
    }


def test_order_extra_fields_live_in_details():
    client = _client()
    table = client.table.return_value
    table.insert.return_value.execute.return_value.data = [
        {
            "id": ORDER_ID,
            "order_number": "ORD-1",
            "status": "pending",
            "customer_name": "Ada",
            "details": {"items": [{"sku": "D1"}], "total": 12},
            "created_at": "2024-01-01T00:00:00+00:00",
            "payment_status": None,
        }
    ]

    created = SupabaseStore(client).create_order(
        {"orderNumber": "ORD-1", "status": "pending", "customerName": "Ada", "items": [{"sku": "D1"}], "total": 12}
    )

    row = table.insert.call_args.args[0]
    assert row == {
        "order_number": "ORD-1",
        "status": "pending",
        "customer_name": "Ada",
        "details": {"items": [{"sku": "D1"}], "total": 12},
    }
    assert created["_id"] == ORDER_ID
    assert created["items"] == [{"sku": "D1"}]
    assert created["orderNumber"] == "ORD-1"
    assert "paymentStatus" not in created


def test_list_orders_filters_and_sorts_newest_first():
    client = _client()
    query = client.table.return_value.select.return_value
    query.eq.return_value.order.return_value.execute.return_value.data = []

    assert SupabaseStore(client).list_orders(status="shipped") == []

    query.eq.assert_called_once_with("status", "shipped")
    query.eq.return_value.order.assert_called_once_with("created_at", desc=True)


def test_update_and_delete_report_matches():
    client = _client()
    table = client.table.return_value
    table.update.return_value.eq.return_value.execute.return_value.data = []
    table.delete.return_value.eq.return_value.execute.return_value.data = [{"id": ORDER_ID}]
    store = SupabaseStore(client)

    assert store.update_order(ORDER_ID, {"status": "shipped"}) is False
    table.update.assert_called_once_with({"status": "shipped"})
    assert store.delete_order(ORDER_ID) is True
    table.delete.return_value.eq.assert_called_once_with("id", ORDER_ID)


def test_empty_product_update_checks_existence():
    client = _client()
    table = client.table.return_value
    table.select.return_value.eq.return_value.limit.return_value.execute.return_value.data = [{"id": PRODUCT_ID}]

    assert SupabaseStore(client).update_product(PRODUCT_ID, {}) is True
    table.update.assert_not_called()


def test_settings_upsert_uses_store_row():
    client = _client()
    table = client.table.return_value
    table.upsert.return_value.execute.return_value.data = [{"id": "store", "theme": "dark", "updated_at": "now"}]

    saved = SupabaseStore(client).save_settings({"theme": "dark", "updatedAt": "now"})

    table.upsert.assert_called_once_with({"id": "store", "theme": "dark", "updated_at": "now"})
    assert saved == {"_id": "store", "theme": "dark", "updatedAt": "now"}


def test_connect_store_without_credentials_is_unavailable():
    store = connect_store(lambda: None)

    assert isinstance(store, UnavailableStore)
    assert store.connected is False


def test_connect_store_seeds_default_settings():
    client = _client()
    table = client.table.return_value
    table.select.return_value.eq.return_value.limit.return_value.execute.return_value.data = []

    store = connect_store(lambda: client)

    assert isinstance(store, SupabaseStore)
    table.insert.assert_called_once_with({"id": "store", "theme": "default"})


def test_connect_store_failure_is_not_fatal():
    client = _client()
    client.table.return_value.select.return_value.limit.return_value.execute.side_effect = RuntimeError("no route to host")

    store = connect_store(lambda: client)

    assert isinstance(store, UnavailableStore)
    assert "no route to host" in store.reason


def test_product_price_round_trips_unrounded():
    client = _client()
    table = client.table.return_value
    table.insert.return_value.execute.return_value.data = [
        {"id": PRODUCT_ID, "name": "Egg", "description": "Resin", "price": 19.999, "emoji": None, "created_at": "2024-01-01"}
    ]

    created = SupabaseStore(client).create_product({"name": "Egg", "description": "Resin", "price": 19.999})

    assert table.insert.call_args.args[0]["price"] == 19.999
    assert created["price"] == 19.999


def test_schema_stores_price_at_full_precision():
    schema = (Path(__file__).resolve().parents[1] / "sql" / "schema.sql").read_text(encoding="utf-8")

    assert "price double precision not null" in schema
    assert "numeric(" not in schema
