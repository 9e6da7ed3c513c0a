"""HTTP tests for the product, customer and invoice routes.

Services run against in-memory repositories via dependency overrides.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from servobill.application.services import CustomerService, InvoiceService, ProductService
from servobill.config import Settings
from servobill.infrastructure import dependencies
from servobill.infrastructure.dependencies import (
    get_customer_service,
    get_invoice_service,
    get_product_service,
)
from servobill.main import app
from tests.fakes import FakeCustomerRepository, FakeInvoiceRepository, FakeProductRepository


@pytest.fixture
def product_repo() -> FakeProductRepository:
    return FakeProductRepository()


@pytest_asyncio.fixture
async def client(product_repo: FakeProductRepository):
    customer_repo = FakeCustomerRepository()
    invoice_repo = FakeInvoiceRepository()
    app.dependency_overrides[get_product_service] = lambda: ProductService(product_repo)
    app.dependency_overrides[get_customer_service] = lambda: CustomerService(customer_repo)
    app.dependency_overrides[get_invoice_service] = lambda: InvoiceService(invoice_repo)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# ── Products ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_product_crud_roundtrip(client: AsyncClient):
    response = await client.post(
        "/api/v1/products",
        json={"category": "Services", "name": "Workshop", "price_cents": 95000, "tax_percentage": 19},
    )
    assert response.status_code == 201
    product = response.json()
    assert product["id"]
    assert product["created_at"] == product["updated_at"]

    response = await client.put(f"/api/v1/products/{product['id']}", json={"unit": "day"})
    assert response.status_code == 200
    assert response.json()["unit"] == "day"
    assert response.json()["name"] == "Workshop"

    response = await client.get(f"/api/v1/products/{product['id']}")
    assert response.status_code == 200

    response = await client.delete(f"/api/v1/products/{product['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == product["id"]

    response = await client.get(f"/api/v1/products/{product['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_products_filters_and_sorts(client: AsyncClient):
    for category, name in [("B", "Widget B"), ("A", "Widget Z"), ("A", "Gadget")]:
        await client.post("/api/v1/products", json={"category": category, "name": name})

    response = await client.get("/api/v1/products", params={"search": "widget"})
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Widget Z", "Widget B"]


@pytest.mark.asyncio
async def test_update_missing_product_is_404_without_write(
    client: AsyncClient, product_repo: FakeProductRepository
):
    response = await client.put("/api/v1/products/missing", json={"name": "X"})
    assert response.status_code == 404
    assert product_repo.save_calls == 0


@pytest.mark.asyncio
async def test_delete_missing_product_is_404(client: AsyncClient):
    response = await client.delete("/api/v1/products/missing")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_invalid_product_input_is_422(client: AsyncClient):
    response = await client.post(
        "/api/v1/products", json={"category": "A", "name": "B", "price_cents": -1}
    )
    assert response.status_code == 422

    response = await client.post(
        "/api/v1/products", json={"category": "A", "name": "B", "tax_percentage": 101}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_with_lifecycle_field_is_422(client: AsyncClient):
    created = (await client.post("/api/v1/products", json={"category": "A", "name": "B"})).json()
    response = await client.put(f"/api/v1/products/{created['id']}", json={"id": "other"})
    assert response.status_code == 422


# ── Customers ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_customer_number_cannot_be_changed_over_http(client: AsyncClient):
    created = (
        await client.post("/api/v1/customers", json={"name": "ACME", "customer_number": "C-1"})
    ).json()

    response = await client.put(
        f"/api/v1/customers/{created['id']}", json={"customer_number": "C-2"}
    )
    assert response.status_code == 422

    response = await client.get(f"/api/v1/customers/{created['id']}")
    assert response.json()["customer_number"] == "C-1"


@pytest.mark.asyncio
async def test_null_show_contact_is_422_and_keeps_record(client: AsyncClient):
    created = (
        await client.post(
            "/api/v1/customers",
            json={"name": "ACME", "customer_number": "C-1", "show_contact": True},
        )
    ).json()

    response = await client.put(f"/api/v1/customers/{created['id']}", json={"show_contact": None})
    assert response.status_code == 422

    response = await client.get(f"/api/v1/customers/{created['id']}")
    assert response.json()["show_contact"] is True


@pytest.mark.asyncio
async def test_duplicate_customer_number_is_422(client: AsyncClient):
    body = {"name": "ACME", "customer_number": "C-1"}
    assert (await client.post("/api/v1/customers", json=body)).status_code == 201

    response = await client.post("/api/v1/customers", json={**body, "name": "Other"})
    assert response.status_code == 422

    response = await client.get("/api/v1/customers")
    assert [c["name"] for c in response.json()] == ["ACME"]


# ── Invoices ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_invoice_totals_endpoint(client: AsyncClient):
    response = await client.post(
        "/api/v1/invoices",
        json={
            "number": "2026-0001",
            "items": [
                {"name": "Consulting", "quantity": 1, "price_cents": 1000, "tax_percentage": 19},
                {"name": "Travel", "quantity": 2, "price_cents": 500, "tax_percentage": 0},
            ],
        },
    )
    assert response.status_code == 201
    invoice = response.json()
    assert invoice["total_cents"] == 2190
    assert [i["total_cents"] for i in invoice["items"]] == [1190, 1000]

    response = await client.get(f"/api/v1/invoices/{invoice['id']}/totals")
    assert response.status_code == 200
    assert response.json() == {
        "subtotal_cents": 2000,
        "tax_cents": 190,
        "total_cents": 2190,
        "subtotal": "20.00 €",
        "tax": "1.90 €",
        "total": "21.90 €",
    }


@pytest.mark.asyncio
async def test_non_finite_numbers_are_422(client: AsyncClient):
    headers = {"Content-Type": "application/json"}

    response = await client.post(
        "/api/v1/invoices",
        content='{"items": [{"name": "X", "quantity": Infinity, "price_cents": 100}]}',
        headers=headers,
    )
    assert response.status_code == 422

    response = await client.post(
        "/api/v1/products",
        content='{"category": "A", "name": "B", "tax_percentage": NaN}',
        headers=headers,
    )
    assert response.status_code == 422

    response = await client.get("/api/v1/invoices")
    assert response.json() == []


@pytest.mark.asyncio
async def test_invoice_totals_for_missing_invoice_is_404(client: AsyncClient):
    response = await client.get("/api/v1/invoices/missing/totals")
    assert response.status_code == 404


# ── Authorization ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_mutations_require_api_key_when_configured(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(dependencies, "get_settings", lambda: Settings(api_key="secret"))
    body = {"category": "A", "name": "B"}

    response = await client.post("/api/v1/products", json=body)
    assert response.status_code == 401

    response = await client.post("/api/v1/products", json=body, headers={"X-API-Key": "wrong"})
    assert response.status_code == 401

    response = await client.post("/api/v1/products", json=body, headers={"X-API-Key": "secret"})
    assert response.status_code == 201

    # reads stay open
    response = await client.get("/api/v1/products")
    assert response.status_code == 200
