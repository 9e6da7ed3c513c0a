"""Integration tests for the SQLAlchemy repositories against in-memory SQLite."""

from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from servobill.application.interfaces import ProductRepository
from servobill.domain.entities import InvoiceItem, Product
from servobill.domain.exceptions import DomainValidationError
from servobill.infrastructure.database.base import Base
from servobill.infrastructure.database.models import ProductModel
from servobill.infrastructure.database.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyInvoiceRepository,
    SQLAlchemyProductRepository,
)
from servobill.infrastructure.database.repositories.base import SQLAlchemyRepository
from tests.fakes import sequential_ids


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as s:
        yield s
    await engine.dispose()


@pytest.mark.asyncio
async def test_create_does_not_persist_until_save(session: AsyncSession):
    repo = SQLAlchemyProductRepository(session, id_generator=sequential_ids("prod"))
    product = repo.create(category="Services", name="Workshop", price_cents=95000)
    assert product.id == "prod-1"
    assert await repo.get_by_id("prod-1") is None

    await repo.save(product)
    loaded = await repo.get_by_id("prod-1")
    assert loaded is not None
    assert loaded.name == "Workshop"
    assert loaded.price_cents == 95000
    assert loaded.created_at == product.created_at
    assert loaded.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_save_overwrites_existing_row(session: AsyncSession):
    repo = SQLAlchemyProductRepository(session)
    product = repo.create(category="A", name="Old")
    await repo.save(product)

    product.update(name="New", tax_percentage=7)
    await repo.save(product)

    loaded = await repo.get_by_id(product.id)
    assert loaded.name == "New"
    assert loaded.tax_percentage == 7
    assert len(await repo.list_by_query()) == 1


@pytest.mark.asyncio
async def test_list_by_query_filters_and_paginates(session: AsyncSession):
    repo = SQLAlchemyProductRepository(session)
    for i in range(5):
        await repo.save(repo.create(category="A" if i % 2 else "B", name=f"P{i}"))

    assert len(await repo.list_by_query(where={"category": "A"})) == 2
    assert len(await repo.list_by_query(where={"category": "B"})) == 3
    assert len(await repo.list_by_query(skip=1, limit=2)) == 2


@pytest.mark.asyncio
async def test_list_by_query_rejects_unknown_column(session: AsyncSession):
    repo = SQLAlchemyProductRepository(session)
    with pytest.raises(DomainValidationError):
        await repo.list_by_query(where={"search": "x"})


@pytest.mark.asyncio
async def test_delete_reports_absence(session: AsyncSession):
    repo = SQLAlchemyCustomerRepository(session)
    customer = repo.create(name="ACME", customer_number="C-1")
    await repo.save(customer)

    assert await repo.delete(customer.id) is True
    assert await repo.delete(customer.id) is False
    assert await repo.get_by_id(customer.id) is None


@pytest.mark.asyncio
async def test_customer_roundtrip(session: AsyncSession):
    repo = SQLAlchemyCustomerRepository(session)
    customer = repo.create(name="ACME", customer_number="C-1", show_contact=True, city="Berlin")
    await repo.save(customer)

    loaded = await repo.get_by_id(customer.id)
    assert loaded.customer_number == "C-1"
    assert loaded.show_contact is True
    assert loaded.city == "Berlin"


@pytest.mark.asyncio
async def test_duplicate_customer_number_is_a_validation_error(session: AsyncSession):
    repo = SQLAlchemyCustomerRepository(session)
    await repo.save(repo.create(name="ACME", customer_number="C-1"))

    with pytest.raises(DomainValidationError):
        await repo.save(repo.create(name="Other", customer_number="C-1"))
    await session.rollback()


@pytest.mark.asyncio
async def test_blank_record_is_refused_before_any_write(session: AsyncSession):
    repo = SQLAlchemyProductRepository(session)
    product = repo.create()
    assert product.id

    with pytest.raises(DomainValidationError) as exc_info:
        await repo.save(product)
    assert exc_info.value.field == "category"
    assert await repo.get_by_id(product.id) is None


@pytest.mark.asyncio
async def test_invoice_items_are_embedded_in_order(session: AsyncSession):
    repo = SQLAlchemyInvoiceRepository(session)
    invoice = repo.create(
        customer_id="c-1",
        number="2026-0001",
        invoiced_at=date(2026, 1, 15),
        items=[
            InvoiceItem(id="b", name="Second?", quantity=2, price_cents=500),
            InvoiceItem(id="a", name="First?", quantity=1, price_cents=1000, tax_percentage=19),
        ],
    )
    await repo.save(invoice)

    loaded = await repo.get_by_id(invoice.id)
    assert [i.id for i in loaded.items] == ["b", "a"]
    assert loaded.invoiced_at == date(2026, 1, 15)
    assert loaded.total_cents == 2190

    loaded.add_item(InvoiceItem(id="c", quantity=1, price_cents=1))
    await repo.save(loaded)

    reloaded = await repo.get_by_id(invoice.id)
    assert [i.id for i in reloaded.items] == ["b", "a", "c"]
    assert reloaded.total_cents == 2191


def test_repository_must_provide_both_mappers():
    class ProductRepositoryWithoutMappers(
        SQLAlchemyRepository[Product, ProductModel], ProductRepository
    ):
        model_class = ProductModel

    with pytest.raises(TypeError):
        ProductRepositoryWithoutMappers(session=None)
