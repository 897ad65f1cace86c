"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (the address identity unique constraint works the same on SQLite)
"""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models import (
    Address, City, Delivery, Product, ProductSale, Sale, State,
)
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Seed data ───────────────────────────────────────────────────

@pytest.fixture
async def seed_locations(test_db):
    """Two states with one city each: SC/Joinville and PR/Curitiba."""
    sc = State(name="Santa Catarina", initials="SC")
    pr = State(name="Parana", initials="PR")
    test_db.add_all([sc, pr])
    await test_db.flush()
    joinville = City(name="Joinville", state_id=sc.id)
    curitiba = City(name="Curitiba", state_id=pr.id)
    test_db.add_all([joinville, curitiba])
    await test_db.commit()
    return {"sc": sc, "pr": pr, "joinville": joinville, "curitiba": curitiba}


@pytest.fixture
async def seed_address(test_db, seed_locations):
    address = Address(
        street="Rua Florianopolis", number=123, complement="Apto. 302",
        cep="89229780", city_id=seed_locations["joinville"].id,
    )
    test_db.add(address)
    await test_db.commit()
    await test_db.refresh(address)
    return address


@pytest.fixture
async def seed_sale(test_db):
    sale = Sale()
    test_db.add(sale)
    await test_db.commit()
    await test_db.refresh(sale)
    return sale


@pytest.fixture
async def seed_delivery(test_db, seed_address, seed_sale):
    delivery = Delivery(address_id=seed_address.id, sale_id=seed_sale.id)
    test_db.add(delivery)
    await test_db.commit()
    await test_db.refresh(delivery)
    return delivery


@pytest.fixture
async def seed_products(test_db):
    products = [
        Product(name="Agua Mineral 500ml", suggested_price=Decimal("2.50")),
        Product(name="Gas de Cozinha P13", suggested_price=Decimal("110.00")),
        Product(name="Agua Mineral 20L", suggested_price=Decimal("15.00")),
    ]
    test_db.add_all(products)
    await test_db.commit()
    for p in products:
        await test_db.refresh(p)
    return products


@pytest.fixture
async def seed_sold_product(test_db, seed_products, seed_sale):
    product = seed_products[1]
    test_db.add(ProductSale(
        sale_id=seed_sale.id, product_id=product.id,
        amount=1, unit_price=product.suggested_price,
    ))
    await test_db.commit()
    return product
