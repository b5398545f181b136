# tests/conftest.py
import pytest
import os
import sys
import tempfile
from decimal import Decimal
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Settings are read at import time, so point them at a throwaway store first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault(
    "LOG_DIR", os.path.join(tempfile.gettempdir(), "storefront-variations-tests")
)

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

from app.db.base import Base
from app.db.models import Manufacturer, ProductType
from app.db.repositories.product_repository import ProductRepository
from app.db.repositories.variation_attribute_repository import (
    VariationAttributeRepository,
)
from app.schemas.product import ProductCreate
from app.services.variation_service import VariationService

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def db_engine():
    """In-memory SQLite engine shared by every session in a test."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite manages transactions itself unless told not to, which breaks SAVEPOINT
    @event.listens_for(engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Create a test database session."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def product_repository(db_session):
    return ProductRepository(db_session)


@pytest.fixture(scope="function")
def attribute_repository(db_session):
    return VariationAttributeRepository(db_session)


@pytest.fixture(scope="function")
def variation_service(db_session):
    """Create a variation service for testing."""
    return VariationService(db_session)


@pytest.fixture(scope="function")
def manufacturer(db_session):
    manufacturer = Manufacturer(name="Pleasure Labs")
    db_session.add(manufacturer)
    db_session.commit()
    db_session.refresh(manufacturer)
    return manufacturer


@pytest.fixture(scope="function")
def other_manufacturer(db_session):
    manufacturer = Manufacturer(name="Velvet Works")
    db_session.add(manufacturer)
    db_session.commit()
    db_session.refresh(manufacturer)
    return manufacturer


@pytest.fixture(scope="function")
def product_type(db_session):
    product_type = ProductType(name="Lubricants")
    db_session.add(product_type)
    db_session.commit()
    db_session.refresh(product_type)
    return product_type


@pytest.fixture(scope="function")
def make_product(product_repository, manufacturer, product_type):
    """Factory for catalog products; defaults to the shared manufacturer and type."""

    def _make(sku, name, **overrides):
        data = {
            "sku": sku,
            "name": name,
            "manufacturer_id": manufacturer.id,
            "product_type_id": product_type.id,
            "price": Decimal("19.99"),
        }
        data.update(overrides)
        return product_repository.create(ProductCreate(**data))

    return _make


@pytest.fixture(scope="function")
def energy_gel(make_product):
    """The canonical three-size group, created largest first."""
    return [
        make_product("EPG08", "Energy Potion Gel 8 OZ"),
        make_product("EPG04", "Energy Potion Gel 4 OZ"),
        make_product("EPG02", "Energy Potion Gel 2 OZ"),
    ]
