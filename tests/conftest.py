"""Test fixtures and configuration."""
import uuid
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bakery.models import Base
from bakery.models.category import Category
from bakery.models.client import Client
from bakery.models.inventory import IntermediateProduct, RawMaterial
from bakery.models.recipe import Recipe, RecipeIngredient


@pytest.fixture(scope="function")
def engine():
    """Create an in-memory SQLite engine for testing."""
    # Use check_same_thread=False for compatibility with FastAPI TestClient
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    # Foreign keys off so lines can point at deleted or foreign stock
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=OFF")
        cursor.close()

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Create a test database session."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.rollback()
    session.close()


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def make_uuid():
    return uuid.uuid4()


@pytest.fixture
def client_factory(db):
    """Factory to create test tenants."""
    def _create(name="Test Bakery", slug=None, **kwargs):
        tenant = Client(
            id=kwargs.pop("id", make_uuid()),
            name=name,
            slug=slug or f"bakery-{uuid.uuid4().hex[:8]}",
            is_active=kwargs.pop("is_active", True),
            **kwargs,
        )
        db.add(tenant)
        db.flush()
        return tenant
    return _create


@pytest.fixture
def tenant(client_factory):
    """Default tenant for tests that only need one."""
    return client_factory(name="ABC Bakery", slug="abc-bakery")


@pytest.fixture
def category_factory(db, tenant):
    """Factory to create test categories."""
    def _create(name="Breads", category_type="RECIPE", **kwargs):
        category = Category(
            id=kwargs.pop("id", make_uuid()),
            client_id=kwargs.pop("client_id", tenant.id),
            name=name,
            category_type=category_type,
            **kwargs,
        )
        db.add(category)
        db.flush()
        return category
    return _create


@pytest.fixture
def raw_material_factory(db, tenant):
    """Factory to create test raw materials."""
    def _create(name="Bread Flour", quantity=100, unit="kg", **kwargs):
        material = RawMaterial(
            id=kwargs.pop("id", make_uuid()),
            client_id=kwargs.pop("client_id", tenant.id),
            name=name,
            quantity=Decimal(str(quantity)),
            unit=unit,
            unit_cost=kwargs.pop("unit_cost", Decimal("1.50")),
            is_contaminated=kwargs.pop("is_contaminated", False),
            **kwargs,
        )
        db.add(material)
        db.flush()
        return material
    return _create


@pytest.fixture
def intermediate_product_factory(db, tenant):
    """Factory to create test intermediate products."""
    def _create(name="Croissant Dough", quantity=10, unit="kg", **kwargs):
        product = IntermediateProduct(
            id=kwargs.pop("id", make_uuid()),
            client_id=kwargs.pop("client_id", tenant.id),
            name=name,
            quantity=Decimal(str(quantity)),
            unit=unit,
            unit_cost=kwargs.pop("unit_cost", Decimal("4.00")),
            status=kwargs.pop("status", "COMPLETED"),
            is_contaminated=kwargs.pop("is_contaminated", False),
            **kwargs,
        )
        db.add(product)
        db.flush()
        return product
    return _create


@pytest.fixture
def recipe_factory(db, tenant):
    """Factory to create test recipes."""
    def _create(name="Test Recipe", yield_quantity=1, yield_unit="loaves", **kwargs):
        recipe = Recipe(
            id=kwargs.pop("id", make_uuid()),
            client_id=kwargs.pop("client_id", tenant.id),
            name=name,
            yield_quantity=Decimal(str(yield_quantity)),
            yield_unit=yield_unit,
            is_active=kwargs.pop("is_active", True),
            created_at=datetime.utcnow(),
            updated_at=datetime.utcnow(),
            **kwargs,
        )
        db.add(recipe)
        db.flush()
        return recipe
    return _create


@pytest.fixture
def recipe_ingredient_factory(db):
    """Factory to create recipe ingredient lines.

    Pass either raw_material or intermediate_product, or a raw id through
    raw_material_id / intermediate_product_id for dangling references.
    """
    def _create(recipe, raw_material=None, intermediate_product=None, quantity=1, unit="kg", **kwargs):
        raw_material_id = kwargs.pop("raw_material_id", raw_material.id if raw_material else None)
        intermediate_product_id = kwargs.pop(
            "intermediate_product_id",
            intermediate_product.id if intermediate_product else None,
        )
        ri = RecipeIngredient(
            id=kwargs.pop("id", make_uuid()),
            recipe_id=recipe.id,
            raw_material_id=raw_material_id,
            intermediate_product_id=intermediate_product_id,
            quantity=Decimal(str(quantity)),
            unit=unit,
            position=kwargs.pop("position", len(recipe.ingredients)),
            **kwargs,
        )
        db.add(ri)
        db.flush()
        db.expire(recipe, ["ingredients"])
        return ri
    return _create
