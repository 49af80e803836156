# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import soora_api.models  # noqa: F401  (registers every table on Base)
from soora_api.database.session import Base, get_db
from soora_api.main import app
from soora_api.models import (
    Address,
    AddressType,
    Order,
    OrderItem,
    OrderStatus,
    Product,
    User,
    UserRole,
)
from soora_api.queries.product_queries import slugify
from soora_api.services.auth_service import create_access_token


@pytest.fixture(scope="function")
def engine():
    """A fresh in-memory SQLite database shared by every session in the test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture(scope="function")
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the lifespan would touch the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Data builders
# ---------------------------------------------------------------------------

@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role=UserRole.CUSTOMER, **kwargs):
        counter["n"] += 1
        data = {
            "email": f"user{counter['n']}@soora.sg",
            "name": f"User {counter['n']}",
            "phone": "+6590000000",
            "role": role,
        }
        data.update(kwargs)
        user = User(**data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_product(db):
    def _make(name="Test Product", **kwargs):
        data = {
            "name": name,
            "slug": slugify(name),
            "price": 10.0,
            "stock": 50,
            "category": "Accessories",
            "brand": "Lumen",
            "description": f"{name} description",
        }
        data.update(kwargs)
        product = Product(**data)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture
def make_address(db):
    def _make(user, **kwargs):
        data = {
            "user_id": user.id,
            "type": AddressType.HOME,
            "name": "Home",
            "street": "1 Orchard Road",
            "postal_code": "238801",
            "district": "Orchard",
            "is_default": False,
        }
        data.update(kwargs)
        address = Address(**data)
        db.add(address)
        db.commit()
        db.refresh(address)
        return address

    return _make


@pytest.fixture
def make_order(db):
    def _make(user, status=OrderStatus.PENDING, total=100.0, items=(), **kwargs):
        order = Order(user_id=user.id, status=status, total=total, **kwargs)
        for product, qty in items:
            order.items.append(OrderItem(product_id=product.id, quantity=qty, price=product.price))
        db.add(order)
        db.commit()
        db.refresh(order)
        return order

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}

    return _headers


@pytest.fixture
def customer(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(role=UserRole.ADMIN, email="admin@soora.sg", name="Admin")
