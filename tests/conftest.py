import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import src.api.models  # noqa: F401
from src.api.models.usersModel import User
from src.api.models.shop_model.shopsModel import Shop


class FakeNotifier:
    """Records stock alerts instead of sending email"""

    def __init__(self):
        self.shop_calls = []
        self.admin_calls = []

    def notify_shop_out_of_stock(self, product, shop):
        self.shop_calls.append((product, shop))

    def notify_admin_out_of_stock(self, product):
        self.admin_calls.append(product)


class FailingNotifier(FakeNotifier):
    def notify_shop_out_of_stock(self, product, shop):
        raise RuntimeError("smtp down")

    def notify_admin_out_of_stock(self, product):
        raise RuntimeError("smtp down")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def owner(session):
    user = User(name="Sara Owner", email="owner@example.com")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def admin(session):
    user = User(name="Root Admin", email="admin@example.com", is_root=True)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def shop(session, owner):
    shop = Shop(owner_id=owner.id, name="Lamp Corner", slug="lamp-corner", is_active=True)
    session.add(shop)
    session.commit()
    session.refresh(shop)
    return shop


@pytest.fixture
def product_data():
    return {
        "name": "Desk Lamp",
        "description": "Adjustable LED desk lamp",
        "category": "Home",
        "brand": "Lumen",
        "material": "Aluminium",
        "price": 39.9,
        "stock_quantity": 12,
        "images": ["https://cdn.example.com/lamp-front.jpg"],
    }


@pytest.fixture
def client(session, notifier):
    from src.main import app
    from src.lib.db_con import get_session
    from src.api.routers.productRoute import get_product_repository
    from src.api.services.product_repository import ProductRepository

    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_product_repository] = lambda: ProductRepository(
        session, notifier=notifier
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
