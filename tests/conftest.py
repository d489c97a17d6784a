import sys
import uuid
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

APP_DIR = Path(__file__).resolve().parents[1] / "portal_app"
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from models import (  # noqa: E402,F401
    users_models, catalog_models, scheduling_models, pool_models,
    billing_models, quote_models, contact_models,
)
from db.base import Base  # noqa: E402
from models.users_models import UserProfile  # noqa: E402
from models.catalog_models import Product, Service  # noqa: E402
from utils.storage import StorageError  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = Session(bind=engine, autoflush=False, expire_on_commit=False, future=True)
    yield session
    session.close()


@pytest.fixture
def customer(db):
    user = UserProfile(id=uuid.uuid4(), full_name="Dana Reyes", email="dana@example.com")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def make_product(db):
    def _make(name="Chlorine Tablets", price="10.00", **kwargs):
        product = Product(name=name, price=Decimal(price), **kwargs)
        db.add(product)
        db.commit()
        return product
    return _make


@pytest.fixture
def make_service(db):
    def _make(name="Weekly Cleaning", price="35.00", **kwargs):
        service = Service(name=name, price=Decimal(price), **kwargs)
        db.add(service)
        db.commit()
        return service
    return _make


@pytest.fixture
def today():
    return date(2025, 3, 5)


class FakeStorage:
    """In-memory stand-in for the object storage bucket."""

    def __init__(self, fail_remove: bool = False):
        self.objects = {}
        self.removed = []
        self.fail_remove = fail_remove

    def upload(self, path, data, content_type=None):
        self.objects[path] = data
        return path

    def remove(self, path):
        if self.fail_remove:
            raise StorageError(f"Failed to delete {path}")
        self.objects.pop(path, None)
        self.removed.append(path)

    def public_url(self, path):
        return f"https://cdn.example.com/attachments/{path}"


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def failing_storage():
    return FakeStorage(fail_remove=True)
