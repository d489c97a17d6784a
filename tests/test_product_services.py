from decimal import Decimal

import pytest

from models.catalog_models import Bundle, BundleProduct
from schemas.catalog_schemas import ProductInput, ServiceInput
from services.product_services import (
    delete_product,
    get_products,
    save_product,
    set_product_flag,
)
from services.service_catalog_services import get_featured_services, save_service, set_service_flag


def test_save_and_search_products(db):
    shock = save_product(db, ProductInput(name="Pool Shock", price=Decimal("12.99"), sku=" SHK-1 "))
    save_product(db, ProductInput(name="Test Strips", price=Decimal("8.00"), active=False))

    assert shock.sku == "SHK-1"
    assert [p.name for p in get_products(db, search="shock")] == ["Pool Shock"]
    assert [p.name for p in get_products(db, active_only=True)] == ["Pool Shock"]


def test_update_product(db, make_product):
    product = make_product()

    save_product(db, ProductInput(id=product.id, name="Chlorine Tabs 25lb", price=Decimal("89.00")))

    assert product.name == "Chlorine Tabs 25lb"
    assert product.price == Decimal("89.00")


def test_toggle_flags(db, make_product):
    product = make_product()

    set_product_flag(db, product.id, "featured", True)
    assert product.featured is True

    with pytest.raises(ValueError):
        set_product_flag(db, product.id, "price", True)


def test_delete_product_used_by_bundle_fails(db, make_product):
    product = make_product()
    bundle = Bundle(name="Starter Kit")
    db.add(bundle)
    db.flush()
    db.add(BundleProduct(bundle_id=bundle.id, product_id=product.id, quantity=1))
    db.commit()

    with pytest.raises(RuntimeError):
        delete_product(db, product.id)

    assert get_products(db)[0].id == product.id


def test_featured_services_come_first(db):
    save_service(db, ServiceInput(name="Acid Wash", price=Decimal("250")))
    weekly = save_service(db, ServiceInput(name="Weekly Cleaning", price=Decimal("35")))
    save_service(db, ServiceInput(name="Old Service", price=Decimal("10"), active=False))
    set_service_flag(db, weekly.id, "featured", True)

    assert [s.name for s in get_featured_services(db)] == ["Weekly Cleaning", "Acid Wash"]
