# tests/modules/purchasing/infrastructure/test_adapters.py
"""
Tests para: InMemoryStoreProduct / InMemoryProductCatalog
Tipo: Unitario (Infrastructure)
"""
from decimal import Decimal

from purchase_packages.core.value_objects import Money
from purchase_packages.modules.purchasing.infrastructure.adapters import (
    InMemoryProductCatalog,
    InMemoryStoreProduct,
)


def test_product_localized_strings():
    product = InMemoryStoreProduct(
        product_identifier="com.myapp.annual",
        price=Money(Decimal("39.99"), "EUR"),
        introductory_price=Money(Decimal("9.99"), "EUR"),
    )

    assert product.localized_price_string == "€39.99"
    assert product.localized_introductory_price_string == "€9.99"


def test_product_without_introductory_price():
    product = InMemoryStoreProduct("com.myapp.weekly", Money(Decimal("1.99"), "USD"))
    assert product.localized_introductory_price_string is None


def test_products_have_value_equality():
    a = InMemoryStoreProduct("com.myapp.weekly", Money(Decimal("1.99"), "USD"))
    b = InMemoryStoreProduct("com.myapp.weekly", Money(Decimal("1.99"), "USD"))

    assert a == b
    assert hash(a) == hash(b)


def test_catalog_find_product():
    """
    Given: Un catálogo con un producto
    When: Se busca por identificador
    Then: Devuelve el producto, o None si no existe
    """
    # Arrange
    product = InMemoryStoreProduct("com.myapp.monthly", Money(Decimal("4.99"), "USD"))
    catalog = InMemoryProductCatalog([product])

    # Act & Assert
    assert catalog.find_product("com.myapp.monthly") is product
    assert catalog.find_product("com.myapp.ghost") is None
    assert len(catalog) == 1


def test_catalog_replaces_duplicates(caplog):
    old = InMemoryStoreProduct("com.myapp.monthly", Money(Decimal("4.99"), "USD"))
    new = InMemoryStoreProduct("com.myapp.monthly", Money(Decimal("5.99"), "USD"))

    catalog = InMemoryProductCatalog([old, new])

    assert catalog.find_product("com.myapp.monthly") is new
    assert len(catalog) == 1
    assert "duplicado" in caplog.text
