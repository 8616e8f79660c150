# src/purchase_packages/modules/purchasing/__init__.py
"""
Módulo de Compras: Paquetes y clasificación de tipos.
"""

from __future__ import annotations

# Application
from .application.use_cases import BuildOfferingPackages

# Domain
from .domain.exceptions import CatalogPayloadError, PurchasingError
from .domain.package import Package
from .domain.ports.product_catalog import ProductCatalog
from .domain.ports.store_product import StoreProduct
from .domain.registry import RESERVED_PREFIX, PackageTypeRegistry
from .domain.value_objects import PackageType

# Infrastructure
from .infrastructure.adapters import InMemoryProductCatalog, InMemoryStoreProduct

__all__ = [
    "PackageType",
    "PackageTypeRegistry",
    "RESERVED_PREFIX",
    "Package",
    "StoreProduct",
    "ProductCatalog",
    "PurchasingError",
    "CatalogPayloadError",
    "BuildOfferingPackages",
    "InMemoryStoreProduct",
    "InMemoryProductCatalog",
]
