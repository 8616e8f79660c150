# src/purchase_packages/modules/purchasing/domain/ports/product_catalog.py
"""
Puerto para el catálogo de productos ya obtenidos.

Arquitectura: Domain Port (Interface)
Responsabilidad: Resolver un identificador de producto de plataforma a su
StoreProduct, sin importar cómo ni de dónde se obtuvo.
"""

from __future__ import annotations

from typing import Optional, Protocol

from purchase_packages.modules.purchasing.domain.ports.store_product import (
    StoreProduct,
)


class ProductCatalog(Protocol):
    """
    Contrato de búsqueda de productos.

    Implementaciones esperadas:
    - InMemoryProductCatalog (Infraestructura / Testing)
    """

    def find_product(self, product_identifier: str) -> Optional[StoreProduct]:
        """
        Args:
            product_identifier: Identificador del producto en la plataforma.

        Returns:
            El producto, o None si la tienda no lo devolvió.
        """
        ...
