# src/purchase_packages/modules/purchasing/infrastructure/adapters.py
"""
Adaptadores de Infraestructura para Compras.

Arquitectura: Infrastructure Layer
Responsabilidad: Implementar los puertos del dominio con estructuras en memoria.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from purchase_packages.core.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InMemoryStoreProduct:
    """
    Implementación en memoria de StoreProduct.
    Útil para tests unitarios, demos y catálogos ya resueltos.

    Comportamiento:
    - Los strings localizados se derivan de Money.format().
    - Sin introductory_price, el precio introductorio localizado es None.
    """

    product_identifier: str
    price: Money
    introductory_price: Optional[Money] = None

    @property
    def localized_price_string(self) -> str:
        return self.price.format()

    @property
    def localized_introductory_price_string(self) -> Optional[str]:
        if self.introductory_price is None:
            return None
        return self.introductory_price.format()


class InMemoryProductCatalog:
    """
    Catálogo de productos indexado por identificador de plataforma.
    """

    def __init__(self, products: Iterable[InMemoryStoreProduct] = ()):
        self._by_identifier: Dict[str, InMemoryStoreProduct] = {}
        for product in products:
            self.add(product)

    def add(self, product: InMemoryStoreProduct) -> None:
        if product.product_identifier in self._by_identifier:
            logger.warning(
                f"Producto duplicado, se reemplaza: {product.product_identifier}"
            )
        self._by_identifier[product.product_identifier] = product

    def find_product(self, product_identifier: str) -> Optional[InMemoryStoreProduct]:
        return self._by_identifier.get(product_identifier)

    def __len__(self) -> int:
        return len(self._by_identifier)
