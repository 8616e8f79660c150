# src/purchase_packages/modules/purchasing/domain/ports/store_product.py
"""
Puerto para el Producto de Tienda subyacente.

Arquitectura: Domain Port (Interface)
Responsabilidad: Definir lo mínimo que un Package necesita del producto de
cada plataforma (precio y sus representaciones localizadas).
"""

from __future__ import annotations

from typing import Optional, Protocol

from purchase_packages.core.value_objects import Money


class StoreProduct(Protocol):
    """
    Contrato abstracto del producto comprable de una plataforma.

    Las implementaciones deben tener igualdad por valor y ser hashables,
    ya que Package deriva su igualdad y hash de este campo.

    Implementaciones esperadas:
    - InMemoryStoreProduct (Infraestructura / Testing)
    """

    @property
    def product_identifier(self) -> str: ...

    @property
    def price(self) -> Money: ...

    @property
    def localized_price_string(self) -> str:
        """Precio formateado según la configuración regional de la tienda."""
        ...

    @property
    def localized_introductory_price_string(self) -> Optional[str]:
        """
        Precio del descuento introductorio formateado.

        Returns:
            None si el producto no tiene descuento introductorio.
        """
        ...
