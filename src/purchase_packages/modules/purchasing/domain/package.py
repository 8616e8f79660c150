# src/purchase_packages/modules/purchasing/domain/package.py
"""
Package Value Object.

Arquitectura: Modular Monolith
Componente: Value Object (Domain)
Responsabilidad: Agrupar un producto de plataforma bajo un identificador
portable y un PackageType, dentro de una oferta.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from purchase_packages.modules.purchasing.domain.ports.store_product import (
    StoreProduct,
)
from purchase_packages.modules.purchasing.domain.registry import PackageTypeRegistry
from purchase_packages.modules.purchasing.domain.value_objects import PackageType

# === 🧭 Protocolos Arquitectónicos ===
# ✅ SIN VALIDACIÓN: Los campos se guardan tal cual (la capa de catálogo valida).
# 🔒 Inmutabilidad: frozen=True.
# ⚖️ Igualdad y hash explícitos sobre los cuatro campos.


@dataclass(frozen=True, eq=False)
class Package:
    """
    Paquete de una oferta: identificador, tipo y producto subyacente.

    Dos paquetes son iguales si y solo si sus cuatro campos lo son
    (el producto se compara con su propia igualdad por valor).
    """

    identifier: str
    package_type: PackageType
    store_product: StoreProduct
    offering_identifier: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return (
            self.identifier == other.identifier
            and self.package_type == other.package_type
            and self.store_product == other.store_product
            and self.offering_identifier == other.offering_identifier
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.identifier,
                self.package_type,
                self.store_product,
                self.offering_identifier,
            )
        )

    @property
    def id(self) -> str:
        """
        Clave de búsqueda: el identificador del paquete.

        No es identidad de objeto: Package tiene semántica de valor, así que
        dos instancias construidas por separado con los mismos campos son
        iguales y comparten id. Paquetes de ofertas distintas pueden repetir
        id; para distinguirlos hay que combinarlo con offering_identifier.
        """
        return self.identifier

    @property
    def localized_price_string(self) -> str:
        return self.store_product.localized_price_string

    @property
    def localized_introductory_price_string(self) -> Optional[str]:
        """Precio introductorio formateado, o None si el producto no tiene."""
        return self.store_product.localized_introductory_price_string

    @staticmethod
    def string_from(package_type: PackageType) -> Optional[str]:
        """Atajo a PackageTypeRegistry.canonical_string."""
        return PackageTypeRegistry.canonical_string(package_type)

    @staticmethod
    def package_type_from(string: str) -> PackageType:
        """Atajo a PackageTypeRegistry.classify."""
        return PackageTypeRegistry.classify(string)
