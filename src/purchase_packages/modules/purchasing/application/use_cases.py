# src/purchase_packages/modules/purchasing/application/use_cases.py
"""
Casos de Uso para la construcción de paquetes de una oferta.

Arquitectura: Application Layer
Responsabilidad: Convertir definiciones crudas (ya obtenidas) en Packages,
clasificando su tipo y resolviendo el producto subyacente.
"""
from __future__ import annotations

import logging
from collections import Counter, abc
from typing import Any, Iterable, List, Mapping

from purchase_packages.modules.purchasing.domain.exceptions import CatalogPayloadError
from purchase_packages.modules.purchasing.domain.package import Package
from purchase_packages.modules.purchasing.domain.ports.product_catalog import (
    ProductCatalog,
)
from purchase_packages.modules.purchasing.domain.registry import PackageTypeRegistry
from purchase_packages.modules.purchasing.domain.value_objects import PackageType
from purchase_packages.modules.purchasing.infrastructure.observability import (
    ObservabilityService,
)

logger = logging.getLogger("purchase_packages.app")


def _summarize_offering(
    packages: List[Package], use_case: "BuildOfferingPackages", *args, **kwargs
) -> dict[str, Any]:
    """Métricas de negocio para el evento '.completed'."""
    package_types = Counter(package.package_type.name for package in packages)
    return {
        "package_count": len(packages),
        "skipped_count": use_case.last_skipped_count,
        "unknown_count": package_types.get(PackageType.UNKNOWN.name, 0),
        "package_types": dict(package_types),
    }


class BuildOfferingPackages:
    """
    Caso de Uso: Construir los paquetes de una oferta.

    Colaboradores:
    - catalog: ProductCatalog (Puerto)

    Reglas:
    1. El tipo se obtiene clasificando el identificador del paquete.
    2. Paquetes sin producto en el catálogo se omiten (la oferta sigue usable).
    3. UNKNOWN se registra como aviso de compatibilidad, nunca como error.
    """

    IDENTIFIER_KEY = "identifier"
    PRODUCT_KEY = "platform_product_identifier"

    def __init__(self, catalog: ProductCatalog):
        self._catalog = catalog
        self.last_skipped_count = 0

    @ObservabilityService.measure_latency(
        operation_name="build_offering_packages", summarize=_summarize_offering
    )
    def execute(
        self, offering_identifier: str, raw_packages: Iterable[Mapping[str, Any]]
    ) -> List[Package]:
        """
        Args:
            offering_identifier: Identificador de la oferta padre.
            raw_packages: Definiciones con 'identifier' y
                'platform_product_identifier'.

        Returns:
            Packages en el mismo orden de entrada, sin los omitidos.

        Raises:
            CatalogPayloadError: Si raw_packages no es una colección de
                definiciones, o una definición no trae ambos campos como str.
        """
        if isinstance(raw_packages, (str, bytes, abc.Mapping)) or not isinstance(
            raw_packages, abc.Iterable
        ):
            raise CatalogPayloadError(
                f"Se esperaba una lista de paquetes, no {type(raw_packages).__name__}"
            )

        packages: List[Package] = []
        skipped = 0

        for position, raw in enumerate(raw_packages):
            identifier = self._require_str(raw, self.IDENTIFIER_KEY, position)
            product_identifier = self._require_str(raw, self.PRODUCT_KEY, position)

            product = self._catalog.find_product(product_identifier)
            if product is None:
                logger.warning(
                    f"[SKIP] Producto '{product_identifier}' no encontrado "
                    f"para el paquete '{identifier}' ({offering_identifier})"
                )
                skipped += 1
                continue

            package_type = PackageTypeRegistry.classify(identifier)
            if package_type is PackageType.UNKNOWN:
                logger.info(
                    f"Tipo de paquete no reconocido '{identifier}', "
                    "probablemente de una versión más nueva"
                )

            packages.append(
                Package(
                    identifier=identifier,
                    package_type=package_type,
                    store_product=product,
                    offering_identifier=offering_identifier,
                )
            )

        logger.info(
            f"Oferta '{offering_identifier}': {len(packages)} paquetes, {skipped} omitidos"
        )
        self.last_skipped_count = skipped
        return packages

    @staticmethod
    def _require_str(raw: Mapping[str, Any], key: str, position: int) -> str:
        if not isinstance(raw, abc.Mapping):
            raise CatalogPayloadError(
                f"Paquete #{position}: se esperaba un objeto, no {type(raw).__name__}"
            )
        value = raw.get(key)
        if not isinstance(value, str):
            raise CatalogPayloadError(
                f"Paquete #{position}: '{key}' ausente o no es texto ({value!r})"
            )
        return value
