# src/purchase_packages/modules/purchasing/domain/registry.py
"""
Registro de tipos de paquete.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Mapeo bidireccional entre strings canónicos y PackageType,
y clasificación de cualquier string de entrada.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from purchase_packages.modules.purchasing.domain.value_objects import PackageType

# === Guía de Organización ===
# ✅ TOTALIDAD: Ninguna operación lanza excepciones, cualquier string es válido.
# 🔒 Inmutabilidad: Tablas construidas una sola vez al importar el módulo.

RESERVED_PREFIX = "$rc_"

_STRINGS_BY_TYPE: Mapping[PackageType, Optional[str]] = MappingProxyType(
    {
        PackageType.UNKNOWN: None,
        PackageType.CUSTOM: None,
        PackageType.LIFETIME: "$rc_lifetime",
        PackageType.ANNUAL: "$rc_annual",
        PackageType.SIX_MONTH: "$rc_six_month",
        PackageType.THREE_MONTH: "$rc_three_month",
        PackageType.TWO_MONTH: "$rc_two_month",
        PackageType.MONTHLY: "$rc_monthly",
        PackageType.WEEKLY: "$rc_weekly",
    }
)

_TYPES_BY_STRING: Mapping[str, PackageType] = MappingProxyType(
    {
        "$rc_lifetime": PackageType.LIFETIME,
        "$rc_annual": PackageType.ANNUAL,
        "$rc_six_month": PackageType.SIX_MONTH,
        "$rc_three_month": PackageType.THREE_MONTH,
        "$rc_two_month": PackageType.TWO_MONTH,
        "$rc_monthly": PackageType.MONTHLY,
        "$rc_weekly": PackageType.WEEKLY,
    }
)


class PackageTypeRegistry:
    """
    Dueño del mapeo canónico string <-> PackageType.

    Reglas de clasificación (en orden de precedencia):
    1. Coincidencia exacta con la tabla canónica (sensible a mayúsculas).
    2. Prefijo reservado '$rc_' sin coincidencia -> UNKNOWN.
    3. Cualquier otro string (incluido '') -> CUSTOM.

    UNKNOWN y CUSTOM son valores de retorno normales: UNKNOWN indica un tipo
    probablemente introducido en una versión más nueva de la taxonomía.
    """

    RESERVED_PREFIX = RESERVED_PREFIX

    @staticmethod
    def canonical_string(package_type: PackageType) -> Optional[str]:
        """String canónico del tipo, o None para UNKNOWN y CUSTOM."""
        return _STRINGS_BY_TYPE[package_type]

    @staticmethod
    def classify(string: str) -> PackageType:
        """Clasifica un string arbitrario en un PackageType. Nunca falla."""
        package_type = _TYPES_BY_STRING.get(string)
        if package_type is not None:
            return package_type

        if string.startswith(RESERVED_PREFIX):
            return PackageType.UNKNOWN
        return PackageType.CUSTOM

    @staticmethod
    def canonical_strings() -> tuple[str, ...]:
        return tuple(_TYPES_BY_STRING)
