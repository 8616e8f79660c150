# src/purchase_packages/modules/purchasing/domain/value_objects.py
"""
Value Objects para el Bounded Context de Compras.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Clasificación cerrada de los tipos de paquete.
"""
from __future__ import annotations

from enum import Enum

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos, sin I/O.
# ❌ SIN TABLAS DE TEXTO: El mapeo string <-> tipo vive en registry.py.


class PackageType(Enum):
    """
    Tipo configurado para un paquete.

    Siete variantes predefinidas (cada una con su string canónico) y dos
    resultados de clasificación sin string canónico:
    - UNKNOWN: usó el prefijo reservado pero no coincide con ninguna entrada
      conocida (señal de compatibilidad hacia adelante, NO un error).
    - CUSTOM: identificador definido por el integrador, fuera del prefijo.
    """

    UNKNOWN = -2
    CUSTOM = -1
    LIFETIME = 0
    ANNUAL = 1
    SIX_MONTH = 2
    THREE_MONTH = 3
    TWO_MONTH = 4
    MONTHLY = 5
    WEEKLY = 6

    def is_predefined(self) -> bool:
        """Indica si el tipo tiene un string canónico asociado."""
        return not self.is_fallback()

    def is_fallback(self) -> bool:
        """Indica si el tipo es un resultado de respaldo de la clasificación."""
        return self in (PackageType.UNKNOWN, PackageType.CUSTOM)
