# src/purchase_packages/modules/purchasing/domain/exceptions.py
"""
Excepciones del dominio de Compras.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.

Nota: La clasificación de tipos nunca falla. UNKNOWN y CUSTOM son resultados
normales, no excepciones.
"""


class PurchasingError(Exception):
    """Clase base para errores en el módulo de compras."""

    pass


class CatalogPayloadError(PurchasingError):
    """La definición cruda de un paquete está incompleta o mal tipada."""

    pass
