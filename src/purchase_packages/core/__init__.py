"""📦 core/: Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Value Objects reusables en CUALQUIER dominio:
     - Money (importe + divisa)
   • Tipos primitivos validados
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Conceptos específicos de compras (Package, PackageType, StoreProduct)
   • Reglas de clasificación o de construcción de ofertas

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/

💡 Principio preventivo:
   Si no podrías reusar este código en un sistema de pagos O un e-commerce,
   probablemente NO pertenece a core/.
"""

from .value_objects import Money

__all__ = ["Money"]
