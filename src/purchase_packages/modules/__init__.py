"""📦 modules/: Bounded contexts específicos del negocio

✨ Estado actual:
   • purchasing/ → Paquetes, PackageType y construcción de ofertas

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Value objects, puertos y reglas del subdominio
   • application/   → Casos de uso
   • infrastructure/→ Adaptadores concretos y observabilidad
   • presentation/  → CLI
"""
