# purchase-packages/demo_offering.py
"""
Demo: Construcción de una oferta con paquetes canónicos, custom y desconocidos.

Arquitectura: Composition Root (Consumer)
Responsabilidad: Cablear dependencias en memoria y ejecutar el caso de uso.
"""
import logging
import sys
from decimal import Decimal
from pathlib import Path

sys.path.append(str(Path(__file__).parent / "src"))

from purchase_packages.core.value_objects import Money  # noqa: E402
from purchase_packages.modules.purchasing import (  # noqa: E402
    BuildOfferingPackages,
    InMemoryProductCatalog,
    InMemoryStoreProduct,
    PackageTypeRegistry,
)
from purchase_packages.modules.purchasing.infrastructure.observability import (  # noqa: E402
    configure_logging,
)

RAW_PACKAGES = [
    {"identifier": "$rc_monthly", "platform_product_identifier": "com.demo.monthly"},
    {"identifier": "$rc_annual", "platform_product_identifier": "com.demo.annual"},
    {"identifier": "$rc_decade", "platform_product_identifier": "com.demo.annual"},
    {"identifier": "com.demo.gold_package", "platform_product_identifier": "com.demo.gold"},
]


def main():
    configure_logging(level=logging.INFO)

    catalog = InMemoryProductCatalog(
        [
            InMemoryStoreProduct(
                "com.demo.monthly",
                Money(Decimal("4.99"), "USD"),
                introductory_price=Money(Decimal("0.99"), "USD"),
            ),
            InMemoryStoreProduct("com.demo.annual", Money(Decimal("39.99"), "USD")),
            InMemoryStoreProduct("com.demo.gold", Money(Decimal("99.00"), "EUR")),
        ]
    )

    packages = BuildOfferingPackages(catalog).execute("default", RAW_PACKAGES)

    print("\n📦 OFERTA 'default'")
    print("=" * 72)
    print(f"{'IDENTIFICADOR':<24} | {'TIPO':<10} | {'CANÓNICO':<14} | {'PRECIO'}")
    print("-" * 72)
    for package in packages:
        canonical = PackageTypeRegistry.canonical_string(package.package_type) or "-"
        intro = package.localized_introductory_price_string
        price = package.localized_price_string + (f" (intro {intro})" if intro else "")
        print(
            f"{package.identifier:<24} | {package.package_type.name:<10} | "
            f"{canonical:<14} | {price}"
        )
    print("=" * 72)


if __name__ == "__main__":
    main()
