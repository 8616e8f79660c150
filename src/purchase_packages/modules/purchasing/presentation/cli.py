# src/purchase_packages/modules/purchasing/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) para Paquetes de Compra.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root.
    3. Formatear la salida (JSON/Tabla).
"""

import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from purchase_packages.core.value_objects import Money
from purchase_packages.modules.purchasing.application.use_cases import (
    BuildOfferingPackages,
)
from purchase_packages.modules.purchasing.domain.exceptions import (
    CatalogPayloadError,
    PurchasingError,
)
from purchase_packages.modules.purchasing.domain.package import Package
from purchase_packages.modules.purchasing.domain.registry import PackageTypeRegistry
from purchase_packages.modules.purchasing.infrastructure.adapters import (
    InMemoryProductCatalog,
    InMemoryStoreProduct,
)
from purchase_packages.modules.purchasing.infrastructure.observability import (
    configure_logging,
)


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    # Opciones comunes a todos los subcomandos
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs detallados",
    )

    parser = argparse.ArgumentParser(
        prog="purchase-packages",
        description="📦 Purchase Packages - Clasificación de tipos de paquete",
        epilog="Ejemplo: purchase-packages classify '$rc_monthly' gold --json",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser(
        "classify", parents=[common], help="Clasifica identificadores en PackageType"
    )
    classify.add_argument("values", nargs="+", help="Identificadores a clasificar")

    subparsers.add_parser(
        "canonical", parents=[common], help="Lista los strings canónicos conocidos"
    )

    build = subparsers.add_parser(
        "build",
        parents=[common],
        help="Construye los paquetes de una oferta desde un archivo JSON",
    )
    build.add_argument("payload", type=Path, help="Ruta al JSON de la oferta")

    return parser


# === Renderizado ===


def _classification_rows(values: Sequence[str]) -> List[dict]:
    rows = []
    for value in values:
        package_type = PackageTypeRegistry.classify(value)
        rows.append(
            {
                "value": value,
                "package_type": package_type.name,
                "canonical_string": PackageTypeRegistry.canonical_string(package_type),
            }
        )
    return rows


def _package_rows(packages: Sequence[Package]) -> List[dict]:
    return [
        {
            "identifier": package.identifier,
            "package_type": package.package_type.name,
            "product_identifier": package.store_product.product_identifier,
            "price": package.localized_price_string,
            "introductory_price": package.localized_introductory_price_string,
            "offering_identifier": package.offering_identifier,
        }
        for package in packages
    ]


def render(rows: List[dict], title: str, as_json: bool, console: Console) -> None:
    if as_json:
        print(json.dumps(rows, indent=2))
        return

    if not rows:
        console.print(f"{title}: (sin resultados)")
        return

    table = Table(title=title)
    for column in rows[0]:
        table.add_column(column.upper())
    for row in rows:
        table.add_row(*("-" if value is None else str(value) for value in row.values()))
    console.print(table)


# === Carga de payload ===


def _parse_money(raw: Any, currency_code: str, context: str) -> Money:
    try:
        return Money(Decimal(str(raw)), currency_code)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise CatalogPayloadError(f"{context}: precio inválido {raw!r} ({e})") from e


def load_offering_payload(path: Path):
    """
    Lee un JSON con la forma:
        {"offering_identifier": str,
         "products": [{"product_identifier", "price", "currency_code",
                       "introductory_price"?}],
         "packages": [{"identifier", "platform_product_identifier"}]}
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CatalogPayloadError(f"JSON inválido en {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogPayloadError("El payload debe ser un objeto JSON")

    offering_identifier = data.get("offering_identifier", "")
    products = data.get("products", [])
    raw_packages = data.get("packages", [])

    if not isinstance(offering_identifier, str):
        raise CatalogPayloadError(
            f"'offering_identifier' debe ser texto: {offering_identifier!r}"
        )
    for key, value in (("products", products), ("packages", raw_packages)):
        if not isinstance(value, list):
            raise CatalogPayloadError(f"'{key}' debe ser una lista: {value!r}")

    catalog = InMemoryProductCatalog()
    for raw in products:
        if not isinstance(raw, dict) or "price" not in raw:
            raise CatalogPayloadError(f"Producto mal formado: {raw!r}")

        product_identifier = raw.get("product_identifier")
        if not isinstance(product_identifier, str):
            raise CatalogPayloadError(
                f"'product_identifier' debe ser texto: {product_identifier!r}"
            )

        currency_code = raw.get("currency_code", "USD")
        intro = raw.get("introductory_price")
        catalog.add(
            InMemoryStoreProduct(
                product_identifier=product_identifier,
                price=_parse_money(raw["price"], currency_code, product_identifier),
                introductory_price=(
                    None
                    if intro is None
                    else _parse_money(intro, currency_code, product_identifier)
                ),
            )
        )

    return offering_identifier, catalog, raw_packages


def main(argv: Optional[Sequence[str]] = None):
    parser = setup_parser()
    args = parser.parse_args(argv)

    configure_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr
    )
    console = Console()

    try:
        if args.command == "classify":
            rows = _classification_rows(args.values)
            render(rows, "Clasificación", args.json, console)

        elif args.command == "canonical":
            rows = _classification_rows(PackageTypeRegistry.canonical_strings())
            render(rows, "Strings canónicos", args.json, console)

        elif args.command == "build":
            if not args.payload.exists():
                print(f"❌ Error: El archivo '{args.payload}' no existe.", file=sys.stderr)
                sys.exit(1)

            offering_identifier, catalog, raw_packages = load_offering_payload(
                args.payload
            )
            use_case = BuildOfferingPackages(catalog=catalog)
            packages = use_case.execute(offering_identifier, raw_packages)
            render(
                _package_rows(packages),
                f"Oferta '{offering_identifier}'",
                args.json,
                console,
            )

    except PurchasingError as e:
        print(f"❌ Error de Catálogo: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n⚠️  Operación cancelada por el usuario.", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"❌ Error Crítico: {e}", file=sys.stderr)
        sys.exit(3)


if __name__ == "__main__":
    main()
