#!/usr/bin/env python3
"""
Pipeline de CI Local para el Proyecto Purchase Packages.
Ejecuta validaciones estáticas, tipos y tests unitarios.

Uso: python scripts/ci_pipeline.py
"""

import subprocess
import sys
import time
from datetime import datetime


# Colores para la terminal
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def print_step(step_name):
    print(f"\n{Colors.HEADER}=== EJECUTANDO: {step_name} ==={Colors.ENDC}")


def run_command(command, description):
    print(f"⏳ {description}...")
    start = time.time()
    result = subprocess.run(command, shell=True, capture_output=True, text=True)
    duration = time.time() - start

    if result.returncode == 0:
        print(f"{Colors.OKGREEN}✅ PASÓ ({duration:.2f}s){Colors.ENDC}")
        return True, result.stdout

    print(f"{Colors.FAIL}❌ FALLÓ ({duration:.2f}s){Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDERR ---\n{result.stderr}{Colors.ENDC}")
    print(f"{Colors.WARNING}--- STDOUT ---\n{result.stdout}{Colors.ENDC}")
    return False, result.stderr


def main():
    start_total = time.time()
    print(f"{Colors.BOLD}🚀 INICIANDO PIPELINE CI - PURCHASE PACKAGES{Colors.ENDC}")
    print(f"📅 Fecha: {datetime.now()}")

    # --- PASO 1: LINTER (Estilo) ---
    print_step("1. ANÁLISIS ESTÁTICO DE CÓDIGO (LINTING)")
    success, _ = run_command(
        "ruff check src/ tests/",
        "Verificando estilo de código (PEP8) y errores comunes",
    )
    if not success:
        # No bloqueante por ahora
        print(f"{Colors.WARNING}⚠️  Advertencias de estilo detectadas{Colors.ENDC}")

    # --- PASO 2: TYPE CHECKING (MyPy) ---
    print_step("2. VERIFICACIÓN DE TIPOS (DOMINIO)")
    success, _ = run_command(
        "mypy src/purchase_packages/modules/purchasing/domain --ignore-missing-imports",
        "Validando tipos estrictos en el Dominio",
    )
    if not success:
        print(f"{Colors.FAIL}⛔ El dominio viola el contrato de tipos.{Colors.ENDC}")
        sys.exit(1)

    # --- PASO 3: TESTS DE DOMINIO ---
    print_step("3. TESTS UNITARIOS (DOMAIN & CORE)")
    success, _ = run_command(
        "pytest tests/core tests/modules/purchasing/domain -v",
        "Ejecutando lógica pura de clasificación",
    )
    if not success:
        sys.exit(1)

    # --- PASO 4: TESTS DE APLICACIÓN, INFRAESTRUCTURA Y CLI ---
    print_step("4. TESTS DE APLICACIÓN, INFRAESTRUCTURA Y CLI")
    success, _ = run_command(
        "pytest tests/modules/purchasing/application "
        "tests/modules/purchasing/infrastructure "
        "tests/modules/purchasing/presentation -v",
        "Validando casos de uso, adaptadores y CLI",
    )
    if not success:
        sys.exit(1)

    total_duration = time.time() - start_total
    print(f"\n{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"{Colors.OKGREEN}🎉  BUILD SUCCESSFUL{Colors.ENDC}")
    print(f"{Colors.OKGREEN}{'='*50}{Colors.ENDC}")
    print(f"⏱️ Tiempo Total: {total_duration:.2f}s")


if __name__ == "__main__":
    main()
