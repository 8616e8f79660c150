"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).

Principios:
1. Logs estructurados en JSON para máquinas.
2. Logs legibles para humanos en consola (y archivo opcional).
3. Correlation ID en cada evento de una misma operación.

Soporta modo "Pretty Print" (LOG_FORMAT=PRETTY) para depuración visual.
"""

import functools
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable, Optional, TextIO

import psutil

logger = logging.getLogger("purchase_packages")

LOG_FILE_ENV = "PURCHASE_PACKAGES_LOG_FILE"


def configure_logging(
    level=logging.INFO, log_file: Optional[str] = None, stream: TextIO = sys.stdout
):
    """
    Configura el logging raíz: consola siempre, archivo solo si se indica.
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    log_file = log_file or os.getenv(LOG_FILE_ENV)
    if log_file:
        # Formato forense para archivo
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
            )
        )
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        logging.info(f"🔭 Observabilidad iniciada. Logs persistentes en: {log_file}")


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(
        operation_name: str,
        summarize: Optional[Callable[..., dict[str, Any]]] = None,
    ):
        """
        Decorador de latencia y RAM.

        Args:
            operation_name: Prefijo de los eventos (.started/.completed/.failed).
            summarize: Recibe (resultado, *args, **kwargs) y devuelve métricas
                de negocio que se fusionan en el payload de '.completed'.
        """

        def decorator(func: Callable):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.time()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()

                # Contexto: el primer argumento str (ej: offering_identifier)
                target = kwargs.get("offering_identifier")
                if target is None:
                    target = next(
                        (arg for arg in args if isinstance(arg, str)), "unknown"
                    )

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)

                    end_time = time.time()
                    end_ram = ObservabilityService._get_ram_usage_mb()

                    payload = {
                        "duration_sec": round(end_time - start_time, 3),
                        "end_ram_mb": end_ram,
                        "ram_delta_mb": round(end_ram - start_ram, 2),
                        "target": target,
                        "status": "success",
                    }
                    if summarize is not None:
                        payload.update(summarize(result, *args, **kwargs))

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.completed",
                        correlation_id=correlation_id,
                        payload=payload,
                    )
                    return result

                except Exception as e:
                    end_time = time.time()
                    crash_ram = ObservabilityService._get_ram_usage_mb()

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(end_time - start_time, 3),
                            "crash_ram_mb": crash_ram,
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

            return wrapper

        return decorator
