# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de derivación y registro leídos del entorno.
# --------------------------------------------------------------
"""Configuración del paquete cargada desde variables de entorno o `.env`."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 100_000
# Por debajo de este umbral la derivación se considera débil.
MIN_ITERATIONS = 10_000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _int_from_env(name: str, default: int) -> int:
    """Lee un entero del entorno devolviendo el valor por defecto si no es válido."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r no es un entero; se usa %d.", name, raw, default)
        return default


PBKDF2_ITERATIONS = _int_from_env("PWCRYPT_PBKDF2_ITERATIONS", DEFAULT_ITERATIONS)
PBKDF2_PRF = os.getenv("PWCRYPT_PBKDF2_PRF", "sha256")
LOG_LEVEL = os.getenv("PWCRYPT_LOG_LEVEL", "INFO").upper()


def resolve_log_level(name: str) -> int:
    """Traduce el nombre de un nivel de logging, usando INFO si no existe."""

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> None:
    """Configura el logging raíz para los puntos de entrada de demostración.

    Args:
        level (Optional[str]): Nombre del nivel; por defecto `PWCRYPT_LOG_LEVEL`.

    """

    logging.basicConfig(level=resolve_log_level(level or LOG_LEVEL), format=LOG_FORMAT)
