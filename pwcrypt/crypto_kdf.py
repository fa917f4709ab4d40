# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir de la contraseña del usuario."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from pwcrypt.config import MIN_ITERATIONS
from pwcrypt.errors import InvalidParameterError, UnsupportedAlgorithmError
from pwcrypt.random_source import DEFAULT_RANDOM, RandomSource

logger = logging.getLogger(__name__)

SALT_SIZE = 16
KEY_BITS = 256

_PRF_FACTORIES: Dict[str, type] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}

# Nombres JCA aceptados por compatibilidad con los llamantes originales.
_PRF_ALIASES = {
    "pbkdf2withhmacsha256": "sha256",
    "pbkdf2withhmacsha384": "sha384",
    "pbkdf2withhmacsha512": "sha512",
    "pbewithhmacsha256andaes_256": "sha256",
}


def resolve_prf(name: str) -> hashes.HashAlgorithm:
    """Traduce el nombre de la PRF al algoritmo hash de `cryptography`.

    Args:
        name (str): `sha256`, `sha384`, `sha512` o un alias JCA equivalente.

    Returns:
        hashes.HashAlgorithm: Instancia del hash que alimenta HMAC.

    Raises:
        UnsupportedAlgorithmError: Si el nombre no corresponde a ninguna PRF conocida.

    """

    if not isinstance(name, str):
        raise UnsupportedAlgorithmError(f"PRF no soportada: {name!r}")
    key = name.strip().lower().replace("-", "")
    key = _PRF_ALIASES.get(key, key)
    factory = _PRF_FACTORIES.get(key)
    if factory is None:
        raise UnsupportedAlgorithmError(f"PRF no soportada: {name!r}")
    return factory()


def new_salt(rng: Optional[RandomSource] = None) -> bytes:
    """Genera una salt aleatoria de 128 bits."""

    return (rng or DEFAULT_RANDOM).token_bytes(SALT_SIZE)


def derive_key(
    password: Union[bytes, str],
    salt: bytes,
    iterations: int,
    key_length: int = KEY_BITS,
    *,
    prf: str = "sha256",
) -> bytes:
    """Deriva una clave simétrica con PBKDF2 sobre HMAC.

    La derivación es determinista: mismos parámetros, misma clave. Ni la
    contraseña ni la clave resultante se registran en el log.

    Args:
        password (Union[bytes, str]): Contraseña; el texto se codifica en UTF-8.
        salt (bytes): Salt aleatoria asociada al cifrado, no vacía.
        iterations (int): Número de rondas PBKDF2, estrictamente positivo.
        key_length (int): Longitud de la clave en bits, múltiplo positivo de 8.
        prf (str): PRF subyacente, HMAC-SHA-256 por defecto.

    Returns:
        bytes: Clave de `key_length // 8` bytes.

    Raises:
        InvalidParameterError: Si algún parámetro está fuera de rango.
        UnsupportedAlgorithmError: Si la PRF no está disponible.

    """

    if isinstance(password, str):
        password = password.encode("utf-8")
    if not isinstance(password, (bytes, bytearray)):
        raise InvalidParameterError("La contraseña debe ser bytes o str.")
    if not isinstance(salt, (bytes, bytearray)) or len(salt) == 0:
        raise InvalidParameterError("La salt debe ser bytes no vacíos.")
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
        raise InvalidParameterError("Las iteraciones deben ser un entero positivo.")
    if (
        isinstance(key_length, bool)
        or not isinstance(key_length, int)
        or key_length <= 0
        or key_length % 8
    ):
        raise InvalidParameterError("La longitud de clave debe ser un múltiplo positivo de 8 bits.")

    algorithm = resolve_prf(prf)
    if iterations < MIN_ITERATIONS:
        logger.warning(
            "PBKDF2 con %d iteraciones está por debajo del mínimo recomendado (%d).",
            iterations,
            MIN_ITERATIONS,
        )

    try:
        kdf = PBKDF2HMAC(
            algorithm=algorithm,
            length=key_length // 8,
            salt=bytes(salt),
            iterations=iterations,
        )
        key = kdf.derive(bytes(password))
    except UnsupportedAlgorithm as exc:
        raise UnsupportedAlgorithmError(f"PBKDF2-HMAC-{algorithm.name} no disponible.") from exc

    logger.debug(
        "Clave derivada: PBKDF2-HMAC-%s iteraciones=%d longitud=%d bits",
        algorithm.name.upper(),
        iterations,
        key_length,
    )
    return key
