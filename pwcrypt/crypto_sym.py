# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado autenticado AES-256-GCM con etiqueta de 128 bits."""

import logging
from typing import Optional

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from pwcrypt.errors import (
    AuthenticationFailedError,
    InvalidParameterError,
    UnsupportedAlgorithmError,
)
from pwcrypt.random_source import DEFAULT_RANDOM, RandomSource

logger = logging.getLogger(__name__)

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16


def new_nonce(rng: Optional[RandomSource] = None) -> bytes:
    """Genera un nonce aleatorio de 96 bits."""

    return (rng or DEFAULT_RANDOM).token_bytes(NONCE_SIZE)


def _check_inputs(key: bytes, nonce: bytes, data: bytes, aad: Optional[bytes]) -> None:
    """Valida tipos y longitudes de clave, nonce, datos y AAD."""

    if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_SIZE:
        raise InvalidParameterError(f"La clave AES-256 debe tener {KEY_SIZE} bytes.")
    if not isinstance(nonce, (bytes, bytearray)) or len(nonce) != NONCE_SIZE:
        raise InvalidParameterError(f"El nonce debe tener {NONCE_SIZE} bytes.")
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidParameterError("Los datos deben ser bytes.")
    if aad is not None and not isinstance(aad, (bytes, bytearray)):
        raise InvalidParameterError("Los datos adicionales deben ser bytes.")


def _cipher(key: bytes) -> AESGCM:
    """Instancia AES-GCM traduciendo la falta de soporte del proveedor."""

    try:
        return AESGCM(bytes(key))
    except UnsupportedAlgorithm as exc:
        raise UnsupportedAlgorithmError("AES-GCM no disponible en este proveedor.") from exc


def aes_gcm_seal(
    key: bytes, nonce: bytes, plaintext: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Cifra y autentica datos con AES-256-GCM.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Vector de inicialización de 96 bits, único por clave.
        plaintext (bytes): Datos en claro que se cifrarán.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Ciphertext seguido de la etiqueta de autenticación de 16 bytes.

    """

    _check_inputs(key, nonce, plaintext, aad)
    sealed = _cipher(key).encrypt(bytes(nonce), bytes(plaintext), aad)
    logger.debug("AES-GCM seal: claro=%d bytes sellado=%d bytes", len(plaintext), len(sealed))
    return sealed


def aes_gcm_open(
    key: bytes, nonce: bytes, sealed: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Verifica la etiqueta y descifra datos sellados con AES-256-GCM.

    No se devuelve ningún byte en claro si la verificación falla.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización usado al cifrar.
        sealed (bytes): Ciphertext con la etiqueta de 128 bits al final.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        AuthenticationFailedError: Si la etiqueta no es válida.

    """

    _check_inputs(key, nonce, sealed, aad)
    if len(sealed) < TAG_SIZE:
        raise AuthenticationFailedError("Datos sellados más cortos que la etiqueta.")
    try:
        return _cipher(key).decrypt(bytes(nonce), bytes(sealed), aad)
    except InvalidTag as exc:
        raise AuthenticationFailedError(
            "Autenticación fallida: contraseña incorrecta o datos manipulados."
        ) from exc
