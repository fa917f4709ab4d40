# --------------------------------------------------------------
# File: pbe.py
# Description: Cifrado basado en contraseña: derivación PBKDF2 + AES-GCM.
# --------------------------------------------------------------
"""Flujo completo de cifrado y descifrado con contraseña.

El cifrado genera una salt y un nonce nuevos, deriva la clave con PBKDF2 y
sella el mensaje con AES-256-GCM. El descifrado vuelve a derivar la clave con
la salt almacenada en el sobre y verifica la etiqueta antes de devolver nada.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pwcrypt import config
from pwcrypt.crypto_kdf import KEY_BITS, SALT_SIZE, derive_key, new_salt
from pwcrypt.crypto_sym import NONCE_SIZE, aes_gcm_open, aes_gcm_seal, new_nonce
from pwcrypt.errors import InvalidParameterError, MalformedEnvelopeError
from pwcrypt.models import EncryptedEnvelope, KdfParams
from pwcrypt.random_source import RandomSource

logger = logging.getLogger(__name__)

Password = Union[bytes, str]


def _kdf_params(
    iterations: Optional[int], prf: Optional[str], allow_weak: bool
) -> KdfParams:
    """Completa los parámetros con la configuración y aplica el mínimo de rondas."""

    rounds = config.PBKDF2_ITERATIONS if iterations is None else iterations
    if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds <= 0:
        raise InvalidParameterError("Las iteraciones deben ser un entero positivo.")
    if rounds < config.MIN_ITERATIONS and not allow_weak:
        raise InvalidParameterError(
            f"{rounds} iteraciones es inferior al mínimo de {config.MIN_ITERATIONS}."
        )
    return KdfParams(iterations=rounds, prf=prf or config.PBKDF2_PRF, key_length=KEY_BITS)


def _derive(password: Password, salt: bytes, params: KdfParams) -> bytes:
    """Deriva la clave AES con los parámetros PBKDF2 resueltos."""

    return derive_key(password, salt, params.iterations, params.key_length, prf=params.prf)


def encrypt_bytes(
    password: Password,
    plaintext: bytes,
    *,
    iterations: Optional[int] = None,
    prf: Optional[str] = None,
    rng: Optional[RandomSource] = None,
    allow_weak: bool = False,
) -> EncryptedEnvelope:
    """Cifra bytes con una clave derivada de la contraseña.

    Args:
        password (Password): Contraseña del usuario.
        plaintext (bytes): Datos en claro.
        iterations (Optional[int]): Rondas PBKDF2; por defecto las configuradas.
        prf (Optional[str]): PRF de PBKDF2; por defecto la configurada.
        rng (Optional[RandomSource]): Fuente de salt y nonce.
        allow_weak (bool): Permite iteraciones por debajo del mínimo.

    Returns:
        EncryptedEnvelope: Salt, nonce y ciphertext con etiqueta.

    """

    if not isinstance(plaintext, (bytes, bytearray)):
        raise InvalidParameterError("El mensaje en claro debe ser bytes.")
    params = _kdf_params(iterations, prf, allow_weak)
    salt = new_salt(rng)
    nonce = new_nonce(rng)
    key = _derive(password, salt, params)
    sealed = aes_gcm_seal(key, nonce, bytes(plaintext))
    logger.info(
        "Mensaje cifrado: PBKDF2-HMAC-%s iteraciones=%d sellado=%d bytes",
        params.prf,
        params.iterations,
        len(sealed),
    )
    return EncryptedEnvelope(salt=bytes(salt), nonce=bytes(nonce), ciphertext=sealed)


def decrypt_bytes(
    password: Password,
    envelope: Union[EncryptedEnvelope, str],
    *,
    iterations: Optional[int] = None,
    prf: Optional[str] = None,
    allow_weak: bool = False,
) -> bytes:
    """Descifra un sobre verificando su etiqueta de autenticación.

    Args:
        password (Password): Contraseña usada al cifrar.
        envelope (Union[EncryptedEnvelope, str]): Sobre o su cadena de transporte.
        iterations (Optional[int]): Rondas PBKDF2 usadas al cifrar.
        prf (Optional[str]): PRF usada al cifrar.
        allow_weak (bool): Permite iteraciones por debajo del mínimo.

    Returns:
        bytes: Mensaje original completo.

    Raises:
        MalformedEnvelopeError: Si la cadena de transporte está mal formada.
        InvalidParameterError: Si salt o nonce no tienen el tamaño esperado.
        AuthenticationFailedError: Si la contraseña es incorrecta o hay manipulación.

    """

    if isinstance(envelope, str):
        envelope = EncryptedEnvelope.from_transport(envelope)
    elif not isinstance(envelope, EncryptedEnvelope):
        raise MalformedEnvelopeError("Se esperaba un sobre o su cadena de transporte.")
    if len(envelope.salt) != SALT_SIZE:
        raise InvalidParameterError(f"La salt debe tener {SALT_SIZE} bytes.")
    if len(envelope.nonce) != NONCE_SIZE:
        raise InvalidParameterError(f"El nonce debe tener {NONCE_SIZE} bytes.")

    params = _kdf_params(iterations, prf, allow_weak)
    key = _derive(password, envelope.salt, params)
    plaintext = aes_gcm_open(key, envelope.nonce, envelope.ciphertext)
    logger.info("Mensaje descifrado: %d bytes", len(plaintext))
    return plaintext


def combined_encrypt(
    password: Password,
    plaintext: str,
    *,
    iterations: Optional[int] = None,
    prf: Optional[str] = None,
    rng: Optional[RandomSource] = None,
    allow_weak: bool = False,
) -> str:
    """Cifra texto UTF-8 y devuelve `salt:nonce:ciphertext` en Base64."""

    if not isinstance(plaintext, str):
        raise InvalidParameterError("El mensaje en claro debe ser texto.")
    envelope = encrypt_bytes(
        password,
        plaintext.encode("utf-8"),
        iterations=iterations,
        prf=prf,
        rng=rng,
        allow_weak=allow_weak,
    )
    return envelope.to_transport()


def combined_decrypt(
    password: Password,
    transport: str,
    *,
    iterations: Optional[int] = None,
    prf: Optional[str] = None,
    allow_weak: bool = False,
) -> str:
    """Descifra una cadena producida por `combined_encrypt`.

    Args:
        password (Password): Contraseña usada al cifrar.
        transport (str): Sobre en formato de transporte.
        iterations (Optional[int]): Rondas PBKDF2 usadas al cifrar.
        prf (Optional[str]): PRF usada al cifrar.
        allow_weak (bool): Permite iteraciones por debajo del mínimo.

    Returns:
        str: Texto original.

    """

    data = decrypt_bytes(
        password, transport, iterations=iterations, prf=prf, allow_weak=allow_weak
    )
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidParameterError("El contenido descifrado no es texto UTF-8.") from exc
