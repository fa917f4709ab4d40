# --------------------------------------------------------------
# File: envelope.py
# Description: Codificación de transporte `salt:nonce:ciphertext` en Base64.
# --------------------------------------------------------------
"""Empaquetado textual de los tres campos del sobre cifrado."""

import base64
import binascii
from typing import Tuple

from pwcrypt.errors import MalformedEnvelopeError

# ":" no forma parte del alfabeto Base64 estándar.
DELIMITER = ":"
_FIELDS = ("salt", "nonce", "ciphertext")


def _b64(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def _unb64(value: str, field: str) -> bytes:
    """Decodifica un campo Base64 de forma estricta."""

    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise MalformedEnvelopeError(f"Campo `{field}` no es Base64 válido.") from exc


def encode_envelope(salt: bytes, nonce: bytes, sealed: bytes) -> str:
    """Une salt, nonce y ciphertext en una única cadena imprimible.

    Args:
        salt (bytes): Salt usada en la derivación.
        nonce (bytes): Nonce usado por AES-GCM.
        sealed (bytes): Ciphertext con la etiqueta de autenticación.

    Returns:
        str: `base64(salt):base64(nonce):base64(sealed)`.

    """

    return DELIMITER.join(_b64(bytes(part)) for part in (salt, nonce, sealed))


def decode_envelope(transport: str) -> Tuple[bytes, bytes, bytes]:
    """Separa y decodifica una cadena de transporte.

    Args:
        transport (str): Texto generado por `encode_envelope`.

    Returns:
        Tuple[bytes, bytes, bytes]: Salt, nonce y ciphertext sellado.

    Raises:
        MalformedEnvelopeError: Si el número de campos o su Base64 no es válido.

    """

    if not isinstance(transport, str):
        raise MalformedEnvelopeError("El sobre debe ser una cadena de texto.")
    parts = transport.strip().split(DELIMITER)
    if len(parts) != len(_FIELDS):
        raise MalformedEnvelopeError(
            f"Se esperaban {len(_FIELDS)} campos separados por '{DELIMITER}', hay {len(parts)}."
        )
    salt, nonce, sealed = (_unb64(part, name) for part, name in zip(parts, _FIELDS))
    return salt, nonce, sealed
