# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del cifrado basado en contraseña.
# --------------------------------------------------------------
"""Inicializa el paquete `pwcrypt` y reexporta su API principal."""

from pwcrypt.crypto_kdf import derive_key
from pwcrypt.crypto_sym import aes_gcm_open, aes_gcm_seal
from pwcrypt.envelope import decode_envelope, encode_envelope
from pwcrypt.errors import (
    AuthenticationFailedError,
    InvalidParameterError,
    MalformedEnvelopeError,
    PwCryptError,
    UnsupportedAlgorithmError,
)
from pwcrypt.models import EncryptedEnvelope
from pwcrypt.pbe import combined_decrypt, combined_encrypt, decrypt_bytes, encrypt_bytes

__all__ = [
    "AuthenticationFailedError",
    "EncryptedEnvelope",
    "InvalidParameterError",
    "MalformedEnvelopeError",
    "PwCryptError",
    "UnsupportedAlgorithmError",
    "aes_gcm_open",
    "aes_gcm_seal",
    "combined_decrypt",
    "combined_encrypt",
    "decode_envelope",
    "decrypt_bytes",
    "derive_key",
    "encode_envelope",
    "encrypt_bytes",
]
