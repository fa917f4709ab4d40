# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del cifrado basado en contraseña.
# --------------------------------------------------------------
"""Errores propagados por las rutinas de derivación, cifrado y transporte."""


class PwCryptError(Exception):
    """Base de todos los errores del paquete."""


class InvalidParameterError(PwCryptError, ValueError):
    """Longitudes o valores de entrada incorrectos proporcionados por el llamante."""


class UnsupportedAlgorithmError(PwCryptError):
    """El proveedor criptográfico no dispone del algoritmo solicitado."""


class AuthenticationFailedError(PwCryptError):
    """La etiqueta AES-GCM no coincide: clave errónea o datos manipulados."""


class MalformedEnvelopeError(PwCryptError):
    """La cadena de transporte no respeta el formato `salt:nonce:ciphertext`."""
