# --------------------------------------------------------------
# File: random_source.py
# Description: Fuente de aleatoriedad inyectable para salts y nonces.
# --------------------------------------------------------------
"""Capacidad CSPRNG compartida por la generación de salt y nonce."""

import os
from typing import Protocol

from pwcrypt.errors import InvalidParameterError


class RandomSource(Protocol):
    """Cualquier objeto capaz de devolver `n` bytes aleatorios."""

    def token_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """Generador seguro de la plataforma, apto para uso concurrente."""

    def token_bytes(self, n: int) -> bytes:
        """Devuelve `n` bytes de `os.urandom`.

        Args:
            n (int): Número de bytes solicitados.

        Returns:
            bytes: Bytes aleatorios del CSPRNG del sistema operativo.

        """

        if n < 0:
            raise InvalidParameterError("El número de bytes no puede ser negativo.")
        return os.urandom(n)


DEFAULT_RANDOM: RandomSource = SystemRandomSource()
