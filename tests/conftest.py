# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y la aleatoriedad.
# --------------------------------------------------------------

import hashlib
import importlib
from typing import Iterator

import pytest

# Mínimo permitido: mantiene las pruebas rápidas sin activar el rechazo por debilidad.
TEST_ITERATIONS = 10_000


class CounterRandom:
    """Fuente determinista: SHA-256 en modo contador sobre una semilla fija."""

    def __init__(self, seed: bytes = b"pwcrypt-tests") -> None:
        """Inicializa el contador con la semilla indicada."""

        self._seed = seed
        self._counter = 0

    def token_bytes(self, n: int) -> bytes:
        """Devuelve los siguientes `n` bytes del flujo determinista."""

        out = b""
        while len(out) < n:
            block = self._seed + self._counter.to_bytes(8, "big")
            out += hashlib.sha256(block).digest()
            self._counter += 1
        return out[:n]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Fija las variables PWCRYPT_* y recarga pwcrypt.config para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("PWCRYPT_PBKDF2_ITERATIONS", str(TEST_ITERATIONS))
    monkeypatch.delenv("PWCRYPT_PBKDF2_PRF", raising=False)
    monkeypatch.delenv("PWCRYPT_LOG_LEVEL", raising=False)

    import pwcrypt.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def det_rng() -> CounterRandom:
    """Devuelve una fuente de aleatoriedad reproducible.

    Returns:
        CounterRandom: Instancia nueva con la semilla por defecto.
    """
    return CounterRandom()
