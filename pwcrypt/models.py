# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from pydantic import BaseModel, ConfigDict, Field

from pwcrypt.envelope import decode_envelope, encode_envelope


class KdfParams(BaseModel):
    """Parámetros PBKDF2 aplicados a una operación.

    Attributes:
        iterations (int): Rondas de la PRF.
        prf (str): Nombre de la PRF subyacente.
        key_length (int): Longitud de la clave derivada en bits.

    """

    model_config = ConfigDict(frozen=True)

    iterations: int = Field(gt=0)
    prf: str = "sha256"
    key_length: int = 256


class EncryptedEnvelope(BaseModel):
    """Representa el sobre cifrado transportable.

    Attributes:
        salt (bytes): Salt de la derivación de clave.
        nonce (bytes): Vector de inicialización de AES-GCM.
        ciphertext (bytes): Datos cifrados con la etiqueta al final.

    """

    model_config = ConfigDict(frozen=True, strict=True)

    salt: bytes
    nonce: bytes
    ciphertext: bytes

    def to_transport(self) -> str:
        """Serializa el sobre como `salt:nonce:ciphertext` en Base64."""

        return encode_envelope(self.salt, self.nonce, self.ciphertext)

    @classmethod
    def from_transport(cls, transport: str) -> "EncryptedEnvelope":
        """Reconstruye el sobre desde su cadena de transporte."""

        salt, nonce, ciphertext = decode_envelope(transport)
        return cls(salt=salt, nonce=nonce, ciphertext=ciphertext)
