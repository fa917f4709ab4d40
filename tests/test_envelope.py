# --------------------------------------------------------------
# File: test_envelope.py
# Description: Pruebas de la codificación de transporte del sobre cifrado.
# --------------------------------------------------------------

import base64

import pytest

from pwcrypt.envelope import decode_envelope, encode_envelope
from pwcrypt.errors import MalformedEnvelopeError
from pwcrypt.models import EncryptedEnvelope


@pytest.mark.parametrize(
    "salt, nonce, sealed",
    [
        (bytes(16), bytes(12), bytes(30)),
        (b"", b"", b""),
        (b"\xff" * 3, b":", bytes(range(256))),
    ],
)
def test_envelope_roundtrip(salt, nonce, sealed):
    """Comprueba que decodificar lo codificado devuelva los tres campos.

    Args:
        salt (bytes): Campo de salt arbitrario.
        nonce (bytes): Campo de nonce arbitrario.
        sealed (bytes): Campo de ciphertext arbitrario.

    Returns:
        None: Las aserciones comparan la tupla recuperada.
    """
    assert decode_envelope(encode_envelope(salt, nonce, sealed)) == (salt, nonce, sealed)


def test_envelope_format_is_colon_delimited_base64():
    """Verifica el formato `base64:base64:base64` del transporte.

    Returns:
        None: Las aserciones revisan cada campo.
    """
    text = encode_envelope(b"s" * 16, b"n" * 12, b"c" * 30)
    parts = text.split(":")
    assert len(parts) == 3
    assert base64.b64decode(parts[0]) == b"s" * 16
    assert base64.b64decode(parts[1]) == b"n" * 12
    assert base64.b64decode(parts[2]) == b"c" * 30


@pytest.mark.parametrize("text", ["", "abc", "AAAA:AAAA", "AAAA:AAAA:AAAA:AAAA", "::::"])
def test_envelope_wrong_part_count(text):
    """Garantiza que un número de campos distinto de tres se rechace.

    Args:
        text (str): Cadena de transporte mal formada.

    Returns:
        None: Se espera MalformedEnvelopeError.
    """
    with pytest.raises(MalformedEnvelopeError):
        decode_envelope(text)


@pytest.mark.parametrize("text", ["!!!!:AAAA:AAAA", "AAAA:AAA:AAAA", "AAAA:AAAA:ñAAA", "AA AA:AAAA:AAAA"])
def test_envelope_invalid_base64(text):
    """Comprueba que un campo con Base64 inválido se rechace.

    Args:
        text (str): Cadena con un campo corrupto.

    Returns:
        None: Se espera MalformedEnvelopeError.
    """
    with pytest.raises(MalformedEnvelopeError):
        decode_envelope(text)


def test_envelope_rejects_non_text():
    """Verifica que solo se acepten cadenas de texto.

    Returns:
        None: Se espera MalformedEnvelopeError.
    """
    with pytest.raises(MalformedEnvelopeError):
        decode_envelope(b"AAAA:AAAA:AAAA")


def test_envelope_tolerates_trailing_newline():
    """Comprueba que se ignoren los espacios finales de ficheros o variables.

    Returns:
        None: Las aserciones comparan el resultado.
    """
    text = encode_envelope(b"salt", b"nonce", b"data") + "\n"
    assert decode_envelope(text) == (b"salt", b"nonce", b"data")


def test_model_transport_roundtrip():
    """Valida la serialización del modelo EncryptedEnvelope.

    Returns:
        None: Las aserciones comparan los modelos.
    """
    env = EncryptedEnvelope(salt=bytes(16), nonce=bytes(12), ciphertext=b"\x01" * 20)
    assert EncryptedEnvelope.from_transport(env.to_transport()) == env
