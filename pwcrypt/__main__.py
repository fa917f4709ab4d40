# --------------------------------------------------------------
# File: __main__.py
# Description: Demostración de cifrado y descifrado por línea de comandos.
# --------------------------------------------------------------
"""Ejecuta `python -m pwcrypt` para cifrar y descifrar un mensaje de ejemplo."""

import sys
from typing import List, Optional

from pwcrypt.config import setup_logging
from pwcrypt.pbe import combined_decrypt, combined_encrypt

DEMO_PASSWORD = "passtest1"
DEMO_PLAINTEXT = "Secret message"


def main(argv: Optional[List[str]] = None) -> int:
    """Cifra el texto indicado (o el de ejemplo) y lo descifra de nuevo.

    Args:
        argv (Optional[List[str]]): `[password, plaintext]` opcionales.

    Returns:
        int: Código de salida del proceso.

    """

    setup_logging()
    args = list(sys.argv[1:] if argv is None else argv)
    password = args[0] if len(args) > 0 else DEMO_PASSWORD
    plaintext = args[1] if len(args) > 1 else DEMO_PLAINTEXT

    encrypted = combined_encrypt(password, plaintext)
    print(f"Encrypted: {encrypted}")
    decrypted = combined_decrypt(password, encrypted)
    print(f"Decrypted: {decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
