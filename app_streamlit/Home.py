# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from pwcrypt import config

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="pwcrypt", page_icon="🔐", layout="centered")
config.setup_logging()

# Presenta el nombre del producto y su propósito general.
st.title("🔐 pwcrypt")
st.write(
    "Cifrado con contraseña: PBKDF2-HMAC-SHA256 para derivar la clave y "
    "AES-256-GCM para cifrar y autenticar el mensaje."
)
st.caption(
    f"Iteraciones configuradas: {config.PBKDF2_ITERATIONS} · PRF: {config.PBKDF2_PRF}"
)
st.info("Usa **Cifrar** para obtener un sobre `salt:nonce:ciphertext` y **Descifrar** para recuperarlo.")
