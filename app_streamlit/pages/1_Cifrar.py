# --------------------------------------------------------------
# File: 1_Cifrar.py
# Description: Cifra un mensaje con contraseña y muestra el sobre resultante.
# --------------------------------------------------------------

import streamlit as st

from pwcrypt.errors import PwCryptError
from pwcrypt.pbe import combined_encrypt

# Presenta el título de la sección dedicada al cifrado.
st.title("🔒 Cifrar")

password = st.text_input("Contraseña", type="password", key="enc_pass")
plaintext = st.text_area("Mensaje en claro", key="enc_plain")

if st.button("Cifrar con AES-GCM", disabled=not password):
    try:
        envelope = combined_encrypt(password, plaintext)
    except PwCryptError as exc:
        st.error(str(exc))
    else:
        st.success("Mensaje cifrado.")
        # Salt y nonce viajan en claro dentro del sobre.
        st.code(envelope)
