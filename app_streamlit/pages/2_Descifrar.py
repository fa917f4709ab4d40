# --------------------------------------------------------------
# File: 2_Descifrar.py
# Description: Descifra un sobre `salt:nonce:ciphertext` con la contraseña.
# --------------------------------------------------------------

import streamlit as st

from pwcrypt.errors import AuthenticationFailedError, PwCryptError
from pwcrypt.pbe import combined_decrypt

# Presenta el título de la sección orientada al descifrado.
st.title("🔓 Descifrar")

password = st.text_input("Contraseña", type="password", key="dec_pass")
envelope = st.text_area("Sobre cifrado", key="dec_env")

if st.button("Descifrar", disabled=not (password and envelope)):
    try:
        plaintext = combined_decrypt(password, envelope)
    except AuthenticationFailedError:
        st.error("No se ha podido descifrar: contraseña incorrecta o sobre manipulado.")
    except PwCryptError as exc:
        st.error(str(exc))
    else:
        st.success("Etiqueta verificada.")
        st.code(plaintext)
